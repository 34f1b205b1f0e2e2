from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from debt_planner.config import settings
from debt_planner.db.store import debt_store
from debt_planner.api.routes import health, debts, plan, planner_settings


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup: open the debt store
    debt_store.initialize()
    yield
    # Shutdown: release the store
    debt_store.close()


app = FastAPI(title="Debt Planner", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router, prefix="/api")
app.include_router(debts.router, prefix="/api")
app.include_router(planner_settings.router, prefix="/api")
app.include_router(plan.router, prefix="/api")
