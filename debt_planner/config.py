from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    DATA_FILE: str = ""
    DEFAULT_STRATEGY: str = "avalanche"
    DEFAULT_EXTRA_CONTRIBUTION: float = 5000.0
    CORS_ORIGINS: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
