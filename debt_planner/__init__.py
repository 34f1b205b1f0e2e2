"""Debt payoff planner: avalanche/snowball amortization schedules over a FastAPI service."""
