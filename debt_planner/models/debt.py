from typing import Optional

from pydantic import BaseModel, Field, field_validator


class DebtBase(BaseModel):
    name: str
    interest_rate: float = Field(ge=0)  # annual percent, e.g. 12.5
    total_terms: Optional[int] = Field(default=None, ge=1)
    remaining_terms: Optional[int] = Field(default=None, ge=1)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("name must not be empty")
        return value


class Debt(DebtBase):
    id: int
    amount: float = Field(ge=0)
    monthly_payment: Optional[float] = None


class DebtCreate(DebtBase):
    """Request body for adding a debt. The id is assigned by the debt service."""
    amount: float = Field(gt=0)
    monthly_payment: Optional[float] = Field(default=None, ge=0)
