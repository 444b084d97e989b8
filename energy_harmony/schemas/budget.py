from datetime import datetime
from typing import Literal
from pydantic import Field
from energy_harmony.schemas.base import CamelModel

BudgetPeriod = Literal["daily", "weekly", "monthly"]

class BudgetCreate(CamelModel):
    amount: float = Field(ge=0, allow_inf_nan=False)
    period: BudgetPeriod = "weekly"

class BudgetResponse(CamelModel):
    id: int
    user_id: int
    amount: float
    period: BudgetPeriod
    created_at: datetime
