from datetime import datetime
from typing import Optional
from pydantic import Field
from energy_harmony.schemas.base import CamelModel

class UsageCreate(CamelModel):
    device_id: Optional[int] = None
    usage: float = Field(ge=0, allow_inf_nan=False)

class UsageResponse(CamelModel):
    id: int
    user_id: int
    device_id: Optional[int] = None
    timestamp: datetime
    usage: float

class UsagePoint(CamelModel):
    label: str
    total: float
