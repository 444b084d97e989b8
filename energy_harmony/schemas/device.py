from datetime import datetime
from typing import Optional
from pydantic import Field
from energy_harmony.schemas.base import CamelModel

class DeviceCreate(CamelModel):
    name: str = Field(min_length=1)
    type: str = Field(min_length=1)
    consumption: float = Field(0.0, allow_inf_nan=False)
    is_active: bool = True

class DeviceUpdate(CamelModel):
    name: Optional[str] = None
    type: Optional[str] = None
    consumption: Optional[float] = Field(None, allow_inf_nan=False)
    is_active: Optional[bool] = None

class DeviceResponse(CamelModel):
    id: int
    user_id: int
    name: str
    type: str
    consumption: float
    is_active: bool
    created_at: datetime
