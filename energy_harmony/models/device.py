from sqlalchemy import Column, Float, String, Boolean, DateTime, ForeignKey
from datetime import datetime
from energy_harmony.models.base import Id
from energy_harmony.core.database import Base

class Device(Base):
    __tablename__ = "devices"

    id = Column(Id, primary_key=True)
    user_id = Column(Id, ForeignKey("users.id"), nullable=False, index=True)
    name = Column(String(100), nullable=False)
    type = Column(String(50), nullable=False)
    consumption = Column(Float, default=0.0)
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
