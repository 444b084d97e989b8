from sqlalchemy import Column, Float, DateTime, ForeignKey, Index
from datetime import datetime
from energy_harmony.models.base import Id
from energy_harmony.core.database import Base


class Usage(Base):
    """One energy usage sample in kWh. Rows are never updated."""

    __tablename__ = "usage"
    __table_args__ = (Index("ix_usage_user_timestamp", "user_id", "timestamp"),)

    id = Column(Id, primary_key=True)
    user_id = Column(Id, ForeignKey("users.id"), nullable=False)
    device_id = Column(Id, ForeignKey("devices.id", ondelete="SET NULL"), nullable=True)
    timestamp = Column(DateTime, nullable=False, default=datetime.utcnow)
    usage = Column(Float, nullable=False)
