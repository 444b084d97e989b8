from sqlalchemy import Column, Float, DateTime, ForeignKey, Enum
from datetime import datetime
from energy_harmony.models.base import Id
from energy_harmony.core.database import Base

class Budget(Base):
    __tablename__ = "budgets"

    id = Column(Id, primary_key=True)
    user_id = Column(Id, ForeignKey("users.id"), nullable=False, index=True)
    amount = Column(Float, nullable=False)
    period = Column(Enum('daily', 'weekly', 'monthly', name='budget_period_enum'), default='weekly')
    created_at = Column(DateTime, default=datetime.utcnow)
