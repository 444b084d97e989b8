from sqlalchemy import Column, String, DateTime
from datetime import datetime
from energy_harmony.models.base import Id
from energy_harmony.core.database import Base

class User(Base):
    __tablename__ = "users"

    id = Column(Id, primary_key=True)
    name = Column(String(100), nullable=False)
    email = Column(String(100), unique=True, nullable=False)
    password = Column(String(255), nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
