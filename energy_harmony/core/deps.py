from typing import Optional
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError
from sqlalchemy.orm import Session
from energy_harmony.core.database import get_db
from energy_harmony.core.errors import InvalidCredential
from energy_harmony.core.security import decode_access_token
from energy_harmony.services.aggregation import AggregationEngine
from energy_harmony.services.summary import SummaryCalculator
from energy_harmony.services.usage_store import UsageStore

security = HTTPBearer(auto_error=False)

def get_current_user(token: Optional[HTTPAuthorizationCredentials] = Depends(security)) -> int:
    if token is None:
        raise InvalidCredential("Authorization header missing")
    try:
        return decode_access_token(token.credentials)
    except (JWTError, KeyError, ValueError):
        raise InvalidCredential("Invalid token")

def get_usage_store(db: Session = Depends(get_db)) -> UsageStore:
    return UsageStore(db)

def get_aggregation_engine(store: UsageStore = Depends(get_usage_store)) -> AggregationEngine:
    return AggregationEngine(store)

def get_summary_calculator(store: UsageStore = Depends(get_usage_store)) -> SummaryCalculator:
    return SummaryCalculator(store)
