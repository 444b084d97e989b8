from datetime import datetime
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session
from energy_harmony.core.database import get_db
from energy_harmony.core.deps import get_current_user, get_aggregation_engine, get_usage_store
from energy_harmony.core.errors import ValidationFailure
from energy_harmony.routers.device import get_owned_device
from energy_harmony.schemas.usage import UsageCreate, UsagePoint, UsageResponse
from energy_harmony.services.aggregation import AggregationEngine, Granularity
from energy_harmony.services.usage_store import UsageStore
from energy_harmony.utils.datetime import start_of_day, start_of_week, to_naive_utc

router = APIRouter(
    prefix="/api/usage",
    tags=["Usage"],
    dependencies=[Depends(get_current_user)]
)

@router.get("/daily", response_model=List[UsagePoint])
def get_daily_usage(
    engine: AggregationEngine = Depends(get_aggregation_engine),
    user_id: int = Depends(get_current_user)
):
    now = datetime.utcnow()
    return engine.aggregate(user_id, start_of_day(now), now, Granularity.HOUR_OF_DAY)

@router.get("/weekly", response_model=List[UsagePoint])
def get_weekly_usage(
    engine: AggregationEngine = Depends(get_aggregation_engine),
    user_id: int = Depends(get_current_user)
):
    # calendar week from Sunday midnight, unlike the rolling 7 days of /api/summary
    now = datetime.utcnow()
    return engine.aggregate(user_id, start_of_week(now), now, Granularity.DAY_OF_WEEK)

@router.get("", response_model=List[UsagePoint])
def get_usage(
    start: datetime,
    end: Optional[datetime] = None,
    granularity: Granularity = Query(Granularity.CALENDAR_DAY),
    engine: AggregationEngine = Depends(get_aggregation_engine),
    user_id: int = Depends(get_current_user)
):
    start = to_naive_utc(start)
    if end is not None:
        end = to_naive_utc(end)
        if end <= start:
            raise ValidationFailure("end must be after start")
    return engine.aggregate(user_id, start, end, granularity)

@router.post("", response_model=UsageResponse, status_code=status.HTTP_201_CREATED)
def create_usage(
    data: UsageCreate,
    db: Session = Depends(get_db),
    store: UsageStore = Depends(get_usage_store),
    user_id: int = Depends(get_current_user)
):
    if data.device_id is not None:
        get_owned_device(db, data.device_id, user_id)

    return store.record(user_id, data.usage, device_id=data.device_id)
