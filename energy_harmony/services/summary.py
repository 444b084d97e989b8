from dataclasses import dataclass
from datetime import datetime, timedelta

from energy_harmony.services.aggregation import Granularity, bucket_totals, round2
from energy_harmony.services.usage_store import UsageStore
from energy_harmony.utils.logger import get_logger

PROJECTION_DAYS = 30


@dataclass(frozen=True)
class SummarySnapshot:
    current_usage: float
    daily_average: float
    weekly_total: float
    monthly_projection: float
    savings_percentage: float


class SummaryCalculator:
    """Derived usage metrics of one user as of a given instant."""

    def __init__(self, store: UsageStore):
        self._store = store
        self._logger = get_logger(__name__)

    def summarize(self, user_id: int, now: datetime) -> SummarySnapshot:
        day_ago = now - timedelta(days=1)
        week_ago = now - timedelta(days=7)
        two_weeks_ago = now - timedelta(days=14)

        # one query covers every window; a store failure aborts the whole snapshot
        samples = self._store.fetch_samples(user_id, two_weeks_ago, now)

        last_week = [s for s in samples if s.timestamp >= week_ago]
        previous_week = [s for s in samples if s.timestamp < week_ago]

        current_usage = sum(s.amount for s in last_week if s.timestamp >= day_ago)
        weekly_total = sum(s.amount for s in last_week)
        previous_week_total = sum(s.amount for s in previous_week)

        day_totals = bucket_totals(last_week, Granularity.CALENDAR_DAY)
        daily_average = sum(day_totals.values()) / len(day_totals) if day_totals else 0.0

        savings_percentage = 0.0
        if previous_week_total > 0:
            savings_percentage = (previous_week_total - weekly_total) / previous_week_total * 100

        monthly_projection = daily_average * PROJECTION_DAYS

        snapshot = SummarySnapshot(
            current_usage=round2(current_usage),
            daily_average=round2(daily_average),
            weekly_total=round2(weekly_total),
            monthly_projection=round2(monthly_projection),
            savings_percentage=round2(savings_percentage),
        )
        self._logger.debug("summary_computed", user_id=user_id, samples=len(samples))
        return snapshot
