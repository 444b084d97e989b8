"""Time-bucketed usage rollups.

Samples are grouped under a bucket key derived from their timestamp, summed
per key at full precision and only rounded when the rows are emitted.
"""
from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal, ROUND_HALF_UP, localcontext
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional

from energy_harmony.services.usage_store import UsageSample, UsageStore
from energy_harmony.utils.datetime import day_of_week

DAY_NAMES = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")

_CENT = Decimal("0.01")

# enough digits to quantize any finite float (max ~1.8e308) to cents
_ROUNDING_PRECISION = 400


class Granularity(str, Enum):
    HOUR_OF_DAY = "hourOfDay"
    DAY_OF_WEEK = "dayOfWeek"
    CALENDAR_DAY = "calendarDay"


@dataclass(frozen=True)
class AggregationRow:
    label: str
    total: float


def round2(value: float) -> float:
    """Round to 2 decimals, halves away from zero like JavaScript's toFixed."""
    with localcontext() as ctx:
        ctx.prec = _ROUNDING_PRECISION
        rounded = Decimal(value).quantize(_CENT, rounding=ROUND_HALF_UP)
    # + 0.0 folds negative zero
    return float(rounded) + 0.0


def _hour_key(ts: datetime) -> int:
    return ts.hour


def _calendar_day_key(ts: datetime) -> date:
    return ts.date()


_KEYS: Dict[Granularity, Callable[[datetime], object]] = {
    Granularity.HOUR_OF_DAY: _hour_key,
    Granularity.DAY_OF_WEEK: day_of_week,
    Granularity.CALENDAR_DAY: _calendar_day_key,
}

_LABELS: Dict[Granularity, Callable[[object], str]] = {
    Granularity.HOUR_OF_DAY: lambda hour: f"{hour}:00",
    Granularity.DAY_OF_WEEK: lambda day: DAY_NAMES[day],
    Granularity.CALENDAR_DAY: lambda day: day.isoformat(),
}


def bucket_totals(samples: Iterable[UsageSample], granularity: Granularity) -> Dict[object, float]:
    """Unrounded sum of `amount` per bucket key. Empty buckets are absent."""
    key_of = _KEYS[Granularity(granularity)]
    totals: Dict[object, float] = {}
    for sample in samples:
        key = key_of(sample.timestamp)
        totals[key] = totals.get(key, 0.0) + sample.amount
    return totals


def bucket_samples(samples: Iterable[UsageSample], granularity: Granularity) -> List[AggregationRow]:
    granularity = Granularity(granularity)
    totals = bucket_totals(samples, granularity)
    label_of = _LABELS[granularity]
    return [
        AggregationRow(label=label_of(key), total=round2(totals[key]))
        for key in sorted(totals)
    ]


class AggregationEngine:
    def __init__(self, store: UsageStore):
        self._store = store

    def aggregate(
        self,
        user_id: int,
        window_start: datetime,
        window_end: Optional[datetime] = None,
        granularity: Granularity = Granularity.CALENDAR_DAY,
    ) -> List[AggregationRow]:
        """Rollup of `user_id`'s samples in `[window_start, window_end)`.

        `window_end` defaults to the current UTC time. Store failures
        propagate as `DataUnavailable`.
        """
        if window_end is None:
            window_end = datetime.utcnow()
        if window_end <= window_start:
            return []

        samples = self._store.fetch_samples(user_id, window_start, window_end)
        return bucket_samples(samples, granularity)
