from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from energy_harmony.core.errors import DataUnavailable
from energy_harmony.models.usage import Usage
from energy_harmony.utils.logger import get_logger


@dataclass(frozen=True)
class UsageSample:
    timestamp: datetime
    amount: float


class UsageStore:
    """Read and append access to the usage samples of the database."""

    def __init__(self, db: Session):
        self._db = db
        self._logger = get_logger(__name__)

    def fetch_samples(self, user_id: int, start: datetime, end: datetime) -> List[UsageSample]:
        """Samples of one user with `start <= timestamp < end`, oldest first."""
        try:
            rows = (
                self._db.query(Usage.timestamp, Usage.usage)
                .filter(
                    Usage.user_id == user_id,
                    Usage.timestamp >= start,
                    Usage.timestamp < end,
                )
                .order_by(Usage.timestamp.asc())
                .all()
            )
        except SQLAlchemyError as exc:
            self._logger.exception(
                "usage_query_failed",
                user_id=user_id,
                start=start.isoformat(),
                end=end.isoformat(),
            )
            raise DataUnavailable() from exc

        return [UsageSample(timestamp=row.timestamp, amount=float(row.usage)) for row in rows]

    def record(
        self,
        user_id: int,
        amount: float,
        device_id: Optional[int] = None,
        timestamp: Optional[datetime] = None,
    ) -> Usage:
        sample = Usage(
            user_id=user_id,
            device_id=device_id,
            timestamp=timestamp or datetime.utcnow(),
            usage=amount,
        )
        log = self._logger.bind(user_id=user_id, device_id=device_id)
        try:
            self._db.add(sample)
            self._db.commit()
            self._db.refresh(sample)
        except SQLAlchemyError as exc:
            self._db.rollback()
            log.exception("usage_insert_failed")
            raise DataUnavailable() from exc

        log.info("usage_recorded", amount=amount)
        return sample
