"""Recency windows for selecting documents."""

import logging
from datetime import datetime, timezone
from enum import Enum
from typing import Iterable, Optional

from dateutil.relativedelta import relativedelta

from mind_profiler.models.document import Document

logger = logging.getLogger(__name__)


class Timeframe(str, Enum):
    """Supported recency windows."""
    SEVEN_DAYS = "7days"
    THIRTY_DAYS = "30days"
    THREE_MONTHS = "3months"
    SIX_MONTHS = "6months"

    @classmethod
    def parse(cls, value: "str | Timeframe | None") -> "Timeframe":
        """Parse a timeframe, falling back to seven days for unknown values."""
        try:
            return cls(value)
        except ValueError:
            logger.debug("Unrecognized timeframe %r, using %s", value, cls.SEVEN_DAYS.value)
            return cls.SEVEN_DAYS

    @property
    def interval(self) -> relativedelta:
        """Calendar interval covered by this window."""
        return {
            Timeframe.SEVEN_DAYS: relativedelta(days=7),
            Timeframe.THIRTY_DAYS: relativedelta(days=30),
            Timeframe.THREE_MONTHS: relativedelta(months=3),
            Timeframe.SIX_MONTHS: relativedelta(months=6),
        }[self]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=timezone.utc)
    return moment


def cutoff_for(timeframe: "str | Timeframe", now: Optional[datetime] = None) -> datetime:
    """
    Compute the earliest instant included in a timeframe.

    Args:
        timeframe: Timeframe value or its string form
        now: Reference instant (defaults to the current UTC time)

    Returns:
        ``now`` minus the timeframe's calendar interval
    """
    reference = _as_utc(now) if now is not None else utc_now()
    return reference - Timeframe.parse(timeframe).interval


def chronological(documents: Iterable[Document]) -> list[Document]:
    """Sort documents oldest first; id and content break ties between equal dates."""
    return sorted(documents, key=lambda doc: (doc.date, doc.id, doc.content))


def filter_by_timeframe(
    documents: Iterable[Document],
    timeframe: "str | Timeframe",
    now: Optional[datetime] = None,
) -> list[Document]:
    """Return the documents dated at or after the timeframe's cutoff, in input order."""
    cutoff = cutoff_for(timeframe, now)
    return [doc for doc in documents if doc.date >= cutoff]
