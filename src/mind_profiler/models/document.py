"""Document model for analyzed text."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, field_validator


class Document(BaseModel):
    """A unit of authored text with the instant it was written.

    Documents are supplied by the storage layer and never modified by
    the engine.
    """

    model_config = ConfigDict(frozen=True, coerce_numbers_to_str=True)

    id: str
    content: str
    date: dt.datetime

    @field_validator("date")
    @classmethod
    def _assume_utc(cls, value: dt.datetime) -> dt.datetime:
        # Naive timestamps from the store are UTC
        if value.tzinfo is None:
            return value.replace(tzinfo=dt.timezone.utc)
        return value
