"""
Shared base for the in-memory clinic records.

Every record is an immutable pydantic value; updates go through
model_copy() in the reducer so an old state can never be mutated.
"""
from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps from seed files or forms are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


UtcDatetime = Annotated[datetime, AfterValidator(_as_utc)]


class ClinicModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra='ignore', use_enum_values=False)

    def to_dict(self):
        """Convert to dictionary for API responses."""
        return self.model_dump(mode='json')
