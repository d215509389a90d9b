from datetime import date
from pydantic import BaseModel, ConfigDict
from typing import Optional

from models.enums import DateSlot


class DateFindings(BaseModel):
    """Dates mined from a patent page, one per slot. First finding wins."""
    model_config = ConfigDict(frozen=True)

    filing: Optional[str] = None
    publication: Optional[str] = None
    grant: Optional[str] = None

    def get(self, slot: DateSlot) -> Optional[str]:
        return getattr(self, DateSlot(slot).value)

    def with_finding(self, slot: DateSlot, value: Optional[str]) -> "DateFindings":
        """Return a copy with `slot` set, unless it is already filled."""
        if not value or self.get(slot):
            return self
        return self.model_copy(update={DateSlot(slot).value: value})

    @property
    def missing_slots(self) -> list[DateSlot]:
        return [slot for slot in DateSlot if not self.get(slot)]

    @property
    def is_complete(self) -> bool:
        return not self.missing_slots


class DateDifference(BaseModel):
    """Day delta between two slots; days is None when either date is missing"""
    first: DateSlot
    second: DateSlot
    days: Optional[int] = None

    @property
    def computable(self) -> bool:
        return self.days is not None


class DateReport(BaseModel):
    """Parsed dates and pairwise differences for one run"""
    findings: DateFindings
    dates: dict[DateSlot, Optional[date]]
    differences: list[DateDifference]
    search_term: Optional[str] = None
