"""Timeline stage output: date ranges found in a resume and the gaps between them."""

from typing import Literal

from pydantic import BaseModel

from models.responses import Gap

TimelineMode = Literal["chronological", "scan"]


class DateRange(BaseModel):
    """A start/end year pair; an open ("present") range already carries the current year."""
    start_year: int
    end_year: int

    @property
    def years(self) -> int:
        return self.end_year - self.start_year


class TimelineAnalysis(BaseModel):
    total_experience_years: int = 0
    gaps: list[Gap] = []
    ranges: list[DateRange] = []  # ranges that contributed to the total

    @property
    def average_tenure_years(self) -> float:
        if not self.ranges:
            return 0.0
        return round(self.total_experience_years / len(self.ranges), 1)
