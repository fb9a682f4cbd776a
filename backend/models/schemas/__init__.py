"""Inter-stage Pydantic contracts for the match-analysis pipeline."""

from models.schemas.match_score import ScoreResult
from models.schemas.timeline import DateRange, TimelineAnalysis, TimelineMode

__all__ = [
    "DateRange",
    "ScoreResult",
    "TimelineAnalysis",
    "TimelineMode",
]
