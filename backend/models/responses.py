from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

Grade = Literal["A+", "A", "B", "C", "D", "F"]
Importance = Literal["High", "Medium", "Low"]


class CamelModel(BaseModel):
    """Serializes with camelCase keys (the UI contract), accepts either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class OverallMatch(CamelModel):
    percentage: int = Field(0, ge=0, le=100)
    grade: Grade = "F"
    summary: str = ""


class MatchingSkill(CamelModel):
    name: str
    match_percent: int = 100


class MissingSkill(CamelModel):
    name: str
    importance: Importance = "High"


class SkillsBreakdown(CamelModel):
    matching: list[MatchingSkill] = []
    missing: list[MissingSkill] = []


class Gap(CamelModel):
    period: str
    duration_years: int


class JobHistoryEntry(CamelModel):
    company: str = ""
    duration: str = ""
    role: str = ""


class ExperienceSummary(CamelModel):
    average_tenure_years: float = 0.0
    total_experience_years: int = 0
    gaps: list[Gap] = []
    # Only filled when structured employment records are supplied; text scanning never does.
    job_history: list[JobHistoryEntry] = []


class MatchResult(CamelModel):
    overall_match: OverallMatch = OverallMatch()
    skills: SkillsBreakdown = SkillsBreakdown()
    experience: ExperienceSummary = ExperienceSummary()
    screening_questions: list[str] = []


class ChatResponse(CamelModel):
    response: str
    source: Literal["llm", "rules", "fallback"] = "llm"
    degraded: bool = False
