"""Scoring stage output."""

from pydantic import BaseModel

from models.responses import Grade


class ScoreResult(BaseModel):
    """Weighted match score: 70% skill overlap, 30% experience."""
    percentage: int = 0  # 0-100
    grade: Grade = "F"
    summary: str = ""
    skill_match_percentage: int = 0  # rounded, for display
    experience_score: int = 0  # 0-100
    matching_skills: list[str] = []  # job-description order
    missing_skills: list[str] = []
