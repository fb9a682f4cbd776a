"""Weighted match scoring and grade assignment.

    overall = 0.7 * skill_overlap_pct + 0.3 * experience_score

Skill overlap is the share of job-description skills present in the resume.
Experience earns 20 points per year and saturates at five years.
"""

import logging
import math
from collections.abc import Sequence

from models.responses import Grade
from models.schemas.match_score import ScoreResult
from services.exceptions import InvalidInputError

logger = logging.getLogger(__name__)

W_SKILLS = 0.7
W_EXPERIENCE = 0.3

POINTS_PER_YEAR = 20
MAX_EXPERIENCE_SCORE = 100

# (inclusive lower bound, grade, summary), highest first. Grade and summary
# share this table so their breakpoints can never drift apart.
GRADE_BANDS: tuple[tuple[int, Grade, str], ...] = (
    (90, "A+", "Excellent match with the job requirements"),
    (80, "A", "Strong match with the job requirements"),
    (70, "B", "Good match with some areas for improvement"),
    (60, "C", "Moderate match with notable skill gaps"),
    (50, "D", "Partial match with significant gaps in key requirements"),
    (0, "F", "Weak match for this role"),
)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (round() would go to even)."""
    return int(math.floor(value + 0.5))


def _band(percentage: int) -> tuple[Grade, str]:
    for lower, grade, summary in GRADE_BANDS:
        if percentage >= lower:
            return grade, summary
    # Below every band (only reachable with a negative percentage)
    _, grade, summary = GRADE_BANDS[-1]
    return grade, summary


def assign_grade(percentage: int) -> Grade:
    return _band(percentage)[0]


def summarize(percentage: int) -> str:
    return _band(percentage)[1]


def compute_experience_score(total_experience_years: float) -> int:
    """20 points per year, clamped to 0-100."""
    raw = total_experience_years * POINTS_PER_YEAR
    return round_half_up(min(MAX_EXPERIENCE_SCORE, max(0.0, raw)))


def score(
    candidate_skills: Sequence[str],
    job_skills: Sequence[str],
    total_experience_years: float,
) -> ScoreResult:
    """Combine skill overlap and experience into a percentage and grade.

    Raises InvalidInputError when job_skills is empty, since the overlap
    ratio has no denominator.
    """
    if not job_skills:
        raise InvalidInputError("Job description contains no recognized skills")

    candidate = set(candidate_skills)
    matching = [s for s in job_skills if s in candidate]
    missing = [s for s in job_skills if s not in candidate]

    skill_pct = 100 * len(matching) / len(job_skills)
    experience_score = compute_experience_score(total_experience_years)

    raw = skill_pct * W_SKILLS + experience_score * W_EXPERIENCE
    percentage = min(100, max(0, round_half_up(raw)))
    grade, summary = _band(percentage)

    logger.debug(
        "Score: skills %.1f%% (%d/%d), experience %d -> %d (%s)",
        skill_pct, len(matching), len(job_skills), experience_score, percentage, grade,
    )

    return ScoreResult(
        percentage=percentage,
        grade=grade,
        summary=summary,
        skill_match_percentage=round_half_up(skill_pct),
        experience_score=experience_score,
        matching_skills=matching,
        missing_skills=missing,
    )
