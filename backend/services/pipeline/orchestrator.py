"""Pipeline orchestrator: wires the match-analysis stages together.

Flow:
    resume_text + job_description
      ├─ SkillExtractor(job_description)   → job skills
      ├─ SkillExtractor(resume_text)       → candidate skills
      ├─ analyze_timeline(resume_text)     → TimelineAnalysis
      │               ↓
      ├─ score(candidate, job, years)      → ScoreResult
      │               ↓
      ├─ generate_questions(match, miss)   → screening questions
      │               ↓
      └─ _to_match_result()                → MatchResult

Every stage is a pure function of its inputs. Any InvalidInputError aborts the
whole analysis; no partial result is ever returned.
"""

import logging
from datetime import date

from models.responses import (
    ExperienceSummary,
    MatchingSkill,
    MatchResult,
    MissingSkill,
    OverallMatch,
    SkillsBreakdown,
)
from models.schemas.match_score import ScoreResult
from models.schemas.timeline import TimelineAnalysis, TimelineMode
from services.exceptions import InvalidInputError
from services.pipeline.match_scorer import score
from services.pipeline.question_generator import generate_questions
from services.pipeline.skill_extractor import SkillExtractor
from services.pipeline.timeline_analyzer import analyze_timeline
from services.pipeline.vocabulary import DEFAULT_VOCABULARY, SkillVocabulary

logger = logging.getLogger(__name__)


class MatchOrchestrator:
    """Runs the full analysis for one resume / job description pair."""

    def __init__(
        self,
        vocabulary: SkillVocabulary = DEFAULT_VOCABULARY,
        timeline_mode: TimelineMode = "chronological",
    ) -> None:
        self.extractor = SkillExtractor(vocabulary)
        self.timeline_mode = timeline_mode

    def analyze(
        self,
        resume_text: str,
        job_description: str,
        current_year: int | None = None,
    ) -> MatchResult:
        if not resume_text or not resume_text.strip():
            raise InvalidInputError("Resume text is empty")
        if not job_description or not job_description.strip():
            raise InvalidInputError("Job description text is empty")
        if current_year is None:
            current_year = date.today().year

        # --- Stage 1: Extraction ---
        job_skills = self.extractor.extract_skills(job_description)
        if not job_skills:
            raise InvalidInputError("Job description contains no recognized skills")
        resume_skills = self.extractor.extract_skills(resume_text)

        # --- Stage 2: Timeline ---
        timeline = analyze_timeline(resume_text, current_year, mode=self.timeline_mode)

        # --- Stage 3: Scoring ---
        score_result = score(resume_skills, job_skills, timeline.total_experience_years)

        # --- Stage 4: Questions ---
        questions = generate_questions(
            score_result.matching_skills, score_result.missing_skills
        )

        logger.info(
            "Match analyzed: %d%% (%s), %d/%d skills, %d years, %d gaps",
            score_result.percentage,
            score_result.grade,
            len(score_result.matching_skills),
            len(job_skills),
            timeline.total_experience_years,
            len(timeline.gaps),
        )
        return _to_match_result(score_result, timeline, questions)


def _to_match_result(
    score_result: ScoreResult,
    timeline: TimelineAnalysis,
    questions: list[str],
) -> MatchResult:
    """Map stage outputs to the public MatchResult."""
    return MatchResult(
        overall_match=OverallMatch(
            percentage=score_result.percentage,
            grade=score_result.grade,
            summary=score_result.summary,
        ),
        skills=SkillsBreakdown(
            # Fixed strength/importance: partial competency is not graded
            matching=[MatchingSkill(name=s, match_percent=100) for s in score_result.matching_skills],
            missing=[MissingSkill(name=s, importance="High") for s in score_result.missing_skills],
        ),
        experience=ExperienceSummary(
            average_tenure_years=timeline.average_tenure_years,
            total_experience_years=timeline.total_experience_years,
            gaps=timeline.gaps,
            job_history=[],
        ),
        screening_questions=questions,
    )


_default_orchestrator = MatchOrchestrator()


def analyze_match(
    resume_text: str,
    job_description: str,
    current_year: int | None = None,
) -> MatchResult:
    """Analyze with the built-in vocabulary and chronological timeline."""
    return _default_orchestrator.analyze(resume_text, job_description, current_year)
