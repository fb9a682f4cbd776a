from models.responses import (
    ExperienceSummary,
    Gap,
    JobHistoryEntry,
    MatchingSkill,
    MatchResult,
    MissingSkill,
    OverallMatch,
    SkillsBreakdown,
)
from services.prompt_builder import build_chat_prompt, format_match_context


def _result(**overrides) -> MatchResult:
    defaults = dict(
        overall_match=OverallMatch(percentage=82, grade="A", summary="Strong match with the job requirements"),
        skills=SkillsBreakdown(
            matching=[MatchingSkill(name="Python")],
            missing=[MissingSkill(name="Kubernetes")],
        ),
        experience=ExperienceSummary(
            average_tenure_years=2.5,
            total_experience_years=5,
            gaps=[Gap(period="2016 - 2018", duration_years=2)],
        ),
        screening_questions=["Can you describe your experience with Python?"],
    )
    defaults.update(overrides)
    return MatchResult(**defaults)


def test_context_includes_all_sections():
    context = format_match_context(_result())
    assert "Overall Match: 82% (A)" in context
    assert "- Python: 100%" in context
    assert "- Kubernetes (High importance)" in context
    assert "Employment Gaps: 2016 - 2018 (2 years)" in context
    assert "Average Tenure: 2.5 years" in context
    assert "Job History: Not available" in context
    assert "1. Can you describe your experience with Python?" in context


def test_context_with_empty_result():
    context = format_match_context(MatchResult())
    assert "Employment Gaps: None found" in context
    assert "Matching Skills:\n- None" in context


def test_context_with_job_history():
    exp = ExperienceSummary(job_history=[JobHistoryEntry(company="Tech Corp", duration="2 years", role="Developer")])
    context = format_match_context(_result(experience=exp))
    assert "Developer at Tech Corp (2 years)" in context


def test_chat_prompt_contains_question():
    prompt = build_chat_prompt(_result(), "Is this candidate senior enough?")
    assert "User Question: Is this candidate senior enough?" in prompt
    assert "Overall Match: 82% (A)" in prompt
