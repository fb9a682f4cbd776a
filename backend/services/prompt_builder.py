"""Prompt templates for Gemini API calls."""

from models.responses import MatchResult

CHAT_SYSTEM_INSTRUCTION = (
    "You are a direct HR assistant helping a recruiter understand a resume match. "
    "Give brief answers (1-3 sentences). No greetings. "
    "Use only the match data provided; say so when the data does not answer the question."
)


def format_match_context(result: MatchResult) -> str:
    """Render a MatchResult as the plain-text context block shared by all chat prompts."""
    overall = result.overall_match
    matching = "\n".join(
        f"- {s.name}: {s.match_percent}%" for s in result.skills.matching
    ) or "- None"
    missing = "\n".join(
        f"- {s.name} ({s.importance} importance)" for s in result.skills.missing
    ) or "- None"

    exp = result.experience
    gaps = (
        ", ".join(f"{g.period} ({g.duration_years} years)" for g in exp.gaps)
        if exp.gaps
        else "None found"
    )
    history = (
        ", ".join(f"{j.role} at {j.company} ({j.duration})" for j in exp.job_history)
        if exp.job_history
        else "Not available"
    )
    questions = "\n".join(
        f"{i}. {q}" for i, q in enumerate(result.screening_questions, start=1)
    ) or "None"

    return f"""Overall Match: {overall.percentage}% ({overall.grade})
Summary: {overall.summary}

Matching Skills:
{matching}

Missing Skills:
{missing}

Experience:
- Total Experience: {exp.total_experience_years} years
- Average Tenure: {exp.average_tenure_years} years
- Employment Gaps: {gaps}
- Job History: {history}

Screening Questions:
{questions}"""


def build_chat_prompt(result: MatchResult, message: str) -> str:
    """Question about an existing match result."""
    return f"""Here is the current resume match result:

{format_match_context(result)}

User Question: {message}

Answer the specific question using the data above. Do not repeat the full
match result unless it is directly relevant."""
