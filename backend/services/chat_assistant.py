"""Conversational layer over a finished MatchResult.

Answers come from Gemini when a key is configured. Without a key, a small
keyword router answers from the match data directly. When the Gemini call
fails, a static apology is returned. The match result itself is never
modified here.
"""

import logging
import re

from models.responses import ChatResponse, MatchResult
from services import gemini_client, prompt_builder

logger = logging.getLogger(__name__)

FALLBACK_MESSAGE = (
    "I apologize, but I'm having trouble accessing the AI system. Please try again later."
)

HELP_MESSAGE = """I can help you understand:
1. The overall match score and grade
2. Matching and missing skills
3. Employment gaps and tenure
4. Recommended screening questions
5. Areas of concern
Just ask me about any of these topics!"""

DEFAULT_MESSAGE = (
    "I can help you analyze the match results. You can ask me about the overall match, "
    "skills, experience, screening questions, or areas of concern. What would you like to know?"
)

CONCERN_THRESHOLD = 70


def _has_any(text: str, *words: str) -> bool:
    """True when any keyword starts a word in text ("ask" hits "asked", not "task")."""
    return any(re.search(rf"\b{re.escape(w)}", text) for w in words)


def _answer_skills(message: str, result: MatchResult) -> str:
    if _has_any(message, "missing", "gap", "lack"):
        if not result.skills.missing:
            return "The candidate covers every skill found in the job description."
        missing = ", ".join(
            f"{s.name} ({s.importance} importance)" for s in result.skills.missing
        )
        return (
            f"The candidate is missing these skills: {missing}. "
            "Focus on the high-importance skills during the interview."
        )

    if not result.skills.matching:
        return "None of the job description's skills were found in the resume."
    top = sorted(result.skills.matching, key=lambda s: s.match_percent, reverse=True)[:3]
    return "The candidate's strongest matching skills are: " + ", ".join(
        f"{s.name} ({s.match_percent}% match)" for s in top
    ) + "."


def _answer_experience(result: MatchResult) -> str:
    exp = result.experience
    parts = [
        f"The candidate shows {exp.total_experience_years} years of experience "
        f"with an average tenure of {exp.average_tenure_years} years."
    ]
    if exp.gaps:
        gaps = ", ".join(f"{g.period} ({g.duration_years} years)" for g in exp.gaps)
        parts.append(f"There are {len(exp.gaps)} employment gaps: {gaps}.")
    else:
        parts.append("No employment gaps were detected.")
    if exp.job_history:
        roles = ", ".join(f"{j.role} at {j.company} ({j.duration})" for j in exp.job_history)
        parts.append(f"Recent roles include: {roles}.")
    return " ".join(parts)


def _answer_concerns(result: MatchResult) -> str:
    concerns: list[str] = []
    pct = result.overall_match.percentage
    if pct < CONCERN_THRESHOLD:
        concerns.append(f"The overall match is below {CONCERN_THRESHOLD}% ({pct}%)")

    high_missing = [s.name for s in result.skills.missing if s.importance == "High"]
    if high_missing:
        concerns.append(f"Missing high-importance skills: {', '.join(high_missing)}")

    if result.experience.gaps:
        concerns.append(f"Has {len(result.experience.gaps)} employment gaps")

    if not concerns:
        return "The candidate appears to be a strong match for the position. No major concerns were identified."
    return "Key areas of concern:\n" + "\n".join(f"- {c}" for c in concerns)


def answer_locally(message: str, result: MatchResult) -> str:
    """Keyword-routed answer built only from the match data."""
    text = message.lower()
    overall = result.overall_match

    if _has_any(text, "help", "what can you do"):
        return HELP_MESSAGE
    if _has_any(text, "skill", "competency"):
        return _answer_skills(text, result)
    if _has_any(text, "concern", "improve", "better", "risk", "weak"):
        return _answer_concerns(result)
    if _has_any(text, "question", "ask", "interview"):
        if not result.screening_questions:
            return "No screening questions were generated for this match."
        return "Here are the recommended screening questions:\n" + "\n".join(
            f"{i}. {q}" for i, q in enumerate(result.screening_questions, start=1)
        )
    if _has_any(text, "experience", "tenure", "job", "gap", "year"):
        return _answer_experience(result)
    if _has_any(text, "match", "score", "grade", "overall"):
        return f"The overall match is {overall.percentage}% ({overall.grade}). {overall.summary}."
    return DEFAULT_MESSAGE


async def answer_question(message: str, result: MatchResult) -> ChatResponse:
    """Answer a free-text question about a match result. Never raises on LLM failure."""
    if gemini_client.get_client() is None:
        logger.warning("Gemini unavailable, answering chat from local rules")
        return ChatResponse(
            response=answer_locally(message, result), source="rules", degraded=True
        )

    prompt = prompt_builder.build_chat_prompt(result, message)
    reply = await gemini_client.generate_text(
        prompt, system_instruction=prompt_builder.CHAT_SYSTEM_INSTRUCTION
    )
    if reply is None:
        logger.warning("Gemini chat failed, returning fallback message")
        return ChatResponse(response=FALLBACK_MESSAGE, source="fallback", degraded=True)

    return ChatResponse(response=reply, source="llm")
