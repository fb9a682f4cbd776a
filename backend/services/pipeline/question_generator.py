"""Screening question synthesis from matched and missing skills."""

from collections.abc import Sequence

MAX_QUESTIONS = 5

CLOSING_QUESTIONS: tuple[str, ...] = (
    "What interests you about this position?",
    "How do you stay updated with industry trends?",
)


def generate_questions(
    matching_skills: Sequence[str],
    missing_skills: Sequence[str],
    limit: int = MAX_QUESTIONS,
) -> list[str]:
    """Build questions in fixed order (matching, missing, closing) and keep the first `limit`.

    With five or more matching skills the missing-skill and closing questions
    are cut off entirely.
    """
    questions = [f"Can you describe your experience with {skill}?" for skill in matching_skills]
    questions += [
        f"How would you approach learning {skill} if required for this role?"
        for skill in missing_skills
    ]
    questions += CLOSING_QUESTIONS
    return questions[:limit]
