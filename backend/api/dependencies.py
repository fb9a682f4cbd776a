"""Shared dependencies for API routes."""

from datetime import date
from functools import lru_cache

from config import settings
from services.pipeline.orchestrator import MatchOrchestrator
from services.pipeline.vocabulary import DEFAULT_VOCABULARY


@lru_cache(maxsize=1)
def get_match_orchestrator() -> MatchOrchestrator:
    vocabulary = DEFAULT_VOCABULARY.extend(settings.extra_skills)
    return MatchOrchestrator(vocabulary=vocabulary, timeline_mode=settings.timeline_mode)


def get_current_year() -> int:
    return date.today().year
