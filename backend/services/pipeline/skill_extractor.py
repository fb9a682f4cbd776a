"""Vocabulary-based skill extraction.

Matching is case-insensitive substring containment against a fixed
vocabulary: no synonyms, no stemming, no word boundaries. Entries that are
substrings of one another ("Java" / "JavaScript") both match when the longer
one appears.
"""

import logging

from services.pipeline.vocabulary import DEFAULT_VOCABULARY, SkillVocabulary

logger = logging.getLogger(__name__)


class SkillExtractor:
    """Finds vocabulary skills in free text."""

    def __init__(self, vocabulary: SkillVocabulary = DEFAULT_VOCABULARY) -> None:
        self.vocabulary = vocabulary

    def extract_skills(self, text: str) -> list[str]:
        """Return canonical skill names found in text, in vocabulary order."""
        if not text:
            return []
        text_lower = text.lower()
        found = [skill for skill, needle in self.vocabulary.pairs() if needle in text_lower]
        logger.debug("Extracted %d skills from %d chars", len(found), len(text))
        return found


_default_extractor = SkillExtractor()


def extract_skills(text: str) -> list[str]:
    """Extract skills using the built-in vocabulary."""
    return _default_extractor.extract_skills(text)
