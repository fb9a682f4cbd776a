"""Fixed skill vocabulary used for keyword detection.

Entries keep their canonical casing for display; matching lower-cases both
sides. Matching is plain substring containment, so an entry also matches
inside longer words ("AWS" in "laws", "React" in "reaction"). Very short or
everyday tokens ("go", "r", "rust", "scala", "rest", "express") are not listed
since they would match nearly any resume.
"""

from collections.abc import Iterable, Iterator


class SkillVocabulary:
    """Immutable ordered set of canonical skill names."""

    __slots__ = ("_entries", "_lowered")

    def __init__(self, entries: Iterable[str]) -> None:
        cleaned: list[str] = []
        seen: set[str] = set()
        for entry in entries:
            name = entry.strip()
            if not name:
                raise ValueError("Skill vocabulary entries must be non-empty")
            key = name.lower()
            if key in seen:
                raise ValueError(f"Duplicate skill vocabulary entry: {name!r}")
            seen.add(key)
            cleaned.append(name)
        object.__setattr__(self, "_entries", tuple(cleaned))
        object.__setattr__(self, "_lowered", tuple(e.lower() for e in cleaned))

    def __setattr__(self, name, value):
        raise AttributeError("SkillVocabulary is immutable")

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._lowered

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SkillVocabulary):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"SkillVocabulary({len(self._entries)} entries)"

    @property
    def entries(self) -> tuple[str, ...]:
        return self._entries

    def pairs(self) -> Iterator[tuple[str, str]]:
        """Yield (canonical, lower-cased) pairs in vocabulary order."""
        return zip(self._entries, self._lowered)

    def extend(self, extra: Iterable[str]) -> "SkillVocabulary":
        """Return a new vocabulary with extra entries appended.

        Entries already present (case-insensitive) are skipped rather than
        rejected, so configuration can safely repeat built-in skills.
        """
        merged = list(self._entries)
        seen = set(self._lowered)
        for entry in extra:
            name = entry.strip()
            if name and name.lower() not in seen:
                seen.add(name.lower())
                merged.append(name)
        return SkillVocabulary(merged)


DEFAULT_SKILLS: tuple[str, ...] = (
    # Languages
    "JavaScript", "TypeScript", "Python", "Java", "C++", "C#", "Kotlin",
    "Swift", "PHP", "Ruby", "SQL",
    # Frontend
    "React", "Angular", "Vue", "Next.js", "HTML", "CSS", "Redux",
    # Backend
    "Node.js", "Django", "Flask", "FastAPI", "Spring Boot", "GraphQL",
    "REST API",
    # Data stores
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch", "Kafka",
    # Cloud & DevOps
    "AWS", "Azure", "GCP", "Docker", "Kubernetes", "Terraform", "Jenkins",
    "CI/CD", "Linux",
    # Data & ML
    "Machine Learning", "TensorFlow", "PyTorch", "Pandas",
    # Practices
    "Microservices", "Agile", "Scrum",
)

DEFAULT_VOCABULARY = SkillVocabulary(DEFAULT_SKILLS)
