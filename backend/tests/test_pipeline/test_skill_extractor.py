"""Tests for vocabulary-based skill extraction."""

import pytest

from services.pipeline.skill_extractor import SkillExtractor, extract_skills
from services.pipeline.vocabulary import SkillVocabulary


def test_finds_skills_in_vocabulary_order():
    skills = extract_skills("Shipped AWS lambdas, React frontends and TypeScript tooling")
    assert skills == ["TypeScript", "React", "AWS"]


def test_returns_canonical_casing():
    assert extract_skills("we use node.js and POSTGRESQL") == ["SQL", "Node.js", "PostgreSQL"]


def test_empty_text():
    assert extract_skills("") == []


def test_no_known_skills():
    assert extract_skills("Excellent communicator and team player") == []


def test_no_duplicates_when_repeated():
    assert extract_skills("React, react, REACT and more React") == ["React"]


def test_java_matches_inside_javascript():
    # Plain substring matching: both entries match
    skills = extract_skills("Five years of JavaScript")
    assert "JavaScript" in skills
    assert "Java" in skills


@pytest.mark.parametrize(
    "text",
    [
        "Python developer with Docker and Kubernetes experience",
        "React / Node.js / GraphQL / AWS",
        "machine learning with PyTorch, pandas and TensorFlow",
        "Nothing relevant here",
        "",
    ],
)
def test_case_insensitive_and_idempotent(text):
    skills = extract_skills(text)
    assert skills == extract_skills(text.upper())
    assert skills == extract_skills(text.lower())
    assert skills == extract_skills(text)


def test_custom_vocabulary():
    extractor = SkillExtractor(SkillVocabulary(["Elixir", "Phoenix"]))
    assert extractor.extract_skills("Built Phoenix apps in elixir and Python") == ["Elixir", "Phoenix"]


def test_custom_vocabulary_ignores_default_skills():
    extractor = SkillExtractor(SkillVocabulary(["Elixir"]))
    assert extractor.extract_skills("Python, React, AWS") == []


def test_matches_inside_longer_words():
    # Substring containment: "laws" contains "aws"
    assert extract_skills("Ensure compliance with labor laws") == ["AWS"]
