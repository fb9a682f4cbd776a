"""Tests for the skill vocabulary value type."""

import pytest

from services.pipeline.vocabulary import DEFAULT_VOCABULARY, SkillVocabulary


def test_preserves_order():
    vocab = SkillVocabulary(["React", "AWS", "Python"])
    assert vocab.entries == ("React", "AWS", "Python")
    assert list(vocab) == ["React", "AWS", "Python"]


def test_rejects_case_insensitive_duplicates():
    with pytest.raises(ValueError, match="Duplicate"):
        SkillVocabulary(["Python", "python"])


def test_rejects_blank_entry():
    with pytest.raises(ValueError):
        SkillVocabulary(["Python", "  "])


def test_contains_is_case_insensitive():
    vocab = SkillVocabulary(["Node.js"])
    assert "node.js" in vocab
    assert "NODE.JS" in vocab
    assert "Node" not in vocab


def test_is_immutable():
    vocab = SkillVocabulary(["Python"])
    with pytest.raises(AttributeError):
        vocab._entries = ("Java",)


def test_extend_returns_new_vocabulary():
    base = SkillVocabulary(["Python", "React"])
    extended = base.extend(["Go", "python", "Elixir", "go"])
    assert extended.entries == ("Python", "React", "Go", "Elixir")
    assert base.entries == ("Python", "React")


def test_extend_with_nothing_is_equal():
    assert DEFAULT_VOCABULARY.extend([]) == DEFAULT_VOCABULARY


def test_default_vocabulary_has_no_duplicates():
    lowered = [e.lower() for e in DEFAULT_VOCABULARY]
    assert len(lowered) == len(set(lowered))
    assert "React" in DEFAULT_VOCABULARY
    assert "TypeScript" in DEFAULT_VOCABULARY
