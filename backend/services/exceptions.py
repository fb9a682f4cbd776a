"""Errors raised by the match-analysis pipeline."""


class InvalidInputError(ValueError):
    """Input cannot be analyzed: blank text, or a job description with no recognized skills."""
