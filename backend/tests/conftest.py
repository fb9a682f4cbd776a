"""Shared test configuration and fixtures."""

import pytest

from services import gemini_client


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "integration: calls external services (needs GEMINI_API_KEY)"
    )


@pytest.fixture
def no_gemini(monkeypatch):
    """Force the chat layer onto its no-LLM path regardless of local .env."""
    monkeypatch.setattr(gemini_client.settings, "gemini_api_key", "")
    gemini_client.reset_client()
    yield
    gemini_client.reset_client()
