from types import SimpleNamespace

import pytest

from services import gemini_client


def _fake_client(generate):
    return SimpleNamespace(aio=SimpleNamespace(models=SimpleNamespace(generate_content=generate)))


@pytest.mark.asyncio
async def test_returns_none_without_key(no_gemini):
    assert gemini_client.get_client() is None
    assert await gemini_client.generate_text("hello") is None


@pytest.mark.asyncio
async def test_returns_stripped_text(monkeypatch):
    calls = {}

    async def generate(model, contents, config):
        calls["model"] = model
        calls["contents"] = contents
        calls["system"] = config.system_instruction
        return SimpleNamespace(text="  A short answer.\n")

    monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(generate))
    text = await gemini_client.generate_text("prompt", system_instruction="be brief")
    assert text == "A short answer."
    assert calls["contents"] == "prompt"
    assert calls["system"] == "be brief"
    assert calls["model"] == gemini_client.settings.gemini_model


@pytest.mark.asyncio
async def test_empty_reply_is_none(monkeypatch):
    async def generate(model, contents, config):
        return SimpleNamespace(text=None)

    monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(generate))
    assert await gemini_client.generate_text("prompt") is None


@pytest.mark.asyncio
async def test_api_error_is_none(monkeypatch):
    async def generate(model, contents, config):
        raise RuntimeError("quota exceeded")

    monkeypatch.setattr(gemini_client, "get_client", lambda: _fake_client(generate))
    assert await gemini_client.generate_text("prompt") is None
