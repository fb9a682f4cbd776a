import os
from typing import Literal

from pydantic_settings import BaseSettings


def _parse_cors_origins() -> list[str] | None:
    """Parse CORS_ORIGINS env var as comma-separated string or JSON list."""
    raw = os.environ.get("CORS_ORIGINS")
    if not raw:
        return None
    if raw.startswith("["):
        import json
        return json.loads(raw)
    return [o.strip() for o in raw.split(",") if o.strip()]


class Settings(BaseSettings):
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    chat_temperature: float = 0.5
    chat_max_output_tokens: int = 256

    max_upload_size_mb: int = 1
    max_resume_chars: int = 50000
    max_job_description_chars: int = 10000
    cors_origins: list[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "http://localhost:3002",
        "http://localhost:3003",
        "http://localhost:3004",
    ]
    debug: bool = False
    log_level: str = "INFO"

    # Match pipeline settings
    timeline_mode: Literal["chronological", "scan"] = "chronological"  # "scan" = pattern-by-pattern gap order
    extra_skills: list[str] = []  # appended to the built-in skill vocabulary

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


_cors_override = _parse_cors_origins()
settings = Settings(**{"cors_origins": _cors_override} if _cors_override else {})
