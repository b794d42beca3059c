"""
Runtime settings.
- Loads .env once (never overrides real environment)
- Resolves everything into a frozen Settings object that is handed to the
  app factory and the scoring chain, so core code never reads os.environ.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv(override=False)

IS_HF = os.environ.get("SPACE_ID") is not None
DEFAULT_BASE_DIR = "/tmp/data" if IS_HF else "data"


def _env_str(name: str) -> Optional[str]:
    value = (os.getenv(name) or "").strip()
    return value or None


def _env_int(name: str, default: int) -> int:
    raw = _env_str(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise RuntimeError(f"{name} must be an integer, got {raw!r}")


@dataclass(frozen=True)
class Settings:
    base_dir: str = DEFAULT_BASE_DIR
    database_url: Optional[str] = None
    upload_dir: Optional[str] = None
    max_upload_bytes: int = 5 * 1024 * 1024

    # generative scorer (disabled without a key)
    groq_api_key: Optional[str] = None
    model_name: str = "llama-3.3-70b-versatile"
    groq_api_url: str = "https://api.groq.com/openai/v1/chat/completions"
    llm_timeout_seconds: int = 30

    # remote HTTP scorer (disabled without a URL)
    scoring_api_url: Optional[str] = None
    scoring_timeout_seconds: int = 30

    shortlist_threshold: int = 70
    allowed_origins: str = "*"
    log_level: str = "INFO"

    @property
    def resolved_database_url(self) -> str:
        return self.database_url or f"sqlite:///{os.path.join(self.base_dir, 'app.db')}"

    @property
    def resolved_upload_dir(self) -> str:
        return self.upload_dir or os.path.join(self.base_dir, "resumes")

    @property
    def origins(self) -> List[str]:
        return [o.strip() for o in self.allowed_origins.split(",") if o.strip()] or ["*"]


def load_settings() -> Settings:
    """Build Settings from the process environment (and .env)."""
    return Settings(
        base_dir=_env_str("BASE_DIR") or DEFAULT_BASE_DIR,
        database_url=_env_str("DATABASE_URL"),
        upload_dir=_env_str("UPLOAD_DIR"),
        max_upload_bytes=_env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024),
        groq_api_key=_env_str("GROQ_API_KEY"),
        model_name=_env_str("MODEL_NAME") or "llama-3.3-70b-versatile",
        groq_api_url=_env_str("GROQ_API_URL") or "https://api.groq.com/openai/v1/chat/completions",
        llm_timeout_seconds=_env_int("LLM_TIMEOUT_SECONDS", 30),
        scoring_api_url=_env_str("SCORING_API_URL"),
        scoring_timeout_seconds=_env_int("SCORING_TIMEOUT_SECONDS", 30),
        shortlist_threshold=_env_int("SHORTLIST_THRESHOLD", 70),
        allowed_origins=_env_str("ALLOWED_ORIGINS") or "*",
        log_level=(_env_str("LOG_LEVEL") or "INFO").upper(),
    )
