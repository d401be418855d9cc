"""Centralised settings for the Reskin pipeline.

All runtime configuration is resolved here in one place.  Values can be
overridden via environment variables or a `.env` file in the project root
(loaded automatically when this module is imported).
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from the project root (one level up from this package)
_env_path = Path(__file__).resolve().parent.parent / ".env"
load_dotenv(_env_path, override=False)


# Public pass-through fetchers, tried in this order when the direct fetch
# fails.  ``{encoded}`` is the percent-encoded target URL, ``{url}`` the raw one.
DEFAULT_PROXY_ENDPOINTS = (
    "https://api.allorigins.win/raw?url={encoded}",
    "https://corsproxy.io/?{encoded}",
    "https://thingproxy.freeboard.io/fetch/{url}",
    "https://api.codetabs.com/v1/proxy?quest={encoded}",
)


def _proxy_endpoints_from_env() -> list[str]:
    raw = os.environ.get("RESKIN_PROXY_ENDPOINTS", "")
    endpoints = [part.strip() for part in raw.split(",") if part.strip()]
    return endpoints or list(DEFAULT_PROXY_ENDPOINTS)


@dataclass
class Settings:
    # ------------------------------------------------------------------
    # Retrieval
    # ------------------------------------------------------------------
    direct_timeout: float = field(
        default_factory=lambda: float(os.environ.get("DIRECT_FETCH_TIMEOUT", "15.0"))
    )
    proxy_timeout: float = field(
        default_factory=lambda: float(os.environ.get("PROXY_FETCH_TIMEOUT", "20.0"))
    )
    max_redirects: int = field(
        default_factory=lambda: int(os.environ.get("MAX_REDIRECTS", "5"))
    )
    # Overall budget in seconds for the whole fallback chain; 0 disables it.
    retrieval_deadline: float = field(
        default_factory=lambda: float(os.environ.get("RETRIEVAL_DEADLINE", "0"))
    )
    proxy_endpoints: list[str] = field(default_factory=_proxy_endpoints_from_env)

    # ------------------------------------------------------------------
    # Rebranding
    # ------------------------------------------------------------------
    generator_marker: str = field(
        default_factory=lambda: os.environ.get("GENERATOR_MARKER", "Reskin Rebranding Tool")
    )

    # ------------------------------------------------------------------
    # Optional AI stylesheet supplement
    # ------------------------------------------------------------------
    llm_provider: str = field(
        default_factory=lambda: os.environ.get("LLM_PROVIDER", "ollama")
    )
    ollama_chat_model: str = field(
        default_factory=lambda: os.environ.get("OLLAMA_CHAT_MODEL", "ministral-3:8b")
    )
    openai_chat_model: str = field(
        default_factory=lambda: os.environ.get("OPENAI_CHAT_MODEL", "gpt-4o-mini")
    )

    # ------------------------------------------------------------------
    # Logging
    # ------------------------------------------------------------------
    log_level: str = field(
        default_factory=lambda: os.environ.get("LOG_LEVEL", "INFO")
    )


# Module-level singleton, import this everywhere:
#   from reskin.config import settings
settings = Settings()
