# bodha/settings.py
# ------------------------------------------------------------------
# Environment → Settings. Everything tunable lives here.
# ------------------------------------------------------------------

from __future__ import annotations
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Optional

from dotenv import load_dotenv

CEREBRAS_API_URL = "https://api.cerebras.ai/v1/chat/completions"

DEFAULT_ORIGINS = [
    "https://dibinxavier.github.io",
    "http://localhost:5500",
    "https://bodha-zeta.vercel.app",
]


def _split_origins(raw: str) -> List[str]:
    return [o.strip() for o in raw.split(",") if o.strip()]


def _optional_float(raw: Optional[str]) -> Optional[float]:
    if raw is None or not raw.strip():
        return None
    return float(raw)


@dataclass
class Settings:
    """Relay settings, loaded from environment variables (and `.env`)."""

    api_key: str = ""
    api_url: str = CEREBRAS_API_URL
    model: str = "llama3.1-8b"
    temperature: float = 0.8
    top_p: float = 0.9
    max_tokens: int = 512
    max_turns: int = 10
    allowed_origins: List[str] = field(default_factory=lambda: list(DEFAULT_ORIGINS))
    system_prompt_file: Optional[str] = None
    upstream_timeout: Optional[float] = None   # None → wait forever
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        load_dotenv()
        s = cls()
        s.api_key = os.getenv("CEREBRAS_API_KEY", "").strip()
        s.api_url = os.getenv("CEREBRAS_API_URL", s.api_url)
        s.model = os.getenv("CEREBRAS_MODEL", s.model)
        s.temperature = float(os.getenv("MODEL_TEMPERATURE", s.temperature))
        s.top_p = float(os.getenv("MODEL_TOP_P", s.top_p))
        s.max_tokens = int(os.getenv("MODEL_MAX_TOKENS", s.max_tokens))
        s.max_turns = int(os.getenv("MAX_TRANSCRIPT_TURNS", s.max_turns))
        if os.getenv("ALLOWED_ORIGINS"):
            s.allowed_origins = _split_origins(os.environ["ALLOWED_ORIGINS"])
        s.system_prompt_file = os.getenv("SYSTEM_PROMPT_FILE") or None
        s.upstream_timeout = _optional_float(os.getenv("UPSTREAM_TIMEOUT"))
        s.host = os.getenv("HOST", s.host)
        # empty PORT falls back to the local dev port
        s.port = int(os.getenv("PORT") or s.port)
        s.log_level = os.getenv("LOG_LEVEL", s.log_level).upper()
        return s

    def sampling(self) -> dict:
        return {
            "temperature": self.temperature,
            "top_p": self.top_p,
            "max_tokens": self.max_tokens,
        }


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_env()
