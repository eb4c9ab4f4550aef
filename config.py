# backend/config.py

import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

OPENROUTER_URL = "https://openrouter.ai/api/v1/chat/completions"
GEMINI_URL = "https://generativelanguage.googleapis.com/v1beta/models/{model}:generateContent"

MAX_UPLOAD_BYTES = 10 * 1024 * 1024


def _convert(env, name, cast, default):
    value = env.get(name)
    if value is None or value.strip() == "":
        return default
    try:
        return cast(value)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {value!r}") from None


@dataclass(frozen=True)
class Settings:
    """Process-wide provider settings, read once from the environment."""

    openrouter_api_key: str = None
    openrouter_model: str = "meta-llama/llama-3.2-3b-instruct:free"
    openrouter_referer: str = "http://localhost:3000"
    openrouter_app_title: str = "AI Exam Question Generator"
    gemini_api_key: str = None
    gemini_model: str = "gemini-1.5-flash"
    max_tokens: int = 1000
    temperature: float = 0.7
    # None means no explicit timeout on provider calls
    request_timeout: float = None
    max_upload_bytes: int = MAX_UPLOAD_BYTES
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ=None):
        env = os.environ if environ is None else environ
        defaults = cls()
        return cls(
            openrouter_api_key=env.get("OPENROUTER_API_KEY") or None,
            openrouter_model=env.get("OPENROUTER_MODEL", defaults.openrouter_model),
            openrouter_referer=env.get("OPENROUTER_REFERER", defaults.openrouter_referer),
            openrouter_app_title=env.get("OPENROUTER_APP_TITLE", defaults.openrouter_app_title),
            gemini_api_key=env.get("GEMINI_API_KEY") or None,
            gemini_model=env.get("GEMINI_MODEL", defaults.gemini_model),
            max_tokens=_convert(env, "MAX_TOKENS", int, defaults.max_tokens),
            temperature=_convert(env, "TEMPERATURE", float, defaults.temperature),
            request_timeout=_convert(env, "PROVIDER_TIMEOUT_SECONDS", float, None),
            log_level=env.get("LOG_LEVEL", defaults.log_level).upper(),
        )
