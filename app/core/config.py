# app/core/config.py
import os
from dataclasses import dataclass, field
from typing import List


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


def _env_list(name: str) -> List[str]:
    raw = os.getenv(name, "")
    return [x.strip() for x in raw.split(",") if x.strip()]


@dataclass
class Settings:
    ANTHROPIC_API_KEY: str = field(default_factory=lambda: os.getenv("ANTHROPIC_API_KEY", ""))

    # 의료진 전달 요약
    SUMMARY_MODEL: str = field(default_factory=lambda: os.getenv("SUMMARY_MODEL", "claude-3-5-sonnet-20241022"))
    SUMMARY_MAX_TOKENS: int = field(default_factory=lambda: _env_int("SUMMARY_MAX_TOKENS", 2000))

    # 추이 분석
    TREND_MODEL: str = field(default_factory=lambda: os.getenv("TREND_MODEL", "claude-3-haiku-20240307"))
    TREND_MAX_TOKENS: int = field(default_factory=lambda: _env_int("TREND_MAX_TOKENS", 800))

    LLM_TIMEOUT: int = field(default_factory=lambda: _env_int("LLM_TIMEOUT", 60))
    LOG_LEVEL: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    ALLOWED_ORIGINS: List[str] = field(default_factory=lambda: _env_list("ALLOWED_ORIGINS"))

settings = Settings()
