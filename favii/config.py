from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml


def _env_int(name: str, default: int) -> int:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    try:
        return int(v)
    except ValueError:
        return default


def _env_bool(name: str, default: bool) -> bool:
    v = os.getenv(name)
    if v is None or v == "":
        return default
    return v.strip().lower() in ("1", "true", "yes", "y", "on")


def _env_str(name: str, default: str) -> str:
    v = os.getenv(name)
    return default if v is None else v


@dataclass
class Settings:
    # Fetching
    user_agent: str = "favii/0.3 (+https://example.invalid)"
    timeout_s: int = 15
    follow_redirects: bool = True
    max_bytes: int = 0  # 0 => read the whole body
    raise_for_status: bool = False

    # Cache
    use_cache: bool = True

    # Logging / UX
    log_level: str = "INFO"
    no_color: bool = False

    @staticmethod
    def from_env() -> "Settings":
        s = Settings()
        s.user_agent = _env_str("FAVII_UA", s.user_agent)
        s.timeout_s = _env_int("FAVII_TIMEOUT_S", s.timeout_s)
        s.follow_redirects = _env_bool("FAVII_FOLLOW_REDIRECTS", s.follow_redirects)
        s.max_bytes = _env_int("FAVII_MAX_BYTES", s.max_bytes)
        s.raise_for_status = _env_bool("FAVII_RAISE_FOR_STATUS", s.raise_for_status)

        s.use_cache = _env_bool("FAVII_USE_CACHE", s.use_cache)

        s.log_level = _env_str("FAVII_LOG_LEVEL", s.log_level)
        s.no_color = _env_bool("FAVII_NO_COLOR", s.no_color)
        return s

    @staticmethod
    def from_file(path: Path) -> "Settings":
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
        s = Settings.from_env()
        for k, v in data.items():
            if hasattr(s, k):
                setattr(s, k, v)
        return s


def load_settings(config_path: Optional[str]) -> Settings:
    if config_path:
        return Settings.from_file(Path(config_path))
    return Settings.from_env()
