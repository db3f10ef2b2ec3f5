from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _as_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    # Directory
    directory_source: str
    base_url: str

    # Pagination / rate limiting
    max_pages: int
    page_delay_ms: int
    retry_attempts: int  # declared only, the controller never retries

    # Output
    output_dir: str
    meta_path: str
    industries_dir: str

    # Browser / timeouts
    navigation_timeout_ms: int
    content_timeout_ms: int
    settle_delay_ms: int
    headless: bool
    user_agent: str
    viewport_width: int
    viewport_height: int

    log_level: str
    run_env: str


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    return Settings(
        directory_source=os.getenv("DIRECTORY_SOURCE", "antler_portfolio"),
        base_url=os.getenv("BASE_URL", "https://www.antler.co/portfolio"),
        max_pages=int(os.getenv("MAX_PAGES", "20")),
        page_delay_ms=int(os.getenv("PAGE_DELAY_MS", "2000")),
        retry_attempts=int(os.getenv("RETRY_ATTEMPTS", "3")),
        output_dir=os.getenv("OUTPUT_DIR", "./companies"),
        meta_path=os.getenv("META_PATH", "./meta.json"),
        industries_dir=os.getenv("INDUSTRIES_DIR", "./industries"),
        navigation_timeout_ms=int(os.getenv("NAVIGATION_TIMEOUT_MS", "30000")),
        content_timeout_ms=int(os.getenv("CONTENT_TIMEOUT_MS", "15000")),
        settle_delay_ms=int(os.getenv("SETTLE_DELAY_MS", "2000")),
        headless=_as_bool(os.getenv("HEADLESS"), default=True),
        user_agent=os.getenv(
            "USER_AGENT",
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
            "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        ),
        viewport_width=int(os.getenv("VIEWPORT_WIDTH", "1920")),
        viewport_height=int(os.getenv("VIEWPORT_HEIGHT", "1080")),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
    )
