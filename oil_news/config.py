"""Runtime configuration, read from the environment (and a local .env file)."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv

from .fetcher import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, MAX_FEED_BYTES
from .merger import MAX_ARTICLES

ENV_PREFIX = "OIL_NEWS_"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


@dataclass
class NewsConfig:
    refresh_interval: float = 600.0
    fetch_timeout: float = DEFAULT_TIMEOUT
    max_feed_bytes: int = MAX_FEED_BYTES
    user_agent: str = DEFAULT_USER_AGENT
    fetch_workers: int = 4
    max_articles: int = MAX_ARTICLES
    # False publishes an empty list when every feed fails; True keeps the last snapshot.
    keep_last_on_total_failure: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "NewsConfig":
        """
        Build a config from OIL_NEWS_* variables.

        When `environ` is omitted, a .env file in the working directory is loaded into
        os.environ first. Malformed numbers raise ValueError.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        def get(name: str) -> Optional[str]:
            val = environ.get(ENV_PREFIX + name)
            return val.strip() if val is not None else None

        cfg = cls()
        interval = get("REFRESH_INTERVAL")
        if interval:
            cfg.refresh_interval = float(interval)
        timeout = get("FETCH_TIMEOUT")
        if timeout:
            cfg.fetch_timeout = float(timeout)
        max_bytes = get("MAX_FEED_BYTES")
        if max_bytes:
            cfg.max_feed_bytes = int(max_bytes)
        cfg.user_agent = get("USER_AGENT") or cfg.user_agent
        workers = get("FETCH_WORKERS")
        if workers:
            cfg.fetch_workers = int(workers)
        max_articles = get("MAX_ARTICLES")
        if max_articles:
            cfg.max_articles = int(max_articles)
        keep_last = get("KEEP_LAST_ON_FAILURE")
        if keep_last is not None:
            cfg.keep_last_on_total_failure = _parse_bool(keep_last)
        cfg.log_level = (get("LOG_LEVEL") or cfg.log_level).upper()

        if cfg.refresh_interval <= 0:
            raise ValueError("OIL_NEWS_REFRESH_INTERVAL must be positive")
        return cfg


def _parse_bool(value: str) -> bool:
    v = value.lower()
    if v in _TRUE_VALUES:
        return True
    if v in _FALSE_VALUES:
        return False
    raise ValueError(f"Not a boolean: {value!r}")
