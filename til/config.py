"""Runtime settings resolved from the environment (and an optional ``.env``)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from dotenv import load_dotenv


DEFAULT_FACTS_TABLE = "facts"
DEFAULT_HTTP_TIMEOUT = 10.0
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    supabase_url: Optional[str] = None
    supabase_key: Optional[str] = None
    facts_table: str = DEFAULT_FACTS_TABLE
    http_timeout: float = DEFAULT_HTTP_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL


def _as_float(value: Optional[str], default: float) -> float:
    if value is None or not value.strip():
        return default
    try:
        out = float(value)
    except ValueError:
        return default
    return out if out > 0 else default


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    if environ is None:
        load_dotenv()
        environ = os.environ
    return Settings(
        supabase_url=(environ.get("SUPABASE_URL") or "").strip().rstrip("/") or None,
        supabase_key=(environ.get("SUPABASE_KEY") or "").strip() or None,
        facts_table=(environ.get("TIL_FACTS_TABLE") or "").strip() or DEFAULT_FACTS_TABLE,
        http_timeout=_as_float(environ.get("TIL_HTTP_TIMEOUT"), DEFAULT_HTTP_TIMEOUT),
        log_level=(environ.get("TIL_LOG_LEVEL") or DEFAULT_LOG_LEVEL).strip().upper(),
    )


def configure_logging(settings: Settings) -> None:
    level = getattr(logging, settings.log_level, logging.INFO)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
