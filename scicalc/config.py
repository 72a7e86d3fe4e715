"""Environment-driven settings for the scicalc CLI.

Reads SCICALC_* variables from an env mapping (os.environ by default).
Bad values fall back to the defaults with a logged warning rather than
aborting, so a stale shell export never blocks a calculation.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from scicalc.formatter import DEFAULT_PRECISION
from scicalc.models import DEFAULT_ANGLE_MODE, AngleMode

logger = logging.getLogger(__name__)

ENV_ANGLE_MODE = "SCICALC_ANGLE_MODE"
ENV_PRECISION = "SCICALC_PRECISION"
ENV_LOG_LEVEL = "SCICALC_LOG_LEVEL"

# Beyond 17 significant digits a float carries no more information
MAX_PRECISION = 17
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Settings:
    """Resolved CLI defaults."""

    angle_mode: AngleMode = DEFAULT_ANGLE_MODE
    precision: int = DEFAULT_PRECISION
    log_level: str = DEFAULT_LOG_LEVEL


def _parse_angle_mode(raw: Optional[str]) -> AngleMode:
    if not raw:
        return DEFAULT_ANGLE_MODE
    try:
        return AngleMode.parse(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r (expected DEG or RAD)", ENV_ANGLE_MODE, raw)
        return DEFAULT_ANGLE_MODE


def _parse_precision(raw: Optional[str]) -> int:
    if not raw:
        return DEFAULT_PRECISION
    try:
        value = int(raw)
    except ValueError:
        value = 0
    if not 1 <= value <= MAX_PRECISION:
        logger.warning("Ignoring %s=%r (expected 1-%d)", ENV_PRECISION, raw, MAX_PRECISION)
        return DEFAULT_PRECISION
    return value


def _parse_log_level(raw: Optional[str]) -> str:
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        logger.warning("Ignoring %s=%r (unknown level)", ENV_LOG_LEVEL, raw)
        return DEFAULT_LOG_LEVEL
    return level


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from `env` (defaults to os.environ)."""
    env = os.environ if env is None else env
    return Settings(
        angle_mode=_parse_angle_mode(env.get(ENV_ANGLE_MODE)),
        precision=_parse_precision(env.get(ENV_PRECISION)),
        log_level=_parse_log_level(env.get(ENV_LOG_LEVEL)),
    )
