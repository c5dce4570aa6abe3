"""Runtime settings read from the environment."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class Settings:
    """Options controlling the headless rendering engine and logging."""

    render_timeout_ms: int = 30000
    headless: bool = True
    page_format: str = "A4"
    print_background: bool = False
    log_level: str = "INFO"


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def _parse_timeout(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be an integer number of milliseconds") from exc
    if value <= 0:
        raise ValueError(f"{name} must be positive")
    return value


def _parse_level(name: str, raw: str) -> str:
    level = raw.strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"{name} is not a logging level: {raw!r}")
    return level


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from ``ANYPDF_*`` environment variables."""

    env = os.environ if environ is None else environ
    defaults = Settings()

    timeout = defaults.render_timeout_ms
    if "ANYPDF_RENDER_TIMEOUT" in env:
        timeout = _parse_timeout("ANYPDF_RENDER_TIMEOUT", env["ANYPDF_RENDER_TIMEOUT"])

    headless = defaults.headless
    if "ANYPDF_HEADLESS" in env:
        headless = _parse_bool("ANYPDF_HEADLESS", env["ANYPDF_HEADLESS"])

    print_background = defaults.print_background
    if "ANYPDF_PRINT_BACKGROUND" in env:
        print_background = _parse_bool("ANYPDF_PRINT_BACKGROUND", env["ANYPDF_PRINT_BACKGROUND"])

    log_level = defaults.log_level
    if "ANYPDF_LOG_LEVEL" in env:
        log_level = _parse_level("ANYPDF_LOG_LEVEL", env["ANYPDF_LOG_LEVEL"])

    page_format = env.get("ANYPDF_PAGE_FORMAT", "").strip() or defaults.page_format

    return Settings(
        render_timeout_ms=timeout,
        headless=headless,
        page_format=page_format,
        print_background=print_background,
        log_level=log_level,
    )


__all__ = ["Settings", "load_settings"]
