"""
Environment-driven settings for the Flask app and the CLI.

- STACKGRID_HOST / PORT: bind address for `python app.py`
- FLASK_DEBUG or DEBUG: truthy values 1/true/yes/on
- STACKGRID_LOG_LEVEL: logging level name (default INFO)
- STACKGRID_SOLVE_DELAY_MS: pause between auto-solve steps in the CLI
"""
from __future__ import annotations

import os
from dataclasses import dataclass

_TRUTHY = ("1", "true", "yes", "on")


def _flag(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    debug: bool
    log_level: str
    solve_delay_ms: int


def load_settings() -> Settings:
    try:
        delay = max(0, int(os.getenv("STACKGRID_SOLVE_DELAY_MS", "0")))
    except ValueError:
        delay = 0
    return Settings(
        host=os.getenv("STACKGRID_HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "5000")),
        debug=_flag(os.getenv("FLASK_DEBUG", os.getenv("DEBUG", "0"))),
        log_level=os.getenv("STACKGRID_LOG_LEVEL", "INFO").upper(),
        solve_delay_ms=delay,
    )
