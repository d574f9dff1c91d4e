"""
Runtime configuration read from the environment.

Values come from environment variables, optionally seeded from a `.env`
file in the working directory (`python-dotenv`, never overriding variables
that are already set). Everything is resolved once at import time into
module-level constants.
"""

# Import libraries
from __future__ import annotations
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv(override=False)

# Project root = .../court-scorecard
APP_ROOT = Path(__file__).resolve().parents[1]

APP_TITLE     = os.getenv("SCORECARD_APP_TITLE", "Court Scorecard")
DEFAULT_COURT = os.getenv("SCORECARD_DEFAULT_COURT", "1")
LOG_LEVEL     = os.getenv("SCORECARD_LOG_LEVEL", "INFO").upper()


def _resolve(path: str) -> Path:
    p = Path(path)
    return p if p.is_absolute() else APP_ROOT / p


LOGO_PATH = _resolve(os.getenv("SCORECARD_LOGO_PATH", "assets/logo.png"))
