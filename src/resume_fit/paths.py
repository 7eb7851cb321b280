"""Centralized path management for resume-fit.

All paths should be imported from this module to ensure consistency.
"""
from __future__ import annotations

import os
from pathlib import Path

# Resolve once, reuse everywhere
PROJECT_ROOT = Path(__file__).resolve().parents[2]
OUTPUT_DIR = Path(os.getenv("RESUME_FIT_OUTPUT_DIR", str(PROJECT_ROOT / "output")))
LOG_DIR = OUTPUT_DIR / "logs"
DEFAULT_FITTED_RESUME = OUTPUT_DIR / "fitted_resume.json"


def ensure_dirs():
    """Create the output and log directories if they don't exist."""
    for d in (OUTPUT_DIR, LOG_DIR):
        d.mkdir(parents=True, exist_ok=True)
