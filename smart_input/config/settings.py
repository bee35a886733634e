"""
Environment settings loaded from .env file.
"""
import os
from dotenv import load_dotenv

from smart_input.config.constants import (
    DEFAULT_BLANK_PATTERN,
    DEFAULT_PRIMARY_PATTERN,
    DEFAULT_SECONDARY_PATTERN,
)

load_dotenv()


# --- Input sources ---
SIS_ISM_TOOL: str = os.getenv("SIS_ISM_TOOL", "macism")
SIS_PRIMARY_SOURCE: str = os.getenv("SIS_PRIMARY_SOURCE", "")
SIS_SECONDARY_SOURCE: str = os.getenv("SIS_SECONDARY_SOURCE", "")

# --- Patterns ---
SIS_PRIMARY_PATTERN: str = os.getenv("SIS_PRIMARY_PATTERN", DEFAULT_PRIMARY_PATTERN)
SIS_SECONDARY_PATTERN: str = os.getenv("SIS_SECONDARY_PATTERN", DEFAULT_SECONDARY_PATTERN)
SIS_BLANK_PATTERN: str = os.getenv("SIS_BLANK_PATTERN", DEFAULT_BLANK_PATTERN)

# --- Logging ---
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
