"""
ScriptClass: closed classification of a single character.
"""
from enum import Enum


class ScriptClass(str, Enum):
    """Script class of a character near the cursor."""

    PRIMARY = "primary"        # e.g. Latin, mapped to the primary input source
    SECONDARY = "secondary"    # e.g. CJK, mapped to the secondary input source
    UNKNOWN = "unknown"        # punctuation, digits, blanks, missing chars
