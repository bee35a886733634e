"""
Character Classifier: maps a single character to its ScriptClass.

Pure predicates over a PatternSet. Never raises: None, empty, non-string
or multi-character input is UNKNOWN. When both the primary and the
secondary pattern match, primary wins.
"""
from typing import Any

from smart_input.models.pattern_set import PatternSet
from smart_input.models.script_class import ScriptClass


def _is_char(ch: Any) -> bool:
    return isinstance(ch, str) and len(ch) == 1


def is_primary(ch: Any, patterns: PatternSet) -> bool:
    return _is_char(ch) and patterns.matches_primary(ch)


def is_secondary(ch: Any, patterns: PatternSet) -> bool:
    return _is_char(ch) and patterns.matches_secondary(ch)


def is_blank(ch: Any, patterns: PatternSet) -> bool:
    return _is_char(ch) and patterns.matches_blank(ch)


def classify(ch: Any, patterns: PatternSet) -> ScriptClass:
    """
    Classify one character.

    Args:
        ch: A single character, or None when there is no character.
        patterns: Active PatternSet for the buffer.

    Returns:
        ScriptClass.PRIMARY | ScriptClass.SECONDARY | ScriptClass.UNKNOWN
    """
    if is_primary(ch, patterns):
        return ScriptClass.PRIMARY
    if is_secondary(ch, patterns):
        return ScriptClass.SECONDARY
    return ScriptClass.UNKNOWN
