"""
Source Switch Decision: verdict → input source to switch to, or None (no-op).

    current == primary   and verdict == SECONDARY → secondary
    current == secondary and verdict == PRIMARY   → primary
    anything else                                  → None

An unrecognised current source is left alone, never forced.
"""
from typing import Optional

from smart_input.models.script_class import ScriptClass
from smart_input.models.source_config import SourceConfig


def decide_switch(
    verdict: Optional[ScriptClass],
    current_source: Optional[str],
    primary_source: str,
    secondary_source: str,
) -> Optional[str]:
    """
    Args:
        verdict: Classifier verdict, None when undetermined.
        current_source: Currently active input source id.
        primary_source: Configured primary source id.
        secondary_source: Configured secondary source id.

    Returns:
        Source id to switch to, or None for no switch.
    """
    if verdict is None:
        return None
    if current_source == primary_source and verdict is ScriptClass.SECONDARY:
        return secondary_source
    if current_source == secondary_source and verdict is ScriptClass.PRIMARY:
        return primary_source
    return None


def force_primary(current_source: Optional[str], sources: SourceConfig) -> Optional[str]:
    return decide_switch(ScriptClass.PRIMARY, current_source, sources.primary_source, sources.secondary_source)


def force_secondary(current_source: Optional[str], sources: SourceConfig) -> Optional[str]:
    return decide_switch(ScriptClass.SECONDARY, current_source, sources.primary_source, sources.secondary_source)
