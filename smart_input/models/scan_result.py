"""
ScanResult: what the proximity scanner found around the cursor.
Produced fresh per query, never persisted.
"""
from dataclasses import dataclass
from typing import Optional

from smart_input.models.script_class import ScriptClass


@dataclass(frozen=True)
class ScanResult:
    """Nearest non-blank neighbours of the cursor and where they sit."""

    cross_line_before: Optional[ScriptClass]
    before: Optional[ScriptClass]
    back_position: int
    forward_position: int
    after: Optional[ScriptClass]
    # Raw characters, kept for logging only
    cross_line_before_char: Optional[str] = None
    before_char: Optional[str] = None
    after_char: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "cross_line_before": self.cross_line_before.value if self.cross_line_before is not None else None,
            "before": self.before.value if self.before is not None else None,
            "back_position": self.back_position,
            "forward_position": self.forward_position,
            "after": self.after.value if self.after is not None else None,
        }

    def __repr__(self) -> str:
        return (
            f"ScanResult({self.cross_line_before_char!r}..{self.before_char!r}"
            f"@{self.back_position} | {self.after_char!r}@{self.forward_position})"
        )
