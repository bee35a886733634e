"""
OverrideRegion: span of buffer text where automatic switching is suspended.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class OverrideRegion:
    """Closed span [start, end] in buffer offsets."""

    start: int
    end: int

    def contains(self, offset: int) -> bool:
        return self.start <= offset <= self.end

    def __repr__(self) -> str:
        return f"OverrideRegion([{self.start},{self.end}])"
