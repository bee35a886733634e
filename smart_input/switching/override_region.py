"""
Override Region Controller: single-slot state machine for the inline region.

States:
    Inactive ──activate()──▶ Active ──deactivate()──▶ Inactive (+ last region)

- At most one region is active; activating again discards the previous one
  without recording it.
- Deactivation records the region as the "last region", a single-shot hint
  consumed by the next classification that reads it.
- While Active the controller asks for cursor-move events
  (is_observing_cursor()); the host wires/unwires its event source on that flag.
- The active region follows buffer edits like an overlay with front- and
  rear-advance: text inserted at its end extends it, text inserted at its
  start does not.
"""
import logging
from typing import Optional

from smart_input.models.override_region import OverrideRegion

logger = logging.getLogger(__name__)


class OverrideRegionController:
    """Per-buffer override region state."""

    def __init__(self) -> None:
        self._region: Optional[OverrideRegion] = None
        self._last_region: Optional[OverrideRegion] = None

    @property
    def region(self) -> Optional[OverrideRegion]:
        return self._region

    @property
    def last_region(self) -> Optional[OverrideRegion]:
        return self._last_region

    @property
    def is_active(self) -> bool:
        return self._region is not None

    def is_observing_cursor(self) -> bool:
        return self._region is not None

    def activate(self, start: int, end: int) -> OverrideRegion:
        """Start a new region, replacing any active one and clearing the last region."""
        if self._region is not None:
            logger.debug("Discarding active %r in favour of [%d,%d]", self._region, start, end)
        self._region = OverrideRegion(start=start, end=end)
        self._last_region = None
        logger.debug("Activated %r", self._region)
        return self._region

    def deactivate(self) -> bool:
        """
        Close the active region and remember its bounds.

        Returns:
            True if a region was closed, False if already inactive (no-op).
        """
        if self._region is None:
            return False
        self._last_region = self._region
        self._region = None
        logger.debug("Deactivated, last region %r", self._last_region)
        return True

    def check_deactivate(self, cursor: int) -> bool:
        """Deactivate when *cursor* has left the active region."""
        if self._region is None:
            return False
        if self._region.contains(cursor):
            return False
        return self.deactivate()

    def consume_last_region(self) -> Optional[OverrideRegion]:
        """Return the last region and forget it."""
        last = self._last_region
        self._last_region = None
        return last

    # ------------------------------------------------------------------
    # Edit tracking
    # ------------------------------------------------------------------

    def track_insertion(self, start: int, length: int) -> None:
        """Shift or extend the active region after *length* chars were inserted at *start*."""
        region = self._region
        if region is None or length <= 0:
            return
        if start <= region.start:
            self._region = OverrideRegion(region.start + length, region.end + length)
        elif start <= region.end:
            self._region = OverrideRegion(region.start, region.end + length)

    def track_deletion(self, start: int, end: int) -> None:
        """Shift or shrink the active region after the span [start, end) was deleted."""
        region = self._region
        if region is None or end <= start:
            return

        def _map(offset: int) -> int:
            if offset <= start:
                return offset
            if offset <= end:
                return start
            return offset - (end - start)

        self._region = OverrideRegion(_map(region.start), _map(region.end))
