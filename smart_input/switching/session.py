"""
Buffer Session: per-buffer orchestrator of detection and switching.

Flow for a text insertion or refresh:
    1. Inert check (no input source manager → nothing to do)
    2. Structured editing probe (normal mode → force primary)
    3. Override region suspension (cursor inside the region → no switch)
    4. Scan + context detectors + decision table
    5. Switch decision + at most one set_input_source() call

All state (patterns, override region, last region, capabilities) lives on
the session; nothing is shared between buffers.
"""
import logging
from typing import Callable, Iterable, List, Optional

from smart_input.detection.context import guess_context
from smart_input.detection.scanner import scan
from smart_input.models.buffer import TextBuffer
from smart_input.models.pattern_set import PatternSet
from smart_input.models.scan_result import ScanResult
from smart_input.models.script_class import ScriptClass
from smart_input.models.source_config import SourceConfig
from smart_input.switching import decision
from smart_input.switching.adapters import CursorEventSource, InputSourceManager
from smart_input.switching.metrics import (
    record_region_event,
    record_switch,
    record_switch_failure,
    record_verdict,
    timed_refresh,
)
from smart_input.switching.override_region import OverrideRegionController

logger = logging.getLogger(__name__)

ContextDetector = Callable[[TextBuffer, int, ScanResult], Optional[ScriptClass]]


class BufferSession:
    """
    Context-aware input source switching for one buffer.

    Args:
        buffer: Host buffer (read-only access).
        sources: Primary / secondary input source ids. None makes the session inert.
        input_source: Getter/setter capability. None makes the session inert.
        patterns: Character patterns; defaults to PatternSet().
        cursor_events: Cursor-move event source, wired only while an
                       override region is active.
        structured_mode_probe: Returns True while a structured/modal
                               editing normal state is on.
        context_detectors: Extra detectors consulted before the built-in
                           decision table; the first PRIMARY or SECONDARY
                           verdict wins.
    """

    def __init__(
        self,
        buffer: TextBuffer,
        sources: Optional[SourceConfig],
        input_source: Optional[InputSourceManager] = None,
        patterns: Optional[PatternSet] = None,
        cursor_events: Optional[CursorEventSource] = None,
        structured_mode_probe: Optional[Callable[[], bool]] = None,
        context_detectors: Optional[Iterable[ContextDetector]] = None,
    ):
        self.buffer = buffer
        self.sources = sources
        self.input_source = input_source
        self.patterns = patterns if patterns is not None else PatternSet()
        self.cursor_events = cursor_events
        self.structured_mode_probe = structured_mode_probe
        self.context_detectors: List[ContextDetector] = list(context_detectors or [])
        self.controller = OverrideRegionController()
        self._cursor_hooked = False

    @classmethod
    def from_settings(
        cls,
        buffer: TextBuffer,
        input_source: Optional[InputSourceManager] = None,
        **kwargs,
    ) -> "BufferSession":
        """
        Build a session from environment settings (see config/settings.py).

        Without resolvable source ids the session is inert.
        """
        sources = SourceConfig.from_settings()
        return cls(
            buffer,
            sources,
            input_source=input_source,
            patterns=PatternSet.from_settings(),
            **kwargs,
        )

    @property
    def is_inert(self) -> bool:
        return self.input_source is None or self.sources is None

    def override_patterns(
        self,
        primary: Optional[str] = None,
        secondary: Optional[str] = None,
        blank: Optional[str] = None,
    ) -> PatternSet:
        """Replace this buffer's patterns; other sessions are unaffected."""
        self.patterns = self.patterns.with_overrides(primary=primary, secondary=secondary, blank=blank)
        return self.patterns

    # ------------------------------------------------------------------
    # Classification
    # ------------------------------------------------------------------

    def classify(self, cursor: int) -> Optional[ScriptClass]:
        """Verdict for *cursor*; may activate an override region (rule 1)."""
        line_start, line_end = self.buffer.line_bounds(cursor)
        cursor = max(line_start, min(cursor, line_end))
        scan_result = scan(self.buffer, cursor, self.patterns)

        verdict = self._run_detectors(cursor, scan_result)
        if verdict is None:
            region_before = self.controller.region
            verdict = guess_context(scan_result, self.controller, line_start, line_end, cursor)
            region_after = self.controller.region
            if region_after is not None and region_after is not region_before:
                record_region_event("activated")

        self._sync_cursor_hook()
        record_verdict(verdict.value if verdict is not None else None)
        return verdict

    def _run_detectors(self, cursor: int, scan_result: ScanResult) -> Optional[ScriptClass]:
        for detector in self.context_detectors:
            try:
                verdict = detector(self.buffer, cursor, scan_result)
            except Exception as e:  # noqa: BLE001
                logger.warning("Context detector %r failed: %s", detector, e)
                continue
            if verdict is not None and verdict is not ScriptClass.UNKNOWN:
                logger.debug("Detector %r → %s", detector, verdict.value)
                return verdict
        return None

    def _in_structured_mode(self) -> bool:
        if self.structured_mode_probe is None:
            return False
        try:
            return bool(self.structured_mode_probe())
        except Exception as e:  # noqa: BLE001
            logger.warning("Structured editing probe failed: %s", e)
            return False

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def refresh(self, cursor: int) -> Optional[str]:
        """
        Run the full pipeline at *cursor*.

        Returns:
            The input source id switched to, or None when no switch was made.
        """
        if self.is_inert:
            return None

        with timed_refresh():
            if self._in_structured_mode():
                return self.force_primary()

            region = self.controller.region
            if region is not None and region.contains(cursor):
                logger.debug("Switching suspended inside %r", region)
                return None

            verdict = self.classify(cursor)
            return self.apply_verdict(verdict)

    def on_text_inserted(self, start: int, length: int, cursor: int) -> Optional[str]:
        """Host notification: *length* chars were inserted at *start*."""
        self.controller.track_insertion(start, length)
        return self.refresh(cursor)

    def on_text_deleted(self, start: int, end: int, cursor: int) -> bool:
        """Host notification: the span [start, end) was deleted."""
        self.controller.track_deletion(start, end)
        return self.on_cursor_moved(cursor)

    def on_cursor_moved(self, cursor: int) -> bool:
        """
        Cursor-move handler, subscribed only while a region is active.

        Returns:
            True if the move closed the override region.
        """
        deactivated = self.controller.check_deactivate(cursor)
        if deactivated:
            record_region_event("deactivated")
        self._sync_cursor_hook()
        return deactivated

    def dismiss_override(self, cursor: int) -> Optional[str]:
        """
        Explicit dismissal (e.g. an acknowledgement key): close the region
        and reclassify once at *cursor*. No-op without an active region.
        """
        if not self.controller.deactivate():
            return None
        record_region_event("dismissed")
        self._sync_cursor_hook()
        return self.refresh(cursor)

    # ------------------------------------------------------------------
    # Switching
    # ------------------------------------------------------------------

    def force_primary(self) -> Optional[str]:
        if self.is_inert:
            return None
        return self._apply(decision.force_primary(self._current_source(), self.sources))

    def force_secondary(self) -> Optional[str]:
        if self.is_inert:
            return None
        return self._apply(decision.force_secondary(self._current_source(), self.sources))

    def apply_verdict(self, verdict: Optional[ScriptClass]) -> Optional[str]:
        """Switch for an already computed verdict; returns the new source id or None."""
        if self.is_inert:
            return None
        target = decision.decide_switch(
            verdict,
            self._current_source(),
            self.sources.primary_source,
            self.sources.secondary_source,
        )
        return self._apply(target)

    def _current_source(self) -> Optional[str]:
        try:
            return self.input_source.get_input_source()
        except Exception as e:  # noqa: BLE001
            logger.warning("Failed to query current input source: %s", e)
            record_switch_failure("get")
            return None

    def _apply(self, target: Optional[str]) -> Optional[str]:
        if target is None:
            return None
        try:
            self.input_source.set_input_source(target)
        except Exception as e:  # noqa: BLE001
            logger.warning("Failed to switch input source to %s: %s", target, e)
            record_switch_failure("set")
            return None

        role = "primary" if target == self.sources.primary_source else "secondary"
        record_switch(role)
        logger.info("Switched input source → %s (%s)", target, role)
        return target

    # ------------------------------------------------------------------
    # Cursor event wiring
    # ------------------------------------------------------------------

    def _sync_cursor_hook(self) -> None:
        if self.cursor_events is None:
            return
        wanted = self.controller.is_observing_cursor()
        if wanted and not self._cursor_hooked:
            self.cursor_events.subscribe(self.on_cursor_moved)
            self._cursor_hooked = True
        elif not wanted and self._cursor_hooked:
            self.cursor_events.unsubscribe(self.on_cursor_moved)
            self._cursor_hooked = False
