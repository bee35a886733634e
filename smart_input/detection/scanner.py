"""
Proximity Scanner: finds the nearest non-blank characters around the cursor.

Three passes, all read-only:
    1. back   : skip blanks on the current line          → back_position, before
    2. cross  : keep skipping blanks and newlines         → cross_line_before
    3. forward: skip blanks on the current line          → forward_position, after

A class field is None when there is no character to classify (line
boundary for before/after, buffer start for cross_line_before).
"""
import logging
from typing import Optional

from smart_input.config.constants import NEWLINE
from smart_input.detection.classifier import classify, is_blank
from smart_input.models.buffer import TextBuffer
from smart_input.models.pattern_set import PatternSet
from smart_input.models.scan_result import ScanResult
from smart_input.models.script_class import ScriptClass

logger = logging.getLogger(__name__)


def _classify_optional(ch: Optional[str], patterns: PatternSet) -> Optional[ScriptClass]:
    if ch is None:
        return None
    return classify(ch, patterns)


def skip_blanks_backward(buffer: TextBuffer, offset: int, patterns: PatternSet, cross_lines: bool = False) -> int:
    """Return the smallest position reachable from *offset* moving back over blanks."""
    pos = offset
    while pos > 0:
        ch = buffer.char_at(pos - 1)
        if is_blank(ch, patterns) or (cross_lines and ch == NEWLINE):
            pos -= 1
            continue
        break
    return pos


def skip_blanks_forward(buffer: TextBuffer, offset: int, patterns: PatternSet) -> int:
    """Return the first position at or after *offset* that is not a blank on the same line."""
    pos = offset
    while is_blank(buffer.char_at(pos), patterns):
        pos += 1
    return pos


def scan(buffer: TextBuffer, cursor: int, patterns: PatternSet) -> ScanResult:
    """
    Scan around *cursor* without touching the buffer.

    Args:
        buffer: Host buffer (read-only access).
        cursor: Cursor offset; clamped to the line holding it.
        patterns: Active PatternSet.

    Returns:
        ScanResult with positions as buffer offsets.
    """
    line_start, line_end = buffer.line_bounds(cursor)
    cursor = max(line_start, min(cursor, line_end))

    # 1. Back, same line
    back_position = skip_blanks_backward(buffer, cursor, patterns)
    before_char = buffer.char_at(back_position - 1) if back_position > line_start else None

    # 2. Back, across lines
    cross_position = skip_blanks_backward(buffer, back_position, patterns, cross_lines=True)
    cross_char = buffer.char_at(cross_position - 1) if cross_position > 0 else None

    # 3. Forward, same line
    forward_position = skip_blanks_forward(buffer, cursor, patterns)
    after_char = buffer.char_at(forward_position) if forward_position < line_end else None

    result = ScanResult(
        cross_line_before=_classify_optional(cross_char, patterns),
        before=_classify_optional(before_char, patterns),
        back_position=back_position,
        forward_position=forward_position,
        after=_classify_optional(after_char, patterns),
        cross_line_before_char=cross_char,
        before_char=before_char,
        after_char=after_char,
    )
    logger.debug("scan(cursor=%d) → %r", cursor, result)
    return result
