"""
Context Classifier: turns a ScanResult into a language verdict.

Decision table (first match wins, order is significant):

    1. [secondary]<blank>^            → PRIMARY   (+ activate override region)
    2. re-entry after the last region,
       [primary]<blank>^              → SECONDARY
    3. ^<blank>[secondary]            → PRIMARY
    4. ^[secondary]                   → SECONDARY
    5. cross-line back is primary     → PRIMARY
    6. cross-line back is secondary   → SECONDARY
    7. otherwise                      → None (leave input source alone)

`^` is the cursor, <blank> at least one skipped blank on the same line.
Rule 1 is the only rule with a side effect. The last region is consumed
whenever rule 2 is tested, whatever its outcome.
"""
import logging
from typing import Optional

from smart_input.models.scan_result import ScanResult
from smart_input.models.script_class import ScriptClass
from smart_input.switching.override_region import OverrideRegionController

logger = logging.getLogger(__name__)


def guess_context(
    scan: ScanResult,
    controller: OverrideRegionController,
    line_start: int,
    line_end: int,
    cursor: int,
) -> Optional[ScriptClass]:
    """
    Decide which script the user is about to type at *cursor*.

    Args:
        scan: Result of scanner.scan() at *cursor*.
        controller: Per-buffer override region state (read and, for rule 1, written).
        line_start: Offset of the first character of the cursor's line.
        line_end: Offset just past the last character of the cursor's line.
        cursor: Cursor offset.

    Returns:
        ScriptClass.PRIMARY, ScriptClass.SECONDARY, or None when undetermined.
    """
    back_position = scan.back_position
    forward_position = scan.forward_position

    # 1. [secondary]<blank>^
    if line_start < back_position < cursor and scan.before is ScriptClass.SECONDARY:
        controller.activate(back_position, cursor)
        logger.debug("rule 1: inline region [%d,%d) → primary", back_position, cursor)
        return ScriptClass.PRIMARY

    # 2. Re-entry just after the last region
    last = controller.consume_last_region()
    if (
        last is not None
        and last.contains(back_position)
        and back_position < cursor
        and scan.before is ScriptClass.PRIMARY
    ):
        logger.debug("rule 2: re-entry after %r → secondary", last)
        return ScriptClass.SECONDARY

    # 3. ^<blank>[secondary]
    if cursor < forward_position < line_end and scan.after is ScriptClass.SECONDARY:
        logger.debug("rule 3 → primary")
        return ScriptClass.PRIMARY

    # 4. ^[secondary]
    if forward_position == cursor and scan.after is ScriptClass.SECONDARY:
        logger.debug("rule 4 → secondary")
        return ScriptClass.SECONDARY

    # 5. / 6. Fall back to the nearest character across lines
    if scan.cross_line_before is ScriptClass.PRIMARY:
        logger.debug("rule 5 → primary")
        return ScriptClass.PRIMARY
    if scan.cross_line_before is ScriptClass.SECONDARY:
        logger.debug("rule 6 → secondary")
        return ScriptClass.SECONDARY

    return None
