"""
Unit tests for the context classifier decision table.
"""
from smart_input.detection.context import guess_context
from smart_input.detection.scanner import scan
from smart_input.models.buffer import StringBuffer
from smart_input.models.override_region import OverrideRegion
from smart_input.models.script_class import ScriptClass


def _guess(marked: str, patterns, controller):
    buffer, cursor = StringBuffer.with_cursor(marked)
    line_start, line_end = buffer.line_bounds(cursor)
    return guess_context(scan(buffer, cursor, patterns), controller, line_start, line_end, cursor)


class TestRule1InlineRegion:
    """[secondary]<blank>^ → primary + region over the skipped blanks."""

    def test_blank_after_secondary(self, patterns, controller):
        assert _guess("hello 你好 |", patterns, controller) is ScriptClass.PRIMARY
        assert controller.region == OverrideRegion(8, 9)
        assert controller.is_observing_cursor()

    def test_blank_after_secondary_before_primary(self, patterns, controller):
        # Literal table: rule 1 fires before the fallback rules are reached.
        assert _guess("你好 |hello", patterns, controller) is ScriptClass.PRIMARY
        assert controller.region == OverrideRegion(2, 3)

    def test_no_blank_no_region(self, patterns, controller):
        assert _guess("hello 你好|", patterns, controller) is ScriptClass.SECONDARY
        assert controller.region is None

    def test_wins_over_rule_3(self, patterns, controller):
        # Both "[secondary]<blank>^" and "^<blank>[secondary]" hold.
        assert _guess("你好 | 世界", patterns, controller) is ScriptClass.PRIMARY
        assert controller.region == OverrideRegion(2, 3)

    def test_clears_last_region(self, patterns, controller):
        controller.activate(0, 1)
        controller.deactivate()
        _guess("你好 |", patterns, controller)
        assert controller.last_region is None


class TestRule2ReEntry:
    """Re-entry just after the last region with a primary char behind → secondary."""

    def test_matches_literal_scenario(self, patterns, controller):
        controller.activate(8, 12)
        controller.deactivate()
        assert _guess("hello 你好 ab |", patterns, controller) is ScriptClass.SECONDARY
        assert controller.last_region is None

    def test_consumed_when_not_matching(self, patterns, controller):
        controller.activate(20, 30)
        controller.deactivate()
        assert _guess("abc |", patterns, controller) is ScriptClass.PRIMARY
        assert controller.last_region is None

    def test_requires_blank_before_cursor(self, patterns, controller):
        controller.activate(8, 12)
        controller.deactivate()
        assert _guess("hello 你好 ab|", patterns, controller) is ScriptClass.PRIMARY
        assert controller.last_region is None

    def test_requires_primary_before(self, patterns, controller):
        controller.activate(0, 10)
        controller.deactivate()
        assert _guess("12 |", patterns, controller) is None

    def test_only_first_call_sees_last_region(self, patterns, controller):
        controller.activate(8, 12)
        controller.deactivate()
        _guess("abc|", patterns, controller)
        assert _guess("hello 你好 ab |", patterns, controller) is ScriptClass.PRIMARY


class TestForwardRules:

    def test_rule_3_blank_then_secondary(self, patterns, controller):
        assert _guess("abc| 你好", patterns, controller) is ScriptClass.PRIMARY
        assert controller.region is None

    def test_rule_4_secondary_right_after_cursor(self, patterns, controller):
        assert _guess("abc|你好", patterns, controller) is ScriptClass.SECONDARY

    def test_rule_4_at_line_start(self, patterns, controller):
        assert _guess("  |你好", patterns, controller) is ScriptClass.SECONDARY

    def test_primary_after_does_not_decide(self, patterns, controller):
        # Falls through to the cross-line fallback.
        assert _guess("123|abc", patterns, controller) is None


class TestCrossLineFallback:

    def test_rule_5_primary(self, patterns, controller):
        assert _guess("abc |", patterns, controller) is ScriptClass.PRIMARY

    def test_rule_6_secondary_across_lines(self, patterns, controller):
        assert _guess("你好\n|hello", patterns, controller) is ScriptClass.SECONDARY
        assert controller.region is None

    def test_rule_5_across_blank_lines(self, patterns, controller):
        assert _guess("hello\n\n   \n|", patterns, controller) is ScriptClass.PRIMARY


class TestNoVerdict:

    def test_empty_buffer(self, patterns, controller):
        assert _guess("|", patterns, controller) is None

    def test_only_unknown_chars(self, patterns, controller):
        assert _guess("123, |", patterns, controller) is None
        assert controller.region is None
