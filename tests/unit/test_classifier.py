"""
Unit tests for the character classifier.
"""
import pytest

from smart_input.detection.classifier import classify, is_blank, is_primary, is_secondary
from smart_input.models.pattern_set import PatternSet
from smart_input.models.script_class import ScriptClass


class TestClassify:
    """classify() over the default Latin / CJK patterns."""

    @pytest.mark.parametrize("ch", list("abcxyzABCXYZ"))
    def test_latin_is_primary(self, patterns, ch):
        assert classify(ch, patterns) is ScriptClass.PRIMARY

    @pytest.mark.parametrize("ch", list("你好世界中文龥"))
    def test_cjk_is_secondary(self, patterns, ch):
        assert classify(ch, patterns) is ScriptClass.SECONDARY

    @pytest.mark.parametrize("ch", ["1", ",", "。", " ", "\t", "\n", "é"])
    def test_other_is_unknown(self, patterns, ch):
        assert classify(ch, patterns) is ScriptClass.UNKNOWN

    def test_none_is_unknown(self, patterns):
        assert classify(None, patterns) is ScriptClass.UNKNOWN

    @pytest.mark.parametrize("value", ["", "ab", "你好", 5, 3.2, b"a"])
    def test_non_char_input_is_unknown(self, patterns, value):
        assert classify(value, patterns) is ScriptClass.UNKNOWN

    def test_primary_wins_when_both_match(self):
        overlapping = PatternSet(primary=r"\w", secondary=r"[\u4e00-\u9fff]")
        assert classify("你", overlapping) is ScriptClass.PRIMARY

    def test_custom_secondary_pattern(self):
        cyrillic = PatternSet(secondary=r"[\u0400-\u04ff]")
        assert classify("ж", cyrillic) is ScriptClass.SECONDARY
        assert classify("你", cyrillic) is ScriptClass.UNKNOWN


class TestPredicates:
    """Boolean helpers never raise."""

    def test_is_primary(self, patterns):
        assert is_primary("a", patterns)
        assert not is_primary("你", patterns)
        assert not is_primary(None, patterns)

    def test_is_secondary(self, patterns):
        assert is_secondary("你", patterns)
        assert not is_secondary("a", patterns)
        assert not is_secondary(None, patterns)

    @pytest.mark.parametrize("ch", [" ", "\t", "\u3000", "\u00a0"])
    def test_horizontal_whitespace_is_blank(self, patterns, ch):
        assert is_blank(ch, patterns)

    def test_newline_is_never_blank(self, patterns):
        greedy = patterns.with_overrides(blank=r"\s")
        assert not is_blank("\n", patterns)
        assert not is_blank("\n", greedy)
        assert is_blank(" ", greedy)

    def test_none_is_not_blank(self, patterns):
        assert not is_blank(None, patterns)
