"""
Unit tests for the source switch decision.
"""
import pytest

from smart_input.models.script_class import ScriptClass
from smart_input.switching.decision import decide_switch, force_primary, force_secondary

P = "abc"
S = "pinyin"


class TestDecideSwitch:

    @pytest.mark.parametrize(
        "verdict, current, expected",
        [
            (ScriptClass.SECONDARY, P, S),
            (ScriptClass.PRIMARY, S, P),
            (ScriptClass.SECONDARY, S, None),
            (ScriptClass.PRIMARY, P, None),
            (ScriptClass.UNKNOWN, P, None),
            (ScriptClass.UNKNOWN, S, None),
            (None, P, None),
            (None, S, None),
        ],
    )
    def test_table(self, verdict, current, expected):
        assert decide_switch(verdict, current, P, S) == expected

    @pytest.mark.parametrize("verdict", [ScriptClass.PRIMARY, ScriptClass.SECONDARY])
    def test_unrecognised_source_untouched(self, verdict):
        assert decide_switch(verdict, "com.apple.keylayout.German", P, S) is None
        assert decide_switch(verdict, None, P, S) is None

    def test_repeated_verdict_is_idempotent(self):
        current = P
        issued = []
        for _ in range(3):
            target = decide_switch(ScriptClass.SECONDARY, current, P, S)
            if target is not None:
                issued.append(target)
                current = target
        assert issued == [S]


class TestForce:

    def test_force_primary(self, sources):
        assert force_primary(sources.secondary_source, sources) == sources.primary_source
        assert force_primary(sources.primary_source, sources) is None

    def test_force_secondary(self, sources):
        assert force_secondary(sources.primary_source, sources) == sources.secondary_source
        assert force_secondary(sources.secondary_source, sources) is None

    def test_force_ignores_foreign_source(self, sources):
        assert force_primary("other", sources) is None
        assert force_secondary("other", sources) is None
