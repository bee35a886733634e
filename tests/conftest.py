"""
Shared test fixtures for the detection & switching test suite.
"""
import pytest

from smart_input.models.buffer import StringBuffer
from smart_input.models.pattern_set import PatternSet
from smart_input.models.source_config import SourceConfig
from smart_input.switching.adapters import CursorEvents, InMemoryInputSource
from smart_input.switching.override_region import OverrideRegionController
from smart_input.switching.session import BufferSession

PRIMARY_SOURCE = "com.apple.keylayout.ABC"
SECONDARY_SOURCE = "com.sogou.inputmethod.sogou.pinyin"


# ==========================================================================
# Configuration
# ==========================================================================

@pytest.fixture
def patterns():
    return PatternSet()


@pytest.fixture
def sources():
    return SourceConfig(
        primary_source=PRIMARY_SOURCE,
        secondary_source=SECONDARY_SOURCE,
        tool="macism",
    )


# ==========================================================================
# State & capabilities
# ==========================================================================

@pytest.fixture
def controller():
    return OverrideRegionController()


@pytest.fixture
def input_source():
    """Input source manager starting on the secondary source."""
    return InMemoryInputSource(SECONDARY_SOURCE)


@pytest.fixture
def cursor_events():
    return CursorEvents()


# ==========================================================================
# Sessions
# ==========================================================================

@pytest.fixture
def make_session(sources, input_source, cursor_events):
    """Factory: make_session("hello 你好 |") → (session, cursor)."""

    def _make(marked: str, **kwargs):
        buffer, cursor = StringBuffer.with_cursor(marked)
        kwargs.setdefault("input_source", input_source)
        kwargs.setdefault("cursor_events", cursor_events)
        return BufferSession(buffer, sources, **kwargs), cursor

    return _make
