"""
Constants used across the detection and switching stages.
Versioned and pinned for determinism.
"""
from typing import Dict, List, Tuple

# =============================================================================
# Character patterns (single-character regexes)
# =============================================================================
DEFAULT_PRIMARY_PATTERN: str = r"[a-zA-Z]"

# CJK Unified Ideographs + extension A + compatibility ideographs.
DEFAULT_SECONDARY_PATTERN: str = r"[\u3400-\u4dbf\u4e00-\u9fff\uf900-\ufaff]"

# Horizontal whitespace only (space, tab, nbsp, ideographic space, ...).
DEFAULT_BLANK_PATTERN: str = r"[^\S\r\n\f\v]"

NEWLINE: str = "\n"

# =============================================================================
# Input source presets per external tool
# (primary_source, secondary_source)
# =============================================================================
ISM_PRESETS: Dict[str, Tuple[str, str]] = {
    "macism": ("com.apple.keylayout.ABC", "com.sogou.inputmethod.sogou.pinyin"),
    "im-select": ("1033", "2052"),
    "fcitx": ("1", "2"),
    "fcitx5": ("1", "2"),
    "ibus": ("xkb:us::eng", "pinyin"),
    "emp": ("com.apple.keylayout.ABC", "com.apple.inputmethod.SCIM.ITABC"),
}

SUPPORTED_TOOLS: List[str] = sorted(ISM_PRESETS)
