"""
PatternSet: typed, validated character pattern configuration.

Three single-character matchers drive detection:
- primary   : characters typed with the primary input source
- secondary : characters typed with the secondary input source
- blank     : horizontal whitespace skipped while scanning

Instances are frozen; per-buffer overrides produce a new instance.
"""
from __future__ import annotations

import re
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, field_validator

from smart_input.config.constants import (
    DEFAULT_BLANK_PATTERN,
    DEFAULT_PRIMARY_PATTERN,
    DEFAULT_SECONDARY_PATTERN,
    NEWLINE,
)


class PatternSet(BaseModel):
    """Regex patterns for primary, secondary and blank characters."""

    model_config = ConfigDict(frozen=True)

    primary: str = Field(DEFAULT_PRIMARY_PATTERN, description="Single-character regex for the primary script.")
    secondary: str = Field(DEFAULT_SECONDARY_PATTERN, description="Single-character regex for the secondary script.")
    blank: str = Field(DEFAULT_BLANK_PATTERN, description="Single-character regex for skippable blanks.")

    _primary_re: re.Pattern[str] = PrivateAttr()
    _secondary_re: re.Pattern[str] = PrivateAttr()
    _blank_re: re.Pattern[str] = PrivateAttr()

    @field_validator("primary", "secondary", "blank")
    @classmethod
    def validate_regex(cls, v: str) -> str:
        if not v:
            raise ValueError("pattern must be a non-empty regex")
        try:
            re.compile(v)
        except re.error as e:
            raise ValueError(f"invalid regex '{v}': {e}") from e
        return v

    def model_post_init(self, __context) -> None:
        self._primary_re = re.compile(self.primary)
        self._secondary_re = re.compile(self.secondary)
        self._blank_re = re.compile(self.blank)

    def matches_primary(self, ch: str) -> bool:
        return self._primary_re.fullmatch(ch) is not None

    def matches_secondary(self, ch: str) -> bool:
        return self._secondary_re.fullmatch(ch) is not None

    def matches_blank(self, ch: str) -> bool:
        """A newline is never blank: it is the line boundary."""
        if ch == NEWLINE:
            return False
        return self._blank_re.fullmatch(ch) is not None

    def with_overrides(
        self,
        primary: Optional[str] = None,
        secondary: Optional[str] = None,
        blank: Optional[str] = None,
    ) -> "PatternSet":
        """Return a new PatternSet with the given patterns replaced (per-buffer override)."""
        return PatternSet(
            primary=primary if primary is not None else self.primary,
            secondary=secondary if secondary is not None else self.secondary,
            blank=blank if blank is not None else self.blank,
        )

    @classmethod
    def from_settings(cls) -> "PatternSet":
        from smart_input.config.settings import (
            SIS_BLANK_PATTERN,
            SIS_PRIMARY_PATTERN,
            SIS_SECONDARY_PATTERN,
        )

        return cls(
            primary=SIS_PRIMARY_PATTERN,
            secondary=SIS_SECONDARY_PATTERN,
            blank=SIS_BLANK_PATTERN,
        )
