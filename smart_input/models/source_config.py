"""
SourceConfig: the two input sources this package reasons about.
"""
from __future__ import annotations

import logging
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from smart_input.config.constants import ISM_PRESETS, SUPPORTED_TOOLS

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """
    Primary / secondary input source ids plus the external tool they belong to.

    Any other active source is left untouched by the switch decision.
    """

    model_config = ConfigDict(frozen=True)

    primary_source: str = Field(..., description="Input source id used for primary-script text.")
    secondary_source: str = Field(..., description="Input source id used for secondary-script text.")
    tool: Optional[str] = Field(None, description="Identifier or path of the external input-source tool.")

    @field_validator("primary_source", "secondary_source")
    @classmethod
    def validate_source_id(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("input source id must be a non-empty string")
        return v

    @model_validator(mode="after")
    def validate_distinct(self) -> "SourceConfig":
        if self.primary_source == self.secondary_source:
            raise ValueError("primary_source and secondary_source must differ")
        return self

    @classmethod
    def from_preset(cls, tool: str) -> "SourceConfig":
        """
        Build a config from the preset table.

        Raises:
            ValueError: If the tool has no preset.
        """
        if tool not in ISM_PRESETS:
            raise ValueError(
                f"No input source preset for tool '{tool}' (known: {', '.join(SUPPORTED_TOOLS)})"
            )
        primary, secondary = ISM_PRESETS[tool]
        return cls(primary_source=primary, secondary_source=secondary, tool=tool)

    @classmethod
    def from_settings(cls) -> Optional["SourceConfig"]:
        """
        Explicit ids from the environment win over the tool preset.

        Returns:
            None when neither the environment nor a preset supplies both
            ids; the caller then runs without switching.
        """
        from smart_input.config.settings import (
            SIS_ISM_TOOL,
            SIS_PRIMARY_SOURCE,
            SIS_SECONDARY_SOURCE,
        )

        preset = ISM_PRESETS.get(SIS_ISM_TOOL, ("", ""))
        primary = SIS_PRIMARY_SOURCE or preset[0]
        secondary = SIS_SECONDARY_SOURCE or preset[1]
        if not primary or not secondary:
            logger.warning(
                "No input sources configured for tool '%s'; set SIS_PRIMARY_SOURCE and "
                "SIS_SECONDARY_SOURCE or use one of: %s",
                SIS_ISM_TOOL,
                ", ".join(SUPPORTED_TOOLS),
            )
            return None
        return cls(primary_source=primary, secondary_source=secondary, tool=SIS_ISM_TOOL)
