"""Pydantic v2 models for the design configurator.

``Configuration`` is the single domain record: an immutable snapshot of every
design axis, rebuilt from the caller's current state on each generation.
``GenerationResult`` bundles the two generated artifacts.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .catalog import DEFAULTS, resolve_shadow_label
from .colors import is_valid_hex


class Configuration(BaseModel):
    """Immutable record of all user-selectable design axes.

    Enum-like axes are stored as plain strings so that unknown values are
    accepted; each resolver degrades them to its neutral default.  Records
    coming from a UI layer use camelCase keys (``projectType``,
    ``shadowDepth``...), which validate through the field aliases.  The
    primary colour is the one checked value: it must be a hex string.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    project_type: str = Field(default=DEFAULTS["project_type"])
    design_style: str = Field(default=DEFAULTS["design_style"])
    theme: str = Field(default=DEFAULTS["theme"])
    primary_color: str = Field(default=DEFAULTS["primary_color"])
    palette_type: str = Field(default=DEFAULTS["palette_type"])
    shadow_depth: int = Field(
        default=DEFAULTS["shadow_depth"],
        description="Ordinal index into the shadow depth table (0-3)",
    )
    device_target: str = Field(default=DEFAULTS["device_target"])
    css_framework: str = Field(default=DEFAULTS["css_framework"])
    typography: str = Field(default=DEFAULTS["typography"])
    animation_type: str = Field(default=DEFAULTS["animation_type"])
    accessibility_level: str = Field(default=DEFAULTS["accessibility_level"])
    js_library: str = Field(default=DEFAULTS["js_library"])

    @field_validator(
        "theme",
        "device_target",
        "css_framework",
        "typography",
        "animation_type",
        "js_library",
        mode="before",
    )
    @classmethod
    def _enum_to_value(cls, value: Any) -> Any:
        return _plain(value)

    @field_validator("primary_color")
    @classmethod
    def _hex_only(cls, value: str) -> str:
        if not is_valid_hex(value):
            raise ValueError(f"primary_color must be a #RGB or #RRGGBB hex string, got {value!r}")
        return value

    @property
    def shadow_depth_label(self) -> str:
        """The shadow depth index resolved to its label."""
        return resolve_shadow_label(self.shadow_depth)

    def with_primary_color(self, text: str) -> "Configuration":
        """Apply a manually typed colour if it is a valid hex string.

        Returns a new record carrying *text* as the primary colour, or this
        record unchanged when *text* is rejected.
        """
        if not is_valid_hex(text):
            return self
        return self.model_copy(update={"primary_color": text})

    def with_options(self, **changes: Any) -> "Configuration":
        """Return a copy with the given fields replaced (snake_case names).

        The merged record is validated again, so values are coerced exactly
        as they are at construction.

        Raises:
            ValueError: If a name is not a configuration field.
            pydantic.ValidationError: If a new value is ill-typed.
        """
        unknown = set(changes) - set(type(self).model_fields)
        if unknown:
            raise ValueError(f"Unknown configuration fields: {sorted(unknown)}")
        updates = {name: _plain(value) for name, value in changes.items()}
        return type(self).model_validate({**self.model_dump(), **updates})

    @classmethod
    def reset(cls) -> "Configuration":
        """Return the default configuration."""
        return cls()

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Configuration":
        """Validate a caller-supplied record (camelCase or snake_case keys)."""
        return cls.model_validate(record)

    def to_record(self) -> dict[str, Any]:
        """Return the camelCase record, with ``shadowDepth`` as the index."""
        return self.model_dump(by_alias=True)

    def resolved_values(self) -> dict[str, str]:
        """Return every field as display text, shadow depth as its label."""
        values = {name: str(value) for name, value in self.model_dump().items()}
        values["shadow_depth"] = self.shadow_depth_label
        return values


def _plain(value: Any) -> Any:
    """Unwrap catalog enum members to their string value."""
    return value.value if isinstance(value, Enum) else value


class GenerationResult(BaseModel):
    """The two artifacts produced from one configuration."""

    prompt_text: str
    document_text: str
