"""
Scale spec model - the abstract recipe for a family of scales.

A spec names a format and type and lists the intervals to apply to each
root. It has a one-line text form used by the custom scales file:

    format; type; interval1, interval2, ...; simplify
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Accidental symbol followed by a step number 1-15
INTERVAL_PATTERN = re.compile(r"^(bbb|bb|b|#x|#|x)?(1[0-5]|[1-9])$")

_FIELD_SEPARATOR = re.compile(r";\s*")
_INTERVAL_SEPARATOR = re.compile(r",\s*")

_BOOLEANS = {"true": True, "false": False}

# Characters that would split a tag across fields or lines
_RESERVED_TAG_CHARS = (";", "\n", "\r")


class SpecFormatError(ValueError):
    """A scale spec line could not be parsed."""


def split_intervals(text: str) -> list[str]:
    """Split a comma-separated interval list ('1, b3, 5')."""
    return [part.strip() for part in _INTERVAL_SEPARATOR.split(text.strip()) if part.strip()]


class ScaleSpec(BaseModel):
    """
    Specification for a collection of scales sharing one interval pattern.

    Format and type are free-text tags, stored lowercase.
    Intervals are spellings like '1', 'b3', '#11'.
    """

    format: str = Field(..., min_length=1, description="Scale format (e.g. 'scale', 'arpeggio')")
    type: str = Field(..., min_length=1, description="Scale type (e.g. 'major', 'dorian')")
    intervals: tuple[str, ...] = Field(
        ..., min_length=1, description="Interval spellings applied to each root"
    )
    simplify: bool = Field(False, description="Respell notes with fewer accidentals")

    model_config = {"frozen": True}

    @field_validator("format", "type", mode="before")
    @classmethod
    def normalize_tag(cls, v: Any) -> Any:
        """Tags are case-insensitive."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("format", "type")
    @classmethod
    def validate_tag(cls, v: str) -> str:
        """Tags must fit in one field of a custom scales file line."""
        if any(char in v for char in _RESERVED_TAG_CHARS):
            raise ValueError(f"Tag cannot contain ';' or line breaks: {v!r}")
        return v

    @field_validator("intervals", mode="before")
    @classmethod
    def coerce_intervals(cls, v: Any) -> Any:
        """Accept a comma-separated string, and bare numbers as written in YAML."""
        if isinstance(v, str):
            return split_intervals(v)
        if isinstance(v, (list, tuple)):
            return [str(item).strip() for item in v]
        return v

    @field_validator("intervals")
    @classmethod
    def validate_intervals(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Each interval must be an accidental plus a number 1-15."""
        invalid = [interval for interval in v if not INTERVAL_PATTERN.match(interval)]
        if invalid:
            raise ValueError(f"Invalid intervals: {', '.join(invalid)}")
        return v

    @property
    def name(self) -> str:
        """Display name, e.g. 'major scale'."""
        return f"{self.type} {self.format}"

    def to_line(self) -> str:
        """Encode as a single line of the custom scales file."""
        simplify = "true" if self.simplify else "false"
        return f"{self.format}; {self.type}; {', '.join(self.intervals)}; {simplify}"

    @classmethod
    def from_line(cls, line: str) -> ScaleSpec:
        """
        Parse a single line of the custom scales file.

        Args:
            line: Text like 'scale; major; 1, 2, 3, 4, 5, 6, 7, 8; false'

        Returns:
            Parsed ScaleSpec

        Raises:
            SpecFormatError: If the field count or simplify flag is wrong
            pydantic.ValidationError: If a field fails validation
        """
        fields = _FIELD_SEPARATOR.split(line.strip())
        if len(fields) != 4:
            raise SpecFormatError(f"Expected 4 fields separated by ';', got {len(fields)}: {line}")

        format_, type_, intervals, simplify = fields
        flag = _BOOLEANS.get(simplify.strip().lower())
        if flag is None:
            raise SpecFormatError(f"Invalid simplify flag: {simplify!r}. Expected true or false")

        return cls(
            format=format_,
            type=type_,
            intervals=split_intervals(intervals),
            simplify=flag,
        )
