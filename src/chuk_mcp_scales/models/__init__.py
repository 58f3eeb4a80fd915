"""
Pydantic models for the scale library.

This module provides:
- ScaleSpec: Format, type, interval pattern and simplify flag for a collection
- SpecFormatError: Raised for malformed scale spec lines
"""

from chuk_mcp_scales.models.spec import ScaleSpec, SpecFormatError, split_intervals

__all__ = [
    "ScaleSpec",
    "SpecFormatError",
    "split_intervals",
]
