"""
CSS value types.
This module defines the keyword and length values carried by declarations.
"""

import re
from enum import Enum
from typing import Optional

# Matches "12px", "-4.5px", ".5px" and the unitless zero
LENGTH_PATTERN = re.compile(r'^([-+]?[0-9]*\.?[0-9]+)(px)?$', re.IGNORECASE)

class Unit(Enum):
    """Length units understood by the layout engine."""
    PX = "px"


class Value:
    """Base class for declared CSS values."""

    def to_px(self) -> float:
        """
        Get the value in pixels.

        Returns:
            The pixel size for px lengths, 0.0 for anything else
        """
        return 0.0


class Keyword(Value):
    """A keyword value such as ``auto``, ``block`` or ``red``."""

    def __init__(self, keyword: str):
        self.keyword = keyword

    def __eq__(self, other):
        return isinstance(other, Keyword) and self.keyword == other.keyword

    def __hash__(self):
        return hash(('keyword', self.keyword))

    def __repr__(self):
        return f"Keyword({self.keyword!r})"

    def __str__(self):
        return self.keyword


class Length(Value):
    """A length value with its unit."""

    def __init__(self, value: float, unit: Unit = Unit.PX):
        self.value = float(value)
        self.unit = unit

    def to_px(self) -> float:
        if self.unit == Unit.PX:
            return self.value
        return 0.0

    def __eq__(self, other):
        return isinstance(other, Length) and self.value == other.value and self.unit == other.unit

    def __hash__(self):
        return hash(('length', self.value, self.unit))

    def __repr__(self):
        return f"Length({self.value!r}, {self.unit.name})"

    def __str__(self):
        return f"{self.value:g}{self.unit.value}"


AUTO = Keyword("auto")
ZERO = Length(0.0, Unit.PX)


def px(value: float) -> Length:
    """Create a pixel length."""
    return Length(value, Unit.PX)


def parse_value(value_text: str) -> Value:
    """
    Parse a declaration value.

    Pixel lengths (and a bare ``0``) become ``Length``; everything else,
    including other units and multi-part shorthands, is kept as an opaque
    ``Keyword``.

    Args:
        value_text: Raw value text (e.g., '10px', 'auto')

    Returns:
        The parsed value
    """
    value_text = value_text.strip()
    match = LENGTH_PATTERN.match(value_text)
    if match:
        number, unit = match.groups()
        if unit is not None or float(number) == 0:
            return Length(float(number), Unit.PX)

    return Keyword(value_text)


def length_or_none(value: Optional[Value]) -> Optional[float]:
    """Get the pixel size of a px length, or None for anything else."""
    if isinstance(value, Length) and value.unit == Unit.PX:
        return value.value
    return None
