#!/usr/bin/env python3
# -*- coding: utf-8 -*-
# File: xyzlab/core/color.py

"""Color value types and the capability contract they share.

Every representation converts to and from CIE 1931 XYZ. Conversions between
any two representations go through XYZ, so a new representation only has to
provide ``from_xyz`` and ``into_xyz`` to reach all the others.
"""

from __future__ import annotations

import operator
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Type, TypeVar

from . import config as c
from . import conversions as conv
from xyzlab.shared.terminal import ForegroundStyle, colorize

T = TypeVar("T", bound="Color")


class Color(ABC):
    """Anything that can be converted to and from the XYZ interchange space."""

    @classmethod
    @abstractmethod
    def from_xyz(cls: Type[T], xyz: XYZColor) -> T:
        """Build a value of this type from an XYZ color. Never fails; may clamp."""

    @abstractmethod
    def into_xyz(self) -> XYZColor:
        """Return this color in the XYZ interchange space."""

    def convert(self, target: Type[T]) -> T:
        """Convert to any other Color type by way of XYZ.

        Converting to the value's own type returns it unchanged, so the lossy
        RGB round trip is never applied to an RGB value.
        """
        if type(self) is target:
            return self
        return target.from_xyz(self.into_xyz())

    def write_colored_str(self, text: str, style: Optional[ForegroundStyle] = None) -> str:
        """Return text wrapped in this color's foreground escape and a reset."""
        rgb = self.convert(RGBColor)
        return rgb.base_write_colored_str(text, style)


@dataclass(frozen=True)
class XYZColor(Color):
    """A point in the CIE 1931 XYZ color space.

    Real light has non-negative tristimulus values, but this is not checked:
    negative components are accepted as given.
    """

    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def from_sequence(cls, nums: Sequence[float]) -> XYZColor:
        return cls(nums[0], nums[1], nums[2])

    def to_list(self) -> List[float]:
        return [self.x, self.y, self.z]

    def __iter__(self) -> Iterator[float]:
        return iter((self.x, self.y, self.z))

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> XYZColor:
        return xyz

    def into_xyz(self) -> XYZColor:
        return self


def _channel(name: str, value) -> int:
    if isinstance(value, bool):
        raise TypeError(f"RGB channel '{name}' must be an integer, got bool")
    try:
        v = operator.index(value)
    except TypeError:
        raise TypeError(
            f"RGB channel '{name}' must be an integer, got {type(value).__name__}"
        ) from None
    if not c.RGB_CHANNEL_MIN <= v <= c.RGB_CHANNEL_MAX:
        raise ValueError(
            f"RGB channel '{name}' out of range: {v} "
            f"(expected {c.RGB_CHANNEL_MIN}-{c.RGB_CHANNEL_MAX})"
        )
    return v


@dataclass(frozen=True)
class RGBColor(Color):
    """An 8-bit-per-channel sRGB color."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "r", _channel("r", self.r))
        object.__setattr__(self, "g", _channel("g", self.g))
        object.__setattr__(self, "b", _channel("b", self.b))

    @classmethod
    def from_sequence(cls, nums: Sequence[int]) -> RGBColor:
        return cls(nums[0], nums[1], nums[2])

    def to_list(self) -> List[int]:
        return [self.r, self.g, self.b]

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    def to_hex(self) -> str:
        """Return the color as ``#RRGGBB`` with uppercase digits."""
        return f"#{conv.rgb_to_hex(self.r, self.g, self.b)}"

    def __str__(self) -> str:
        return self.to_hex()

    def base_write_colored_str(self, text: str, style: Optional[ForegroundStyle] = None) -> str:
        # Color.write_colored_str is the public entry point; this is its RGB backend.
        return colorize(text, self.r, self.g, self.b, style)

    @classmethod
    def from_xyz(cls, xyz: XYZColor) -> RGBColor:
        return cls(*conv.xyz_to_rgb(xyz.x, xyz.y, xyz.z))

    def into_xyz(self) -> XYZColor:
        return XYZColor(*conv.rgb_to_xyz(self.r, self.g, self.b))
