"""The CIE 1931 Yxy (xyY) colour space.

Yxy is a luminance-chromaticity space derived from CIE XYZ. Chromaticity
diagrams are plots of its ``x`` and ``y`` coordinates, while ``luma`` is the
same as the Y of XYZ. Conversions depend on the white point.
"""

from __future__ import annotations

import math
import operator
import sys
from dataclasses import dataclass
from typing import Callable

from ciexyz.white_point import D65, WhitePoint
from ciexyz.xyz import Xyz, _clamp, _ieee_div, _is_scalar

__all__ = ["Yxy"]


def _is_normal(value: float) -> bool:
    """True for finite, non-zero values that are not subnormal."""
    return math.isfinite(value) and abs(value) >= sys.float_info.min


@dataclass(frozen=True)
class Yxy:
    """A CIE 1931 Yxy colour under a given white point (D65 by default).

    ``x`` and ``y`` are the chromaticity coordinates X/(X+Y+Z) and
    Y/(X+Y+Z); ``luma`` is the luminance, 0.0 for black and 1.0 for white.
    """

    x: float
    y: float
    luma: float
    white_point: WhitePoint = D65

    @classmethod
    def from_components(
        cls, components: tuple[float, float, float], white_point: WhitePoint = D65
    ) -> Yxy:
        """Build a colour from an ``(x, y, luma)`` tuple."""
        x, y, luma = components
        return cls(x, y, luma, white_point)

    def into_components(self) -> tuple[float, float, float]:
        """Return the ``(x, y, luma)`` tuple."""
        return (self.x, self.y, self.luma)

    @classmethod
    def default(cls, white_point: WhitePoint = D65) -> Yxy:
        """Black: the white point's chromaticity with zero luminance.

        The white point's chromaticity is used rather than 0 because ``(0, 0)``
        lies outside the usual gamut.
        """
        white = cls.from_xyz(Xyz.reference(white_point))
        return cls(white.x, white.y, 0.0, white_point)

    @classmethod
    def from_xyz(cls, xyz: Xyz) -> Yxy:
        """Convert from XYZ, keeping its white point.

        When ``X + Y + Z`` is zero, subnormal or not finite, ``x`` and ``y``
        are left at 0.
        """
        total = xyz.x + xyz.y + xyz.z
        if _is_normal(total):
            return cls(xyz.x / total, xyz.y / total, xyz.y, xyz.white_point)
        return cls(0.0, 0.0, xyz.y, xyz.white_point)

    def to_xyz(self) -> Xyz:
        """Convert to XYZ under the same white point.

        When ``y`` is zero, subnormal or not finite, ``X`` and ``Z`` are 0.
        """
        if _is_normal(self.y):
            return Xyz(
                self.luma * self.x / self.y,
                self.luma,
                self.luma * (1.0 - self.x - self.y) / self.y,
                self.white_point,
            )
        return Xyz(0.0, self.luma, 0.0, self.white_point)

    @staticmethod
    def min_x() -> float:
        return 0.0

    @staticmethod
    def max_x() -> float:
        return 1.0

    @staticmethod
    def min_y() -> float:
        return 0.0

    @staticmethod
    def max_y() -> float:
        return 1.0

    @staticmethod
    def min_luma() -> float:
        return 0.0

    @staticmethod
    def max_luma() -> float:
        return 1.0

    def is_valid(self) -> bool:
        """Whether every component lies in [0, 1]."""
        return (
            0.0 <= self.x <= 1.0
            and 0.0 <= self.y <= 1.0
            and 0.0 <= self.luma <= 1.0
        )

    def clamp(self) -> Yxy:
        """Return a copy with every component clamped to [0, 1]."""
        return self.component_wise_self(lambda v: _clamp(v, 0.0, 1.0))

    def mix(self, other: Yxy, factor: float) -> Yxy:
        """Linearly interpolate towards ``other``; ``factor`` is clamped to [0, 1]."""
        factor = _clamp(factor, 0.0, 1.0)
        return self.component_wise(other, lambda a, b: a + factor * (b - a))

    def lighten(self, amount: float) -> Yxy:
        """Return a copy with ``amount`` added to ``luma``."""
        return Yxy(self.x, self.y, self.luma + amount, self.white_point)

    def component_wise(
        self, other: Yxy, func: Callable[[float, float], float]
    ) -> Yxy:
        """Combine matching components of two colours with ``func``."""
        if other.white_point != self.white_point:
            raise ValueError(
                f"white points differ: {self.white_point.name} "
                f"and {other.white_point.name}"
            )
        return Yxy(
            func(self.x, other.x),
            func(self.y, other.y),
            func(self.luma, other.luma),
            self.white_point,
        )

    def component_wise_self(self, func: Callable[[float], float]) -> Yxy:
        """Apply ``func`` to every component."""
        return Yxy(func(self.x), func(self.y), func(self.luma), self.white_point)

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Yxy):
            return self.component_wise(other, op)
        if _is_scalar(other):
            return self.component_wise_self(lambda a: op(a, other))
        return NotImplemented

    def __add__(self, other: Yxy | float) -> Yxy:
        return self._apply(other, operator.add)

    def __sub__(self, other: Yxy | float) -> Yxy:
        return self._apply(other, operator.sub)

    def __mul__(self, other: Yxy | float) -> Yxy:
        return self._apply(other, operator.mul)

    def __truediv__(self, other: Yxy | float) -> Yxy:
        return self._apply(other, _ieee_div)