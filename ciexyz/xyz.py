"""The CIE 1931 XYZ colour space.

XYZ links perceived colours to their wavelengths and describes how we see
colours as numbers. It is often used as the intermediate space when
converting between other colour spaces and it needs a standard illuminant and
observer, given here as a ``WhitePoint``.
"""

from __future__ import annotations

import math
import operator
from dataclasses import dataclass
from typing import Callable

from ciexyz.white_point import D65, WhitePoint

__all__ = ["Xyz"]


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def _ieee_div(a: float, b: float) -> float:
    """Divide like IEEE 754 floats do: zero divisors give infinities or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _is_scalar(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


@dataclass(frozen=True)
class Xyz:
    """A CIE 1931 XYZ colour under a given white point (D65 by default).

    ``x`` is the response curve of the cone cells, ``y`` the luminance where
    0.0 is black and 1.0 white, and ``z`` roughly the blue stimulation. The
    ranges of ``x`` and ``z`` go up to the white point's values.
    """

    x: float
    y: float
    z: float
    white_point: WhitePoint = D65

    @classmethod
    def from_components(
        cls, components: tuple[float, float, float], white_point: WhitePoint = D65
    ) -> Xyz:
        """Build a colour from an ``(X, Y, Z)`` tuple."""
        x, y, z = components
        return cls(x, y, z, white_point)

    def into_components(self) -> tuple[float, float, float]:
        """Return the ``(X, Y, Z)`` tuple."""
        return (self.x, self.y, self.z)

    @classmethod
    def reference(cls, white_point: WhitePoint = D65) -> Xyz:
        """Return the white point itself as an XYZ colour."""
        return cls(*white_point.tristimulus(), white_point)

    @staticmethod
    def min_x() -> float:
        return 0.0

    @staticmethod
    def max_x(white_point: WhitePoint = D65) -> float:
        return white_point.x

    @staticmethod
    def min_y() -> float:
        return 0.0

    @staticmethod
    def max_y(white_point: WhitePoint = D65) -> float:
        return white_point.y

    @staticmethod
    def min_z() -> float:
        return 0.0

    @staticmethod
    def max_z(white_point: WhitePoint = D65) -> float:
        return white_point.z

    def is_valid(self) -> bool:
        """Whether every component lies between 0 and the white point's value."""
        ref = self.white_point
        return (
            0.0 <= self.x <= ref.x
            and 0.0 <= self.y <= ref.y
            and 0.0 <= self.z <= ref.z
        )

    def clamp(self) -> Xyz:
        """Return a copy with every component clamped to its valid range."""
        ref = self.white_point
        return Xyz(
            _clamp(self.x, 0.0, ref.x),
            _clamp(self.y, 0.0, ref.y),
            _clamp(self.z, 0.0, ref.z),
            ref,
        )

    def mix(self, other: Xyz, factor: float) -> Xyz:
        """Linearly interpolate towards ``other``; ``factor`` is clamped to [0, 1]."""
        self._check_same_white_point(other)
        factor = _clamp(factor, 0.0, 1.0)
        return self.component_wise(other, lambda a, b: a + factor * (b - a))

    def lighten(self, amount: float) -> Xyz:
        """Return a copy with ``amount`` added to the luminance ``y``."""
        return Xyz(self.x, self.y + amount, self.z, self.white_point)

    def component_wise(
        self, other: Xyz, func: Callable[[float, float], float]
    ) -> Xyz:
        """Combine matching components of two colours with ``func``."""
        self._check_same_white_point(other)
        return Xyz(
            func(self.x, other.x),
            func(self.y, other.y),
            func(self.z, other.z),
            self.white_point,
        )

    def component_wise_self(self, func: Callable[[float], float]) -> Xyz:
        """Apply ``func`` to every component."""
        return Xyz(func(self.x), func(self.y), func(self.z), self.white_point)

    def _check_same_white_point(self, other: Xyz) -> None:
        if other.white_point != self.white_point:
            raise ValueError(
                f"white points differ: {self.white_point.name} "
                f"and {other.white_point.name}"
            )

    def _apply(self, other: object, op: Callable[[float, float], float]):
        if isinstance(other, Xyz):
            return self.component_wise(other, op)
        if _is_scalar(other):
            return self.component_wise_self(lambda a: op(a, other))
        return NotImplemented

    def __add__(self, other: Xyz | float) -> Xyz:
        return self._apply(other, operator.add)

    def __sub__(self, other: Xyz | float) -> Xyz:
        return self._apply(other, operator.sub)

    def __mul__(self, other: Xyz | float) -> Xyz:
        return self._apply(other, operator.mul)

    def __truediv__(self, other: Xyz | float) -> Xyz:
        return self._apply(other, _ieee_div)