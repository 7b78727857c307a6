"""Tristimulus values of the CIE standard illuminants.

A white point (reference white or target white) is the set of tristimulus
values that defines the colour "white" under a given illuminant and standard
observer. Custom white points are made by creating a ``WhitePoint`` with the
wanted values; they can be used anywhere the predefined ones are accepted.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

__all__ = [
    "WhitePoint",
    "by_name",
    "A",
    "B",
    "C",
    "D50",
    "D55",
    "D65",
    "D75",
    "E",
    "F2",
    "F7",
    "F11",
    "D50_DEGREE10",
    "D55_DEGREE10",
    "D65_DEGREE10",
    "D75_DEGREE10",
    "STANDARD_WHITE_POINTS",
]


@dataclass(frozen=True)
class WhitePoint:
    """A reference white given by its XYZ tristimulus values."""

    name: str
    x: float
    y: float
    z: float
    description: str = ""

    def tristimulus(self) -> tuple[float, float, float]:
        """Return the ``(X, Y, Z)`` tristimulus values."""
        return (self.x, self.y, self.z)

    def chromaticity(self) -> tuple[float, float]:
        """Return the ``(x, y)`` chromaticity coordinates.

        When ``X + Y + Z`` is zero or not finite, ``(0.0, 0.0)`` is returned.
        """
        total = self.x + self.y + self.z
        if total == 0.0 or not math.isfinite(total):
            return (0.0, 0.0)
        return (self.x / total, self.y / total)


A = WhitePoint(
    "A", 1.09850, 1.0, 0.35585,
    "Tungsten-filament lighting, Planckian radiator at about 2856 K; 2° observer",
)
B = WhitePoint(
    "B", 0.99072, 1.0, 0.85223,
    "Noon sunlight, CCT 4874 K; 2° observer",
)
C = WhitePoint(
    "C", 0.98074, 1.0, 1.18232,
    "Average daylight, CCT 6774 K; 2° observer",
)
D50 = WhitePoint(
    "D50", 0.96422, 1.0, 0.82521,
    "Natural daylight around 5000 K; 2° observer",
)
D55 = WhitePoint(
    "D55", 0.95682, 1.0, 0.92149,
    "Natural daylight around 5500 K; 2° observer",
)
D65 = WhitePoint(
    "D65", 0.95047, 1.0, 1.08883,
    "Natural daylight at 6500 K; 2° observer",
)
D75 = WhitePoint(
    "D75", 0.94972, 1.0, 1.22638,
    "Natural daylight around 7500 K; 2° observer",
)
E = WhitePoint(
    "E", 1.0, 1.0, 1.0,
    "Equal energy radiator; 2° observer",
)
F2 = WhitePoint(
    "F2", 0.99186, 1.0, 0.67393,
    "Semi-broadband fluorescent lamp; 2° observer",
)
F7 = WhitePoint(
    "F7", 0.95041, 1.0, 1.08747,
    "Broadband fluorescent lamp; 2° observer",
)
F11 = WhitePoint(
    "F11", 1.00962, 1.0, 0.64350,
    "Narrowband fluorescent lamp; 2° observer",
)
D50_DEGREE10 = WhitePoint(
    "D50Degree10", 0.9672, 1.0, 0.8143,
    "Natural daylight around 5000 K; 10° observer",
)
D55_DEGREE10 = WhitePoint(
    "D55Degree10", 0.958, 1.0, 0.9093,
    "Natural daylight around 5500 K; 10° observer",
)
D65_DEGREE10 = WhitePoint(
    "D65Degree10", 0.9481, 1.0, 1.073,
    "Natural daylight at 6500 K; 10° observer",
)
D75_DEGREE10 = WhitePoint(
    "D75Degree10", 0.94416, 1.0, 1.2064,
    "Natural daylight around 7500 K; 10° observer",
)

STANDARD_WHITE_POINTS: tuple[WhitePoint, ...] = (
    A, B, C, D50, D55, D65, D75, E, F2, F7, F11,
    D50_DEGREE10, D55_DEGREE10, D65_DEGREE10, D75_DEGREE10,
)


def _normalize(name: str) -> str:
    return "".join(ch for ch in name.casefold() if ch not in "_- ")


_BY_NAME = {_normalize(wp.name): wp for wp in STANDARD_WHITE_POINTS}


def by_name(name: str) -> WhitePoint:
    """Look up a standard white point by name, ignoring case and ``_``/``-``.

    Raises ``ValueError`` for an unknown name.
    """
    try:
        return _BY_NAME[_normalize(name)]
    except KeyError:
        raise ValueError(f"unknown white point: {name!r}") from None