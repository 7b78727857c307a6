# ciexyz

The CIE 1931 XYZ and Yxy (xyY) colour spaces, with the tristimulus values of
the standard CIE illuminants as white points. Pure Python, no dependencies.

## Installation

```
pip install ciexyz
```

For running the tests:

```
pip install "ciexyz[test]"
pytest
```

## White points

`ciexyz.white_point` defines the CIE illuminants `A`, `B`, `C`, `D50`, `D55`,
`D65`, `D75`, `E`, `F2`, `F7` and `F11` for the 2° standard observer, and
`D50_DEGREE10`, `D55_DEGREE10`, `D65_DEGREE10` and `D75_DEGREE10` for the 10°
observer. All of them are collected in `STANDARD_WHITE_POINTS`. Each one is a
frozen `WhitePoint` dataclass with `name`, `x`, `y`, `z` and `description`:

```python
from ciexyz.white_point import WhitePoint, by_name

d65 = by_name("D65")
d65.tristimulus()    # (0.95047, 1.0, 1.08883)
d65.chromaticity()   # (x, y) = (X, Y) / (X + Y + Z)

by_name("d65-degree10")   # case, "_", "-" and spaces are ignored

custom = WhitePoint("Custom", 0.98, 1.0, 1.18)
```

`by_name` raises `ValueError` for a name it does not know. `chromaticity`
returns `(0.0, 0.0)` when `X + Y + Z` is zero or not finite.

## XYZ

`ciexyz.xyz.Xyz` is a frozen dataclass holding `x`, `y` and `z` together with
the white point they are relative to (`D65` if none is given).

```python
from ciexyz.white_point import D50, D65
from ciexyz.xyz import Xyz

colour = Xyz.from_components((0.4, 0.5, 0.6), D65)
other = Xyz(0.2, 0.3, 0.4)

colour.into_components()      # (0.4, 0.5, 0.6)
colour.is_valid()             # every component between 0 and the white point's value
colour.clamp()                # components clamped to that range
colour.mix(other, 0.25)       # linear mix, the factor clamped to [0, 1]
colour.lighten(0.1)           # add to the luminance y
colour + other, colour * 2.0  # component-wise arithmetic with colours or numbers
colour.component_wise(other, max)
colour.component_wise_self(abs)
```

Combining two colours with different white points (`mix`, `component_wise`
and the operators) raises `ValueError`. Division by zero follows IEEE float
rules and gives infinities or NaN instead of raising.

`Xyz.reference(white_point)` gives the white point itself as an XYZ colour;
`Xyz.max_x(white_point)`, `max_y` and `max_z` give its components, and
`min_x`, `min_y` and `min_z` are all 0.

## Yxy

`ciexyz.yxy.Yxy` is a frozen dataclass holding the chromaticity `x`, `y` and
the luminance `luma`, with a white point (`D65` by default). It converts to
and from XYZ, keeping the white point:

```python
from ciexyz.yxy import Yxy

yxy = Yxy.from_xyz(colour)
back = yxy.to_xyz()
Yxy.default(D65)   # black, at the white point's chromaticity
```

When `X + Y + Z` (or, the other way, the chromaticity `y`) is zero,
subnormal or not finite, the chromaticity parts of the result are 0.

Yxy offers the same range checks, clamping, mixing, lightening, component-wise
functions and arithmetic as Xyz, with every component limited to the range
0 to 1 (`min_x`, `max_x`, `min_y`, `max_y`, `min_luma`, `max_luma`).

## What this package does not do

It covers only XYZ and Yxy. It has no RGB, luma, Lab or other colour spaces
and no conversions to them, no alpha channel, no chromatic adaptation between
white points, no random colour sampling and no command-line tool.