import dataclasses
import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ciexyz.white_point import (
    D50,
    D65,
    D75_DEGREE10,
    E,
    F11,
    STANDARD_WHITE_POINTS,
    WhitePoint,
    by_name,
)

STANDARD_NAMES = [wp.name for wp in STANDARD_WHITE_POINTS]


def test_d65_tristimulus():
    assert D65.tristimulus() == (0.95047, 1.0, 1.08883)


def test_d50_tristimulus():
    assert D50.tristimulus() == (0.96422, 1.0, 0.82521)


def test_f11_and_degree10_values():
    assert F11.tristimulus() == (1.00962, 1.0, 0.64350)
    assert D75_DEGREE10.tristimulus() == (0.94416, 1.0, 1.2064)


@pytest.mark.parametrize("name", STANDARD_NAMES)
def test_all_standard_points_have_unit_luminance(name):
    _, luminance, _ = by_name(name).tristimulus()
    assert luminance == 1.0


def test_names_are_unique():
    assert len(STANDARD_NAMES) == len(set(STANDARD_NAMES)) == 15
    resolved = [by_name(name) for name in STANDARD_NAMES]
    assert resolved == list(STANDARD_WHITE_POINTS)


def test_equal_energy_chromaticity_is_symmetric():
    x, y = E.chromaticity()
    assert x == pytest.approx(y)
    assert x == pytest.approx(1 / 3)


@pytest.mark.parametrize("name", STANDARD_NAMES)
def test_chromaticity_reconstructs_tristimulus(name):
    wp = by_name(name)
    x, y = wp.chromaticity()
    tx, ty, tz = wp.tristimulus()
    total = tx + ty + tz
    assert x * total == pytest.approx(tx)
    assert y * total == pytest.approx(ty)


@pytest.mark.parametrize("name", STANDARD_NAMES)
def test_by_name_round_trip(name):
    wp = by_name(name)
    assert wp.name == name
    assert by_name(wp.name) is wp


def test_by_name_is_forgiving():
    assert by_name("d65") is D65
    assert by_name("D75_DEGREE10") is D75_DEGREE10
    assert by_name("d75-degree10") is D75_DEGREE10


def test_by_name_unknown_raises():
    with pytest.raises(ValueError):
        by_name("D99")


def test_white_point_is_frozen():
    wp = WhitePoint("custom", 0.9, 1.0, 1.1)
    with pytest.raises(dataclasses.FrozenInstanceError):
        wp.x = 1.0
    assert wp.tristimulus() == (0.9, 1.0, 1.1)


def test_custom_white_point():
    custom = WhitePoint("Pointer", 0.980722647624, 1.0, 1.182254189827)
    assert custom.tristimulus() == (0.980722647624, 1.0, 1.182254189827)
    x, _ = custom.chromaticity()
    assert x * sum(custom.tristimulus()) == pytest.approx(0.980722647624)


def test_degenerate_chromaticity_is_zero():
    assert WhitePoint("zero", 0.0, 0.0, 0.0).chromaticity() == (0.0, 0.0)
    assert WhitePoint("inf", math.inf, 1.0, 1.0).chromaticity() == (0.0, 0.0)


@given(
    st.floats(min_value=0.01, max_value=10.0),
    st.floats(min_value=0.01, max_value=10.0),
    st.floats(min_value=0.01, max_value=10.0),
)
def test_chromaticity_invariants(x, y, z):
    cx, cy = WhitePoint("custom", x, y, z).chromaticity()
    assert 0.0 < cx < 1.0
    assert 0.0 < cy < 1.0
    assert cx + cy < 1.0
    assert cx * (x + y + z) == pytest.approx(x)