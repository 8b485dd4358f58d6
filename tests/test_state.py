"""Tests for the transform state."""

import math

import pytest

from gestures.errors import StateError
from gestures.state import State
from gestures.utils.geometry import map_point


def test_default_state_is_identity():
    state = State()
    assert (state.x, state.y, state.zoom, state.rotation) == (0.0, 0.0, 1.0, 0.0)
    assert map_point(state.get_matrix(), 12.0, 34.0) == pytest.approx((12.0, 34.0))


def test_matrix_scales_rotates_then_translates():
    state = State(x=10.0, y=20.0, zoom=2.0, rotation=90.0)
    # Content point (5, 0) -> scaled (10, 0) -> rotated clockwise (0, 10) -> translated
    assert map_point(state.get_matrix(), 5.0, 0.0) == pytest.approx((10.0, 30.0))
    assert map_point(state.get_matrix(), 0.0, 0.0) == pytest.approx((10.0, 20.0))


def test_get_matrix_returns_a_new_array():
    state = State(x=1.0)
    matrix = state.get_matrix()
    matrix[0, 2] = 99.0
    assert state.get_matrix()[0, 2] == pytest.approx(1.0)


def test_translate():
    state = State()
    state.translate_to(5.0, 6.0)
    state.translate_by(-1.0, 4.0)
    assert (state.x, state.y) == (4.0, 10.0)


def test_zoom_to_keeps_pivot_fixed():
    state = State(x=10.0, y=10.0)
    pivot = (50.0, 30.0)
    before = _content_point_under(state, *pivot)
    state.zoom_to(4.0, *pivot)
    assert state.zoom == pytest.approx(4.0)
    assert _content_point_under(state, *pivot) == pytest.approx(before)


def test_zoom_by_multiplies():
    state = State(zoom=2.0)
    state.zoom_by(1.5, 0.0, 0.0)
    assert state.zoom == pytest.approx(3.0)


def test_rotate_to_keeps_pivot_fixed():
    state = State(x=10.0, y=10.0, zoom=2.0)
    pivot = (40.0, 25.0)
    before = _content_point_under(state, *pivot)
    state.rotate_to(30.0, *pivot)
    assert state.rotation == pytest.approx(30.0)
    assert _content_point_under(state, *pivot) == pytest.approx(before)


def test_rotation_is_normalised():
    state = State(rotation=270.0)
    assert state.rotation == pytest.approx(-90.0)
    state.rotate_by(-100.0, 0.0, 0.0)
    assert state.rotation == pytest.approx(170.0)
    assert State(rotation=-180.0).rotation == pytest.approx(180.0)


@pytest.mark.parametrize("zoom", [0.0, -1.0, math.inf, math.nan])
def test_invalid_zoom_is_rejected(zoom):
    with pytest.raises(StateError):
        State(zoom=zoom)
    with pytest.raises(StateError):
        State().zoom_to(zoom, 0.0, 0.0)


def test_equality_uses_tolerance():
    assert State(x=1.0) == State(x=1.0 + 1e-4)
    assert State(x=1.0) != State(x=1.1)
    assert State.equals(0.5, 0.5005)


def test_copy_is_independent():
    original = State(x=1.0, y=2.0, zoom=3.0, rotation=4.0)
    duplicate = original.copy()
    assert duplicate == original
    duplicate.translate_by(10.0, 0.0)
    assert original.x == 1.0


def _content_point_under(state: State, x: float, y: float) -> tuple[float, float]:
    """Return which content point currently sits at screen position (x, y)."""
    dx, dy = x - state.x, y - state.y
    theta = math.radians(-state.rotation)
    ux = dx * math.cos(theta) - dy * math.sin(theta)
    uy = dx * math.sin(theta) + dy * math.cos(theta)
    return ux / state.zoom, uy / state.zoom
