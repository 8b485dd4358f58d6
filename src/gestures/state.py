"""Transform state of the content: translation, zoom and rotation."""

from __future__ import annotations

import math

import numpy as np

from .config import STATE_EPSILON
from .errors import StateError
from .utils.geometry import map_point, rotation_matrix, scale_matrix, translation_matrix


class State:
    """Current position of the content inside the viewport.

    ``x`` and ``y`` locate the content origin (its top-left corner before
    rotation) in viewport coordinates.  The content is scaled by ``zoom`` and
    rotated by ``rotation`` degrees about that origin.
    """

    def __init__(self, x: float = 0.0, y: float = 0.0, zoom: float = 1.0, rotation: float = 0.0) -> None:
        self._x: float = 0.0
        self._y: float = 0.0
        self._zoom: float = 1.0
        self._rotation: float = 0.0
        self.set(x, y, zoom, rotation)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    @property
    def zoom(self) -> float:
        return self._zoom

    @property
    def rotation(self) -> float:
        return self._rotation

    def get_matrix(self) -> np.ndarray:
        """Return a new matrix mapping content coordinates to viewport coordinates."""

        return (
            translation_matrix(self._x, self._y)
            @ rotation_matrix(self._rotation)
            @ scale_matrix(self._zoom, self._zoom)
        )

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------
    def set(self, x: float, y: float, zoom: float, rotation: float) -> None:
        zoom = float(zoom)
        if not math.isfinite(zoom) or zoom <= 0.0:
            raise StateError(f"Zoom must be a positive finite number, got {zoom!r}")
        self._x = float(x)
        self._y = float(y)
        self._zoom = zoom
        self._rotation = _normalise_degrees(rotation)

    def set_from(self, other: "State") -> None:
        self._x = other._x
        self._y = other._y
        self._zoom = other._zoom
        self._rotation = other._rotation

    def copy(self) -> "State":
        state = State()
        state.set_from(self)
        return state

    def translate_to(self, x: float, y: float) -> None:
        self._x = float(x)
        self._y = float(y)

    def translate_by(self, dx: float, dy: float) -> None:
        self._x += float(dx)
        self._y += float(dy)

    def zoom_to(self, zoom: float, pivot_x: float, pivot_y: float) -> None:
        """Apply an absolute zoom keeping ``(pivot_x, pivot_y)`` fixed on screen."""

        zoom = float(zoom)
        if not math.isfinite(zoom) or zoom <= 0.0:
            raise StateError(f"Zoom must be a positive finite number, got {zoom!r}")
        factor = zoom / self._zoom
        self._x, self._y = map_point(scale_matrix(factor, factor, pivot_x, pivot_y), self._x, self._y)
        self._zoom = zoom

    def zoom_by(self, factor: float, pivot_x: float, pivot_y: float) -> None:
        self.zoom_to(self._zoom * float(factor), pivot_x, pivot_y)

    def rotate_to(self, rotation: float, pivot_x: float, pivot_y: float) -> None:
        """Apply an absolute rotation keeping ``(pivot_x, pivot_y)`` fixed on screen."""

        self.rotate_by(float(rotation) - self._rotation, pivot_x, pivot_y)

    def rotate_by(self, degrees: float, pivot_x: float, pivot_y: float) -> None:
        degrees = float(degrees)
        if degrees == 0.0:
            return
        self._x, self._y = map_point(rotation_matrix(degrees, pivot_x, pivot_y), self._x, self._y)
        self._rotation = _normalise_degrees(self._rotation + degrees)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------
    @staticmethod
    def equals(first: float, second: float) -> bool:
        """Compare two scalar state values using :data:`STATE_EPSILON`."""
        return abs(first - second) < STATE_EPSILON

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, State):
            return NotImplemented
        return (
            State.equals(self._x, other._x)
            and State.equals(self._y, other._y)
            and State.equals(self._zoom, other._zoom)
            and State.equals(self._rotation, other._rotation)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"State(x={self._x!r}, y={self._y!r}, zoom={self._zoom!r}, rotation={self._rotation!r})"


def _normalise_degrees(degrees: float) -> float:
    """Bring *degrees* into ``(-180, 180]``."""

    value = math.fmod(float(degrees), 360.0)
    if value > 180.0:
        value -= 360.0
    elif value <= -180.0:
        value += 360.0
    return value


__all__ = ["State"]
