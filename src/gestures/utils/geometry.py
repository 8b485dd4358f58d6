"""Affine helpers shared by the transform state and the movement bounds.

Matrices are 3x3 ``numpy`` arrays acting on column vectors ``(x, y, 1)``.  The
product ``a @ b`` therefore applies ``b`` first and ``a`` second.
"""

from __future__ import annotations

import math

import numpy as np
from PySide6.QtCore import QPointF, QRectF

from ..config import ROTATION_SNAP_EPSILON


def restrict(value: float, min_value: float, max_value: float) -> float:
    """Clamp *value* into ``[min_value, max_value]``."""
    return max(min_value, min(max_value, value))


def identity_matrix() -> np.ndarray:
    return np.identity(3, dtype=np.float64)


def translation_matrix(dx: float, dy: float) -> np.ndarray:
    matrix = identity_matrix()
    matrix[0, 2] = float(dx)
    matrix[1, 2] = float(dy)
    return matrix


def scale_matrix(sx: float, sy: float, pivot_x: float = 0.0, pivot_y: float = 0.0) -> np.ndarray:
    matrix = identity_matrix()
    matrix[0, 0] = float(sx)
    matrix[1, 1] = float(sy)
    matrix[0, 2] = float(pivot_x) - float(sx) * float(pivot_x)
    matrix[1, 2] = float(pivot_y) - float(sy) * float(pivot_y)
    return matrix


def _snap(value: float) -> float:
    return 0.0 if abs(value) <= ROTATION_SNAP_EPSILON else value


def rotation_matrix(degrees: float, pivot_x: float = 0.0, pivot_y: float = 0.0) -> np.ndarray:
    """Return a rotation by *degrees* about ``(pivot_x, pivot_y)``.

    Positive angles turn clockwise on a y-down screen.  Sine and cosine values
    that are numerically zero are snapped so quarter turns stay exact.
    """

    theta = math.radians(float(degrees))
    sin_t = _snap(math.sin(theta))
    cos_t = _snap(math.cos(theta))
    px = float(pivot_x)
    py = float(pivot_y)
    return np.array(
        [
            [cos_t, -sin_t, px - cos_t * px + sin_t * py],
            [sin_t, cos_t, py - sin_t * px - cos_t * py],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )


def map_point(matrix: np.ndarray, x: float, y: float) -> tuple[float, float]:
    """Map ``(x, y)`` through *matrix*."""
    mapped = matrix @ np.array([float(x), float(y), 1.0], dtype=np.float64)
    return float(mapped[0]), float(mapped[1])


def rect_corners(rect: QRectF) -> list[tuple[float, float]]:
    left, top = float(rect.left()), float(rect.top())
    right, bottom = float(rect.right()), float(rect.bottom())
    return [(left, top), (right, top), (right, bottom), (left, bottom)]


def map_rect(matrix: np.ndarray, rect: QRectF) -> QRectF:
    """Return the axis-aligned bounding box of *rect* mapped through *matrix*."""

    corners = np.array(
        [[x, y, 1.0] for x, y in rect_corners(rect)],
        dtype=np.float64,
    ).T
    mapped = matrix @ corners
    left = float(mapped[0].min())
    right = float(mapped[0].max())
    top = float(mapped[1].min())
    bottom = float(mapped[1].max())
    return QRectF(left, top, right - left, bottom - top)


class CoordinateFrame:
    """A frame rotated by ``rotation`` degrees about a pivot point.

    ``to_frame`` takes screen coordinates into the frame (rotating by
    ``-rotation``), ``from_frame`` takes them back out.  A frame with zero
    rotation is the screen frame and both mappings are the identity.
    """

    def __init__(self, rotation: float = 0.0, pivot_x: float = 0.0, pivot_y: float = 0.0) -> None:
        self.rotation = float(rotation)
        self.pivot_x = float(pivot_x)
        self.pivot_y = float(pivot_y)

    @property
    def is_identity(self) -> bool:
        return self.rotation == 0.0

    def pivot(self) -> QPointF:
        return QPointF(self.pivot_x, self.pivot_y)

    def to_frame_matrix(self) -> np.ndarray:
        return rotation_matrix(-self.rotation, self.pivot_x, self.pivot_y)

    def from_frame_matrix(self) -> np.ndarray:
        return rotation_matrix(self.rotation, self.pivot_x, self.pivot_y)

    def to_frame(self, x: float, y: float) -> tuple[float, float]:
        if self.is_identity:
            return float(x), float(y)
        return map_point(self.to_frame_matrix(), x, y)

    def from_frame(self, x: float, y: float) -> tuple[float, float]:
        if self.is_identity:
            return float(x), float(y)
        return map_point(self.from_frame_matrix(), x, y)

    def map_rect_to_frame(self, rect: QRectF) -> QRectF:
        if self.is_identity:
            return QRectF(rect)
        return map_rect(self.to_frame_matrix(), rect)

    def map_rect_from_frame(self, rect: QRectF) -> QRectF:
        if self.is_identity:
            return QRectF(rect)
        return map_rect(self.from_frame_matrix(), rect)

    def __repr__(self) -> str:
        return (
            f"CoordinateFrame(rotation={self.rotation!r}, "
            f"pivot_x={self.pivot_x!r}, pivot_y={self.pivot_y!r})"
        )


__all__ = [
    "CoordinateFrame",
    "identity_matrix",
    "map_point",
    "map_rect",
    "rect_corners",
    "restrict",
    "rotation_matrix",
    "scale_matrix",
    "translation_matrix",
]
