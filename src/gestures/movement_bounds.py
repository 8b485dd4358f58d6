"""
Movement bounds restriction for the content position.

Most of the time the legal range of the content's top-left corner is a plain
axis-aligned rectangle.  With :attr:`Fit.OUTSIDE` and a non-zero rotation the
range becomes a rotated rectangle instead.  Rather than clamping against a
rotated shape, the movement area is rotated into the content's own unrotated
frame, the rectangle is computed there, and candidate points are moved into
that frame before clamping and back out afterwards.
"""

from __future__ import annotations

import math

import numpy as np
from PySide6.QtCore import QPointF, QRectF

from .settings import Fit, Settings
from .state import State
from .utils.geometry import CoordinateFrame, map_point, map_rect, restrict, rotation_matrix
from .utils.gravity import apply_gravity
from .utils.logging import get_logger

LOGGER = get_logger(__name__)


def _round_half_up(value: float) -> float:
    return float(math.floor(value + 0.5))


class MovementBounds:
    """Legal range of the content position, optionally in a rotated frame.

    Values returned by the public methods are new objects, so callers may keep
    them across later calls.
    """

    def __init__(self) -> None:
        self._bounds = QRectF()
        self._frame = CoordinateFrame()

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def rect(self) -> QRectF:
        """Bounds in their own frame (see :attr:`rotation` and :attr:`pivot`)."""
        return QRectF(self._bounds)

    @property
    def rotation(self) -> float:
        return self._frame.rotation

    @property
    def pivot(self) -> QPointF:
        return self._frame.pivot()

    @property
    def frame(self) -> CoordinateFrame:
        return CoordinateFrame(self._frame.rotation, self._frame.pivot_x, self._frame.pivot_y)

    def set(self, other: "MovementBounds") -> None:
        self._bounds = QRectF(other._bounds)
        self._frame = other.frame

    def copy(self) -> "MovementBounds":
        bounds = MovementBounds()
        bounds.set(self)
        return bounds

    # ------------------------------------------------------------------
    # Restrictions
    # ------------------------------------------------------------------
    def restrict(
        self,
        x: float,
        y: float,
        overscroll_x: float = 0.0,
        overscroll_y: float = 0.0,
    ) -> QPointF:
        """Clamp ``(x, y)`` to the bounds, allowing an extra elastic slack per axis."""

        fx, fy = self._frame.to_frame(x, y)
        fx = restrict(fx, self._bounds.left() - overscroll_x, self._bounds.right() + overscroll_x)
        fy = restrict(fy, self._bounds.top() - overscroll_y, self._bounds.bottom() + overscroll_y)
        rx, ry = self._frame.from_frame(fx, fy)
        return QPointF(rx, ry)

    def get_external_bounds(self) -> QRectF:
        """Return the bounds in screen coordinates.

        For rotated bounds this is the bounding box of the rotated rectangle,
        which is larger than the region :meth:`restrict` actually allows.
        """

        return self._frame.map_rect_from_frame(self._bounds)

    def union(self, x: float, y: float) -> "MovementBounds":
        """Grow the bounds so they include the screen point ``(x, y)``."""

        fx, fy = self._frame.to_frame(x, y)
        if fx < self._bounds.left():
            self._bounds.setLeft(fx)
        elif fx > self._bounds.right():
            self._bounds.setRight(fx)
        if fy < self._bounds.top():
            self._bounds.setTop(fy)
        elif fy > self._bounds.bottom():
            self._bounds.setBottom(fy)
        return self

    # ------------------------------------------------------------------
    # Setup
    # ------------------------------------------------------------------
    def setup(self, state: State, settings: Settings) -> "MovementBounds":
        """Compute the bounds of ``state.x``/``state.y`` for the current settings.

        The content is kept within the movement area when it is larger than the
        area, and is locked at its gravity position along any axis where it is
        not.
        """

        area = self.get_movement_area_with_gravity(settings)
        pivot_x = float(area.center().x())
        pivot_y = float(area.center().y())
        is_outside = settings.fit_method is Fit.OUTSIDE

        if is_outside:
            # Rotate the area instead of the content so the content rect stays
            # axis-aligned in the working frame.
            self._frame = CoordinateFrame(state.rotation, pivot_x, pivot_y)
            unrotated = rotation_matrix(-state.rotation, pivot_x, pivot_y) @ state.get_matrix()
            pos = self._get_position_with_gravity(unrotated, settings)
            area = self._frame.map_rect_to_frame(area)
        else:
            self._frame = CoordinateFrame(0.0, pivot_x, pivot_y)
            pos = self._get_position_with_gravity(state.get_matrix(), settings)

        # Bounds for the top-left corner of the scaled content
        left, right = self._axis_range(area.left(), area.width(), pos.left(), pos.width())
        top, bottom = self._axis_range(area.top(), area.height(), pos.top(), pos.height())
        self._bounds = QRectF(left, top, right - left, bottom - top)

        if not is_outside:
            # A rotated content rect's top-left corner lies somewhere on the edge
            # of its bounding box, not on the box's corner.
            matrix = state.get_matrix()
            content = map_rect(matrix, QRectF(0.0, 0.0, settings.image_w, settings.image_h))
            origin_x, origin_y = map_point(matrix, 0.0, 0.0)
            self._bounds.translate(origin_x - content.left(), origin_y - content.top())

        LOGGER.debug(
            "Movement bounds %s rotation=%.3f pivot=(%.3f, %.3f)",
            self._bounds,
            self._frame.rotation,
            pivot_x,
            pivot_y,
        )
        return self

    @staticmethod
    def _axis_range(area_start: float, area_size: float, pos_start: float, pos_size: float) -> tuple[float, float]:
        if area_size < pos_size:
            # Content is bigger than the area: it may slide until its far edge
            # reaches the far edge of the area.
            return area_start - (pos_size - area_size), area_start
        # Content fits: it stays where gravity put it.
        return pos_start, pos_start

    # ------------------------------------------------------------------
    # Gravity helpers
    # ------------------------------------------------------------------
    @staticmethod
    def setup_initial_movement(state: State, settings: Settings) -> None:
        """Move the content to its gravity position at the current zoom and rotation."""

        pos = MovementBounds._get_position_with_gravity(state.get_matrix(), settings)
        state.translate_to(pos.left(), pos.top())

    @staticmethod
    def _get_position_with_gravity(matrix: np.ndarray, settings: Settings) -> QRectF:
        """Position of the transformed content in the viewport, ignoring its translation."""

        content = map_rect(matrix, QRectF(0.0, 0.0, settings.image_w, settings.image_h))
        width = _round_half_up(content.width())
        height = _round_half_up(content.height())
        viewport = QRectF(0.0, 0.0, settings.viewport_w, settings.viewport_h)
        return apply_gravity(settings.gravity, width, height, viewport)

    @staticmethod
    def get_movement_area_with_gravity(settings: Settings) -> QRectF:
        """Return the movement area aligned inside the viewport."""

        viewport = QRectF(0.0, 0.0, settings.viewport_w, settings.viewport_h)
        return apply_gravity(settings.gravity, settings.movement_area_w, settings.movement_area_h, viewport)

    def __repr__(self) -> str:
        return (
            f"MovementBounds(rect=({self._bounds.left()}, {self._bounds.top()}, "
            f"{self._bounds.right()}, {self._bounds.bottom()}), rotation={self._frame.rotation}, "
            f"pivot=({self._frame.pivot_x}, {self._frame.pivot_y}))"
        )


__all__ = ["MovementBounds"]
