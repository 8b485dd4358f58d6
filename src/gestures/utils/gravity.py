"""
Gravity flags and the alignment primitive used to place content in a container.

The flag layout follows the classic per-axis encoding: each axis owns four bits
(``specified``, ``pull before``, ``pull after``, ``clip``), the horizontal axis in
the low nibble and the vertical axis in the next one.  Pulling towards both edges
means *fill*, pulling towards none means *center*.
"""

from __future__ import annotations

import enum
import math

from PySide6.QtCore import QRectF

from ..errors import SettingsValidationError

_AXIS_SPECIFIED = 0x0001
_AXIS_PULL_BEFORE = 0x0002
_AXIS_PULL_AFTER = 0x0004
_AXIS_CLIP = 0x0008
_AXIS_X_SHIFT = 0
_AXIS_Y_SHIFT = 4
_AXIS_PULL_MASK = _AXIS_PULL_BEFORE | _AXIS_PULL_AFTER


class Gravity(enum.IntFlag):
    """Alignment of content inside a container, per axis."""

    NO_GRAVITY = 0x0000
    CENTER_HORIZONTAL = _AXIS_SPECIFIED << _AXIS_X_SHIFT
    LEFT = (_AXIS_PULL_BEFORE | _AXIS_SPECIFIED) << _AXIS_X_SHIFT
    RIGHT = (_AXIS_PULL_AFTER | _AXIS_SPECIFIED) << _AXIS_X_SHIFT
    FILL_HORIZONTAL = LEFT | RIGHT
    CLIP_HORIZONTAL = _AXIS_CLIP << _AXIS_X_SHIFT
    CENTER_VERTICAL = _AXIS_SPECIFIED << _AXIS_Y_SHIFT
    TOP = (_AXIS_PULL_BEFORE | _AXIS_SPECIFIED) << _AXIS_Y_SHIFT
    BOTTOM = (_AXIS_PULL_AFTER | _AXIS_SPECIFIED) << _AXIS_Y_SHIFT
    FILL_VERTICAL = TOP | BOTTOM
    CLIP_VERTICAL = _AXIS_CLIP << _AXIS_Y_SHIFT
    CENTER = CENTER_HORIZONTAL | CENTER_VERTICAL
    FILL = FILL_HORIZONTAL | FILL_VERTICAL

    @classmethod
    def parse(cls, value: str) -> "Gravity":
        """Build a gravity from a ``"top|left"`` style string."""

        result = cls.NO_GRAVITY
        for token in value.split("|"):
            name = token.strip().upper()
            if not name:
                continue
            try:
                result |= cls[name]
            except KeyError as exc:
                raise SettingsValidationError(f"Unknown gravity flag: {token.strip()!r}") from exc
        return result

    def to_string(self) -> str:
        """Return the most compact ``"a|b"`` spelling of this gravity."""

        if self == Gravity.NO_GRAVITY:
            return "no_gravity"
        parts: list[str] = []
        for shift, names in (
            (_AXIS_X_SHIFT, ("center_horizontal", "left", "right", "fill_horizontal")),
            (_AXIS_Y_SHIFT, ("center_vertical", "top", "bottom", "fill_vertical")),
        ):
            bits = (int(self) >> shift) & (_AXIS_SPECIFIED | _AXIS_PULL_MASK)
            if bits & _AXIS_SPECIFIED:
                pull = (bits & _AXIS_PULL_MASK) >> 1
                parts.append(names[pull])
        if (self & Gravity.FILL) == Gravity.CENTER:
            parts = ["center"]
        elif (self & Gravity.FILL) == Gravity.FILL:
            parts = ["fill"]
        if self & Gravity.CLIP_HORIZONTAL:
            parts.append("clip_horizontal")
        if self & Gravity.CLIP_VERTICAL:
            parts.append("clip_vertical")
        return "|".join(parts)


def _truncate_half(value: float) -> float:
    # Integral gaps are halved with truncation toward zero, like integer layout math.
    if float(value).is_integer():
        return float(math.trunc(value / 2))
    return value / 2.0


def _apply_axis(
    axis_gravity: int,
    size: float,
    start: float,
    end: float,
) -> tuple[float, float]:
    pull = axis_gravity & _AXIS_PULL_MASK
    if pull == 0:
        lo = start + _truncate_half(end - start - size)
        hi = lo + size
        if axis_gravity & _AXIS_CLIP:
            lo = max(lo, start)
            hi = min(hi, end)
    elif pull == _AXIS_PULL_BEFORE:
        lo = start
        hi = lo + size
        if axis_gravity & _AXIS_CLIP:
            hi = min(hi, end)
    elif pull == _AXIS_PULL_AFTER:
        hi = end
        lo = hi - size
        if axis_gravity & _AXIS_CLIP:
            lo = max(lo, start)
    else:
        lo = start
        hi = end
    return lo, hi


def apply_gravity(gravity: int, width: float, height: float, container: QRectF) -> QRectF:
    """Return the rectangle of a ``width`` x ``height`` box aligned in *container*.

    Parameters
    ----------
    gravity:
        Any combination of :class:`Gravity` flags.
    width, height:
        Size of the content being placed. Larger than the container is fine.
    container:
        Rectangle the content is aligned against.

    Returns
    -------
    QRectF
        A new rectangle; the container is never modified.
    """

    flags = int(gravity)
    left, right = _apply_axis(
        (flags >> _AXIS_X_SHIFT) & 0xF,
        float(width),
        float(container.left()),
        float(container.right()),
    )
    top, bottom = _apply_axis(
        (flags >> _AXIS_Y_SHIFT) & 0xF,
        float(height),
        float(container.top()),
        float(container.bottom()),
    )
    return QRectF(left, top, right - left, bottom - top)


__all__ = ["Gravity", "apply_gravity"]
