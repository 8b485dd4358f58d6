"""Configuration of a gesture session: viewport, content, movement area and fit."""

from __future__ import annotations

import enum
import math
from typing import Any

from jsonschema import ValidationError

from ..config import DEFAULT_FIT_NAME, DEFAULT_GRAVITY_NAME, SETTINGS_SCHEMA_ID
from ..errors import SettingsValidationError
from ..utils.gravity import Gravity
from .schema import DEFAULT_SETTINGS, SETTINGS_SCHEMA, merge_with_defaults, validate_settings


class Fit(enum.Enum):
    """How rotated content is fitted against the movement area."""

    INSIDE = "inside"
    OUTSIDE = "outside"


def _non_negative(name: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value < 0.0:
        raise SettingsValidationError(f"{name} must be a non-negative number, got {value!r}")
    return value


class Settings:
    """Sizes and alignment preferences read by the movement bounds.

    The movement area defaults to the viewport until it is set explicitly.
    """

    def __init__(self) -> None:
        self._viewport_w: float = 0.0
        self._viewport_h: float = 0.0
        self._movement_area_w: float = 0.0
        self._movement_area_h: float = 0.0
        self._is_movement_area_specified: bool = False
        self._image_w: float = 0.0
        self._image_h: float = 0.0
        self._gravity: Gravity = Gravity.parse(DEFAULT_GRAVITY_NAME)
        self._fit_method: Fit = Fit(DEFAULT_FIT_NAME)
        self._overscroll_x: float = 0.0
        self._overscroll_y: float = 0.0

    # ------------------------------------------------------------------
    # Setters
    # ------------------------------------------------------------------
    def set_viewport(self, width: float, height: float) -> "Settings":
        self._viewport_w = _non_negative("Viewport width", width)
        self._viewport_h = _non_negative("Viewport height", height)
        return self

    def set_movement_area(self, width: float, height: float) -> "Settings":
        """Restrict movement to a ``width`` x ``height`` area aligned by gravity."""

        self._movement_area_w = _non_negative("Movement area width", width)
        self._movement_area_h = _non_negative("Movement area height", height)
        self._is_movement_area_specified = True
        return self

    def reset_movement_area(self) -> "Settings":
        self._movement_area_w = 0.0
        self._movement_area_h = 0.0
        self._is_movement_area_specified = False
        return self

    def set_image(self, width: float, height: float) -> "Settings":
        """Set the unscaled content size."""

        self._image_w = _non_negative("Image width", width)
        self._image_h = _non_negative("Image height", height)
        return self

    def set_gravity(self, gravity: int) -> "Settings":
        self._gravity = Gravity(int(gravity))
        return self

    def set_fit_method(self, fit_method: Fit) -> "Settings":
        self._fit_method = Fit(fit_method)
        return self

    def set_overscroll_distance(self, distance_x: float, distance_y: float) -> "Settings":
        """Set the elastic slack, in pixels, allowed beyond the hard bounds."""

        self._overscroll_x = _non_negative("Overscroll distance", distance_x)
        self._overscroll_y = _non_negative("Overscroll distance", distance_y)
        return self

    def set_overscroll_distance_dp(self, density: float, distance_x: float, distance_y: float) -> "Settings":
        """Same as :meth:`set_overscroll_distance` with density independent units."""

        density = _non_negative("Screen density", density)
        return self.set_overscroll_distance(distance_x * density, distance_y * density)

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------
    @property
    def viewport_w(self) -> float:
        return self._viewport_w

    @property
    def viewport_h(self) -> float:
        return self._viewport_h

    @property
    def movement_area_w(self) -> float:
        return self._movement_area_w if self._is_movement_area_specified else self._viewport_w

    @property
    def movement_area_h(self) -> float:
        return self._movement_area_h if self._is_movement_area_specified else self._viewport_h

    @property
    def is_movement_area_specified(self) -> bool:
        return self._is_movement_area_specified

    @property
    def image_w(self) -> float:
        return self._image_w

    @property
    def image_h(self) -> float:
        return self._image_h

    @property
    def gravity(self) -> Gravity:
        return self._gravity

    @property
    def fit_method(self) -> Fit:
        return self._fit_method

    @property
    def overscroll_distance_x(self) -> float:
        return self._overscroll_x

    @property
    def overscroll_distance_y(self) -> float:
        return self._overscroll_y

    def has_viewport_size(self) -> bool:
        return self._viewport_w > 0.0 and self._viewport_h > 0.0

    def has_image_size(self) -> bool:
        return self._image_w > 0.0 and self._image_h > 0.0

    # ------------------------------------------------------------------
    # Serialisation
    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, values: dict[str, Any] | None) -> "Settings":
        """Build settings from a plain mapping, filling gaps from the defaults."""

        try:
            data = merge_with_defaults(values)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc

        settings = cls()
        settings.set_viewport(*data["viewport"])
        settings.set_image(*data["image"])
        if data.get("movement_area") is not None:
            settings.set_movement_area(*data["movement_area"])
        settings.set_gravity(Gravity.parse(data["gravity"]))
        settings.set_fit_method(Fit(data["fit"]))
        settings.set_overscroll_distance(*data["overscroll"])
        return settings

    def as_mapping(self) -> dict[str, Any]:
        """Export the settings as a schema-valid mapping."""

        data: dict[str, Any] = {
            "schema": SETTINGS_SCHEMA_ID,
            "viewport": [self._viewport_w, self._viewport_h],
            "movement_area": (
                [self._movement_area_w, self._movement_area_h]
                if self._is_movement_area_specified
                else None
            ),
            "image": [self._image_w, self._image_h],
            "gravity": self._gravity.to_string(),
            "fit": self._fit_method.value,
            "overscroll": [self._overscroll_x, self._overscroll_y],
        }
        validate_settings(data)
        return data

    def __repr__(self) -> str:
        return (
            f"Settings(viewport=({self._viewport_w}, {self._viewport_h}), "
            f"movement_area=({self.movement_area_w}, {self.movement_area_h}), "
            f"image=({self._image_w}, {self._image_h}), "
            f"gravity={self._gravity.to_string()!r}, fit={self._fit_method.value!r})"
        )


__all__ = [
    "DEFAULT_SETTINGS",
    "SETTINGS_SCHEMA",
    "Fit",
    "Settings",
    "merge_with_defaults",
    "validate_settings",
]
