"""Default configuration values for gestures."""

from __future__ import annotations

from typing import Final

# Two states whose scalar fields differ by less than this are considered equal.
# Translation is measured in pixels so anything below this is invisible.
STATE_EPSILON: Final[float] = 0.001

# sin/cos values this close to zero are snapped to exactly zero so that quarter
# turns map integral rectangles onto integral rectangles.
ROTATION_SNAP_EPSILON: Final[float] = 1e-12

DEFAULT_GRAVITY_NAME: Final[str] = "center"
DEFAULT_FIT_NAME: Final[str] = "inside"

SETTINGS_SCHEMA_ID: Final[str] = "gestures/settings@1"
