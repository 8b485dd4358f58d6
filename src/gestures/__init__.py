"""Movement bounds for interactive pan/zoom/rotate views."""

from .movement_bounds import MovementBounds
from .settings import Fit, Settings
from .state import State
from .state_controller import StateController
from .utils.gravity import Gravity, apply_gravity

__all__ = [
    "Fit",
    "Gravity",
    "MovementBounds",
    "Settings",
    "State",
    "StateController",
    "apply_gravity",
]
