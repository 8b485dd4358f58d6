"""Keep a transform state inside its movement bounds."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QRectF

from .movement_bounds import MovementBounds
from .settings import Settings
from .state import State
from .utils.logging import get_logger

LOGGER = get_logger(__name__)

StateListener = Callable[[State], None]


class StateController:
    """Own the settings and state of a single view/content pairing.

    The controller does not decide *when* to run; hosts call
    :meth:`update_state` after layout or content changes and
    :meth:`restrict_state_bounds` while a gesture or animation is in flight.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings if settings is not None else Settings()
        self._state = State()
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------
    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def state(self) -> State:
        return self._state

    def get_movement_bounds(self) -> MovementBounds:
        """Return fresh bounds computed for the current state."""
        return MovementBounds().setup(self._state, self._settings)

    def get_movement_area(self) -> QRectF:
        return MovementBounds.get_movement_area_with_gravity(self._settings)

    # ------------------------------------------------------------------
    # Listeners
    # ------------------------------------------------------------------
    def add_on_state_changed_listener(self, listener: StateListener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def remove_on_state_changed_listener(self, listener: StateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify_state_changed(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    # ------------------------------------------------------------------
    # State updates
    # ------------------------------------------------------------------
    def _is_ready(self) -> bool:
        if not self._settings.has_viewport_size() or not self._settings.has_image_size():
            LOGGER.debug("Skipping state update, sizes not known yet: %r", self._settings)
            return False
        return True

    def reset_state(self) -> bool:
        """Put the content back at zoom 1, no rotation, at its gravity position."""

        if not self._is_ready():
            return False
        previous = self._state.copy()
        self._state.set(0.0, 0.0, 1.0, 0.0)
        MovementBounds.setup_initial_movement(self._state, self._settings)
        changed = previous != self._state
        self._notify_state_changed()
        return changed

    def update_state(self) -> bool:
        """Re-apply the bounds after viewport, content or settings changed."""

        if not self._is_ready():
            return False
        changed = self.restrict_state_bounds(self._state)
        self._notify_state_changed()
        return changed

    def restrict_state_bounds(self, state: State, allow_overscroll: bool = False) -> bool:
        """Move *state* inside its bounds; return ``True`` when it was moved.

        With *allow_overscroll* the settings' overscroll distance is added as
        slack on both sides of each axis.
        """

        bounds = MovementBounds().setup(state, self._settings)
        overscroll_x = self._settings.overscroll_distance_x if allow_overscroll else 0.0
        overscroll_y = self._settings.overscroll_distance_y if allow_overscroll else 0.0
        point = bounds.restrict(state.x, state.y, overscroll_x, overscroll_y)
        if State.equals(point.x(), state.x) and State.equals(point.y(), state.y):
            return False
        state.translate_to(point.x(), point.y())
        return True

    def is_within_bounds(self, state: State) -> bool:
        """Return ``True`` when *state* already sits inside its hard bounds."""

        point = MovementBounds().setup(state, self._settings).restrict(state.x, state.y)
        return State.equals(point.x(), state.x) and State.equals(point.y(), state.y)


__all__ = ["StateController", "StateListener"]
