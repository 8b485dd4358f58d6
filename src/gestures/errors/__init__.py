"""Custom exception hierarchy for gestures."""

from __future__ import annotations


class GesturesError(Exception):
    """Base class for all custom errors raised by gestures."""


class SettingsError(GesturesError):
    """Base class for settings related failures."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails validation."""


class StateError(GesturesError):
    """Raised when a transform state receives values it cannot represent."""
