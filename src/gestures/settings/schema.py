"""Schema helpers for serialised gesture settings."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_FIT_NAME, DEFAULT_GRAVITY_NAME, SETTINGS_SCHEMA_ID

_SIZE_SCHEMA: dict[str, Any] = {
    "type": "array",
    "items": {"type": "number", "minimum": 0},
    "minItems": 2,
    "maxItems": 2,
}

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "gestures/settings.schema.json",
    "type": "object",
    "required": ["schema", "viewport", "image", "gravity", "fit"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "viewport": _SIZE_SCHEMA,
        "movement_area": {"oneOf": [_SIZE_SCHEMA, {"type": "null"}]},
        "image": _SIZE_SCHEMA,
        "gravity": {"type": "string", "pattern": "^[A-Za-z_]+(\\|[A-Za-z_]+)*$"},
        "fit": {"type": "string", "enum": ["inside", "outside"]},
        "overscroll": _SIZE_SCHEMA,
    },
    "additionalProperties": False,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "viewport": [0, 0],
    "movement_area": None,
    "image": [0, 0],
    "gravity": DEFAULT_GRAVITY_NAME,
    "fit": DEFAULT_FIT_NAME,
    "overscroll": [0, 0],
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if isinstance(value, tuple):
                value = list(value)
            merged[key] = value
    _validator.validate(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
