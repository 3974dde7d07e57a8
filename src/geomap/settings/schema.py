"""Schema helpers for the camera settings."""

from __future__ import annotations

from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import MAXIMUM_QUEUE_SIZE, MINIMUM_MOVEMENT_THRESHOLD_M

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "geomap/settings.schema.json",
    "type": "object",
    "required": ["schema", "camera"],
    "properties": {
        "schema": {"const": "geomap/settings@1"},
        "camera": {
            "type": "object",
            "required": ["queue_size", "movement_threshold_m", "resolve_dropped_requests"],
            "properties": {
                "queue_size": {"type": "integer", "minimum": 1},
                "movement_threshold_m": {"type": "number", "minimum": 0},
                "resolve_dropped_requests": {"type": "boolean"},
            },
            "additionalProperties": False,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": "geomap/settings@1",
    "camera": {
        "queue_size": MAXIMUM_QUEUE_SIZE,
        "movement_threshold_m": MINIMUM_MOVEMENT_THRESHOLD_M,
        # Queue overflow historically dropped the oldest request without
        # reporting anything to its completion.
        "resolve_dropped_requests": False,
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "camera" and isinstance(value, dict):
                merged["camera"].update(value)
                continue
            merged[key] = value
    _validator.validate(merged)
    return merged


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
