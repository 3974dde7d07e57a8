"""Validated settings for the camera scheduler."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

from jsonschema import ValidationError

from ..config import MAXIMUM_QUEUE_SIZE, MINIMUM_MOVEMENT_THRESHOLD_M
from ..errors import SettingsLoadError, SettingsValidationError
from .schema import DEFAULT_SETTINGS, SETTINGS_SCHEMA, merge_with_defaults


@dataclass(frozen=True)
class CameraSettings:
    """Tunables for :class:`~geomap.camera.scheduler.CameraUpdateScheduler`."""

    queue_size: int = MAXIMUM_QUEUE_SIZE
    movement_threshold_m: float = MINIMUM_MOVEMENT_THRESHOLD_M
    resolve_dropped_requests: bool = False

    # ------------------------------------------------------------------
    @classmethod
    def from_mapping(cls, payload: Mapping[str, Any] | None) -> CameraSettings:
        """Build settings from a document shaped like :data:`DEFAULT_SETTINGS`."""

        try:
            data = merge_with_defaults(dict(payload) if payload else None)
        except ValidationError as exc:
            raise SettingsValidationError(exc.message) from exc

        camera = data["camera"]
        return cls(
            queue_size=int(camera["queue_size"]),
            movement_threshold_m=float(camera["movement_threshold_m"]),
            resolve_dropped_requests=bool(camera["resolve_dropped_requests"]),
        )

    # ------------------------------------------------------------------
    @classmethod
    def from_file(cls, path: Path | str) -> CameraSettings:
        """Read and validate a JSON settings file."""

        try:
            payload = json.loads(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise SettingsLoadError(f"{path}: {exc}") from exc
        if not isinstance(payload, dict):
            raise SettingsValidationError(f"{path}: settings must be a JSON object")
        return cls.from_mapping(payload)


__all__ = ["CameraSettings", "DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults"]
