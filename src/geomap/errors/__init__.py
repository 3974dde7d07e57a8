"""Custom exception hierarchy for geomap."""

from __future__ import annotations


class GeoMapError(Exception):
    """Base class for all custom errors raised by geomap."""


# --- Polyline decoding ---

class PolylineDecodeError(GeoMapError):
    """Raised when an encoded path cannot be decoded."""


class InvalidPositionError(PolylineDecodeError):
    """Raised when the input ends before a component byte could be read."""


class InvalidNumberOfComponentsError(PolylineDecodeError):
    """Raised when a sixth component byte still signals continuation."""


class InvalidCharacterError(PolylineDecodeError):
    """Raised when the input holds a byte outside the printable polyline range."""


# --- Camera scheduling ---

class CompletionAlreadyResolvedError(GeoMapError):
    """Raised when a camera move completion is resolved more than once."""


# --- Settings ---

class SettingsError(GeoMapError):
    """Base class for settings related failures."""


class SettingsLoadError(SettingsError):
    """Raised when the settings file cannot be parsed or loaded."""


class SettingsValidationError(SettingsError):
    """Raised when settings data fails schema validation."""
