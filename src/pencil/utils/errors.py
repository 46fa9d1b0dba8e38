"""Typed exceptions for configuration loading and operation scripts.

The :class:`~pencil.model.Pencil` entity itself never raises for domain input;
these errors only surface at the configuration and script boundaries.
"""


class PencilError(ValueError):
    """Base class for package errors."""


class ConfigError(PencilError):
    """Raised when configuration files or environment values are invalid."""


class ScriptError(PencilError):
    """Raised when an operation script is malformed."""
