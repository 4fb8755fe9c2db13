"""Error types raised while building a network configuration."""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when required network details are missing."""


class RecoverableInputError(ValueError):
    """Raised for invalid optional input that has a documented default."""
