"""Exceptions raised by the scale bar helpers."""

from __future__ import annotations

__all__ = [
    "InvalidUnitError",
    "InvalidUnitSystemError",
    "ScaleBarError",
]


class ScaleBarError(ValueError):
    """Raised when a scale bar computation receives an invalid argument."""


class InvalidUnitSystemError(ScaleBarError):
    """Raised when a unit system is missing or not recognised."""


class InvalidUnitError(ScaleBarError):
    """Raised when a linear unit is missing or not a :class:`LinearUnit`."""
