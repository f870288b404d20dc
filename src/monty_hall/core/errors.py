"""Error types raised at public operation boundaries."""

from __future__ import annotations


class InvalidIndexError(ValueError):
    """Raised when a door index is outside the valid door range."""


class InvalidArgumentError(ValueError):
    """Raised when a batch-level argument is invalid (e.g. ``n < 1``)."""


__all__ = ["InvalidArgumentError", "InvalidIndexError"]
