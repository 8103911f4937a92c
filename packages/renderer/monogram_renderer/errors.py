"""Typed failures raised while producing an avatar image."""

from __future__ import annotations


class MonogramError(Exception):
    """Base class for avatar pipeline faults."""


class InitializationError(MonogramError):
    """The font resource could not be loaded; no render can succeed."""


class RenderError(MonogramError):
    """The render engine failed on a well-formed composition."""


class EncodeError(MonogramError):
    """The rendered pixels could not be encoded to PNG."""
