"""Custom exception types used by boilr."""

from __future__ import annotations

from pathlib import Path


class BoilrError(RuntimeError):
    """Base class for failures that abort a ``boilr`` command."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class GenerationError(BoilrError):
    """Raised when a generator cannot produce its files."""


class RegistryIOError(BoilrError):
    """Raised when the route registry cannot be read or written."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot access route registry {path}: {reason}")
        self.path = path


__all__ = ["BoilrError", "GenerationError", "RegistryIOError"]
