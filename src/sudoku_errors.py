"""Shared error types for the Sudoku generator, solver and configuration."""

from __future__ import annotations


class GeneratorInvariantError(AssertionError):
    """A freshly seeded board could not be completed.

    A single shuffled row is always completable, so this signals a defect in
    the placement check or the seeding rather than a recoverable condition.
    """


class ConfigError(ValueError):
    """The configuration document could not be parsed or failed validation."""

    def __init__(self, msg: str, path: str = "") -> None:
        super().__init__(f"{path}: {msg}" if path else msg)
        self.msg = msg
        self.path = path


__all__ = ["ConfigError", "GeneratorInvariantError"]
