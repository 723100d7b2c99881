from __future__ import annotations

from typing import List


class RegistryError(Exception):
    """Base class for username registry errors."""


class MissingArgumentError(RegistryError, ValueError):
    """A required argument was ``None``."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Missing required argument: {argument}")


class SuggestionsExhaustedError(RegistryError):
    """The numeric-suffix search hit its attempt bound before filling up."""

    def __init__(self, *, username: str, attempts: int, found: List[str]):
        self.username = username
        self.attempts = attempts
        self.found = list(found)
        super().__init__(
            f"No suggestions found for {username!r} after {attempts} attempts "
            f"({len(self.found)} unclaimed candidates collected)"
        )
