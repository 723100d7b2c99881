from __future__ import annotations

from typing import Optional

from username_registry.errors import MissingArgumentError


def normalize_username(username: Optional[str], *, argument: str = "username") -> str:
    """Trim surrounding whitespace and lower-case.

    This is the only key form the registry stores or compares. ``None`` is
    rejected; an empty string is a valid key.
    """
    if username is None:
        raise MissingArgumentError(argument)
    return username.strip().lower()
