from __future__ import annotations

from username_registry.registry import UsernameRegistry
from username_registry.settings import Settings, get_settings


# NOTE: Do not cache across process lifetime. Tests toggle env vars and expect
# a fresh registry with the new settings each time.


def get_registry(settings: Settings | None = None) -> UsernameRegistry:
    """Build a registry configured from settings.

    Each call returns a new, empty registry; share the instance yourself.
    """
    s = settings or get_settings()
    return UsernameRegistry(max_suggestion_attempts=s.max_suggestion_attempts)
