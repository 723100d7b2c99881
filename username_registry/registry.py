from __future__ import annotations

import itertools
import logging
import threading
from typing import Dict, List, Optional, Tuple

from username_registry.errors import MissingArgumentError, SuggestionsExhaustedError
from username_registry.models import AttemptStat, RegistrySnapshot
from username_registry.normalize import normalize_username

logger = logging.getLogger("username_registry")

SUGGESTION_COUNT = 3
DEFAULT_MAX_SUGGESTION_ATTEMPTS = 10_000


class UsernameRegistry:
    """Thread-safe in-memory username registry.

    Two tables share the normalized-username key space:

    - claims: username -> owner id. Written once per key, never overwritten.
    - attempts: username -> number of availability checks.

    Each table has its own lock and no method holds both at once, so callers
    can mix operations freely from any number of threads. Nothing here is
    durable; state lives and dies with the instance.

    Suggestions are not reservations. A suggested name can be claimed by
    someone else before the caller gets to it; always go through
    :meth:`register_username` to actually take a name.
    """

    def __init__(self, *, max_suggestion_attempts: Optional[int] = DEFAULT_MAX_SUGGESTION_ATTEMPTS):
        if max_suggestion_attempts is not None and max_suggestion_attempts < 1:
            raise ValueError("max_suggestion_attempts must be >= 1 (or None for an unbounded search)")
        self._max_suggestion_attempts = max_suggestion_attempts

        self._claims_lock = threading.Lock()
        self._claims: Dict[str, str] = {}

        self._attempts_lock = threading.Lock()
        self._attempts: Dict[str, int] = {}

    @property
    def max_suggestion_attempts(self) -> Optional[int]:
        return self._max_suggestion_attempts

    def check_availability(self, username: Optional[str]) -> bool:
        """Record an attempt for ``username`` and report whether it is unclaimed.

        The attempt is counted whatever the answer is.
        """
        u = normalize_username(username)
        with self._attempts_lock:
            self._attempts[u] = self._attempts.get(u, 0) + 1
        return not self._is_claimed(u)

    def register_username(self, username: Optional[str], owner_id: Optional[str]) -> bool:
        """Claim ``username`` for ``owner_id`` if nobody has it yet.

        Returns False when the name is already claimed, including by the same
        owner. The existing claim is left as is.
        """
        u = normalize_username(username)
        if owner_id is None:
            raise MissingArgumentError("owner_id")
        with self._claims_lock:
            if u in self._claims:
                claimed = False
            else:
                self._claims[u] = owner_id
                claimed = True
        if not claimed:
            logger.debug("Username already claimed", extra={"username": u})
        return claimed

    def suggest_alternatives(self, username: Optional[str]) -> List[str]:
        """Suggest unclaimed variants of ``username``.

        Numeric suffixes are tried in order (name1, name2, ...) until three
        unclaimed ones are found. If the name has underscores, the version with
        dots instead is appended when it is unclaimed too.

        Raises SuggestionsExhaustedError when the attempt bound is reached
        first. With ``max_suggestion_attempts=None`` there is no bound and the
        search only ends once three free suffixes turn up.
        """
        u = normalize_username(username)
        suggestions: List[str] = []

        for suffix in itertools.count(1):
            if self._max_suggestion_attempts is not None and suffix > self._max_suggestion_attempts:
                logger.warning(
                    "Suggestion search exhausted",
                    extra={"username": u, "attempts": self._max_suggestion_attempts},
                )
                raise SuggestionsExhaustedError(
                    username=u, attempts=self._max_suggestion_attempts, found=suggestions
                )
            candidate = f"{u}{suffix}"
            if not self._is_claimed(candidate):
                suggestions.append(candidate)
                if len(suggestions) == SUGGESTION_COUNT:
                    break

        if "_" in u:
            dotted = u.replace("_", ".")
            if not self._is_claimed(dotted):
                suggestions.append(dotted)

        return suggestions

    def get_most_attempted(self) -> Optional[str]:
        """Return the most checked username, or None if nothing was checked.

        Among tied names any one may come back.
        """
        with self._attempts_lock:
            if not self._attempts:
                return None
            return max(self._attempts.items(), key=lambda kv: kv[1])[0]

    def attempt_count(self, username: Optional[str]) -> int:
        u = normalize_username(username)
        with self._attempts_lock:
            return self._attempts.get(u, 0)

    def owner_of(self, username: Optional[str]) -> Optional[str]:
        u = normalize_username(username)
        with self._claims_lock:
            return self._claims.get(u)

    def top_attempted(self, limit: int = 5) -> List[AttemptStat]:
        """Most checked usernames first; ties ordered by name."""
        with self._attempts_lock:
            items = list(self._attempts.items())
        return _rank(items, limit)

    def snapshot(self, *, top: int = 5) -> RegistrySnapshot:
        with self._claims_lock:
            claimed = len(self._claims)
        # One copy of the attempt table so top and totals agree.
        with self._attempts_lock:
            items = list(self._attempts.items())
        return RegistrySnapshot(
            claimed=claimed,
            tracked=len(items),
            total_attempts=sum(v for _, v in items),
            top=_rank(items, top),
        )

    def __len__(self) -> int:
        with self._claims_lock:
            return len(self._claims)

    def __contains__(self, username: object) -> bool:
        if not isinstance(username, str):
            return False
        return self._is_claimed(normalize_username(username))

    def _is_claimed(self, key: str) -> bool:
        with self._claims_lock:
            return key in self._claims


def _rank(items: List[Tuple[str, int]], limit: int) -> List[AttemptStat]:
    if limit < 1:
        return []
    ranked = sorted(items, key=lambda kv: (-kv[1], kv[0]))
    return [AttemptStat(username=k, attempts=v) for k, v in ranked[:limit]]
