import logging

import pytest

from username_registry.errors import SuggestionsExhaustedError
from username_registry.registry import UsernameRegistry


def test_suggestions_skip_claimed_suffixes_and_add_dot_variant():
    r = UsernameRegistry()
    for name in ("john_doe", "john_doe1", "john_doe2"):
        r.register_username(name, "u")

    assert r.suggest_alternatives("john_doe") == ["john_doe3", "john_doe4", "john_doe5", "john.doe"]


def test_suggestions_are_normalized_and_in_generation_order():
    r = UsernameRegistry()
    r.register_username("bob2", "u")
    assert r.suggest_alternatives("  BOB ") == ["bob1", "bob3", "bob4"]


def test_dot_variant_omitted_when_claimed():
    r = UsernameRegistry()
    r.register_username("john.doe", "u")
    assert r.suggest_alternatives("John_Doe") == ["john_doe1", "john_doe2", "john_doe3"]


def test_all_underscores_become_dots():
    r = UsernameRegistry()
    assert r.suggest_alternatives("a_b_c")[-1] == "a.b.c"


def test_empty_username_gets_bare_numbers():
    assert UsernameRegistry().suggest_alternatives("") == ["1", "2", "3"]


def test_every_suggestion_is_available_right_after():
    r = UsernameRegistry()
    for name in ("x_y", "x_y1", "x_y3", "x_y4"):
        r.register_username(name, "u")

    suggestions = r.suggest_alternatives("x_y")
    assert len(set(suggestions)) == len(suggestions) == 4
    for candidate in suggestions:
        assert r.check_availability(candidate) is True


def test_suggestions_are_not_reservations():
    r = UsernameRegistry()
    first = r.suggest_alternatives("kim")[0]
    assert r.register_username(first, "someone_else") is True
    # A caller acting on the stale suggestion loses the race cleanly.
    assert r.register_username(first, "me") is False
    assert r.suggest_alternatives("kim") == ["kim2", "kim3", "kim4"]


def test_bounded_search_raises_with_partial_results(caplog):
    r = UsernameRegistry(max_suggestion_attempts=5)
    for i in (1, 2, 4, 5):
        r.register_username(f"sam{i}", "u")

    with caplog.at_level(logging.WARNING, logger="username_registry"):
        with pytest.raises(SuggestionsExhaustedError) as exc:
            r.suggest_alternatives("Sam")

    assert exc.value.username == "sam"
    assert exc.value.attempts == 5
    assert exc.value.found == ["sam3"]
    assert "Suggestion search exhausted" in caplog.text


def test_bounded_search_succeeds_on_last_allowed_attempt():
    r = UsernameRegistry(max_suggestion_attempts=5)
    for i in (1, 2):
        r.register_username(f"sam{i}", "u")
    assert r.suggest_alternatives("sam") == ["sam3", "sam4", "sam5"]


def test_unbounded_search_goes_past_the_default_bound():
    r = UsernameRegistry(max_suggestion_attempts=None)
    for i in range(1, 10_001):
        r.register_username(f"taken{i}", "u")

    assert r.suggest_alternatives("taken") == ["taken10001", "taken10002", "taken10003"]


def test_default_registry_is_bounded():
    r = UsernameRegistry()
    for i in range(1, r.max_suggestion_attempts + 1):
        r.register_username(f"busy{i}", "u")

    with pytest.raises(SuggestionsExhaustedError):
        r.suggest_alternatives("busy")
