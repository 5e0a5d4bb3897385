"""Util and validation helpers shared by the event registry.

The util functions are small and composable; the validation helpers build on
them to answer the questions the registry asks about its arguments and its
subscription mapping.
"""

from __future__ import annotations

from typing import Any, Callable


def has(prop: Any) -> Callable[[Any], bool]:
    """Build a predicate checking that a mapping holds ``prop`` as a key.

    Example:
        ```python
        has_name = has("name")
        has_name({"name": "foo"})  # True
        has_name(["name"])  # False
        ```
    """

    def check(coll: Any) -> bool:
        if not isinstance(coll, dict):
            return False
        try:
            return prop in coll
        except TypeError:
            # Unhashable keys can never be present
            return False

    return check


def length(coll: Any) -> int:
    """Length of a list, 0 for anything else."""
    if isinstance(coll, list):
        return len(coll)
    return 0


def is_valid_event_name(name: Any) -> bool:
    """Check that an event name is a non-empty string."""
    return isinstance(name, str) and name != ""


def is_valid_listener(fn: Any) -> bool:
    """Check that a listener is callable."""
    return callable(fn)


def has_event(event_name: str, subscriptions: dict) -> bool:
    """Check whether the subscription mapping holds an entry for this event."""
    return has(event_name)(subscriptions)


def count_listeners(event_name: str, subscriptions: dict) -> int:
    """Count how many listeners one event has.

    Args:
        event_name: Name of the event.
        subscriptions: Mapping of event name to entry, as held by a Registry.

    Returns:
        int: Number of registered listeners, 0 if the event has no entry.
    """
    if not has_event(event_name, subscriptions):
        return 0
    return length(subscriptions[event_name].listeners)
