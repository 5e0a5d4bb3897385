"""Synchronous event registry.

Listeners are registered against an event name and called, in registration
order, whenever that event is triggered. Handlers are called synchronously;
exceptions bubble up normally.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable

from pyemitter.lib.helpers import (
    count_listeners,
    has_event,
    is_valid_event_name,
    is_valid_listener,
)

Listener = Callable[..., Any]


class InvalidArgument(TypeError):
    """Raised when an event name or a listener does not satisfy its contract."""


class _All:
    """Marker for `off(event_name)`: remove every listener of the event."""

    def __repr__(self) -> str:
        return "ALL"


ALL = _All()


class EventEntry:
    """Listeners of one event plus its run-once flag.

    The listener list is replaced, never edited in place, so a list handed
    out to a running dispatch stays stable.
    """

    __slots__ = ("listeners", "run_once")

    def __init__(self, listeners: list[Listener] | None = None, run_once: bool = False) -> None:
        self.listeners: list[Listener] = listeners if listeners is not None else []
        self.run_once = run_once

    def __repr__(self) -> str:
        return f"EventEntry(listeners={self.listeners!r}, run_once={self.run_once!r})"


def _check_event_name(event_name: Any, signature: str) -> None:
    if not is_valid_event_name(event_name):
        raise InvalidArgument(f"{signature}: {event_name!r} should be a non-empty string")


def _check_listener(fn: Any, signature: str) -> None:
    if not is_valid_listener(fn):
        raise InvalidArgument(f"{signature}: {fn!r} should be callable")


class Registry:
    """Mapping of event names to listeners with on/once/off/trigger operations.

    Any number of registries can live side by side; the module-level
    functions of this module share one default instance.
    """

    def __init__(self) -> None:
        self._subscriptions: dict[str, EventEntry] = {}
        # Guards the mapping only, never held while listeners run
        self._lock = threading.Lock()

    def on(self, event_name: str, fn: Listener, once: bool = False) -> int:
        """Register a listener for an event.

        The run-once flag belongs to the event as a whole: the last call to
        `on` or `once` for a name decides whether the next trigger removes
        every listener of that event.

        Args:
            event_name: Non-empty event name, matched case-sensitively.
            fn: Callable invoked with the trigger arguments.
            once: Remove the whole event after its next trigger.

        Returns:
            int: Number of listeners registered for the event afterwards.

        Raises:
            InvalidArgument: If the event name or the listener is invalid.
        """
        _check_event_name(event_name, "on(event_name, fn)")
        _check_listener(fn, "on(event_name, fn)")
        with self._lock:
            entry = self._subscriptions.get(event_name)
            if entry is None:
                entry = self._subscriptions[event_name] = EventEntry()
            entry.listeners = [*entry.listeners, fn]
            entry.run_once = once
            count = count_listeners(event_name, self._subscriptions)
        logging.debug(
            "Registered listener %r on << %s >> (once=%s, listeners=%d)",
            fn,
            event_name,
            once,
            count,
        )
        return count

    def once(self, event_name: str, fn: Listener) -> int:
        """Register a listener and mark the event to be removed after its next trigger."""
        return self.on(event_name, fn, once=True)

    def trigger(self, event_name: str, *args: Any, **kwargs: Any) -> bool:
        """Call every listener of an event with the given arguments.

        Listeners run against the list as it stood when the trigger began:
        listeners added or removed while dispatching only affect later
        triggers. A listener that raises aborts the remaining listeners and
        the exception reaches the caller; a run-once event is only removed
        after a complete pass.

        Returns:
            bool: True if at least one listener was called.

        Raises:
            InvalidArgument: If the event name is invalid.
        """
        _check_event_name(event_name, "trigger(event_name, *args)")
        with self._lock:
            entry = self._subscriptions.get(event_name)
            if entry is None or not entry.listeners:
                listeners, run_once = [], False
            else:
                listeners, run_once = entry.listeners, entry.run_once

        if not listeners:
            logging.debug("Triggered << %s >> with no listeners", event_name)
            return False

        logging.debug("Triggering << %s >> to %d listeners", event_name, len(listeners))
        for fn in listeners:
            fn(*args, **kwargs)

        if run_once:
            self.unsubscribe_all(event_name)
        return True

    def off(self, event_name: str, fn: Listener | _All = ALL) -> int:
        """Remove listeners from an event.

        `off(event_name)` removes the whole event; `off(event_name, fn)`
        removes only `fn`. Passing anything other than `ALL` as `fn`,
        including None, selects the second form and must be callable.

        Returns:
            int: Number of listeners left for the event.
        """
        if fn is ALL:
            return self.unsubscribe_all(event_name)
        return self.unsubscribe_one(event_name, fn)

    def unsubscribe_one(self, event_name: str, fn: Listener) -> int:
        """Remove every registration of one listener, keeping the run-once flag."""
        _check_event_name(event_name, "off(event_name, fn)")
        _check_listener(fn, "off(event_name, fn)")
        with self._lock:
            entry = self._subscriptions.get(event_name)
            if entry is not None:
                entry.listeners = [listener for listener in entry.listeners if listener != fn]
                if not entry.listeners:
                    del self._subscriptions[event_name]
            count = count_listeners(event_name, self._subscriptions)
        logging.debug("Removed listener %r from << %s >> (listeners=%d)", fn, event_name, count)
        return count

    def unsubscribe_all(self, event_name: str) -> int:
        """Remove an event and all of its listeners."""
        _check_event_name(event_name, "off(event_name)")
        with self._lock:
            self._subscriptions.pop(event_name, None)
            count = count_listeners(event_name, self._subscriptions)
        logging.debug("Removed all listeners from << %s >>", event_name)
        return count

    def listener_count(self, event_name: str) -> int:
        with self._lock:
            return count_listeners(event_name, self._subscriptions)

    def has_event(self, event_name: str) -> bool:
        with self._lock:
            return has_event(event_name, self._subscriptions)

    def event_names(self) -> list[str]:
        """Names of all events with registered listeners, in registration order."""
        with self._lock:
            return list(self._subscriptions)

    def clear(self) -> None:
        """Remove all events (useful in tests)."""
        with self._lock:
            self._subscriptions.clear()

    def __contains__(self, event_name: object) -> bool:
        return self.has_event(event_name)

    def __len__(self) -> int:
        with self._lock:
            return len(self._subscriptions)


_default_registry: Registry | None = None
_default_lock = threading.Lock()


def get_default_registry() -> Registry:
    """Return the process-wide registry, creating it on first use."""
    global _default_registry
    with _default_lock:
        if _default_registry is None:
            _default_registry = Registry()
        return _default_registry


def on(event_name: str, fn: Listener) -> int:
    """Subscribe a function to be called every time the event is triggered."""
    return get_default_registry().on(event_name, fn)


def once(event_name: str, fn: Listener) -> int:
    """Subscribe a function to be called only the next time the event is triggered."""
    return get_default_registry().once(event_name, fn)


def off(event_name: str, fn: Listener | _All = ALL) -> int:
    """Unsubscribe a whole event, or only the function provided."""
    return get_default_registry().off(event_name, fn)


def trigger(event_name: str, *args: Any, **kwargs: Any) -> bool:
    """Trigger an event on the default registry."""
    return get_default_registry().trigger(event_name, *args, **kwargs)
