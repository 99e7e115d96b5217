"""Named observer and filter hooks used to extend template lookups."""

from __future__ import annotations

import itertools
import logging
from collections import defaultdict
from typing import Any, Callable, Dict, List, NamedTuple, Protocol

logger = logging.getLogger(__name__)

DEFAULT_PRIORITY = 10

Callback = Callable[..., Any]


class Observer(Protocol):
    """Fire-and-forget notifications; return values are ignored."""

    def do_action(self, name: str, *args: Any) -> None: ...


class ListTransform(Protocol):
    """Chain of callables each receiving and returning a value."""

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any: ...


class Hooks(Observer, ListTransform, Protocol):
    """Both hook capabilities, as the loader consumes them."""


class _Registration(NamedTuple):
    priority: int
    sequence: int
    callback: Callback
    accepted_args: int


class HookRegistry:
    """Per-loader registry of actions and filters.

    Callbacks for a hook run in ascending priority, then in the order they
    were added. A callback receives only its first ``accepted_args``
    arguments; for filters the value being filtered counts as the first.
    """

    def __init__(self) -> None:
        self._actions: Dict[str, List[_Registration]] = defaultdict(list)
        self._filters: Dict[str, List[_Registration]] = defaultdict(list)
        self._sequence = itertools.count()

    def add_action(
        self,
        name: str,
        callback: Callback,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        self._register(self._actions, name, callback, priority, accepted_args)

    def remove_action(self, name: str, callback: Callback) -> bool:
        return self._unregister(self._actions, name, callback)

    def do_action(self, name: str, *args: Any) -> None:
        for entry in self._ordered(self._actions, name):
            entry.callback(*args[: entry.accepted_args])

    def add_filter(
        self,
        name: str,
        callback: Callback,
        priority: int = DEFAULT_PRIORITY,
        accepted_args: int = 1,
    ) -> None:
        self._register(self._filters, name, callback, priority, accepted_args)

    def remove_filter(self, name: str, callback: Callback) -> bool:
        return self._unregister(self._filters, name, callback)

    def has_filter(self, name: str) -> bool:
        return bool(self._filters.get(name))

    def apply_filters(self, name: str, value: Any, *args: Any) -> Any:
        for entry in self._ordered(self._filters, name):
            value = entry.callback(value, *args[: max(entry.accepted_args - 1, 0)])
        return value

    def _register(
        self,
        table: Dict[str, List[_Registration]],
        name: str,
        callback: Callback,
        priority: int,
        accepted_args: int,
    ) -> None:
        table[name].append(_Registration(priority, next(self._sequence), callback, accepted_args))
        logger.debug("Registered hook %s at priority %d", name, priority)

    @staticmethod
    def _unregister(table: Dict[str, List[_Registration]], name: str, callback: Callback) -> bool:
        entries = table.get(name)
        if not entries:
            return False
        remaining = [entry for entry in entries if entry.callback != callback]
        removed = len(remaining) != len(entries)
        table[name] = remaining
        return removed

    @staticmethod
    def _ordered(table: Dict[str, List[_Registration]], name: str) -> List[_Registration]:
        return sorted(table.get(name, ()), key=lambda entry: (entry.priority, entry.sequence))
