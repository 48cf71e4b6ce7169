"""Named transform points that let callers adjust menu rendering.

A hook receives the current value plus some context arguments and returns the
value to use from then on. Hooks with no registered callbacks are the
identity transform.

Example::

    hooks = HookRegistry()

    @hooks.hook(NAV_MENU_CSS_CLASS)
    def add_brand_class(classes, item, arguments, depth):
        return [*classes, "is-brand"] if depth == 0 else classes
"""

from __future__ import annotations

import logging
from itertools import count
from typing import Any, Callable, Dict, List, Tuple

NAV_MENU_ITEM_ARGS = "nav_menu_item_args"
NAV_MENU_CSS_CLASS = "nav_menu_css_class"
NAV_MENU_ITEM_ID = "nav_menu_item_id"
NAV_MENU_LINK_ATTRIBUTES = "nav_menu_link_attributes"
THE_TITLE = "the_title"
NAV_MENU_ITEM_TITLE = "nav_menu_item_title"
WALKER_NAV_MENU_START_EL = "walker_nav_menu_start_el"
NAV_MENU_OBJECTS = "nav_menu_objects"
NAV_MENU_ITEMS = "nav_menu_items"

DEFAULT_PRIORITY = 10

HookCallback = Callable[..., Any]

_LOGGER = logging.getLogger(__name__)


class HookRegistry:
    """Ordered collection of transform callbacks keyed by hook name."""

    def __init__(self) -> None:
        self._callbacks: Dict[str, List[Tuple[int, int, HookCallback]]] = {}
        self._sequence = count()

    def add(self, name: str, callback: HookCallback, priority: int = DEFAULT_PRIORITY) -> None:
        """Register ``callback`` for ``name``; lower priorities run first."""

        if not callable(callback):
            raise TypeError(f"Hook callback for '{name}' must be callable")
        entries = self._callbacks.setdefault(name, [])
        entries.append((priority, next(self._sequence), callback))
        entries.sort(key=lambda entry: (entry[0], entry[1]))

    def remove(self, name: str, callback: HookCallback) -> bool:
        """Unregister ``callback`` from ``name``; return whether it was found."""

        entries = self._callbacks.get(name, [])
        remaining = [entry for entry in entries if entry[2] is not callback]
        if len(remaining) == len(entries):
            return False
        if remaining:
            self._callbacks[name] = remaining
        else:
            del self._callbacks[name]
        return True

    def has(self, name: str) -> bool:
        return bool(self._callbacks.get(name))

    def hook(self, name: str, priority: int = DEFAULT_PRIORITY) -> Callable[[HookCallback], HookCallback]:
        """Decorator form of :meth:`add`."""

        def _register(callback: HookCallback) -> HookCallback:
            self.add(name, callback, priority)
            return callback

        return _register

    def apply(self, name: str, value: Any, *context: Any) -> Any:
        """Pass ``value`` through every callback registered for ``name``."""

        entries = self._callbacks.get(name)
        if not entries:
            return value
        _LOGGER.debug("Applying %d callback(s) for hook %s", len(entries), name)
        for _, _, callback in list(entries):
            value = callback(value, *context)
        return value


__all__ = [
    "DEFAULT_PRIORITY",
    "HookCallback",
    "HookRegistry",
    "NAV_MENU_CSS_CLASS",
    "NAV_MENU_ITEMS",
    "NAV_MENU_ITEM_ARGS",
    "NAV_MENU_ITEM_ID",
    "NAV_MENU_ITEM_TITLE",
    "NAV_MENU_LINK_ATTRIBUTES",
    "NAV_MENU_OBJECTS",
    "THE_TITLE",
    "WALKER_NAV_MENU_START_EL",
]
