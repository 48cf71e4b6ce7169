"""Read menu definitions from JSON documents."""

from __future__ import annotations

import json
import logging
from dataclasses import fields
from itertools import count
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator, List, Mapping

from .models import MenuItem

_LOGGER = logging.getLogger(__name__)

_ALIASES = {
    "id": "target_id",
    "object_id": "target_id",
    "targetId": "target_id",
    "nodeId": "node_id",
    "db_id": "node_id",
    "parentId": "parent_id",
    "menu_item_parent": "parent_id",
    "attrTitle": "attr_title",
    "xfn": "relationship",
    "objectType": "object_type",
    "type": "object_type",
    "objectSubtype": "object_subtype",
    "object": "object_subtype",
    "menuOrder": "menu_order",
}
_FIELDS = {f.name for f in fields(MenuItem)}
_INT_FIELDS = {"target_id", "node_id", "parent_id", "menu_order"}


class MenuLoadError(ValueError):
    """Raised when a menu document cannot be turned into menu items."""


def _normalise_entry(raw: Mapping[str, Any], position: str) -> Dict[str, Any]:
    if not isinstance(raw, Mapping):
        raise MenuLoadError(f"Menu entry {position} must be an object, got {type(raw).__name__}")

    data: Dict[str, Any] = {}
    for key, value in raw.items():
        if key == "children":
            continue
        name = _ALIASES.get(key, key)
        if name not in _FIELDS:
            _LOGGER.debug("Ignoring unknown menu field %s on entry %s", key, position)
            continue
        data[name] = value

    for name in _INT_FIELDS & data.keys():
        if data[name] is None:
            continue
        try:
            data[name] = int(data[name])
        except (TypeError, ValueError) as exc:
            raise MenuLoadError(f"Menu entry {position}: '{name}' must be an integer") from exc

    classes = data.get("classes") or []
    if isinstance(classes, str):
        classes = classes.split()
    if not isinstance(classes, list):
        raise MenuLoadError(f"Menu entry {position}: 'classes' must be a list or a string")
    data["classes"] = [str(css_class) for css_class in classes if str(css_class)]

    for name in ("url", "attr_title", "target", "relationship", "object_type", "object_subtype"):
        if data.get(name) is None:
            data.pop(name, None)
        else:
            data[name] = str(data[name])

    data.setdefault("title", None)
    if data.get("parent_id") is None:
        data["parent_id"] = 0
    return data


def _max_node_id(entries: Iterable[Mapping[str, Any]]) -> int:
    highest = 0
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        for key in ("node_id", "nodeId", "db_id"):
            value = entry.get(key)
            if isinstance(value, int):
                highest = max(highest, value)
        highest = max(highest, _max_node_id(entry.get("children") or []))
    return highest


def _flatten(
    entries: Iterable[Mapping[str, Any]],
    parent_id: int,
    counter: Iterator[int],
    prefix: str,
) -> List[MenuItem]:
    items: List[MenuItem] = []
    for index, raw in enumerate(entries):
        position = f"{prefix}{index}"
        data = _normalise_entry(raw, position)
        children = raw.get("children") or []
        if children and not isinstance(children, list):
            raise MenuLoadError(f"Menu entry {position}: 'children' must be a list")
        if parent_id:
            data["parent_id"] = parent_id
        if children and not data.get("node_id"):
            data["node_id"] = next(counter)
        items.append(MenuItem(**data))
        if children:
            items.extend(_flatten(children, data["node_id"], counter, f"{position}."))
    return items


def parse_menu(data: Any) -> List[MenuItem]:
    """Turn a decoded JSON document into a flat list of :class:`MenuItem`.

    Both flat lists linked through ``parent_id`` and nested ``children``
    lists are accepted; the document may also be an object with an
    ``items`` key. Parents without a ``node_id`` get one above the highest
    explicit id so their children can refer to them.
    """

    if isinstance(data, Mapping):
        data = data.get("items")
    if not isinstance(data, list):
        raise MenuLoadError("Menu document must be a list of items or an object with an 'items' list")

    start = _max_node_id(data) + 1
    counter = count(start)
    return _flatten(data, 0, counter, "")


def load_menu(path: Path) -> List[MenuItem]:
    """Load a menu from the JSON file at ``path``."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise MenuLoadError(f"Menu file not found: {path}") from exc
    except json.JSONDecodeError as exc:
        raise MenuLoadError(f"Unable to decode menu file {path}: {exc}") from exc
    items = parse_menu(payload)
    _LOGGER.info("Loaded %d menu item(s) from %s", len(items), path)
    return items


__all__ = ["MenuLoadError", "load_menu", "parse_menu"]
