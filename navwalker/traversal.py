"""Depth-first traversal that feeds a menu tree to a :class:`~navwalker.base.Walker`."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Sequence

from .base import Walker
from .models import MenuItem, PageContext, RenderArguments
from .tracing import log_event

_LOGGER = logging.getLogger(__name__)


def _node_key(item: MenuItem) -> int:
    return item.node_id or 0


class _Traversal:
    """Single walk over one menu; holds the child index consumed while walking."""

    def __init__(
        self,
        walker: Walker,
        arguments: RenderArguments,
        page: Optional[PageContext],
        max_depth: int,
    ) -> None:
        self.walker = walker
        self.arguments = arguments
        self.page = page
        self.max_depth = max_depth
        self.children: Dict[int, List[MenuItem]] = {}
        self.output: List[str] = []

    def descends(self, depth: int) -> bool:
        return self.max_depth == 0 or self.max_depth > depth + 1

    def display(self, item: MenuItem, depth: int) -> None:
        key = _node_key(item)
        has_children = self.walker.has_children(item)

        markup = self._start(item, depth, has_children)
        self.output.append(markup)

        child_items = self.children.pop(key, []) if key and self.descends(depth) else []
        if child_items:
            self.output.append(self.walker.open_level(depth, self.arguments))
            for child in child_items:
                self.display(child, depth + 1)
            self.output.append(self.walker.close_level(depth, self.arguments))

        # Nothing was opened for a skipped or failed item, so nothing is closed.
        opened = bool(markup)
        self.output.append(
            self.walker.close_item(item, depth, self.arguments, has_children=has_children and opened)
        )

    def _start(self, item: MenuItem, depth: int, has_children: bool) -> str:
        try:
            return self.walker.render_item(
                item,
                depth,
                self.arguments,
                page=self.page,
                has_children=has_children,
            )
        except Exception as exc:
            log_event(
                _LOGGER,
                logging.WARNING,
                "menu.item.failure",
                walker=self.walker.name,
                node_id=item.node_id,
                depth=depth,
                error=str(exc),
                exception=exc.__class__.__name__,
                exc_info=True,
            )
            return ""


def walk_menu(
    items: Sequence[MenuItem],
    walker: Walker,
    arguments: RenderArguments | None = None,
    *,
    page: Optional[PageContext] = None,
    max_depth: int = 0,
) -> str:
    """Render ``items`` with ``walker`` and return the concatenated markup.

    ``max_depth`` follows the usual menu convention: ``0`` walks the whole
    tree, ``-1`` renders every item flat at depth 0 and ``n > 0`` limits the
    walk to ``n`` levels.
    """

    if max_depth < -1:
        raise ValueError(f"max_depth must be -1 or greater, got {max_depth}")
    if not items:
        return ""

    traversal = _Traversal(walker, arguments or RenderArguments(), page, max_depth)

    if max_depth == -1:
        for item in items:
            traversal.display(item, 0)
        return "".join(traversal.output)

    top_level: List[MenuItem] = []
    for item in items:
        if item.parent_id:
            traversal.children.setdefault(item.parent_id, []).append(item)
        else:
            top_level.append(item)

    if not top_level:
        # Partial trees: treat the parent of the first item as the root.
        root = items[0].parent_id
        top_level = traversal.children.pop(root, [])

    for item in top_level:
        traversal.display(item, 0)

    if max_depth == 0 and traversal.children:
        orphans = [item for group in traversal.children.values() for item in group]
        _LOGGER.debug("Rendering %d orphaned menu item(s) at the top level", len(orphans))
        # Orphans are rendered flat, without their own sublevels.
        traversal.children.clear()
        for item in orphans:
            traversal.display(item, 0)

    return "".join(traversal.output)


__all__ = ["walk_menu"]
