"""Contract shared by every menu walker."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from .models import MenuItem, PageContext, RenderArguments


class Walker(ABC):
    """Formatting callbacks invoked by :func:`navwalker.traversal.walk_menu`.

    The traversal driver owns the tree and the depth bookkeeping; a walker
    only turns one event at a time into markup.
    """

    def __init__(self, name: str, logger: Optional[logging.Logger] = None) -> None:
        self._name = name
        self._logger = logger or logging.getLogger(name)

    @property
    def name(self) -> str:
        """Return the human readable name for the walker."""

        return self._name

    @property
    def logger(self) -> logging.Logger:
        """Return the logger associated with the walker."""

        return self._logger

    def has_children(self, item: MenuItem) -> bool:
        """Return whether ``item`` is rendered as the parent of a sublevel."""

        return item.has_children

    @abstractmethod
    def open_level(self, depth: int, arguments: RenderArguments) -> str:
        """Markup emitted before the first child of an item at ``depth``."""

    @abstractmethod
    def close_level(self, depth: int, arguments: RenderArguments) -> str:
        """Markup emitted after the last child of an item at ``depth``."""

    @abstractmethod
    def render_item(
        self,
        item: MenuItem,
        depth: int,
        arguments: RenderArguments,
        *,
        page: Optional[PageContext] = None,
        has_children: Optional[bool] = None,
    ) -> str:
        """Opening markup for ``item``."""

    @abstractmethod
    def close_item(
        self,
        item: MenuItem,
        depth: int,
        arguments: RenderArguments,
        *,
        has_children: Optional[bool] = None,
    ) -> str:
        """Closing markup for ``item``, emitted after its children."""


__all__ = ["Walker"]
