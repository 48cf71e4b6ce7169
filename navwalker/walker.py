"""Bulma navbar walker.

Bulma's navbar only knows two levels: ``navbar-item`` entries and a single
``navbar-dropdown`` under an item with children. This walker emits that
structure and keeps the usual menu hooks working, so existing CSS-class and
attribute customisations still apply.

Example::

    renderer = MenuRenderer(RenderConfig(dropdown_right=True))
    markup = walk_menu(items, renderer, RenderArguments())

See https://bulma.io/documentation/components/navbar/ for the markup contract.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Optional

from .base import Walker
from .escaping import escape_attribute, escape_html, escape_url
from .hooks import (
    NAV_MENU_CSS_CLASS,
    NAV_MENU_ITEM_ARGS,
    NAV_MENU_ITEM_ID,
    NAV_MENU_ITEM_TITLE,
    NAV_MENU_LINK_ATTRIBUTES,
    THE_TITLE,
    WALKER_NAV_MENU_START_EL,
    HookRegistry,
)
from .models import MenuItem, PageContext, RenderArguments, RenderConfig
from .tracing import log_event

DROPDOWN_CLASS = "navbar-dropdown"
DROPDOWN_RIGHT_CLASS = "is-right"
DROPDOWN_BOXED_CLASS = "is-boxed"
DIVIDER_MARKUP = '<hr class="navbar-divider">'
ITEM_CLASS = "navbar-item"
LINK_CLASS = "navbar-link"
ACTIVE_CLASS = "is-active"
HEADER_CLASSES = ("navbar-item", "has-dropdown")
HEADER_UP_CLASS = "has-dropdown-up"
HEADER_HOVERABLE_CLASS = "is-hoverable"
POST_TYPE_ARCHIVE = "post_type_archive"


class MenuRenderer(Walker):
    """Render menu items as Bulma ``navbar-item`` elements.

    The renderer keeps no per-node state; one instance can serve any number
    of renders as long as each passes its own arguments.
    """

    def __init__(
        self,
        config: RenderConfig | None = None,
        *,
        hooks: HookRegistry | None = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        super().__init__(name="navwalker.bulma", logger=logger)
        self._config = config or RenderConfig()
        self._hooks = hooks or HookRegistry()

    @property
    def config(self) -> RenderConfig:
        return self._config

    @property
    def hooks(self) -> HookRegistry:
        return self._hooks

    # ------------------------------------------------------------------
    # Levels
    # ------------------------------------------------------------------
    def open_level(self, depth: int, arguments: RenderArguments) -> str:
        if depth == 0:
            classes = [DROPDOWN_CLASS]
            if self._config.dropdown_right:
                classes.append(DROPDOWN_RIGHT_CLASS)
            if self._config.boxed:
                classes.append(DROPDOWN_BOXED_CLASS)
            return f'<div class="{escape_attribute(" ".join(classes))}">'
        # Bulma has no nested dropdowns, deeper levels collapse to a divider.
        return DIVIDER_MARKUP

    def close_level(self, depth: int, arguments: RenderArguments) -> str:
        if depth == 0:
            return "</div>"
        return ""

    # ------------------------------------------------------------------
    # Items
    # ------------------------------------------------------------------
    def render_item(
        self,
        item: MenuItem,
        depth: int,
        arguments: RenderArguments,
        *,
        page: Optional[PageContext] = None,
        has_children: Optional[bool] = None,
    ) -> str:
        target_id = _resolve_target_id(item)
        node_id = item.node_id or 0

        if not item.title:
            log_event(
                self.logger,
                logging.DEBUG,
                "menu.item.skipped",
                reason="missing_title",
                node_id=node_id,
                depth=depth,
            )
            return ""

        arguments = self._hooks.apply(NAV_MENU_ITEM_ARGS, arguments, item, depth)
        indent = "" if arguments.discards_spacing else "\t" * depth

        if has_children is None:
            has_children = self.has_children(item)
        is_header = has_children and depth == 0

        css_classes = self._item_classes(item, depth, arguments, target_id, node_id, is_header, page)
        attributes = self._link_attributes(item, depth, arguments, css_classes, node_id)

        title = self._hooks.apply(THE_TITLE, item.title, target_id)
        title = self._hooks.apply(NAV_MENU_ITEM_TITLE, title, item, arguments, depth)

        element = "a" if attributes.get("href") else "div"

        html = indent
        if is_header:
            html += f'<div class="{escape_attribute(" ".join(self._header_classes()))}">'
        html += f"{arguments.before}<{element} "
        for name, value in attributes.items():
            if value is None:
                continue
            name = escape_html(name)
            value = escape_url(value) if name == "href" else escape_attribute(value)
            html += f'{name}="{value}" '
        html += ">"
        html += f"{arguments.link_before}{escape_html(title)}{arguments.link_after}"
        html += f"</{element}>{arguments.after}"

        return self._hooks.apply(WALKER_NAV_MENU_START_EL, html, item, depth, arguments)

    def close_item(
        self,
        item: MenuItem,
        depth: int,
        arguments: RenderArguments,
        *,
        has_children: Optional[bool] = None,
    ) -> str:
        if has_children is None:
            has_children = self.has_children(item)
        html = "</div>" if has_children and depth == 0 else ""
        if not arguments.discards_spacing:
            html += "\n"
        return html

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def is_active(
        self,
        item: MenuItem,
        page: Optional[PageContext],
        *,
        target_id: Optional[int] = None,
    ) -> bool:
        """Return whether ``item`` points at the page being rendered."""

        if page is None:
            return False
        if target_id is None:
            target_id = _resolve_target_id(item)
        current = page.current_target_id
        if current is not None and current == target_id:
            return True
        if (
            current is not None
            and current == page.home_id
            and page.posts_page_id is not None
            and page.posts_page_id == target_id
        ):
            return True
        return item.object_type == POST_TYPE_ARCHIVE and page.archive_matches(item.object_subtype)

    def _item_classes(
        self,
        item: MenuItem,
        depth: int,
        arguments: RenderArguments,
        target_id: int,
        node_id: int,
        is_header: bool,
        page: Optional[PageContext],
    ) -> str:
        classes: List[str] = list(item.classes)
        if node_id != 0:
            classes.append(f"menu-item-{node_id}")
        classes.append(LINK_CLASS if is_header else ITEM_CLASS)
        if self.is_active(item, page, target_id=target_id):
            classes.append(ACTIVE_CLASS)
        classes = self._hooks.apply(NAV_MENU_CSS_CLASS, classes, item, arguments, depth)
        return " ".join(str(css_class) for css_class in classes)

    def _link_attributes(
        self,
        item: MenuItem,
        depth: int,
        arguments: RenderArguments,
        css_classes: str,
        node_id: int,
    ) -> Dict[str, Optional[str]]:
        element_id = ""
        if node_id != 0:
            element_id = self._hooks.apply(NAV_MENU_ITEM_ID, f"menu-item-{node_id}", item, arguments, depth)

        attributes: Dict[str, Optional[str]] = {"class": css_classes}
        if item.url:
            attributes["href"] = item.url
        if item.attr_title:
            attributes["title"] = item.attr_title
        if item.target:
            attributes["target"] = item.target
        if item.relationship:
            attributes["rel"] = item.relationship
        if element_id:
            attributes["id"] = element_id

        return self._hooks.apply(NAV_MENU_LINK_ATTRIBUTES, attributes, item, arguments, depth)

    def _header_classes(self) -> List[str]:
        classes = list(HEADER_CLASSES)
        if self._config.dropdown_up:
            classes.append(HEADER_UP_CLASS)
        if self._config.hoverable:
            classes.append(HEADER_HOVERABLE_CLASS)
        return classes


def _resolve_target_id(item: MenuItem) -> int:
    if item.target_id is not None:
        return int(item.target_id)
    if item.node_id is not None:
        # Fall back to the menu entry itself when no target is known.
        return int(item.node_id)
    return 0


__all__ = [
    "ACTIVE_CLASS",
    "DIVIDER_MARKUP",
    "DROPDOWN_CLASS",
    "ITEM_CLASS",
    "LINK_CLASS",
    "MenuRenderer",
]
