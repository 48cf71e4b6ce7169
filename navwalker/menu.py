"""Complete navbar menu rendering: item preparation, walk and outer wrapper."""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from string import Formatter
from typing import Iterable, List, Optional

from pydantic import BaseModel, Field, field_validator

from .escaping import escape_attribute
from .hooks import NAV_MENU_ITEMS, NAV_MENU_OBJECTS, HookRegistry
from .models import HAS_CHILDREN_CLASS, MenuItem, PageContext, RenderArguments, RenderConfig
from .tracing import trace
from .traversal import walk_menu
from .walker import MenuRenderer

_LOGGER = logging.getLogger(__name__)

_ALLOWED_CONTAINERS = {"div", "nav"}
_DEFAULT_ITEMS_WRAP = '<div id="{menu_id}" class="{menu_class}">{items}</div>'
_WRAP_FIELDS = {"menu_id", "menu_class", "items"}


def _slugify(value: str) -> str:
    slug = re.sub(r"[^a-z0-9]+", "-", value.strip().lower()).strip("-")
    return slug or "menu"


class NavMenuOptions(BaseModel):
    """Options for the wrapper placed around the rendered items."""

    name: str = Field(default="primary", description="Menu name used for the default id")
    menu_id: str = Field(default="", description="Id of the items wrapper")
    menu_class: str = Field(default="navbar-start", description="Class of the items wrapper")
    container: Optional[str] = Field(default="div", description="Outer element, 'div', 'nav' or None")
    container_class: str = Field(default="navbar-menu")
    container_id: str = Field(default="")
    items_wrap: str = Field(
        default=_DEFAULT_ITEMS_WRAP,
        description="Format string with {menu_id}, {menu_class} and {items} placeholders",
    )
    depth: int = Field(default=0, ge=-1, description="0 for unlimited, -1 for a flat list")
    item_spacing: str = Field(default="default")
    before: str = ""
    after: str = ""
    link_before: str = ""
    link_after: str = ""
    fallback_html: str = ""

    @field_validator("container", mode="before")
    @classmethod
    def _normalise_container(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return None
        candidate = str(value).strip().lower()
        if not candidate or candidate == "none":
            return None
        if candidate not in _ALLOWED_CONTAINERS:
            raise ValueError(
                f"Unsupported container '{value}'. Expected one of: {', '.join(sorted(_ALLOWED_CONTAINERS))}."
            )
        return candidate

    @field_validator("items_wrap")
    @classmethod
    def _check_items_wrap(cls, value: str) -> str:
        fields = {name for _, name, _, _ in Formatter().parse(value) if name is not None}
        unknown = fields - _WRAP_FIELDS
        if unknown:
            raise ValueError(
                f"Unsupported items_wrap placeholder(s): {', '.join(sorted(unknown))}. "
                f"Expected: {', '.join(sorted(_WRAP_FIELDS))}."
            )
        return value

    @field_validator("item_spacing", mode="before")
    @classmethod
    def _normalise_spacing(cls, value: Optional[str]) -> str:
        # RenderArguments owns the accepted values.
        return RenderArguments(item_spacing=value or "default").item_spacing

    def resolved_menu_id(self) -> str:
        return self.menu_id or f"menu-{_slugify(self.name)}"

    def render_arguments(self) -> RenderArguments:
        return RenderArguments(
            before=self.before,
            after=self.after,
            link_before=self.link_before,
            link_after=self.link_after,
            item_spacing=self.item_spacing,
        )


def prepare_items(items: Iterable[MenuItem]) -> List[MenuItem]:
    """Return copies of ``items`` ordered by ``menu_order`` with default classes.

    Every item gains ``menu-item`` and, when known, its type and object
    classes; items that own children in the tree gain the has-children marker.
    """

    ordered = sorted(items, key=lambda item: item.menu_order)
    parents = {item.parent_id for item in ordered if item.parent_id}

    prepared: List[MenuItem] = []
    for item in ordered:
        defaults = ["menu-item"]
        if item.object_type:
            defaults.append(f"menu-item-type-{item.object_type}")
        if item.object_subtype:
            defaults.append(f"menu-item-object-{item.object_subtype}")
        classes = [css_class for css_class in defaults if css_class not in item.classes]
        classes.extend(item.classes)
        if item.node_id and item.node_id in parents and HAS_CHILDREN_CLASS not in classes:
            classes.append(HAS_CHILDREN_CLASS)
        prepared.append(replace(item, classes=classes))
    return prepared


def render_nav_menu(
    items: Iterable[MenuItem],
    *,
    config: RenderConfig | None = None,
    options: NavMenuOptions | None = None,
    page: PageContext | None = None,
    hooks: HookRegistry | None = None,
) -> str:
    """Render ``items`` as a Bulma ``navbar-menu`` block."""

    options = options or NavMenuOptions()
    hooks = hooks or HookRegistry()
    renderer = MenuRenderer(config, hooks=hooks)

    prepared = hooks.apply(NAV_MENU_OBJECTS, prepare_items(items), options)
    if not prepared:
        _LOGGER.debug("Menu '%s' has no items, using fallback markup", options.name)
        return options.fallback_html

    with trace("menu.render", logger=_LOGGER, menu=options.name, items=len(prepared)) as span:
        markup = walk_menu(
            prepared,
            renderer,
            options.render_arguments(),
            page=page,
            max_depth=options.depth,
        )
        markup = hooks.apply(NAV_MENU_ITEMS, markup, options)
        span["length"] = len(markup)

    html = options.items_wrap.format(
        menu_id=escape_attribute(options.resolved_menu_id()),
        menu_class=escape_attribute(options.menu_class),
        items=markup,
    )

    if options.container:
        attributes = ""
        if options.container_class:
            attributes += f' class="{escape_attribute(options.container_class)}"'
        if options.container_id:
            attributes += f' id="{escape_attribute(options.container_id)}"'
        html = f"<{options.container}{attributes}>{html}</{options.container}>"
    return html


__all__ = ["NavMenuOptions", "prepare_items", "render_nav_menu"]
