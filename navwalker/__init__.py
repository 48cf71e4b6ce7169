"""Render hierarchical menus as Bulma navbar markup."""

from .config import load_render_config
from .hooks import HookRegistry
from .loader import MenuLoadError, load_menu, parse_menu
from .logging_config import configure_logging
from .menu import NavMenuOptions, prepare_items, render_nav_menu
from .models import MenuItem, PageContext, RenderArguments, RenderConfig
from .traversal import walk_menu
from .walker import MenuRenderer

__version__ = "1.0.0"

__all__ = [
    "HookRegistry",
    "MenuItem",
    "MenuLoadError",
    "MenuRenderer",
    "NavMenuOptions",
    "PageContext",
    "RenderArguments",
    "RenderConfig",
    "configure_logging",
    "load_menu",
    "load_render_config",
    "parse_menu",
    "prepare_items",
    "render_nav_menu",
    "walk_menu",
]
