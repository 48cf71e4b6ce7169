"""Command line entrypoint for rendering a menu file as Bulma navbar markup."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import ValidationError

from navwalker import (
    MenuLoadError,
    NavMenuOptions,
    PageContext,
    configure_logging,
    load_menu,
    load_render_config,
    render_nav_menu,
)

_LOGGER = logging.getLogger("navmenu")


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a JSON menu as Bulma navbar markup")
    parser.add_argument("menu", type=Path, help="Path to the JSON menu definition.")
    parser.add_argument("--config", type=Path, help="JSON file with dropdown flags.")
    parser.add_argument("--log-level", default="WARNING", help="Python logging level (default: WARNING)")
    parser.add_argument("--dropdown-right", action="store_true", default=None, help="Align dropdowns right.")
    parser.add_argument("--dropdown-up", action="store_true", default=None, help="Open dropdowns upwards.")
    parser.add_argument(
        "--no-hover",
        dest="hoverable",
        action="store_false",
        default=None,
        help="Require a click (JavaScript) to open dropdowns.",
    )
    parser.add_argument("--boxed", action="store_true", default=None, help="Use boxed dropdowns.")
    parser.add_argument(
        "--discard-spacing",
        action="store_true",
        help="Do not emit indentation and newlines between items.",
    )
    parser.add_argument("--depth", type=int, default=0, help="Levels to render (0: all, -1: flat).")
    parser.add_argument("--current-id", type=int, help="Target id of the page being rendered.")
    parser.add_argument("--posts-page-id", type=int, help="Target id of the posts page.")
    parser.add_argument("--menu-class", default="navbar-start", help="Class of the items wrapper.")
    parser.add_argument("--output", type=Path, help="Write markup to this file instead of stdout.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging(args.log_level)

    overrides = {
        key: value
        for key, value in {
            "dropdown_right": args.dropdown_right,
            "dropdown_up": args.dropdown_up,
            "hoverable": args.hoverable,
            "boxed": args.boxed,
        }.items()
        if value is not None
    }
    try:
        config = load_render_config(args.config)
        if overrides:
            config = config.model_copy(update=overrides)
        items = load_menu(args.menu)
        options = NavMenuOptions(
            menu_class=args.menu_class,
            depth=args.depth,
            item_spacing="discard" if args.discard_spacing else "default",
        )
    except (MenuLoadError, ValidationError) as exc:
        _LOGGER.error("%s", exc)
        return 2

    page = PageContext(current_target_id=args.current_id, posts_page_id=args.posts_page_id)
    markup = render_nav_menu(items, config=config, options=options, page=page)

    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(markup, encoding="utf-8")
        _LOGGER.info("Wrote %d characters to %s", len(markup), args.output)
    else:
        sys.stdout.write(markup + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
