"""Shared pytest fixtures for the navwalker test-suite."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Iterator, List

import sys

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navwalker.models import MenuItem, PageContext, RenderArguments, RenderConfig
from navwalker.walker import MenuRenderer

_ENV_FLAGS = (
    "NAVWALKER_DROPDOWN_RIGHT",
    "NAVWALKER_DROPDOWN_UP",
    "NAVWALKER_HOVERABLE",
    "NAVWALKER_BOXED",
)


@pytest.fixture(autouse=True)
def _isolate_environment(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Keep environment overrides and root logger changes local to one test."""

    for variable in _ENV_FLAGS:
        monkeypatch.delenv(variable, raising=False)

    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield
    for handler in list(root_logger.handlers):
        if handler not in handlers:
            root_logger.removeHandler(handler)
    for handler in handlers:
        if handler not in root_logger.handlers:
            root_logger.addHandler(handler)
    root_logger.setLevel(level)


@pytest.fixture
def fixtures_dir() -> Path:
    """Return the root directory containing reusable fixture files."""

    return Path(__file__).parent / "fixtures"


@pytest.fixture
def json_fixture(fixtures_dir: Path) -> Callable[[str], object]:
    """Return a callable that loads JSON fixture payloads by name."""

    def _load(name: str) -> object:
        path = fixtures_dir / "json" / name
        return json.loads(path.read_text(encoding="utf-8"))

    return _load


@pytest.fixture
def arguments() -> RenderArguments:
    """Return render arguments with default spacing."""

    return RenderArguments()


@pytest.fixture
def renderer() -> MenuRenderer:
    """Return a renderer using the default dropdown flags."""

    return MenuRenderer(RenderConfig())


@pytest.fixture
def flat_menu() -> List[MenuItem]:
    """Return a two-entry menu without dropdowns."""

    return [
        MenuItem(title="Home", url="/"),
        MenuItem(title="About", url="/about"),
    ]


@pytest.fixture
def dropdown_menu() -> List[MenuItem]:
    """Return a menu with one dropdown holding a nested third level."""

    return [
        MenuItem(title="Home", url="/", target_id=2, node_id=10),
        MenuItem(
            title="Services",
            node_id=11,
            classes=["menu-item-has-children"],
        ),
        MenuItem(title="Design", url="/design", target_id=7, node_id=12, parent_id=11),
        MenuItem(
            title="Hosting",
            url="/hosting",
            target_id=8,
            node_id=13,
            parent_id=11,
            classes=["menu-item-has-children"],
        ),
        MenuItem(title="Managed", url="/hosting/managed", target_id=9, node_id=14, parent_id=13),
    ]


@pytest.fixture
def home_page() -> PageContext:
    """Return a page context for the page with target id 2."""

    return PageContext(current_target_id=2)
