"""Tests for :mod:`navwalker.menu`."""

from __future__ import annotations

from typing import List

import pytest
from bs4 import BeautifulSoup
from pydantic import ValidationError

from navwalker.hooks import NAV_MENU_ITEMS, NAV_MENU_OBJECTS, HookRegistry
from navwalker.menu import NavMenuOptions, prepare_items, render_nav_menu
from navwalker.models import MenuItem, PageContext, RenderConfig


def _nested_menu() -> List[MenuItem]:
    return [
        MenuItem(title="Home", url="/", target_id=2, node_id=10, menu_order=1),
        MenuItem(title="Services", node_id=11, menu_order=2),
        MenuItem(title="Design", url="/design", target_id=7, node_id=12, parent_id=11, menu_order=3),
        MenuItem(
            title="Books",
            url="/books/",
            node_id=13,
            object_type="post_type_archive",
            object_subtype="book",
            menu_order=4,
        ),
    ]


def test_prepare_items_adds_default_classes_and_marker() -> None:
    """Given raw items When prepared Then menu classes and the has-children marker are added to copies."""

    items = _nested_menu()

    prepared = prepare_items(items)

    services = next(item for item in prepared if item.title == "Services")
    books = next(item for item in prepared if item.title == "Books")
    assert services.classes == ["menu-item", "menu-item-has-children"]
    assert books.classes == ["menu-item", "menu-item-type-post_type_archive", "menu-item-object-book"]
    assert items[1].classes == []


def test_prepare_items_sorts_by_menu_order_and_keeps_existing_classes() -> None:
    """Given unordered items When prepared Then they are sorted and existing classes are not duplicated."""

    items = [
        MenuItem(title="Second", menu_order=2, classes=["menu-item", "custom"]),
        MenuItem(title="First", menu_order=1),
    ]

    prepared = prepare_items(items)

    assert [item.title for item in prepared] == ["First", "Second"]
    assert prepared[1].classes == ["menu-item", "custom"]


def test_render_nav_menu_structure() -> None:
    """Given a nested menu When rendered Then the Bulma navbar-menu structure is produced."""

    html = render_nav_menu(_nested_menu(), page=PageContext(current_target_id=2))

    soup = BeautifulSoup(html, "lxml")
    wrapper = soup.select_one("div.navbar-menu > div#menu-primary.navbar-start")
    assert wrapper is not None
    header = wrapper.select_one("div.navbar-item.has-dropdown.is-hoverable")
    assert header is not None
    assert header.select_one("div.navbar-link").get_text() == "Services"
    dropdown = header.select_one("div.navbar-dropdown")
    assert [a["href"] for a in dropdown.select("a.navbar-item")] == ["/design"]
    home = wrapper.select_one("a#menu-item-10")
    assert "is-active" in home["class"]


def test_render_nav_menu_flat_example() -> None:
    """Given two flat items When rendered Then both are navbar-item links without dropdown or divider."""

    items = [MenuItem(title="Home", url="/"), MenuItem(title="About", url="/about")]

    html = render_nav_menu(items, options=NavMenuOptions(container=None))

    soup = BeautifulSoup(html, "lxml")
    links = soup.select("a.navbar-item")
    assert [link["href"] for link in links] == ["/", "/about"]
    assert "has-dropdown" not in html
    assert "navbar-divider" not in html
    assert html.startswith('<div id="menu-primary" class="navbar-start">')


def test_render_nav_menu_container_and_wrap_options() -> None:
    """Given custom container and wrap options When rendered Then they are used around the items."""

    options = NavMenuOptions(
        name="Footer Links",
        container="nav",
        container_class="navbar-menu is-footer",
        container_id="footer",
        menu_class="navbar-end",
        item_spacing="discard",
    )

    html = render_nav_menu([MenuItem(title="Home", url="/")], options=options)

    assert html == (
        '<nav class="navbar-menu is-footer" id="footer">'
        '<div id="menu-footer-links" class="navbar-end">'
        '<a class="menu-item navbar-item" href="/" >Home</a>'
        "</div></nav>"
    )


def test_render_nav_menu_applies_config_flags() -> None:
    """Given dropdown flags When a menu with a dropdown renders Then header and container carry the modifiers."""

    config = RenderConfig(dropdown_right=True, dropdown_up=True, hoverable=False, boxed=True)

    html = render_nav_menu(_nested_menu(), config=config)

    assert '<div class="navbar-item has-dropdown has-dropdown-up">' in html
    assert '<div class="navbar-dropdown is-right is-boxed">' in html


def test_render_nav_menu_empty_uses_fallback() -> None:
    """Given no items When rendered Then the fallback markup is returned."""

    assert render_nav_menu([], options=NavMenuOptions(fallback_html="<p>No menu</p>")) == "<p>No menu</p>"


def test_render_nav_menu_menu_level_hooks() -> None:
    """Given object and items hooks When rendered Then items can be filtered and markup post-processed."""

    hooks = HookRegistry()
    hooks.add(NAV_MENU_OBJECTS, lambda items, options: [item for item in items if item.title != "Books"])
    hooks.add(NAV_MENU_ITEMS, lambda markup, options: markup + "<!-- end -->")

    html = render_nav_menu(_nested_menu(), hooks=hooks)

    assert "Books" not in html
    assert "<!-- end --></div></div>" in html


def test_render_nav_menu_depth_limit() -> None:
    """Given depth 1 When rendered Then no dropdown container is opened."""

    html = render_nav_menu(_nested_menu(), options=NavMenuOptions(depth=1))

    assert "navbar-dropdown" not in html
    assert "Design" not in html


@pytest.mark.parametrize(
    "payload",
    [
        {"container": "section"},
        {"item_spacing": "tight"},
        {"depth": -3},
        {"items_wrap": '<div style="a{b}">{items}</div>'},
        {"items_wrap": "<div>{0}{items}</div>"},
        {"items_wrap": "<div>{items</div>"},
    ],
)
def test_nav_menu_options_validation(payload) -> None:
    """Given invalid options When validated Then a ValidationError is raised."""

    with pytest.raises(ValidationError):
        NavMenuOptions(**payload)


def test_nav_menu_options_container_none_spellings() -> None:
    """Given empty container spellings When validated Then no container is used."""

    assert NavMenuOptions(container="").container is None
    assert NavMenuOptions(container="None").container is None
    assert NavMenuOptions(container=" NAV ").container == "nav"


def test_nav_menu_options_items_wrap_with_known_placeholders() -> None:
    """Given an items_wrap using only the known placeholders When rendered Then each is substituted."""

    options = NavMenuOptions(menu_id="main", items_wrap="<ul id=\"{menu_id}\" class=\"{menu_class}\">{items}</ul>")

    html = render_nav_menu([MenuItem(title="Home", url="/", node_id=1)], options=options)

    assert html.startswith('<div class="navbar-menu"><ul id="main" class="navbar-start"><a ')
