"""Data models shared by the navbar renderer, the traversal driver and the CLI."""

from __future__ import annotations

import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

HAS_CHILDREN_CLASS = "menu-item-has-children"

_TRUE_WORDS = {"1", "true", "yes", "on"}
_FALSE_WORDS = {"", "0", "false", "no", "off"}
_SPACING_ALIASES = {"preserve": "default"}
_ALLOWED_SPACING = {"default", "discard"}


class RenderConfig(BaseModel):
    """Presentation flags for Bulma navbar dropdowns.

    See https://bulma.io/documentation/components/navbar/ for the meaning of
    each modifier. Hover activation defaults to on since no JavaScript is
    assumed to toggle the dropdown state.
    """

    model_config = ConfigDict(frozen=True)

    dropdown_right: bool = Field(default=False, description="Align dropdowns to the right")
    dropdown_up: bool = Field(default=False, description="Open dropdowns upwards")
    hoverable: bool = Field(default=True, description="Activate dropdowns on hover")
    boxed: bool = Field(default=False, description="Use the boxed dropdown style")

    @field_validator("dropdown_right", "dropdown_up", "hoverable", "boxed", mode="before")
    @classmethod
    def _coerce_flag(cls, value: Any) -> Any:
        if isinstance(value, str):
            word = value.strip().lower()
            if word in _TRUE_WORDS:
                return True
            if word in _FALSE_WORDS:
                return False
            raise ValueError(f"Unrecognised flag value '{value}'")
        return value


@dataclass(slots=True)
class Serializable:
    """Base dataclass providing JSON serialisation helpers."""

    def to_dict(self) -> Dict:
        """Convert the dataclass to a serialisable dictionary."""

        def _convert(value):
            if dataclasses.is_dataclass(value):
                return {f.name: _convert(getattr(value, f.name)) for f in dataclasses.fields(value)}
            if isinstance(value, (list, tuple)):
                return [_convert(item) for item in value]
            if isinstance(value, dict):
                return {key: _convert(val) for key, val in value.items()}
            return value

        return _convert(self)

    def to_json(self, path: Path) -> None:
        """Write the dataclass as JSON to the provided ``path``."""

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")


@dataclass(slots=True)
class MenuItem(Serializable):
    """One navigation entry of a menu tree.

    ``target_id`` identifies the page the entry points to and is used for the
    active-state check, ``node_id`` identifies the menu entry itself. The
    order of ``classes`` is significant and preserved on output.
    """

    title: Optional[str]
    url: str = ""
    target_id: Optional[int] = None
    node_id: Optional[int] = None
    parent_id: int = 0
    attr_title: str = ""
    target: str = ""
    relationship: str = ""
    classes: List[str] = field(default_factory=list)
    object_type: str = ""
    object_subtype: str = ""
    menu_order: int = 0

    @property
    def has_children(self) -> bool:
        return HAS_CHILDREN_CLASS in self.classes


@dataclass(frozen=True, slots=True)
class RenderArguments:
    """Markup fragments and spacing mode applied around every rendered item."""

    before: str = ""
    after: str = ""
    link_before: str = ""
    link_after: str = ""
    item_spacing: str = "default"

    def __post_init__(self) -> None:
        spacing = str(self.item_spacing or "default").strip().lower()
        spacing = _SPACING_ALIASES.get(spacing, spacing)
        if spacing not in _ALLOWED_SPACING:
            raise ValueError(
                f"Unsupported item_spacing '{self.item_spacing}'. Expected one of: "
                f"{', '.join(sorted(_ALLOWED_SPACING))}."
            )
        object.__setattr__(self, "item_spacing", spacing)

    @property
    def discards_spacing(self) -> bool:
        return self.item_spacing == "discard"


@dataclass(frozen=True, slots=True)
class PageContext:
    """Read-only description of the page the menu is rendered on."""

    current_target_id: Optional[int] = None
    posts_page_id: Optional[int] = None
    home_id: int = 1
    is_archive_view: bool = False
    archive_post_type: Optional[str] = None

    def archive_matches(self, object_subtype: str) -> bool:
        """Return ``True`` when the current archive lists ``object_subtype`` posts."""

        if not self.is_archive_view or not self.archive_post_type:
            return False
        return self.archive_post_type == object_subtype


__all__ = [
    "HAS_CHILDREN_CLASS",
    "MenuItem",
    "PageContext",
    "RenderArguments",
    "RenderConfig",
    "Serializable",
]
