# sitenav/domain/navigation/view_models.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class MenuItemView:
    text: str
    title: str | None
    url: str
    view_roles: Tuple[str, ...] = ()
    children: Tuple["MenuItemView", ...] = ()


@dataclass(frozen=True)
class MenuViewModel:
    """
    Fully resolved menu, ready for rendering.

    Immutable so a single instance can be shared from the cache by every
    request asking for the same (site, name, language).
    """

    name: str = ""
    menu_items: Tuple[MenuItemView, ...] = field(default_factory=tuple)

    @property
    def is_empty(self) -> bool:
        return not self.name and not self.menu_items
