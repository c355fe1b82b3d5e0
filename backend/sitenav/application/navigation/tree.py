# sitenav/application/navigation/tree.py
from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from flask import current_app

from sitenav.domain.navigation.localisation import localise_text
from sitenav.domain.navigation.types import EMPTY_ID, MenuItemType, is_empty_id
from sitenav.domain.navigation.urls import PageTarget, resolve_url, target_for
from sitenav.domain.navigation.view_models import MenuItemView
from .roles import view_role_names


def group_by_parent(items: Iterable) -> Dict[str, List]:
    """
    Adjacency mapping parent id -> children, siblings sorted by sort_order.

    Null and empty parent ids are both filed under EMPTY_ID.
    """
    children: Dict[str, List] = defaultdict(list)
    for item in items:
        parent_id = EMPTY_ID if is_empty_id(item.parent_id) else item.parent_id
        children[parent_id].append(item)

    for siblings in children.values():
        siblings.sort(key=lambda i: i.sort_order)

    return children


class MenuTreeBuilder:
    """
    Turns the flat, pre-loaded items of one menu into MenuItemView trees.

    `pages` maps page id -> non-deleted page for every page the items may
    reference; a page item whose page is absent from it is dropped along
    with its children.

    Walking starts from the root bucket. Every item has exactly one
    parent, so items caught in a parent cycle are never reached.
    """

    def __init__(self, *, pages: Dict[str, object], role_service, language=None, add_language_slug: bool = False):
        self.pages = pages
        self.role_service = role_service
        self.language = language
        self.add_language_slug = add_language_slug

    def build(self, items: Iterable, parent_id: Optional[str] = None) -> Tuple[MenuItemView, ...]:
        children = group_by_parent(items)
        root = EMPTY_ID if is_empty_id(parent_id) else parent_id
        return self._build_level(children, root)

    def _build_level(self, children: Dict[str, List], parent_id: str) -> Tuple[MenuItemView, ...]:
        result = []

        for item in children.get(parent_id, ()):
            view = self._build_item(children, item)
            if view is not None:
                result.append(view)

        return tuple(result)

    def _build_item(self, children: Dict[str, List], item) -> Optional[MenuItemView]:
        role_ids = [p.role_id for p in item.permissions]

        page = None
        if item.type == MenuItemType.PAGE.value:
            page = self.pages.get(item.page_id)
            if page is None:
                current_app.logger.debug(
                    "Skipping menu item %s: page %s missing or deleted", item.id, item.page_id
                )
                return None

        text, title = localise_text(item.text, item.title, item.localisations, self.language)

        target = target_for(item, page)
        url = resolve_url(target, self.language, self.add_language_slug)

        # Page items are visible to whoever may view the page
        if isinstance(target, PageTarget):
            role_ids = target.page.view_role_ids()

        return MenuItemView(
            text=text,
            title=title,
            url=url,
            view_roles=view_role_names(self.role_service, role_ids),
            children=self._build_level(children, item.id),
        )
