# sitenav/domain/navigation/urls.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .localisation import find_localisation, is_blank
from .types import MenuItemType

PLACEHOLDER_URL = "#"


@dataclass(frozen=True)
class PageTarget:
    page: Any


@dataclass(frozen=True)
class LinkTarget:
    link: str | None


@dataclass(frozen=True)
class NoTarget:
    pass


MenuItemTarget = Union[PageTarget, LinkTarget, NoTarget]


def target_for(item, page=None) -> MenuItemTarget:
    """
    Map a stored menu item onto what it points at.

    `page` is the already loaded page for page items; a page item with
    no page has nothing to link to.
    """
    if item.type == MenuItemType.PAGE.value:
        return PageTarget(page) if page is not None else NoTarget()
    if item.type == MenuItemType.LINK.value:
        return LinkTarget(item.link)
    return NoTarget()


def page_url(page, language, add_language_slug: bool) -> str:
    if language is None:
        return f"/{page.slug}"

    localisation = find_localisation(page.localisations, language)
    slug = localisation.slug if localisation is not None and localisation.slug else page.slug
    url = f"/{slug}"

    if add_language_slug:
        url = f"/{language.slug}" + url

    return url


def resolve_url(target: MenuItemTarget, language, add_language_slug: bool) -> str:
    if isinstance(target, PageTarget):
        return page_url(target.page, language, add_language_slug)

    if isinstance(target, LinkTarget):
        # Links are used verbatim, whatever the language
        return PLACEHOLDER_URL if is_blank(target.link) else target.link

    if isinstance(target, NoTarget):
        return PLACEHOLDER_URL

    raise TypeError(f"Unknown menu item target: {target!r}")
