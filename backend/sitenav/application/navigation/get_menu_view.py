# sitenav/application/navigation/get_menu_view.py
from typing import Dict, Iterable, List, Optional
from flask import current_app
from sqlalchemy import select
from sqlalchemy.orm import selectinload
from sitenav.extensions import db, menu_cache
from sitenav.models.language import Language
from sitenav.models.menu import Menu, MenuItem
from sitenav.models.page import Page
from sitenav.models.site import Site
from sitenav.domain.navigation.types import (
    EMPTY_ID,
    LanguageStatus,
    MenuItemStatus,
    MenuItemType,
    MenuStatus,
    PageStatus,
    is_empty_id,
)
from sitenav.domain.navigation.view_models import MenuViewModel
from .roles import RoleService
from .tree import MenuTreeBuilder

MENU_CACHE_KEY = "menu:{site_id}:{name}:{language_id}"


def menu_cache_key(site_id: str, name: str, language_id: Optional[str] = EMPTY_ID) -> str:
    """
    Cache key for one resolved menu.

    A missing language always becomes EMPTY_ID so repeated requests
    without a language share a key.
    """
    if is_empty_id(language_id):
        language_id = EMPTY_ID
    return MENU_CACHE_KEY.format(site_id=site_id, name=name, language_id=language_id)


def get_menu_view_model(
    *,
    site_id: str,
    name: str,
    language_id: Optional[str] = EMPTY_ID,
    cache=None,
    role_service=None,
) -> MenuViewModel:
    """
    Resolve a site's menu into a render-ready view model.

    Results are cached per (site, name, language). An unknown or deleted
    menu resolves to an empty MenuViewModel. Storage errors propagate and
    leave nothing cached.
    """
    cache = cache if cache is not None else menu_cache
    role_service = role_service if role_service is not None else RoleService()

    key = menu_cache_key(site_id, name, language_id)

    return cache.get_or_compute(
        key,
        lambda: build_menu_view_model(
            site_id=site_id,
            name=name,
            language_id=language_id,
            role_service=role_service,
        ),
    )


def build_menu_view_model(
    *,
    site_id: str,
    name: str,
    language_id: Optional[str],
    role_service,
) -> MenuViewModel:
    menu = db.session.execute(
        select(Menu).where(
            Menu.site_id == site_id,
            Menu.name == name,
            Menu.status != MenuStatus.DELETED.value,
        )
    ).scalars().first()

    if menu is None:
        current_app.logger.warning("Menu %r not found for site %s", name, site_id)
        return MenuViewModel()

    items = load_menu_items(menu.id)
    language = load_language(site_id, language_id)
    add_language_slug = load_add_language_slug(site_id)
    pages = load_pages(item.page_id for item in items if item.type == MenuItemType.PAGE.value)

    builder = MenuTreeBuilder(
        pages=pages,
        role_service=role_service,
        language=language,
        add_language_slug=add_language_slug,
    )

    return MenuViewModel(name=menu.name, menu_items=builder.build(items))


def load_menu_items(menu_id: str) -> List[MenuItem]:
    return list(
        db.session.execute(
            select(MenuItem)
            .options(
                selectinload(MenuItem.localisations),
                selectinload(MenuItem.permissions),
            )
            .where(
                MenuItem.menu_id == menu_id,
                MenuItem.status != MenuItemStatus.DELETED.value,
            )
            .order_by(MenuItem.sort_order)
        ).scalars().all()
    )


def load_language(site_id: str, language_id: Optional[str]) -> Optional[Language]:
    if is_empty_id(language_id):
        return None

    return db.session.execute(
        select(Language).where(
            Language.site_id == site_id,
            Language.id == language_id,
            Language.status == LanguageStatus.ACTIVE.value,
        )
    ).scalars().first()


def load_add_language_slug(site_id: str) -> bool:
    value = db.session.execute(
        select(Site.add_language_slug).where(Site.id == site_id)
    ).scalar_one_or_none()
    return bool(value)


def load_pages(page_ids: Iterable[Optional[str]]) -> Dict[str, Page]:
    """Non-deleted pages by id, with localisations and permissions loaded."""
    ids = {page_id for page_id in page_ids if page_id}
    if not ids:
        return {}

    pages = db.session.execute(
        select(Page)
        .options(
            selectinload(Page.localisations),
            selectinload(Page.permissions),
        )
        .where(
            Page.id.in_(ids),
            Page.status != PageStatus.DELETED.value,
        )
    ).scalars().all()

    return {page.id: page for page in pages}
