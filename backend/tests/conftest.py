import uuid

import pytest
from sqlalchemy import event

from sitenav import create_app
from sitenav.extensions import db
from sitenav.models import (
    Language,
    Menu,
    MenuItem,
    MenuItemLocalisation,
    MenuItemPermission,
    Page,
    PageLocalisation,
    PagePermission,
    Role,
    Site,
)


def new_id():
    return str(uuid.uuid4())


class Seed:
    """Small helper for writing fixture rows in tests."""

    def __init__(self, session):
        self.session = session

    def _add(self, obj):
        self.session.add(obj)
        self.session.flush()
        return obj

    def site(self, *, add_language_slug=False, **kwargs):
        kwargs.setdefault("name", "Site")
        kwargs.setdefault("slug", f"site-{new_id()[:8]}")
        return self._add(Site(id=new_id(), add_language_slug=add_language_slug, **kwargs))

    def language(self, site, *, slug, status="active", **kwargs):
        kwargs.setdefault("name", slug.upper())
        return self._add(Language(id=new_id(), site_id=site.id, slug=slug, status=status, **kwargs))

    def role(self, name):
        return self._add(Role(id=new_id(), name=name))

    def page(self, site, *, slug, status="active", view_roles=(), edit_roles=(), **kwargs):
        kwargs.setdefault("title", slug)
        page = self._add(Page(id=new_id(), site_id=site.id, slug=slug, status=status, **kwargs))
        for role in view_roles:
            self._add(PagePermission(page_id=page.id, role_id=role.id, type="view"))
        for role in edit_roles:
            self._add(PagePermission(page_id=page.id, role_id=role.id, type="edit"))
        return page

    def page_localisation(self, page, language, *, slug=None, title=None):
        return self._add(PageLocalisation(page_id=page.id, language_id=language.id, slug=slug, title=title))

    def menu(self, site, name="Main", status="active"):
        return self._add(Menu(id=new_id(), site_id=site.id, name=name, status=status))

    def item(self, menu, text, *, sort_order=0, parent=None, roles=(), **kwargs):
        item = self._add(MenuItem(
            id=new_id(),
            menu_id=menu.id,
            parent_id=parent.id if parent is not None else None,
            sort_order=sort_order,
            text=text,
            **kwargs
        ))
        for role in roles:
            self._add(MenuItemPermission(menu_item_id=item.id, role_id=role.id))
        return item

    def link(self, menu, text, link, **kwargs):
        return self.item(menu, text, type="link", link=link, **kwargs)

    def page_item(self, menu, text, page, **kwargs):
        return self.item(menu, text, type="page", page_id=page.id if page is not None else new_id(), **kwargs)

    def item_localisation(self, item, language, *, text=None, title=None):
        return self._add(MenuItemLocalisation(menu_item_id=item.id, language_id=language.id, text=text, title=title))

    def commit(self):
        self.session.commit()


class StatementCounter:
    def __init__(self):
        self.count = 0

    def __call__(self, conn, cursor, statement, parameters, context, executemany):
        self.count += 1


@pytest.fixture
def app():
    app = create_app("testing")
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seed(app):
    return Seed(db.session)


@pytest.fixture
def statements(app):
    counter = StatementCounter()
    event.listen(db.engine, "before_cursor_execute", counter)
    yield counter
    event.remove(db.engine, "before_cursor_execute", counter)
