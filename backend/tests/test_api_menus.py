from unittest.mock import patch

from sqlalchemy.exc import OperationalError

from sitenav.domain.navigation.types import EMPTY_ID
from sitenav.domain.navigation.view_models import MenuViewModel


def test_health_needs_no_site(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "service": "site-navigation"}


def test_missing_site_header(client):
    response = client.get("/api/v1/menus/Main")

    assert response.status_code == 400
    assert response.get_json() == {"error": "X-Site-ID header is missing"}


def test_unknown_site(client):
    response = client.get("/api/v1/menus/Main", headers={"X-Site-ID": "nope"})

    assert response.status_code == 404


def test_inactive_site(client, seed):
    site = seed.site(is_active=False)
    seed.commit()

    response = client.get("/api/v1/menus/Main", headers={"X-Site-ID": site.id})

    assert response.status_code == 404


def test_get_menu(client, seed):
    site = seed.site(add_language_slug=True)
    fr = seed.language(site, slug="fr")
    members = seed.role("Members")
    page = seed.page(site, slug="about-us", view_roles=[members])
    seed.page_localisation(page, fr, slug="a-propos")
    menu = seed.menu(site, "Main")
    home = seed.link(menu, "Home", "/", sort_order=1)
    seed.link(menu, "News", "/news", parent=home)
    about = seed.page_item(menu, "About", page, title="About us", sort_order=2)
    seed.item_localisation(about, fr, text="A propos")
    seed.commit()
    site_id, fr_id = site.id, fr.id

    response = client.get(
        "/api/v1/menus/Main",
        query_string={"language_id": fr_id},
        headers={"X-Site-ID": site_id},
    )

    assert response.status_code == 200
    assert response.get_json() == {
        "name": "Main",
        "menu_items": [
            {
                "text": "Home",
                "title": None,
                "url": "/",
                "view_roles": [],
                "children": [
                    {"text": "News", "title": None, "url": "/news", "view_roles": [], "children": []},
                ],
            },
            {
                "text": "A propos",
                "title": "About us",
                "url": "/fr/a-propos",
                "view_roles": ["Members"],
                "children": [],
            },
        ],
    }


def test_unknown_menu_returns_empty_model(client, seed):
    site = seed.site()
    seed.commit()

    response = client.get("/api/v1/menus/Nowhere", headers={"X-Site-ID": site.id})

    assert response.status_code == 200
    assert response.get_json() == {"name": "", "menu_items": []}


def test_malformed_language_id(client, seed):
    site = seed.site()
    seed.commit()

    response = client.get(
        "/api/v1/menus/Main",
        query_string={"language_id": "not-a-uuid"},
        headers={"X-Site-ID": site.id},
    )

    assert response.status_code == 400
    assert response.get_json()["error"] == "InvalidLanguageId"


def test_storage_failure_maps_to_503(client, seed):
    site = seed.site()
    seed.commit()
    site_id = site.id

    def broken(**kwargs):
        raise OperationalError("SELECT 1", {}, Exception("connection lost"))

    with patch("sitenav.api.v1.menus.get_menu_view_model", side_effect=broken):
        response = client.get("/api/v1/menus/Main", headers={"X-Site-ID": site_id})

    assert response.status_code == 503
    assert response.get_json()["error"] == "StorageUnavailable"


def test_missing_language_uses_empty_sentinel(client, seed):
    site = seed.site()
    seed.commit()
    site_id = site.id

    with patch("sitenav.api.v1.menus.get_menu_view_model") as resolve:
        resolve.return_value = MenuViewModel()
        client.get("/api/v1/menus/Main", headers={"X-Site-ID": site_id})

    resolve.assert_called_once_with(site_id=site_id, name="Main", language_id=EMPTY_ID)


def test_openapi_document_is_served(client):
    response = client.get("/openapi/navigation.yaml")

    assert response.status_code == 200
    assert b"/api/v1/menus/{name}" in response.data
