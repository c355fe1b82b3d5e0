# sitenav/api/v1/menus.py
import uuid
from flask import g, request, jsonify
from sitenav.application.navigation.get_menu_view import get_menu_view_model
from sitenav.domain.navigation.exceptions import InvalidLanguageId
from sitenav.domain.navigation.types import EMPTY_ID
from sitenav.normalizers.menu import normalize_menu
from . import v1_bp


def parse_language_id(raw):
    if not raw:
        return EMPTY_ID

    try:
        return str(uuid.UUID(raw))
    except ValueError:
        raise InvalidLanguageId(raw)


@v1_bp.route("/menus/<name>", methods=["GET"])
def get_menu(name):
    site = g.current_site
    language_id = parse_language_id(request.args.get("language_id"))

    menu = get_menu_view_model(
        site_id=site.id,
        name=name,
        language_id=language_id,
    )

    return jsonify(normalize_menu(menu)), 200
