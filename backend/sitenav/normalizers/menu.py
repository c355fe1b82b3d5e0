from sitenav.domain.navigation.view_models import MenuItemView, MenuViewModel


def normalize_menu_item(item: MenuItemView):
    return {
        "text": item.text,
        "title": item.title,
        "url": item.url,
        "view_roles": list(item.view_roles),
        "children": [normalize_menu_item(child) for child in item.children],
    }


def normalize_menu(menu: MenuViewModel):
    return {
        "name": menu.name,
        "menu_items": [normalize_menu_item(item) for item in menu.menu_items],
    }
