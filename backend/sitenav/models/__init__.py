from .site import Site
from .language import Language
from .role import Role
from .page import Page, PageLocalisation, PagePermission
from .menu import Menu, MenuItem, MenuItemLocalisation, MenuItemPermission

__all__ = [
    "Site",
    "Language",
    "Role",
    "Page",
    "PageLocalisation",
    "PagePermission",
    "Menu",
    "MenuItem",
    "MenuItemLocalisation",
    "MenuItemPermission",
]
