from enum import Enum

# Stands for "no language requested" and for the root of a menu item tree.
# Always this one value, so identical requests share one cache key.
EMPTY_ID = "00000000-0000-0000-0000-000000000000"


class MenuStatus(str, Enum):
    ACTIVE = "active"
    DELETED = "deleted"


class MenuItemStatus(str, Enum):
    ACTIVE = "active"
    HIDDEN = "hidden"
    DELETED = "deleted"


class MenuItemType(str, Enum):
    PAGE = "page"
    LINK = "link"
    OTHER = "other"


class PageStatus(str, Enum):
    ACTIVE = "active"
    HIDDEN = "hidden"
    DELETED = "deleted"


class LanguageStatus(str, Enum):
    ACTIVE = "active"
    HIDDEN = "hidden"
    DELETED = "deleted"


class PermissionType(str, Enum):
    VIEW = "view"
    EDIT = "edit"


def is_empty_id(value) -> bool:
    return value is None or value == "" or value == EMPTY_ID
