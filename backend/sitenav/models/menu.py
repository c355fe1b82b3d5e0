from sitenav.extensions import db
from sitenav.domain.navigation.types import MenuStatus, MenuItemStatus, MenuItemType
from .base import BaseModel
from .site_mixin import SiteMixin

class Menu(BaseModel, SiteMixin):
    __tablename__ = "menus"

    name = db.Column(db.String(100), nullable=False)
    status = db.Column(db.String(20), nullable=False, default=MenuStatus.ACTIVE.value, index=True)

    __table_args__ = (
        db.UniqueConstraint("site_id", "name", name="uq_menu_name_per_site"),
    )

    items = db.relationship(
        "MenuItem",
        back_populates="menu",
        order_by="MenuItem.sort_order",
        cascade="all, delete-orphan"
    )


class MenuItem(BaseModel):
    __tablename__ = "menu_items"

    menu_id = db.Column(db.String(36), db.ForeignKey("menus.id"), nullable=False, index=True)
    # Null for root items. Not a foreign key: the root may also be stored as the empty id.
    parent_id = db.Column(db.String(36), nullable=True, index=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    type = db.Column(db.String(20), nullable=False, default=MenuItemType.LINK.value)  # page, link, other
    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), nullable=True)
    link = db.Column(db.String(512), nullable=True)

    text = db.Column(db.String(200), nullable=False)
    title = db.Column(db.String(200), nullable=True)
    status = db.Column(db.String(20), nullable=False, default=MenuItemStatus.ACTIVE.value, index=True)

    menu = db.relationship("Menu", back_populates="items")
    localisations = db.relationship(
        "MenuItemLocalisation",
        back_populates="menu_item",
        cascade="all, delete-orphan"
    )
    permissions = db.relationship(
        "MenuItemPermission",
        back_populates="menu_item",
        cascade="all, delete-orphan"
    )

    __table_args__ = (
        db.Index("idx_menu_item_menu_parent", "menu_id", "parent_id"),
    )


class MenuItemLocalisation(db.Model):
    __tablename__ = "menu_item_localisations"

    menu_item_id = db.Column(db.String(36), db.ForeignKey("menu_items.id"), primary_key=True)
    language_id = db.Column(db.String(36), db.ForeignKey("languages.id"), primary_key=True)
    text = db.Column(db.String(200), nullable=True)
    title = db.Column(db.String(200), nullable=True)

    menu_item = db.relationship("MenuItem", back_populates="localisations")


class MenuItemPermission(db.Model):
    __tablename__ = "menu_item_permissions"

    menu_item_id = db.Column(db.String(36), db.ForeignKey("menu_items.id"), primary_key=True)
    role_id = db.Column(db.String(36), db.ForeignKey("roles.id"), primary_key=True)

    menu_item = db.relationship("MenuItem", back_populates="permissions")
