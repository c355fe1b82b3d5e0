from sitenav.extensions import db
from sitenav.domain.navigation.types import PageStatus, PermissionType
from .base import BaseModel
from .site_mixin import SiteMixin

class Page(BaseModel, SiteMixin):
    __tablename__ = 'pages'

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    status = db.Column(db.String(50), default=PageStatus.ACTIVE.value, index=True)

    __table_args__ = (
        db.UniqueConstraint("site_id", "slug", name="uq_page_slug_per_site"),
    )

    localisations = db.relationship(
        "PageLocalisation",
        back_populates="page",
        cascade="all, delete-orphan"
    )
    permissions = db.relationship(
        "PagePermission",
        back_populates="page",
        cascade="all, delete-orphan"
    )

    def view_role_ids(self):
        return [
            p.role_id for p in self.permissions
            if p.type == PermissionType.VIEW.value
        ]


class PageLocalisation(db.Model):
    __tablename__ = "page_localisations"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), primary_key=True)
    language_id = db.Column(db.String(36), db.ForeignKey("languages.id"), primary_key=True)
    slug = db.Column(db.String(200), nullable=True)
    title = db.Column(db.String(200), nullable=True)

    page = db.relationship("Page", back_populates="localisations")


class PagePermission(db.Model):
    __tablename__ = "page_permissions"

    page_id = db.Column(db.String(36), db.ForeignKey("pages.id"), primary_key=True)
    role_id = db.Column(db.String(36), db.ForeignKey("roles.id"), primary_key=True)
    type = db.Column(db.String(20), primary_key=True, default=PermissionType.VIEW.value)

    page = db.relationship("Page", back_populates="permissions")
