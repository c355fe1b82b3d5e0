from sitenav.extensions import db
from sitenav.domain.navigation.types import LanguageStatus
from .base import BaseModel
from .site_mixin import SiteMixin

class Language(BaseModel, SiteMixin):
    __tablename__ = "languages"

    name = db.Column(db.String(100), nullable=False)
    culture_name = db.Column(db.String(20), nullable=True)  # fr-FR, en-GB
    slug = db.Column(db.String(50), nullable=False)  # url fragment, e.g. "fr"
    status = db.Column(db.String(20), nullable=False, default=LanguageStatus.ACTIVE.value, index=True)
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    __table_args__ = (
        db.UniqueConstraint("site_id", "slug", name="uq_language_slug_per_site"),
    )
