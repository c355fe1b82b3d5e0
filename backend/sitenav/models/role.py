from sitenav.extensions import db
from .base import BaseModel

class Role(BaseModel):
    __tablename__ = "roles"

    name = db.Column(db.String(100), unique=True, nullable=False)
