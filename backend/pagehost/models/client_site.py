from pagehost.extensions import db
from .base import BaseModel


class ClientSite(BaseModel):
    __tablename__ = "client_sites"

    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    global_css = db.Column(db.Text, nullable=True)
    favicon = db.Column(db.String(512), nullable=True)

    # default_title | default_description | default_og_image
    meta_defaults = db.Column(db.JSON, default=dict)

    pages = db.relationship("ClientPage", back_populates="client", lazy="dynamic")

    def meta_default(self, key: str):
        """
        Read a single SEO default, tolerating a NULL meta_defaults column.
        """
        return (self.meta_defaults or {}).get(key)
