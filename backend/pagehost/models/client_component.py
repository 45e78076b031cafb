from pagehost.extensions import db
from .base import BaseModel
from .client_mixin import ClientMixin


class ClientComponent(BaseModel, ClientMixin):
    __tablename__ = "client_components"

    component_type = db.Column(db.String(50), nullable=False, index=True)  # header, footer
    name = db.Column(db.String(255), nullable=True)
    is_active = db.Column(db.Boolean, nullable=False, default=True)

    html_content = db.Column(db.Text, nullable=True)
    css_content = db.Column(db.Text, nullable=True)

    html_content_draft = db.Column(db.Text, nullable=True)
    css_content_draft = db.Column(db.Text, nullable=True)
    has_draft = db.Column(db.Boolean, nullable=False, default=False)
