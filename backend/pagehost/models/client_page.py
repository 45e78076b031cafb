from pagehost.extensions import db
from .base import BaseModel
from .client_mixin import ClientMixin

PAGE_TYPES = ("normal", "listing")


class ClientPage(BaseModel, ClientMixin):
    __tablename__ = "client_pages"

    slug = db.Column(db.String(200), nullable=False, index=True)
    category = db.Column(db.String(200), nullable=True, index=True)
    title = db.Column(db.String(255), nullable=True)

    # Listing card fields
    excerpt = db.Column(db.Text, nullable=True)
    featured_image = db.Column(db.String(512), nullable=True)
    author = db.Column(db.String(255), nullable=True)
    published_date = db.Column(db.Date, nullable=True)

    page_type = db.Column(db.String(20), nullable=False, default="normal")
    sort_order = db.Column(db.Integer, nullable=False, default=0)

    is_published = db.Column(db.Boolean, nullable=False, default=False, index=True)
    is_home_page = db.Column(db.Boolean, nullable=False, default=False)
    has_draft = db.Column(db.Boolean, nullable=False, default=False)
    use_client_header = db.Column(db.Boolean, nullable=False, default=True)
    use_client_footer = db.Column(db.Boolean, nullable=False, default=True)

    published_at = db.Column(db.DateTime(timezone=True), nullable=True)
    published_by = db.Column(db.String(255), nullable=True)

    # Published content
    html_content = db.Column(db.Text, nullable=True)
    css_content = db.Column(db.Text, nullable=True)
    js_content = db.Column(db.Text, nullable=True)
    meta_title = db.Column(db.String(255), nullable=True)
    meta_description = db.Column(db.Text, nullable=True)
    meta_keywords = db.Column(db.Text, nullable=True)
    og_image = db.Column(db.String(512), nullable=True)
    canonical_url = db.Column(db.String(512), nullable=True)

    # Draft content
    html_content_draft = db.Column(db.Text, nullable=True)
    css_content_draft = db.Column(db.Text, nullable=True)
    js_content_draft = db.Column(db.Text, nullable=True)
    meta_title_draft = db.Column(db.String(255), nullable=True)
    meta_description_draft = db.Column(db.Text, nullable=True)
    meta_keywords_draft = db.Column(db.Text, nullable=True)
    og_image_draft = db.Column(db.String(512), nullable=True)
    canonical_url_draft = db.Column(db.String(512), nullable=True)

    client = db.relationship("ClientSite", back_populates="pages")

    __table_args__ = (
        db.UniqueConstraint("client_id", "category", "slug", name="uq_client_page_slug"),
        db.Index("idx_client_page_sort", "client_id", "sort_order"),
    )

    @property
    def is_listing(self) -> bool:
        return self.page_type == "listing"
