from sqlalchemy import event
from pagehost.extensions import db
from .base import BaseModel


class ClientPageVersion(BaseModel):
    __tablename__ = "client_page_versions"

    page_id = db.Column(
        db.String(36),
        db.ForeignKey("client_pages.id"),
        nullable=False
    )

    version_number = db.Column(db.Integer, nullable=False)
    status = db.Column(db.String(20), nullable=False)
    # published | rollback

    snapshot = db.Column(db.JSON, nullable=False)

    created_by = db.Column(db.String(255), nullable=True)

    __table_args__ = (
        db.UniqueConstraint("page_id", "version_number", name="uq_client_page_version"),
        db.Index("idx_client_page_version_page", "page_id"),
    )


@event.listens_for(ClientPageVersion, "before_update")
@event.listens_for(ClientPageVersion, "before_delete")
def prevent_version_mutation(mapper, connection, target):
    raise RuntimeError("Page versions are immutable")
