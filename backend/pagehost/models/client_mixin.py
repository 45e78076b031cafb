from pagehost.extensions import db


class ClientMixin:
    client_id = db.Column(
        db.String(36),
        db.ForeignKey("client_sites.id"),
        nullable=False,
        index=True
    )
