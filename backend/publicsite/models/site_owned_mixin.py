from publicsite.extensions import db


class SiteOwnedMixin:
    site_id = db.Column(
        db.String(36),
        db.ForeignKey("sites.id"),
        nullable=False,
        index=True
    )
