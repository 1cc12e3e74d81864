from publicsite.extensions import db
from .base import BaseModel
from .site_owned_mixin import SiteOwnedMixin


class Page(BaseModel, SiteOwnedMixin):
    __tablename__ = "pages"

    title = db.Column(db.String(200), nullable=False)
    slug = db.Column(db.String(200), nullable=False, index=True)
    status = db.Column(db.String(50), default="draft", index=True)
    content = db.Column(db.JSON(none_as_null=True), default=dict)  # {"blocks": [...]}

    seo_title = db.Column(db.String(255), nullable=True)
    seo_description = db.Column(db.Text, nullable=True)
    page_type = db.Column(db.String(50), nullable=True)

    __table_args__ = (
        db.UniqueConstraint("site_id", "slug", name="uq_page_slug_per_site"),
    )

    site = db.relationship("Site", back_populates="pages")
