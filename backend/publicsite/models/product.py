from publicsite.extensions import db
from .base import BaseModel
from .site_owned_mixin import SiteOwnedMixin


class Product(BaseModel, SiteOwnedMixin):
    __tablename__ = "products"

    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    price_amount = db.Column(db.Numeric(12, 2), nullable=False, default=0)
    price_currency = db.Column(db.String(3), nullable=False, default="USD")
    thumbnail_url = db.Column(db.String(512), nullable=True)
    product_type = db.Column(db.String(50), nullable=True)
    status = db.Column(db.String(50), default="draft", index=True)

    site = db.relationship("Site", back_populates="products")

    __table_args__ = (
        db.Index("idx_product_site_status", "site_id", "status"),
    )
