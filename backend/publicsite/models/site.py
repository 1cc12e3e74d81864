from publicsite.extensions import db
from .base import BaseModel


class Site(BaseModel):
    __tablename__ = "sites"

    # Identity
    name = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False, index=True)
    status = db.Column(db.String(20), nullable=False, default="active", index=True)

    # Custom domain (trusted only once verified)
    custom_domain = db.Column(db.String(255), unique=True, nullable=True, index=True)
    domain_verification_status = db.Column(db.String(20), nullable=False, default="unverified")

    # Theme + free-form settings (description, logo_url, ...)
    primary_color = db.Column(db.String(32), nullable=True)
    settings = db.Column(db.JSON, default=dict)

    pages = db.relationship("Page", back_populates="site", order_by="Page.created_at")
    products = db.relationship("Product", back_populates="site")
