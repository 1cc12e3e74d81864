import os
from dotenv import load_dotenv

load_dotenv()


def _csv(name, default):
    raw = os.getenv(name)
    if not raw:
        return tuple(default)
    return tuple(item.strip().lower() for item in raw.split(",") if item.strip())


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Tenant resolution
    # Resolution used .creatorapp.site while page links used .creatorapp.us;
    # both stay accepted until the platform settles on one.
    RESERVED_SUBDOMAIN_SUFFIXES = _csv(
        "RESERVED_SUBDOMAIN_SUFFIXES", (".creatorapp.site", ".creatorapp.us")
    )
    EXCLUDED_HOSTS = _csv(
        "EXCLUDED_HOSTS",
        (
            "creatorapp.us",
            "creatorapp.site",
            "app.creatorapp.us",
            "localhost",
            "127.0.0.1",
        ),
    )
    SITE_CACHE_TTL = int(os.getenv("SITE_CACHE_TTL", "60"))

    # Page composition
    HOME_PAGE_SLUG = os.getenv("HOME_PAGE_SLUG", "creatorappu-landing-page")
    NAV_SLUGS = _csv(
        "NAV_SLUGS",
        (
            "creatorappu-landing-page",
            "curriculum",
            "pricing",
            "about",
            "free-creator-toolkit",
            "contact",
        ),
    )
    NAV_LABELS = {
        "creatorappu-landing-page": "Home",
        "curriculum": "Curriculum",
        "pricing": "Pricing",
        "about": "About",
        "free-creator-toolkit": "Free Toolkit",
        "contact": "Contact",
    }
    DEFAULT_PRIMARY_COLOR = os.getenv("DEFAULT_PRIMARY_COLOR", "#0ea5e9")
    PLATFORM_NAME = os.getenv("PLATFORM_NAME", "CreatorApp")

    # Delivery
    CACHE_MAX_AGE = int(os.getenv("CACHE_MAX_AGE", "300"))
    RENDER_TIMEOUT_SECONDS = float(os.getenv("RENDER_TIMEOUT_SECONDS", "8"))
    FETCH_MAX_WORKERS = int(os.getenv("FETCH_MAX_WORKERS", "8"))


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    SQLALCHEMY_DATABASE_URI = os.getenv("DEV_DATABASE_URI", "sqlite:///creator_sites.db")


class ProductionConfig(BaseConfig):
    DEBUG = False
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URI")


class TestingConfig(BaseConfig):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    SITE_CACHE_TTL = 0
    RENDER_TIMEOUT_SECONDS = 2.0


config_by_name = {
    "development": DevelopmentConfig,
    "production": ProductionConfig,
    "testing": TestingConfig,
}
