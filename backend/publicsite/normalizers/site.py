# publicsite/normalizers/site.py
from __future__ import annotations

from publicsite.domain.content import Site
from publicsite.models.site import Site as SiteRow


def normalize_site(site: SiteRow) -> Site:
    """
    Converts a Site row into the read-only content model.

    Unknown status strings fall back to the most restrictive value so a bad
    row can never surface as an active, verified tenant.
    """
    if not site:
        raise ValueError("Site cannot be None")

    return Site(
        id=str(site.id),
        name=site.name,
        slug=site.slug,
        custom_domain=site.custom_domain,
        domain_verification_status=(
            "verified" if site.domain_verification_status == "verified" else "unverified"
        ),
        status="active" if site.status == "active" else "inactive",
        primary_color=site.primary_color,
        settings=site.settings or {},
    )
