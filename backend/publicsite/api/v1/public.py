# publicsite/api/v1/public.py
"""
JSON side of the interactive mount.

GET /api/v1/public/page?domain=<host>&path=<path>[&preview=domain]

Returns the composed node tree for the mount script. ``preview=domain``
asks for links in the ``/site-preview`` form so navigation stays inside the
domain preview.
"""
from flask import current_app, g, jsonify, request

from publicsite.delivery.interactive import MountState, build_payload, state_for
from publicsite.domain.exceptions import SiteNotFound
from publicsite.rendering.urls import DomainPreviewUrls
from publicsite.utils.decorators import cors_enabled, edge_cacheable
from . import v1_bp


@v1_bp.route("/public/page", methods=["GET", "OPTIONS"], endpoint="public_page")
@cors_enabled
@edge_cacheable
def public_page():
    pipeline = current_app.extensions["site_pipeline"]

    urls = None
    if request.args.get("preview") == "domain":
        urls = DomainPreviewUrls(g.tenant_host)

    try:
        outcome = pipeline.render(g.tenant_host, g.tenant_path, urls=urls)
    except SiteNotFound:
        current_app.logger.info("Mount requested for unknown host %r", g.tenant_host)
        return jsonify(build_payload(MountState.SITE_NOT_FOUND)), 404

    payload = build_payload(state_for(outcome.composition), outcome.composition)
    return jsonify(payload), outcome.status
