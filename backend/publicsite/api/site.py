# publicsite/api/site.py
"""
HTML routes for tenant sites.

/render                     static document endpoint (edge cache / crawlers)
/s/<slug>/, /s/<slug>/<p>   slug preview, mounted interactively
/site-preview               legacy domain preview, mounted interactively
"""
from flask import Blueprint, current_app, g, make_response, url_for

from publicsite.rendering.html import render_document
from publicsite.rendering.urls import DomainPreviewUrls
from publicsite.utils.decorators import cors_enabled, edge_cacheable

site_bp = Blueprint("site", __name__)


def _html(html, status=200):
    response = make_response(html, status)
    response.headers["Content-Type"] = "text/html; charset=utf-8"
    return response


@site_bp.route("/render", methods=["GET", "OPTIONS"], endpoint="render_static")
@cors_enabled
@edge_cacheable
def render_static():
    renderer = current_app.extensions["static_renderer"]
    result = renderer.render(g.tenant_host, g.tenant_path)
    return _html(result.html, result.status)


def _mounted(urls=None, preview=None):
    pipeline = current_app.extensions["site_pipeline"]
    outcome = pipeline.render(g.tenant_host, g.tenant_path, urls=urls)

    mount_config = {
        "api": url_for("v1.public_page"),
        "domain": g.tenant_host,
        "preview": preview,
        "site": outcome.composition.site.slug,
    }
    html = render_document(
        outcome.composition,
        mount_config=mount_config,
        mount_script_url=url_for("static", filename="mount.js"),
    )
    response = _html(html, outcome.status)
    response.headers["Cache-Control"] = "no-store"
    return response


@site_bp.route("/s/<slug>/", methods=["GET"], endpoint="preview_slug", strict_slashes=False)
def preview_slug(slug):
    return _mounted(preview="slug")


@site_bp.route("/s/<slug>/<path:page>", methods=["GET"], endpoint="preview_slug_page")
def preview_slug_page(slug, page):
    return _mounted(preview="slug")


@site_bp.route("/site-preview", methods=["GET"], endpoint="preview_domain")
def preview_domain():
    return _mounted(urls=DomainPreviewUrls(g.tenant_host), preview="domain")
