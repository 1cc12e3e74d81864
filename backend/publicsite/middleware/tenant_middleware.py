from flask import request, g, jsonify

# Endpoints that serve a tenant site; everything else (health, docs,
# static files) is platform-level and carries no tenant.
TENANT_ENDPOINTS = {
    "site.render_static",
    "site.preview_slug",
    "site.preview_slug_page",
    "site.preview_domain",
    "v1.public_page",
}

MAX_HOST_LENGTH = 253


def tenant_middleware(app):
    @app.before_request
    def load_tenant_host():
        if request.endpoint not in TENANT_ENDPOINTS:
            return None

        # ?domain= wins over the Host header so an edge worker can render
        # any tenant through a single origin.
        host = (request.args.get("domain") or request.host or "").strip()
        if not host:
            return jsonify({"error": "BadRequest", "message": "Host is missing"}), 400
        if len(host) > MAX_HOST_LENGTH:
            return jsonify({"error": "BadRequest", "message": "Host is too long"}), 400

        if request.endpoint in ("site.preview_slug", "site.preview_slug_page"):
            path = request.path
        else:
            path = request.args.get("path") or "/"

        # Attach tenant host to global context; resolution happens in the pipeline
        g.tenant_host = host
        g.tenant_path = path
