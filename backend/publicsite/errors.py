from flask import current_app, jsonify, make_response, request
from werkzeug.exceptions import HTTPException

from publicsite.domain.exceptions import SiteNotFound, UpstreamFetchFailure
from publicsite.rendering.html import render_error_document, render_site_not_found


def _wants_json():
    return request.path.startswith("/api/")


def _json_error(name, message, status):
    response = jsonify({
        "error": name,
        "message": message
    })
    response.status_code = status
    response.headers["Cache-Control"] = "no-store"
    response.headers["Access-Control-Allow-Origin"] = "*"
    return response


def _html_error(html, status):
    response = make_response(html, status)
    response.headers["Content-Type"] = "text/html; charset=utf-8"
    response.headers["Cache-Control"] = "no-store"
    return response


def register_error_handlers(app):
    @app.errorhandler(SiteNotFound)
    def handle_site_not_found(error):
        current_app.logger.info("Site not found for host %r", error.host)
        if _wants_json():
            return _json_error("SiteNotFound", str(error), 404)
        return _html_error(render_site_not_found(), 404)

    @app.errorhandler(UpstreamFetchFailure)
    def handle_upstream_failure(error):
        current_app.logger.exception("Upstream failure during %s", error.operation)
        if _wants_json():
            return _json_error("UpstreamFetchFailure", "The site could not be loaded", 500)
        return _html_error(render_error_document(), 500)

    @app.errorhandler(Exception)
    def handle_unexpected(error):
        if isinstance(error, HTTPException):
            return error
        current_app.logger.exception("Unhandled error on %s", request.path)
        if _wants_json():
            return _json_error("InternalServerError", "Something went wrong", 500)
        return _html_error(render_error_document(), 500)
