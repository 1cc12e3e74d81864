from functools import wraps
from flask import current_app, make_response, request

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, OPTIONS",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def cors_enabled(fn):
    """Adds permissive CORS headers and answers the OPTIONS preflight."""
    @wraps(fn)
    def wrapper(*args, **kwargs):
        if request.method == "OPTIONS":
            response = make_response("", 204)
        else:
            response = make_response(fn(*args, **kwargs))

        response.headers.update(CORS_HEADERS)
        return response
    return wrapper


def edge_cacheable(fn):
    """
    Public caching for successful renders only. Error and not-found
    responses are never cached so a fixed tenant is visible at once.
    """
    @wraps(fn)
    def wrapper(*args, **kwargs):
        response = make_response(fn(*args, **kwargs))

        if response.status_code == 200 and request.method == "GET":
            max_age = current_app.config["CACHE_MAX_AGE"]
            response.headers["Cache-Control"] = f"public, max-age={max_age}"
        else:
            response.headers["Cache-Control"] = "no-store"

        response.headers["X-Content-Type-Options"] = "nosniff"
        return response
    return wrapper
