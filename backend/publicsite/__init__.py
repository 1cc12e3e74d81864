from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate
from .api.v1 import v1_bp
from .api.site import site_bp
from .middleware.tenant_middleware import tenant_middleware
from .errors import register_error_handlers
from .delivery.pipeline import SitePipeline
from .delivery.static import StaticDocumentRenderer
from .repositories import SqlAlchemySiteReader
from flask_swagger_ui import get_swaggerui_blueprint
import os


def create_app(config_name: str = "development", reader=None) -> Flask:
    """
    ``reader`` replaces the database-backed SiteReader; embedding hosts and
    the test-suite pass an InMemorySiteReader.
    """
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)

    # -------------------------------------------------
    # Rendering pipeline
    # -------------------------------------------------
    if reader is None:
        reader = SqlAlchemySiteReader(app)

    pipeline = SitePipeline.from_config(reader, app.config)
    app.extensions["site_pipeline"] = pipeline
    app.extensions["static_renderer"] = StaticDocumentRenderer(
        pipeline,
        timeout=app.config["RENDER_TIMEOUT_SECONDS"],
        max_workers=app.config["FETCH_MAX_WORKERS"],
    )

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    tenant_middleware(app)

    # -------------------------------------------------
    # Blueprints
    # -------------------------------------------------
    app.register_blueprint(site_bp)
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO TENANT)
    # -------------------------------------------------
    @app.route("/openapi/public.yaml", methods=["GET"], endpoint="openapi_public")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "public_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("public_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/public.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Public Site Renderer",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
