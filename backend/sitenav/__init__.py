import logging
import os
from flask import Flask, send_file, current_app
from .config import config_by_name
from .extensions import db, migrate, menu_cache
from .api.v1 import v1_bp
from .middleware.site_middleware import site_middleware
from .errors import register_error_handlers
from flask_swagger_ui import get_swaggerui_blueprint


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    app.logger.setLevel(getattr(logging, app.config["LOG_LEVEL"], logging.INFO))

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    menu_cache.init_app(app)

    # Register models with the metadata
    from . import models  # noqa: F401

    # -------------------------------------------------
    # Middleware
    # -------------------------------------------------
    site_middleware(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    app.register_blueprint(v1_bp, url_prefix="/api/v1")
    register_error_handlers(app)

    # -------------------------------------------------
    # Serve OpenAPI YAML (PUBLIC, NO SITE)
    # -------------------------------------------------
    @app.route("/openapi/navigation.yaml", methods=["GET"], endpoint="openapi_navigation")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "navigation_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("navigation_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/navigation.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Site Navigation API",
            "deepLinking": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    return app
