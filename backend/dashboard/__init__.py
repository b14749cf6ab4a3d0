import click
from flask import Flask, send_file, send_from_directory, current_app
from .config import config_by_name
from .extensions import db, migrate, jwt
from .api.v1 import v1_bp
from .errors import register_error_handlers
from .utils.media import upload_folder
from flask_swagger_ui import get_swaggerui_blueprint
import os

# Register models with SQLAlchemy metadata
from .models import audit_log, site_document, user  # noqa: F401


def create_app(config_name: str = "development") -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])

    # -------------------------------------------------
    # Extensions
    # -------------------------------------------------
    db.init_app(app)
    migrate.init_app(app, db)
    jwt.init_app(app)

    # -------------------------------------------------
    # API Blueprints
    # -------------------------------------------------
    # Mounted at /api so existing editor builds keep working.
    app.register_blueprint(v1_bp, url_prefix="/api")
    register_error_handlers(app)

    # -------------------------------------------------
    # Uploaded media
    # -------------------------------------------------
    @app.route("/uploads/<path:filename>", methods=["GET"], endpoint="uploads")
    def serve_upload(filename):
        return send_from_directory(upload_folder(), filename)

    # -------------------------------------------------
    # Serve OpenAPI YAML
    # -------------------------------------------------
    @app.route("/openapi/dashboard.yaml", methods=["GET"], endpoint="openapi_dashboard")
    def serve_openapi():
        spec_path = os.path.join(
            current_app.root_path,
            "api",
            "v1",
            "dashboard_openapi.yaml",
        )

        if not os.path.exists(spec_path):
            raise FileNotFoundError("dashboard_openapi.yaml not found")

        return send_file(
            spec_path,
            mimetype="application/yaml",
            as_attachment=False,
        )

    # -------------------------------------------------
    # Swagger UI
    # -------------------------------------------------
    SWAGGER_URL = "/swagger"
    API_URL = "/openapi/dashboard.yaml"

    swaggerui_blueprint = get_swaggerui_blueprint(
        SWAGGER_URL,
        API_URL,
        config={
            "app_name": "Dashboard Content API",
            "deepLinking": True,
            "persistAuthorization": True,
        },
    )

    app.register_blueprint(swaggerui_blueprint, url_prefix=SWAGGER_URL)

    # -------------------------------------------------
    # CLI
    # -------------------------------------------------
    @app.cli.command("create-admin")
    @click.option("--username", default=None)
    @click.password_option()
    def create_admin(username, password):
        """Create or reset the operator account."""
        from .application.users.ensure_admin import ensure_admin_user

        user = ensure_admin_user(
            username=username or app.config["ADMIN_USERNAME"],
            password=password,
        )
        click.echo(f"Operator account '{user.username}' is ready.")

    return app
