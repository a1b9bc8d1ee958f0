# blog_api/__init__.py
import logging

from flask import Flask

from blog_api.config import Config
from blog_api.extensions import db, migrate, cors
from blog_api.auth.tokens import init_tokens
from blog_api.errors import register_error_handlers
from blog_api.routes import register_routes  # <- usar el init de routes


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    logging.basicConfig(
        level=app.config["LOG_LEVEL"],
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.logger.setLevel(app.config["LOG_LEVEL"])

    # Inicializar extensiones
    db.init_app(app)
    migrate.init_app(app, db)
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}},
        allow_headers=["Content-Type", "Authorization"]
    )

    # 🔐 Emisor y verificador de JWT, construidos una sola vez
    init_tokens(app)

    register_error_handlers(app)
    register_routes(app)

    # Para que flask-migrate vea los modelos
    from blog_api import models  # noqa: F401

    return app
