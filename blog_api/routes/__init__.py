# blog_api/routes/__init__.py
from flask import Flask


def register_routes(app: Flask):
    """
    Registrar todos los blueprints de la carpeta routes bajo /api.
    Llamá a register_routes(app) desde create_app().
    """
    # Import local para evitar problemas de import circular al inicializar la app
    from .users import users_bp
    from .auth import auth_bp
    from .post_routes import post_bp
    app.register_blueprint(users_bp, url_prefix="/api")
    app.register_blueprint(auth_bp, url_prefix="/api")
    app.register_blueprint(post_bp, url_prefix="/api")
