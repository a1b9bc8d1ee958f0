# blog_api/errors.py
"""
Excepciones de la API y su traducción a respuestas JSON.

Las rutas lanzan estas excepciones; los handlers registrados en
create_app las convierten en ``{"error": mensaje}`` con el status adecuado.
"""
from flask import current_app, jsonify
from sqlalchemy.exc import SQLAlchemyError

from blog_api.extensions import db


class ApiError(Exception):
    """Base de todos los errores que terminan en una respuesta HTTP."""

    status_code = 500
    message = "Error interno del servidor"

    def __init__(self, message=None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self):
        return {"error": self.message}


class ValidationError(ApiError):
    """Payload mal formado. Lleva sólo el mensaje del primer campo inválido."""

    status_code = 400
    message = "Datos inválidos"

    def __init__(self, message=None, field=None):
        self.field = field
        super().__init__(message)


class AuthenticationError(ApiError):
    # Mismo mensaje para email inexistente y contraseña incorrecta
    status_code = 401
    message = "Credenciales inválidas"


class MissingTokenError(ApiError):
    status_code = 401
    message = "Token requerido"


class InvalidTokenError(ApiError):
    """Firma inválida, token mal formado o expirado."""

    status_code = 403
    message = "Token inválido o expirado"


class NotFoundError(ApiError):
    status_code = 404
    message = "Recurso no encontrado"


class StoreError(ApiError):
    """Fallo de persistencia. No se reintenta."""

    status_code = 500


def register_error_handlers(app):
    @app.errorhandler(ApiError)
    def handle_api_error(error):
        if error.status_code >= 500:
            current_app.logger.exception("❌ %s", error)
        return jsonify(error.to_dict()), error.status_code

    @app.errorhandler(SQLAlchemyError)
    def handle_store_error(error):
        db.session.rollback()
        current_app.logger.exception("❌ Error de base de datos: %s", error)
        return jsonify(StoreError().to_dict()), StoreError.status_code
