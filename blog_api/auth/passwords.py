# blog_api/auth/passwords.py
from flask import current_app
from werkzeug.security import generate_password_hash, check_password_hash

DEFAULT_METHOD = "pbkdf2:sha256:600000"


def hash_password(plaintext, method=None):
    """Hash salado de la contraseña. El costo sale de PASSWORD_HASH_METHOD."""
    if method is None:
        method = current_app.config.get("PASSWORD_HASH_METHOD", DEFAULT_METHOD)
    return generate_password_hash(plaintext, method=method)


def verify_password(plaintext, password_hash):
    """True si coincide. Nunca lanza por un hash vacío o desconocido."""
    if not password_hash:
        return False
    try:
        return check_password_hash(password_hash, plaintext)
    except ValueError:
        return False
