# blog_api/auth/__init__.py
from .decorators import jwt_required
from .passwords import hash_password, verify_password
from .tokens import TokenIssuer, TokenSettings, TokenVerifier, init_tokens

__all__ = [
    "jwt_required",
    "hash_password",
    "verify_password",
    "TokenIssuer",
    "TokenSettings",
    "TokenVerifier",
    "init_tokens",
]
