# blog_api/auth/tokens.py
"""
Emisión y verificación de JWT.

La configuración de firma se construye una sola vez en create_app
(``TokenSettings.from_config``) y se inyecta en el emisor y el verificador.
Ninguno de los dos lee variables de entorno ni estado global.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app

from blog_api.errors import InvalidTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TokenSettings:
    secret_key: str = field(repr=False)
    algorithm: str = "HS256"
    lifetime: timedelta = timedelta(hours=1)

    @classmethod
    def from_config(cls, config):
        secret = config.get("JWT_SECRET_KEY")
        if not secret:
            raise RuntimeError("JWT_SECRET_KEY no está configurada")
        return cls(
            secret_key=secret,
            algorithm=config.get("JWT_ALGORITHM", "HS256"),
            lifetime=config.get("JWT_EXPIRES", timedelta(hours=1)),
        )


class TokenIssuer:
    def __init__(self, settings: TokenSettings):
        self._settings = settings

    def issue(self, subject_id, now: datetime = None) -> str:
        now = now or datetime.now(tz=timezone.utc)
        payload = {
            "sub": str(subject_id),
            "iat": now,
            "exp": now + self._settings.lifetime,
        }
        return jwt.encode(payload, self._settings.secret_key, algorithm=self._settings.algorithm)


class TokenVerifier:
    def __init__(self, settings: TokenSettings):
        self._settings = settings

    def verify(self, token: str) -> str:
        """Devuelve el ``sub`` del token o lanza InvalidTokenError."""
        try:
            payload = jwt.decode(
                token,
                self._settings.secret_key,
                algorithms=[self._settings.algorithm],
                options={"require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            logger.info("Token expirado")
            raise InvalidTokenError("Token expirado")
        except jwt.InvalidTokenError as e:
            logger.info("Token inválido: %s", e)
            raise InvalidTokenError()
        return payload["sub"]


def init_tokens(app):
    settings = TokenSettings.from_config(app.config)
    app.extensions["token_issuer"] = TokenIssuer(settings)
    app.extensions["token_verifier"] = TokenVerifier(settings)


def get_token_issuer() -> TokenIssuer:
    return current_app.extensions["token_issuer"]


def get_token_verifier() -> TokenVerifier:
    return current_app.extensions["token_verifier"]
