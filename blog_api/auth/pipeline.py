# blog_api/auth/pipeline.py
"""
Pipeline explícito de handlers para interceptar requests.

Cada handler recibe el contexto actual y devuelve ``Continue(contexto)``
para pasar al siguiente, o ``Terminate(respuesta)`` para cortar ahí.
"""
import logging
from dataclasses import dataclass, field, replace
from typing import Callable, Mapping, Optional, Sequence, Union

from blog_api.errors import ApiError, MissingTokenError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RequestContext:
    headers: Mapping[str, str] = field(default_factory=dict)
    token: Optional[str] = None
    user_id: Optional[str] = None


@dataclass(frozen=True)
class Continue:
    context: RequestContext


@dataclass(frozen=True)
class Terminate:
    body: dict
    status: int

    @classmethod
    def from_error(cls, error: ApiError):
        return cls(body=error.to_dict(), status=error.status_code)


Result = Union[Continue, Terminate]
Handler = Callable[[RequestContext], Result]


def run_pipeline(handlers: Sequence[Handler], context: RequestContext) -> Result:
    result = Continue(context)
    for handler in handlers:
        result = handler(result.context)
        if isinstance(result, Terminate):
            break
    return result


def extract_bearer_token(header):
    """Token de un header ``Bearer <token>``, o None si no tiene esa forma."""
    if not header:
        return None
    scheme, _, token = header.strip().partition(" ")
    if scheme != "Bearer":
        return None
    token = token.strip()
    return token or None


def require_bearer_token(context: RequestContext) -> Result:
    token = extract_bearer_token(context.headers.get("Authorization"))
    if token is None:
        logger.debug("⚠️ Request sin Authorization válido")
        return Terminate.from_error(MissingTokenError())
    return Continue(replace(context, token=token))


def verify_bearer_token(verifier) -> Handler:
    def handler(context: RequestContext) -> Result:
        try:
            subject = verifier.verify(context.token)
        except ApiError as e:
            return Terminate.from_error(e)
        return Continue(replace(context, user_id=subject))
    return handler


def bearer_gate(verifier) -> Sequence[Handler]:
    return (require_bearer_token, verify_bearer_token(verifier))
