# blog_api/schemas.py
# Esquemas de request (pydantic). Los campos se validan en el orden en que
# están declarados y sólo se reporta el primer error.
from typing import Any, Optional

from pydantic import BaseModel, EmailStr, Field, StrictStr, field_validator
from pydantic import ValidationError as PydanticValidationError

from blog_api.errors import ValidationError

PASSWORD_MIN_LENGTH = 6


class UserCreate(BaseModel):
    nome: StrictStr = Field(min_length=1)
    email: EmailStr
    senha: StrictStr = Field(min_length=PASSWORD_MIN_LENGTH)

    @field_validator("email", mode="wrap")
    @classmethod
    def keep_email_as_sent(cls, value, handler):
        # EmailStr valida pero normaliza el dominio; se guarda lo que llegó
        # para que el login compare contra el mismo string
        handler(value)
        return value


class LoginRequest(BaseModel):
    email: StrictStr
    senha: StrictStr


class PostCreate(BaseModel):
    titulo: StrictStr = Field(min_length=1, max_length=255)
    texto: StrictStr = Field(min_length=1)


def _error_message(error: dict) -> tuple:
    loc = error.get("loc") or ()
    field = str(loc[0]) if loc else None
    kind = error.get("type")
    ctx = error.get("ctx") or {}

    if field is None:
        return None, "El cuerpo debe ser un objeto JSON"
    if kind == "missing":
        return field, f"El campo {field} es obligatorio"
    if kind == "string_type":
        return field, f"El campo {field} debe ser texto"
    if kind == "string_too_short":
        if ctx.get("min_length", 1) <= 1:
            return field, f"El campo {field} no puede estar vacío"
        return field, f"El campo {field} debe tener al menos {ctx['min_length']} caracteres"
    if kind == "string_too_long":
        return field, f"El campo {field} debe tener como máximo {ctx.get('max_length')} caracteres"
    if field == "email":
        return field, "El campo email debe ser un email válido"
    return field, f"El campo {field} es inválido: {error.get('msg')}"


def validate(schema, payload: Optional[Any]):
    """Valida ``payload`` contra ``schema``.

    Devuelve la instancia del modelo o lanza ValidationError con el mensaje
    del primer campo que falla.
    """
    if payload is None:
        payload = {}
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        field, message = _error_message(e.errors()[0])
        raise ValidationError(message, field=field)
