"""
Autenticación Basic.

Cada petición protegida se vuelve a autenticar contra la tabla users:
no hay sesiones ni tokens.

- Formato: Authorization: Basic <base64(email:password)>
- Se separa email y password por el primer ':'.
- El password se compara en texto plano con el guardado en la BD.
"""

import base64
import logging
import secrets
from typing import Optional, Tuple

from fastapi import Depends, Request, Security
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from app import models
from app.database import get_db
from app.exceptions import AuthenticationError
from app.repositories import UserRepository

logger = logging.getLogger(__name__)

BASIC_PREFIX = "Basic "

MISSING_CREDENTIALS = "Autorização ausente ou invalida."
USER_NOT_FOUND = "Usuário não encontrado."
WRONG_PASSWORD = "Senha incorreta."

# Leemos el header crudo para poder devolver nuestros propios mensajes
authorization_header = APIKeyHeader(name="Authorization", auto_error=False)


def decode_basic_credentials(authorization: Optional[str]) -> Tuple[str, str]:
    """
    Extrae (email, password) del header Authorization.

    Lanza AuthenticationError si el header falta, no usa el esquema Basic
    o el base64 no se puede decodificar.
    """
    if not authorization or not authorization.startswith(BASIC_PREFIX):
        raise AuthenticationError(MISSING_CREDENTIALS)

    encoded = authorization[len(BASIC_PREFIX):].strip()
    try:
        credentials = base64.b64decode(encoded, validate=True).decode("utf-8")
    except ValueError:
        # binascii.Error y UnicodeDecodeError heredan de ValueError
        raise AuthenticationError(MISSING_CREDENTIALS)

    email, _, password = credentials.partition(":")
    return email, password


def _passwords_match(supplied: str, stored: str) -> bool:
    return secrets.compare_digest(supplied.encode("utf-8"), stored.encode("utf-8"))


def authenticate(db: Session, authorization: Optional[str]) -> models.User:
    email, password = decode_basic_credentials(authorization)

    user = UserRepository(db).find_by_email(email)
    if user is None:
        logger.info("Autenticación rechazada: email desconocido %r", email)
        raise AuthenticationError(USER_NOT_FOUND)

    if not _passwords_match(password, user.password):
        logger.info("Autenticación rechazada: password incorrecto para %r", email)
        raise AuthenticationError(WRONG_PASSWORD)

    return user


def get_current_user(
    request: Request,
    authorization: Optional[str] = Security(authorization_header),
    db: Session = Depends(get_db),
) -> models.User:
    """Dependencia de FastAPI para las rutas protegidas."""
    user = authenticate(db, authorization)
    request.state.user = user
    return user
