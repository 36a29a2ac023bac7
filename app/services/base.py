import functools
import logging
from dataclasses import dataclass
from typing import Any, Type

from pydantic import BaseModel
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


@dataclass
class ServiceResult:
    """Resultado de una operación: código HTTP y cuerpo JSON."""

    status: int
    data: Any


def serialize(schema: Type[BaseModel], entity) -> dict:
    return schema.model_validate(entity).model_dump(mode="json", by_alias=True)


def guarded(message: str, key: str = "message", expose_error: bool = False):
    """
    Captura cualquier error inesperado de la operación y lo convierte en un 500.

    Con expose_error=True el cuerpo lleva el texto del error en lugar del
    mensaje fijo.
    """

    def decorator(func):
        @functools.wraps(func)
        def wrapper(self, *args, **kwargs):
            try:
                return func(self, *args, **kwargs)
            except Exception as exc:
                self.db.rollback()
                logger.exception("%s.%s falló", type(self).__name__, func.__name__)
                if expose_error:
                    return ServiceResult(500, {"error": str(exc)})
                return ServiceResult(500, {key: message})

        return wrapper

    return decorator


class BaseService:
    def __init__(self, db: Session):
        self.db = db
