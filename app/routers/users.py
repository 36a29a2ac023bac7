from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app import schemas
from app.auth import get_current_user
from app.database import get_db
from app.routers import as_response
from app.services import UserService

router = APIRouter(prefix="/users", tags=["users"])


def get_user_service(db: Session = Depends(get_db)) -> UserService:
    return UserService(db)


# 1. POST: Crear Usuario (única ruta sin autenticación)
@router.post("", status_code=201)
def create_user(user: schemas.UserCreate, service: UserService = Depends(get_user_service)):
    return as_response(service.create_user(user))


# 2. GET: Obtener todos (también los borrados lógicamente)
@router.get("", dependencies=[Depends(get_current_user)])
def list_users(
    name: Optional[str] = None,
    email: Optional[str] = None,
    active_user: Optional[bool] = Query(default=None, alias="activeUser"),
    service: UserService = Depends(get_user_service),
):
    filters = {"name": name, "email": email, "active_user": active_user}
    return as_response(service.list_users({k: v for k, v in filters.items() if v is not None}))


# 3. GET: Obtener uno por ID
@router.get("/{user_id}", dependencies=[Depends(get_current_user)])
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return as_response(service.get_user_by_id(user_id))


# 4. PUT: Actualizar cualquier campo
@router.put("/{user_id}", dependencies=[Depends(get_current_user)])
def update_user(user_id: int, patch: schemas.UserUpdate, service: UserService = Depends(get_user_service)):
    return as_response(service.update_user_by_id(user_id, patch))


# 5. DELETE: Borrado Lógico
@router.delete("/{user_id}", dependencies=[Depends(get_current_user)])
def delete_user(user_id: int, service: UserService = Depends(get_user_service)):
    return as_response(service.delete_user_by_id(user_id))
