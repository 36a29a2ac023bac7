from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app import schemas
from app.auth import get_current_user
from app.database import get_db
from app.routers import as_response
from app.services import ClientService

# Todas las rutas de clientes requieren Basic Auth
router = APIRouter(prefix="/client", tags=["clients"], dependencies=[Depends(get_current_user)])


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    return ClientService(db)


@router.post("", status_code=201)
def create_client(client: schemas.ClientCreate, service: ClientService = Depends(get_client_service)):
    return as_response(service.create_client(client))


@router.get("")
def list_clients(
    name: Optional[str] = None,
    email: Optional[str] = None,
    active_client: Optional[bool] = Query(default=None, alias="activeClient"),
    service: ClientService = Depends(get_client_service),
):
    filters = {"name": name, "email": email, "active_client": active_client}
    return as_response(service.list_client({k: v for k, v in filters.items() if v is not None}))


@router.get("/{client_id}")
def get_client(client_id: int, service: ClientService = Depends(get_client_service)):
    return as_response(service.list_client_id(client_id))


@router.put("/{client_id}")
def update_client(client_id: int, patch: schemas.ClientUpdate, service: ClientService = Depends(get_client_service)):
    return as_response(service.update_client_id(client_id, patch))


@router.delete("/{client_id}")
def delete_client(client_id: int, service: ClientService = Depends(get_client_service)):
    return as_response(service.delete_client_id(client_id))
