from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app import schemas
from app.auth import get_current_user
from app.database import get_db
from app.routers import as_response
from app.services import SalesService

router = APIRouter(prefix="/sales", tags=["sales"], dependencies=[Depends(get_current_user)])


def get_sales_service(db: Session = Depends(get_db)) -> SalesService:
    return SalesService(db)


# totalValue se calcula en el servicio, nunca se toma del body
@router.post("", status_code=201)
def create_sale(sale: schemas.SaleCreate, service: SalesService = Depends(get_sales_service)):
    return as_response(service.create_sales(sale))


@router.get("")
def list_sales(
    name_product: Optional[str] = Query(default=None, alias="nameProduct"),
    client_id: Optional[int] = Query(default=None, alias="clientId"),
    active_sales: Optional[bool] = Query(default=None, alias="activeSales"),
    service: SalesService = Depends(get_sales_service),
):
    filters = {"name_product": name_product, "client_id": client_id, "active_sales": active_sales}
    return as_response(service.list_sales({k: v for k, v in filters.items() if v is not None}))


@router.get("/{sale_id}")
def get_sale(sale_id: int, service: SalesService = Depends(get_sales_service)):
    return as_response(service.list_sales_by_id(sale_id))


@router.put("/{sale_id}")
def update_sale(sale_id: int, patch: schemas.SaleUpdate, service: SalesService = Depends(get_sales_service)):
    return as_response(service.update_sales_by_id(sale_id, patch))


# Borrar dos veces la misma venta devuelve 404 la segunda vez
@router.delete("/{sale_id}")
def delete_sale(sale_id: int, service: SalesService = Depends(get_sales_service)):
    return as_response(service.delete_sales_by_id(sale_id))
