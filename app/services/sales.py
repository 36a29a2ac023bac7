"""
Lógica de negocio de ventas.

Reglas:
- Antes de crear una venta el cliente debe existir y estar activo (si no, 404).
- total_value = quantity_items * value_item, calculado aquí al crear y al
  actualizar. Lo que no sea numérico cuenta como 0.
- Al actualizar no se vuelve a comprobar el cliente.
- Borrado lógico con active_sales. Borrar una venta ya inactiva da 404.
"""

import logging
import math
from typing import Any, Optional, Tuple

from app import schemas
from app.repositories import ClientRepository, SaleRepository
from app.services.base import BaseService, ServiceResult, guarded, serialize

logger = logging.getLogger(__name__)

# Rango de un INTEGER de 64 bits en la BD
MAX_QUANTITY = 2 ** 63 - 1
MIN_QUANTITY = -(2 ** 63)


def to_number(value: Any) -> float:
    """Convierte a número; None, texto no numérico, NaN o infinito valen 0."""
    if isinstance(value, bool):
        return float(value)
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if math.isnan(number) or math.isinf(number):
        return 0.0
    return number


def compute_totals(quantity_items: Any, value_item: Any) -> Tuple[int, float, float]:
    """Devuelve (cantidad, valor unitario, total) ya normalizados."""
    quantity = int(to_number(quantity_items))
    if not MIN_QUANTITY <= quantity <= MAX_QUANTITY:
        # Fuera de rango cuenta como no numérico
        quantity = 0
    unit_value = to_number(value_item)
    return quantity, unit_value, quantity * unit_value


class SalesService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.sales = SaleRepository(db)
        self.clients = ClientRepository(db)

    def _not_found(self, sale_id: int) -> ServiceResult:
        return ServiceResult(404, {"message": f"Venda não encontrada com o id: {sale_id}"})

    # Este método devuelve el texto del error en el 500, a diferencia del resto
    @guarded("Erro ao criar venda.", key="error", expose_error=True)
    def create_sales(self, data: schemas.SaleCreate) -> ServiceResult:
        client = self.clients.find_active(data.client_id)
        if client is None:
            return ServiceResult(404, {
                "message": f"Cliente não encontrado com o id: {data.client_id}, "
                           f"não é possível cadastrar a venda."
            })

        quantity, unit_value, total = compute_totals(data.quantity_items, data.value_item)
        values = data.model_dump()
        values.update(quantity_items=quantity, value_item=unit_value, total_value=total)

        sale = self.sales.create(values)
        logger.info("Venta %s creada para el cliente %s (total %.2f)", sale.id, client.id, total)
        return ServiceResult(201, serialize(schemas.SaleResponse, sale))

    @guarded("Erro ao listar vendas.")
    def list_sales(self, filters: Optional[dict] = None) -> ServiceResult:
        sales = self.sales.find_all(**(filters or {}))
        return ServiceResult(200, [serialize(schemas.SaleResponse, s) for s in sales])

    @guarded("Erro ao buscar vendas por ID.")
    def list_sales_by_id(self, sale_id: int) -> ServiceResult:
        sale = self.sales.get(sale_id)
        if sale is None:
            return self._not_found(sale_id)
        return ServiceResult(200, serialize(schemas.SaleResponse, sale))

    @guarded("Erro ao atualizar venda.")
    def update_sales_by_id(self, sale_id: int, patch: schemas.SaleUpdate) -> ServiceResult:
        sale = self.sales.get(sale_id)
        if sale is None:
            return self._not_found(sale_id)

        touched = patch.model_fields_set
        values = patch.model_dump(exclude_unset=True, exclude_none=True)

        # Solo se recalcula el total si cambia alguno de los dos factores
        if {"quantity_items", "value_item"} & touched:
            quantity = values.get("quantity_items", sale.quantity_items)
            unit_value = values.get("value_item", sale.value_item)
            quantity, unit_value, total = compute_totals(quantity, unit_value)
            values.update(quantity_items=quantity, value_item=unit_value, total_value=total)

        sale = self.sales.update(sale, values)
        return ServiceResult(200, {
            "message": "Venda atualizada com sucesso.",
            "updateSales": serialize(schemas.SaleResponse, sale),
        })

    @guarded("Erro ao deletar venda.")
    def delete_sales_by_id(self, sale_id: int) -> ServiceResult:
        sale = self.sales.get(sale_id)
        if sale is None or not sale.active_sales:
            return ServiceResult(404, {"message": f"Venda não encontrada ou deletada, com o id: {sale_id}"})

        sale.active_sales = False
        sale = self.sales.save(sale)
        return ServiceResult(200, {
            "message": "Venda deletada com sucesso.",
            "deleteSales": serialize(schemas.SaleResponse, sale),
        })
