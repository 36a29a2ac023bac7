import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from app import schemas
from app.repositories import ClientRepository
from app.services.base import BaseService, ServiceResult, guarded, serialize
from app.services.users import EMAIL_TAKEN

logger = logging.getLogger(__name__)


class ClientService(BaseService):
    """Mismas reglas que los usuarios, sin password. Borrado lógico con active_client."""

    def __init__(self, db):
        super().__init__(db)
        self.clients = ClientRepository(db)

    def _not_found(self, client_id: int) -> ServiceResult:
        return ServiceResult(404, {"message": f"Cliente não encontrado com o id: {client_id}"})

    @guarded("Erro ao criar cliente.", key="error")
    def create_client(self, data: schemas.ClientCreate) -> ServiceResult:
        if self.clients.find_by_email(data.email):
            return ServiceResult(400, {"error": EMAIL_TAKEN})

        try:
            client = self.clients.create(data.model_dump())
        except IntegrityError:
            self.db.rollback()
            logger.warning("Email duplicado detectado por la BD: %s", data.email)
            return ServiceResult(400, {"error": EMAIL_TAKEN})

        logger.info("Cliente %s creado", client.id)
        return ServiceResult(201, serialize(schemas.ClientResponse, client))

    @guarded("Erro ao listar clientes.")
    def list_client(self, filters: Optional[dict] = None) -> ServiceResult:
        clients = self.clients.find_all(**(filters or {}))
        return ServiceResult(200, [serialize(schemas.ClientResponse, c) for c in clients])

    @guarded("Erro ao buscar cliente por ID.")
    def list_client_id(self, client_id: int) -> ServiceResult:
        client = self.clients.get(client_id)
        if client is None:
            return self._not_found(client_id)
        return ServiceResult(200, serialize(schemas.ClientResponse, client))

    @guarded("Erro ao atualizar cliente.")
    def update_client_id(self, client_id: int, patch: schemas.ClientUpdate) -> ServiceResult:
        client = self.clients.get(client_id)
        if client is None:
            return self._not_found(client_id)

        client = self.clients.update(client, patch.model_dump(exclude_unset=True, exclude_none=True))
        return ServiceResult(200, {
            "message": "Cliente atualizado com sucesso.",
            "updateClint": serialize(schemas.ClientResponse, client),
        })

    @guarded("Erro ao deletar cliente.")
    def delete_client_id(self, client_id: int) -> ServiceResult:
        client = self.clients.get(client_id)
        if client is None:
            return self._not_found(client_id)

        client.active_client = False
        client = self.clients.save(client)
        return ServiceResult(200, {
            "message": "Cliente deletado com sucesso.",
            "deleteClient": serialize(schemas.ClientResponse, client),
        })
