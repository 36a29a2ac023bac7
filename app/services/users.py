"""
Lógica de negocio de usuarios.

- No se permite crear un usuario con un email ya registrado (400).
- El borrado es lógico: active_user pasa a False y el registro se mantiene.
- Los errores internos se devuelven como 500 con un mensaje fijo.
"""

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError

from app import schemas
from app.repositories import UserRepository
from app.services.base import BaseService, ServiceResult, guarded, serialize

logger = logging.getLogger(__name__)

EMAIL_TAKEN = "E-mail já cadastrado."


class UserService(BaseService):
    def __init__(self, db):
        super().__init__(db)
        self.users = UserRepository(db)

    def _not_found(self, user_id: int) -> ServiceResult:
        return ServiceResult(404, {"message": f"Usuário não encontrado com o id: {user_id}"})

    @guarded("Erro ao criar usuario.", key="error")
    def create_user(self, data: schemas.UserCreate) -> ServiceResult:
        if self.users.find_by_email(data.email):
            return ServiceResult(400, {"error": EMAIL_TAKEN})

        try:
            user = self.users.create(data.model_dump())
        except IntegrityError:
            # Otra petición registró el mismo email entre la consulta y el insert
            self.db.rollback()
            logger.warning("Email duplicado detectado por la BD: %s", data.email)
            return ServiceResult(400, {"error": EMAIL_TAKEN})

        logger.info("Usuario %s creado", user.id)
        return ServiceResult(201, serialize(schemas.UserResponse, user))

    @guarded("Erro ao listar usuários.")
    def list_users(self, filters: Optional[dict] = None) -> ServiceResult:
        users = self.users.find_all(**(filters or {}))
        return ServiceResult(200, [serialize(schemas.UserResponse, u) for u in users])

    @guarded("Erro ao buscar usuário por ID.")
    def get_user_by_id(self, user_id: int) -> ServiceResult:
        user = self.users.get(user_id)
        if user is None:
            return self._not_found(user_id)
        return ServiceResult(200, serialize(schemas.UserResponse, user))

    @guarded("Erro ao atualizar usuário.")
    def update_user_by_id(self, user_id: int, patch: schemas.UserUpdate) -> ServiceResult:
        user = self.users.get(user_id)
        if user is None:
            return self._not_found(user_id)

        # No se vuelve a validar que el email sea único
        user = self.users.update(user, patch.model_dump(exclude_unset=True, exclude_none=True))
        return ServiceResult(200, {
            "message": "Usuário atualizado com sucesso.",
            "updateUser": serialize(schemas.UserResponse, user),
        })

    @guarded("Erro ao deletar usuário.")
    def delete_user_by_id(self, user_id: int) -> ServiceResult:
        user = self.users.get(user_id)
        if user is None:
            return self._not_found(user_id)

        # No usamos db.delete(user). Solo cambiamos el estado.
        user.active_user = False
        user = self.users.save(user)
        return ServiceResult(200, {
            "message": "Usuário deletado com sucesso.",
            "deleteUser": serialize(schemas.UserResponse, user),
        })
