"""
Acceso tipado a las tablas users, clients y sales.

Cada repositorio envuelve la sesión de SQLAlchemy de la petición y hace
commit en cada escritura: no hay transacciones que abarquen varias
operaciones.
"""

from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy.orm import Session

from app import models

ModelT = TypeVar("ModelT")


class Repository(Generic[ModelT]):
    model: Type[ModelT]

    def __init__(self, db: Session):
        self.db = db

    def get(self, entity_id: int) -> Optional[ModelT]:
        return self.db.get(self.model, entity_id)

    def find_one(self, **filters) -> Optional[ModelT]:
        return self.db.query(self.model).filter_by(**filters).first()

    def find_all(self, **filters) -> List[ModelT]:
        # Sin filtros devuelve todo, también los registros inactivos
        return self.db.query(self.model).filter_by(**filters).order_by(self.model.id).all()

    def create(self, data: dict) -> ModelT:
        entity = self.model(**data)
        return self.save(entity)

    def update(self, entity: ModelT, data: dict) -> ModelT:
        for field, value in data.items():
            setattr(entity, field, value)
        return self.save(entity)

    def save(self, entity: ModelT) -> ModelT:
        self.db.add(entity)
        self.db.commit()
        self.db.refresh(entity)
        return entity


class UserRepository(Repository[models.User]):
    model = models.User

    def find_by_email(self, email: str) -> Optional[models.User]:
        return self.find_one(email=email)


class ClientRepository(Repository[models.Client]):
    model = models.Client

    def find_by_email(self, email: str) -> Optional[models.Client]:
        return self.find_one(email=email)

    def find_active(self, client_id: int) -> Optional[models.Client]:
        return self.find_one(id=client_id, active_client=True)


class SaleRepository(Repository[models.Sale]):
    model = models.Sale
