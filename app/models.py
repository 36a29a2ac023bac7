from sqlalchemy import Column, Integer, String, Boolean, Float, DateTime, ForeignKey, func
from sqlalchemy.orm import relationship

from app.database import Base


class TimestampMixin:
    # createdAt / updatedAt los asigna el servidor
    created_at = Column("createdAt", DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at = Column(
        "updatedAt",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class User(TimestampMixin, Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    # Texto plano: se compara tal cual en la autenticación Basic
    password = Column(String, nullable=False)

    # Borrado lógico: si active_user es False el usuario sigue en la BD
    active_user = Column("activeUser", Boolean, default=True, nullable=False)


class Client(TimestampMixin, Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String, nullable=False)
    email = Column(String, unique=True, index=True, nullable=False)
    active_client = Column("activeClient", Boolean, default=True, nullable=False)

    sales = relationship("Sale", back_populates="client", passive_deletes=True)


class Sale(TimestampMixin, Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name_product = Column("nameProduct", String, nullable=False)
    quantity_items = Column("quantityItems", Integer, nullable=False)
    value_item = Column("valueItem", Float, nullable=False)
    # Derivado: siempre quantity_items * value_item
    total_value = Column("totalValue", Float, nullable=False)
    active_sales = Column("activeSales", Boolean, default=True, nullable=False)

    # Si el id del cliente cambia se propaga; si el cliente se borra queda en NULL
    client_id = Column(
        "clientId",
        Integer,
        ForeignKey("clients.id", onupdate="CASCADE", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )

    client = relationship("Client", back_populates="sales")
