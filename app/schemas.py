from datetime import datetime
from typing import Annotated, Any, Optional

from email_validator import validate_email
from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# En el JSON los campos van en camelCase (activeUser, nameProduct, ...)
class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def _check_email(value: str) -> str:
    # Se valida el formato pero se guarda el email tal cual llegó:
    # la autenticación lo busca por coincidencia exacta
    validate_email(value, check_deliverability=False)
    return value


Email = Annotated[str, AfterValidator(_check_email)]


# --- USUARIOS ---

# Esquema para recibir datos (Crear Usuario)
class UserCreate(CamelModel):
    name: str = Field(min_length=1)
    email: Email
    password: str = Field(min_length=1)
    active_user: bool = True


# Cualquier campo se puede modificar, incluido activeUser
class UserUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[Email] = None
    password: Optional[str] = Field(default=None, min_length=1)
    active_user: Optional[bool] = None


# Esquema para responder datos (Ocultamos el password)
class UserResponse(CamelModel):
    id: int
    name: str
    email: str
    active_user: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- CLIENTES ---

class ClientCreate(CamelModel):
    name: str = Field(min_length=1)
    email: Email
    active_client: bool = True


class ClientUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[Email] = None
    active_client: Optional[bool] = None


class ClientResponse(CamelModel):
    id: int
    name: str
    email: str
    active_client: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# --- VENTAS ---

# quantityItems y valueItem se aceptan tal cual llegan: lo que no sea
# numérico se convierte en 0 al calcular totalValue.
# totalValue nunca se acepta del cliente.
class SaleCreate(CamelModel):
    name_product: str = Field(min_length=1)
    quantity_items: Any = None
    value_item: Any = None
    client_id: int
    active_sales: bool = True


class SaleUpdate(CamelModel):
    name_product: Optional[str] = Field(default=None, min_length=1)
    quantity_items: Any = None
    value_item: Any = None
    client_id: Optional[int] = None
    active_sales: Optional[bool] = None


class SaleResponse(CamelModel):
    id: int
    name_product: str
    quantity_items: int
    value_item: float
    total_value: float
    active_sales: bool
    client_id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
