from app.services.base import ServiceResult
from app.services.clients import ClientService
from app.services.sales import SalesService
from app.services.users import UserService

__all__ = ["ServiceResult", "UserService", "ClientService", "SalesService"]
