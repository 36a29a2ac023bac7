from fastapi.responses import JSONResponse

from app.services import ServiceResult


def as_response(result: ServiceResult) -> JSONResponse:
    """Traduce el resultado del servicio a la respuesta HTTP."""
    return JSONResponse(status_code=result.status, content=result.data)
