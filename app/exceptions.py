"""
Excepciones propias de la API.
"""


class SalesApiError(Exception):
    """Clase base para los errores de la API."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class AuthenticationError(SalesApiError):
    """Credenciales Basic ausentes, mal formadas o incorrectas."""

    status_code = 401
