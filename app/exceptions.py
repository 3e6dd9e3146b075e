"""Errores de dominio de la API de Caminante."""


class CaminanteError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(CaminanteError):
    def __init__(self, message: str = "Datos inválidos"):
        super().__init__(message, 400)


class AuthenticationError(CaminanteError):
    def __init__(self, message: str = "Token requerido"):
        super().__init__(message, 401)


class AuthorizationError(CaminanteError):
    def __init__(self, message: str = "Acceso denegado"):
        super().__init__(message, 403)


class NotFoundError(CaminanteError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class ConflictError(CaminanteError):
    def __init__(self, message: str):
        super().__init__(message, 409)


class StoreError(CaminanteError):
    def __init__(self, message: str = "Error interno"):
        super().__init__(message, 500)
