from enum import Enum


class UserRole(str, Enum):
    """Roles de usuario de Caminante"""

    ADMIN = "admin"
    USUARIO = "usuario"
