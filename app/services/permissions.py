"""
Autorización centralizada.

Cada endpoint declara la capacidad que necesita como dependencia de FastAPI en
lugar de comparar el rol a mano dentro del handler.
"""
from typing import Callable

from fastapi import Depends

from app.enums.user_role import UserRole
from app.exceptions import AuthorizationError
from app.services.auth import CurrentUser, get_current_user


def is_admin(user: CurrentUser) -> bool:
    return user.role == UserRole.ADMIN.value


def can_manage_user(user: CurrentUser, target_user_id: int) -> bool:
    """Un usuario puede gestionar su propia cuenta; un admin, cualquiera."""
    return user.id == target_user_id or is_admin(user)


def require_role(role: UserRole) -> Callable[..., CurrentUser]:
    def dependency(current_user: CurrentUser = Depends(get_current_user)):
        if current_user.role != role.value:
            raise AuthorizationError()
        return current_user

    return dependency


require_admin = require_role(UserRole.ADMIN)


def require_self_or_admin(
    user_id: int, current_user: CurrentUser = Depends(get_current_user)
) -> CurrentUser:
    # user_id se toma del path del endpoint que usa esta dependencia
    if not can_manage_user(current_user, user_id):
        raise AuthorizationError()
    return current_user
