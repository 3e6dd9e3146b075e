from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
import logging

from app.database import get_db
from app.crud import user as crud
from app.enums.user_role import UserRole
from app.exceptions import NotFoundError, ValidationError
from app.schemas.user import (
    UserPasswordUpdate,
    UserResponse,
    UserRoleUpdate,
    UsersResponse,
)
from app.services.auth import CurrentUser
from app.services.permissions import require_admin, require_self_or_admin

router = APIRouter()

logger = logging.getLogger(__name__)


@router.get("", response_model=UsersResponse)
def read_users(
    skip: int = 0,
    limit: int = 100,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    """
    Lista todos los usuarios. Solo para administradores.
    """
    users = crud.get_users(db, skip=skip, limit=limit)
    return {
        "message": "Usuarios obtenidos correctamente",
        "users": [UserResponse.model_validate(user) for user in users],
    }


@router.put("/{user_id}/password")
def change_password(
    user_id: int,
    password_data: UserPasswordUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_self_or_admin),
):
    """
    Cambia la contraseña de un usuario. El propio usuario o un admin.
    """
    if crud.update_password(db, user_id, password_data.password) is None:
        raise NotFoundError("Usuario no encontrado")

    logger.info("Password for user %s changed by user %s", user_id, current_user.id)
    return {"message": "Contraseña actualizada correctamente"}


@router.put("/{user_id}/role")
def change_role(
    user_id: int,
    role_data: UserRoleUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    try:
        role = UserRole(role_data.role)
    except ValueError:
        raise ValidationError("Rol inválido")

    db_user = crud.update_role(db, user_id, role)
    if db_user is None:
        raise NotFoundError("Usuario no encontrado")

    return {
        "message": "Rol actualizado correctamente",
        "user": UserResponse.model_validate(db_user),
    }


@router.delete("/{user_id}")
def delete_user(
    user_id: int,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(require_admin),
):
    # Un admin no puede borrarse a sí mismo
    if user_id == current_user.id:
        raise ValidationError("No puedes eliminar tu propio usuario")

    if not crud.delete_user(db, user_id):
        raise NotFoundError("Usuario no encontrado")

    return {"message": "Usuario eliminado correctamente"}
