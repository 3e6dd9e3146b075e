from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session
from app.database import get_db
from app.crud import user as crud
from app.exceptions import ConflictError, NotFoundError
from app.schemas.user import LoginResponse, UserCreate, UserLogin, UserResponse
from app.services.auth import (
    CurrentUser,
    authenticate_user,
    create_user_token,
    get_current_user,
)

router = APIRouter()


@router.post("/register", status_code=status.HTTP_201_CREATED)
def register(user: UserCreate, db: Session = Depends(get_db)):
    if crud.get_user_by_email(db, user.email):
        raise ConflictError("El correo ya está registrado")

    db_user = crud.create_user(db=db, user=user)
    return {
        "message": "Usuario registrado correctamente",
        "user": UserResponse.model_validate(db_user),
    }


@router.post("/login", response_model=LoginResponse)
def login(credentials: UserLogin, db: Session = Depends(get_db)):
    user = authenticate_user(db, credentials.email, credentials.password)
    if not user:
        # El frontend espera el flag autenticado junto al mensaje
        return JSONResponse(
            status_code=status.HTTP_401_UNAUTHORIZED,
            content={
                "message": "Correo o contraseña incorrectos",
                "authenticated": False,
            },
            headers={"WWW-Authenticate": "Bearer"},
        )

    return {
        "message": "Inicio de sesión correcto",
        "authenticated": True,
        "user": UserResponse.model_validate(user),
        "token": create_user_token(user),
        "token_type": "bearer",
    }


@router.get("/me")
def read_users_me(
    current_user: CurrentUser = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    db_user = crud.get_user(db, current_user.id)
    if db_user is None:
        raise NotFoundError("Usuario no encontrado")
    return {"message": "Usuario actual", "user": UserResponse.model_validate(db_user)}
