from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime

from app.enums.user_role import UserRole


class UserBase(BaseModel):
    name: str
    email: EmailStr


class UserCreate(UserBase):
    password: str = Field(..., min_length=6)


class UserLogin(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class UserInDB(UserBase):
    id: int
    role: UserRole = UserRole.USUARIO
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class UserResponse(UserInDB):
    pass


class UserPasswordUpdate(BaseModel):
    password: str = Field(..., min_length=6)

    class Config:
        json_schema_extra = {"example": {"password": "new_secure_password456"}}


class UserRoleUpdate(BaseModel):
    # Se valida en el servicio para responder con el mensaje de rol inválido
    role: str


class LoginResponse(BaseModel):
    message: str
    authenticated: bool
    user: UserResponse
    token: str
    token_type: str = "bearer"


class UsersResponse(BaseModel):
    message: str
    users: List[UserResponse]
