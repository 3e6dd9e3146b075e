from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from typing import List, Optional
import json


class RouteBase(BaseModel):
    destination: str = Field(..., min_length=1)
    price: float = Field(..., ge=0)
    schedules: List[str] = []
    map_url: Optional[str] = None


class RouteCreate(RouteBase):
    # Tamaño de la grilla de asientos; si se omite se usa la configuración
    rows: Optional[int] = Field(None, ge=1, le=100)
    columns: Optional[int] = Field(None, ge=1, le=20)


class RouteUpdate(BaseModel):
    destination: Optional[str] = Field(None, min_length=1)
    price: Optional[float] = Field(None, ge=0)
    schedules: Optional[List[str]] = None
    map_url: Optional[str] = None


class RouteResponse(RouteBase):
    id: int
    created_at: Optional[datetime] = None

    @field_validator("schedules", mode="before")
    @classmethod
    def decode_schedules(cls, value):
        # Rutas antiguas guardaban los horarios como texto JSON
        if isinstance(value, str):
            try:
                decoded = json.loads(value)
            except json.JSONDecodeError:
                # Texto libre: se conserva como un único horario
                return [value]
            return decoded if isinstance(decoded, list) else [value]
        if value is None:
            return []
        return value

    class Config:
        from_attributes = True
