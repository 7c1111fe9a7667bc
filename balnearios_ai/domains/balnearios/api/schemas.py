"""
Balnearios API Schemas

Pydantic schemas for API request/response validation.
"""

from pydantic import BaseModel, ConfigDict, Field


class CiudadResponse(BaseModel):
    """City response schema."""

    model_config = ConfigDict(from_attributes=True)

    id_ciudad: int
    nombre: str
    img: str | None = None


class BalnearioResponse(BaseModel):
    """Resort response schema (no city join)."""

    model_config = ConfigDict(from_attributes=True)

    id_balneario: int
    nombre: str
    direccion: str | None = None
    telefono: str | None = None
    imagen: str | None = None
    id_ciudad: int | None = None


class BalnearioConCiudadResponse(BaseModel):
    """Resort joined with its owning city."""

    model_config = ConfigDict(from_attributes=True)

    id_balneario: int
    nombre: str
    direccion: str | None = None
    telefono: str | None = None
    imagen: str | None = None
    ciudad: str | None = None
    ciudad_img: str | None = None


class FiltrarBalneariosRequest(BaseModel):
    """Filter request: every service is required; city is optional."""

    servicios: list[str] = Field(..., min_length=1, description="Servicios requeridos (todos)")
    ciudad: str | None = Field(default=None, description="Ciudad (fragmento del nombre)")
