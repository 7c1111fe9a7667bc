"""
Balnearios Entities

Read-only domain entities for cities, resorts and amenities, plus the
flattened search result (resort + owning city).
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class Ciudad:
    """
    City owning zero or more resorts.

    Attributes:
        id_ciudad: Store identifier
        nombre: Display name
        img: Optional image reference
    """

    id_ciudad: int
    nombre: str
    img: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Servicio:
    """Amenity type a resort may offer (Wi-Fi, Pileta, ...)."""

    id_servicio: int
    nombre: str
    imagen: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Balneario:
    """
    Resort as stored, with the raw owning city identifier.

    Returned by the city search, where the city is already the filter key.
    """

    id_balneario: int
    nombre: str
    direccion: str | None = None
    telefono: str | None = None
    imagen: str | None = None
    id_ciudad: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class AsociacionServicio:
    """Pair stating that a resort offers an amenity."""

    id_balneario: int
    id_servicio: int


@dataclass(frozen=True)
class BalnearioConCiudad:
    """
    Search result: resort fields flattened with its owning city.

    ``ciudad`` and ``ciudad_img`` are None when the resort has no
    resolvable owning city.
    """

    id_balneario: int
    nombre: str
    direccion: str | None = None
    telefono: str | None = None
    imagen: str | None = None
    ciudad: str | None = None
    ciudad_img: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
