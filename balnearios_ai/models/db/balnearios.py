"""
Modelos de ciudades, balnearios y servicios.

Las tablas pertenecen al almacén externo (Supabase/PostgreSQL); acá solo se
mapean para consultarlas.
"""

from typing import List, Optional

from sqlalchemy import Column, ForeignKey, Integer, String, Table, Text
from sqlalchemy.orm import Mapped, relationship

from .base import Base

# Tabla de asociación balneario <-> servicio (many-to-many, sin pares duplicados)
balneario_servicio_association = Table(
    "balnearios_servicios",
    Base.metadata,
    Column("id_balneario", Integer, ForeignKey("balnearios.id_balneario"), primary_key=True),
    Column("id_servicio", Integer, ForeignKey("servicios.id_servicio"), primary_key=True),
)


class Ciudad(Base):
    """Ciudades (Miramar, Necochea, Mar del Plata, etc.)"""

    __tablename__ = "ciudades"

    id_ciudad = Column(Integer, primary_key=True)
    nombre = Column(String(150), nullable=False, index=True)
    img = Column(Text)

    # Relationships
    balnearios: Mapped[List["Balneario"]] = relationship("Balneario", back_populates="ciudad")


class Balneario(Base):
    """Balnearios, cada uno opcionalmente asociado a una ciudad"""

    __tablename__ = "balnearios"

    id_balneario = Column(Integer, primary_key=True)
    nombre = Column(String(200), nullable=False, index=True)
    direccion = Column(String(255))
    telefono = Column(String(50))
    imagen = Column(Text)
    id_ciudad = Column(Integer, ForeignKey("ciudades.id_ciudad"), index=True)

    # Relationships
    ciudad: Mapped[Optional["Ciudad"]] = relationship("Ciudad", back_populates="balnearios")
    servicios: Mapped[List["Servicio"]] = relationship(
        "Servicio", secondary=balneario_servicio_association, back_populates="balnearios"
    )


class Servicio(Base):
    """Servicios que un balneario puede ofrecer (Wi-Fi, Pileta, Estacionamiento)"""

    __tablename__ = "servicios"

    id_servicio = Column(Integer, primary_key=True)
    nombre = Column(String(150), nullable=False, index=True)
    imagen = Column(Text)

    # Relationships
    balnearios: Mapped[List["Balneario"]] = relationship(
        "Balneario", secondary=balneario_servicio_association, back_populates="servicios"
    )
