#!/usr/bin/env python3
"""
Carga datos de ejemplo (ciudades, balnearios y servicios) para desarrollo local.

Uso:
    DATABASE_URL=sqlite+aiosqlite:///./balnearios.db python scripts/seed_balnearios.py
    python scripts/seed_balnearios.py --reset
"""

import argparse
import asyncio
import logging

from sqlalchemy import func, insert, select

from balnearios_ai.config.settings import get_settings
from balnearios_ai.core.shared.logger import configure_logging
from balnearios_ai.database import AsyncSessionLocal, async_engine, create_tables, drop_tables
from balnearios_ai.models.db import Balneario, Ciudad, Servicio, balneario_servicio_association

logger = logging.getLogger(__name__)

CIUDADES = [
    {"id_ciudad": 1, "nombre": "Miramar", "img": "miramar.jpg"},
    {"id_ciudad": 2, "nombre": "Necochea", "img": "necochea.jpg"},
    {"id_ciudad": 3, "nombre": "Mar del Plata", "img": "mardelplata.jpg"},
    {"id_ciudad": 4, "nombre": "Mar de Ajó", "img": None},
]

SERVICIOS = [
    {"id_servicio": 100, "nombre": "Wi-Fi", "imagen": "wifi.png"},
    {"id_servicio": 101, "nombre": "Pileta", "imagen": "pileta.png"},
    {"id_servicio": 102, "nombre": "Estacionamiento", "imagen": "estacionamiento.png"},
    {"id_servicio": 103, "nombre": "Restaurante", "imagen": "restaurante.png"},
    {"id_servicio": 104, "nombre": "Carpas", "imagen": "carpas.png"},
]

BALNEARIOS = [
    {"id_balneario": 10, "nombre": "Sol y Mar", "direccion": "Costanera 1200", "telefono": "2291-420000",
     "imagen": "solymar.jpg", "id_ciudad": 1},
    {"id_balneario": 11, "nombre": "Las Gaviotas", "direccion": "Av. 9 y 40", "telefono": None,
     "imagen": None, "id_ciudad": 1},
    {"id_balneario": 12, "nombre": "Parador Médano", "direccion": "Av. 2 y 87", "telefono": "2262-431111",
     "imagen": "medano.jpg", "id_ciudad": 2},
    {"id_balneario": 13, "nombre": "Playa Grande Club", "direccion": "Bv. Marítimo 4500", "telefono": "223-4865000",
     "imagen": "playagrande.jpg", "id_ciudad": 3},
    {"id_balneario": 14, "nombre": "Punta Mogotes 7", "direccion": "Av. Martínez de Hoz 4300", "telefono": None,
     "imagen": None, "id_ciudad": 3},
]

ASOCIACIONES = [
    (10, 100), (10, 101), (10, 103),
    (11, 100), (11, 104),
    (12, 101), (12, 102),
    (13, 100), (13, 101), (13, 102), (13, 103),
    (14, 104),
]


async def seed(reset: bool = False) -> None:
    if reset:
        await drop_tables(async_engine)
    await create_tables(async_engine)

    async with AsyncSessionLocal() as session:
        existentes = await session.scalar(select(func.count()).select_from(Ciudad))
        if existentes:
            logger.info(f"Ya hay {existentes} ciudades cargadas, no se agregan datos (usar --reset)")
            return

        session.add_all(Ciudad(**fila) for fila in CIUDADES)
        session.add_all(Servicio(**fila) for fila in SERVICIOS)
        session.add_all(Balneario(**fila) for fila in BALNEARIOS)
        await session.flush()

        await session.execute(
            insert(balneario_servicio_association),
            [{"id_balneario": b, "id_servicio": s} for b, s in ASOCIACIONES],
        )
        await session.commit()

    logger.info(
        f"Datos cargados: {len(CIUDADES)} ciudades, {len(BALNEARIOS)} balnearios, "
        f"{len(SERVICIOS)} servicios, {len(ASOCIACIONES)} asociaciones"
    )


def main() -> None:
    parser = argparse.ArgumentParser(description="Carga datos de ejemplo de balnearios")
    parser.add_argument("--reset", action="store_true", help="Borra y recrea las tablas antes de cargar")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(level=settings.LOG_LEVEL, format_type=settings.LOG_FORMAT)

    async def run() -> None:
        try:
            await seed(reset=args.reset)
        finally:
            await async_engine.dispose()

    asyncio.run(run())


if __name__ == "__main__":
    main()
