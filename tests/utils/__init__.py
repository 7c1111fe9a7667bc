"""Test utilities and helpers."""

from tests.utils.factories import (
    Dataset,
    asociar,
    cargar_dataset,
    create_balneario,
    create_ciudad,
    create_servicio,
    crear_dataset_demo,
    crear_dataset_miramar,
)
from tests.utils.fakes import InMemoryBalnearioRepository

__all__ = [
    "Dataset",
    "InMemoryBalnearioRepository",
    "asociar",
    "cargar_dataset",
    "create_balneario",
    "create_ciudad",
    "create_servicio",
    "crear_dataset_demo",
    "crear_dataset_miramar",
]
