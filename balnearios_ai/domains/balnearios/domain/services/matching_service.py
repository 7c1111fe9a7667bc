"""
Matching Service

Domain service deciding which stored name a free-text fragment refers to.
Matching is a case-insensitive substring test; among several matches an
exact (case-insensitive) name wins, otherwise the first candidate in the
store's natural order.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import TypeVar

T = TypeVar("T")


class MatchingService:
    """Case-insensitive fragment matching with a deterministic tie-break."""

    @staticmethod
    def normalizar(texto: str | None) -> str:
        return (texto or "").strip().lower()

    @classmethod
    def contiene(cls, nombre: str | None, fragmento: str) -> bool:
        """True if ``fragmento`` is a case-insensitive substring of ``nombre``."""
        return cls.normalizar(fragmento) in cls.normalizar(nombre)

    @classmethod
    def preferir_exacta(
        cls,
        fragmento: str,
        candidatos: Sequence[T],
        nombre: Callable[[T], str | None],
    ) -> T | None:
        """
        Pick one candidate out of an already-matched, ordered sequence.

        Args:
            fragmento: Text the user typed
            candidatos: Matches in the store's natural order
            nombre: Accessor for the candidate's display name

        Returns:
            The exact-name match if any, else the first candidate, else None
        """
        if not candidatos:
            return None

        objetivo = cls.normalizar(fragmento)
        for candidato in candidatos:
            if cls.normalizar(nombre(candidato)) == objetivo:
                return candidato
        return candidatos[0]

    @classmethod
    def seleccionar(
        cls,
        fragmento: str,
        candidatos: Sequence[T],
        nombre: Callable[[T], str | None],
    ) -> T | None:
        """
        Pick the candidate ``fragmento`` refers to from a mixed candidate list
        (e.g. the union of matches for several fragments).

        Returns:
            Chosen candidate, or None when no candidate contains the fragment
        """
        coincidencias = [c for c in candidatos if cls.contiene(nombre(c), fragmento)]
        return cls.preferir_exacta(fragmento, coincidencias, nombre)
