"""
Core domain building blocks shared by every domain package.
"""

from balnearios_ai.core.domain.exceptions import DataStoreException, DomainException

__all__ = [
    "DomainException",
    "DataStoreException",
]
