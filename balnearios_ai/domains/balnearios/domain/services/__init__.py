"""
Balnearios Domain Services

Pure business rules with no I/O.
"""

from .matching_service import MatchingService
from .membership_service import MembershipService

__all__ = [
    "MatchingService",
    "MembershipService",
]
