"""
Shared Domain Layer
Pure domain contracts with no framework dependencies
"""
from shared.domain.base_entity import BaseEntity

__all__ = [
    "BaseEntity",
]
