"""Ports layer - Abstract interfaces (Protocols) for the application.

Ports define the contracts between the application core and external
adapters. They enable dependency injection and make the system testable.
"""

from .catalog import CatalogRepositoryPort
from .storage import ClockPort, ListStorePort

__all__ = [
    "CatalogRepositoryPort",
    "ListStorePort",
    "ClockPort",
]
