"""Repository layer for data access."""

from .data_repository import AsyncDataRepository, DataRepository

__all__ = [
    "AsyncDataRepository",
    "DataRepository",
]
