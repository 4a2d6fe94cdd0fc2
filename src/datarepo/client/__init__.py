"""Data client interfaces consumed by repositories."""

from .protocol import AsyncDataClient, DataClient

__all__ = [
    "AsyncDataClient",
    "DataClient",
]
