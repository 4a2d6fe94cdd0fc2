"""Data models shared by data clients and repositories."""

from .enums import SortOrder
from .query import Document, Filter, PaginationOptions, SortOption
from .response import PaginatedResponse, ResponseMetadata, SuccessApiResponse

__all__ = [
    "Document",
    "Filter",
    "PaginatedResponse",
    "PaginationOptions",
    "ResponseMetadata",
    "SortOption",
    "SortOrder",
    "SuccessApiResponse",
]
