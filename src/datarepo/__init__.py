"""Generic data-access repository over pluggable data clients."""

from .client import AsyncDataClient, DataClient
from .exceptions import (
    BadRequestError,
    ConflictError,
    DataFormatError,
    ForbiddenError,
    HttpError,
    InvalidInputError,
    NetworkError,
    NotFoundError,
    ServerError,
    UnauthorizedError,
    UnknownError,
)
from .models import (
    Document,
    Filter,
    PaginatedResponse,
    PaginationOptions,
    ResponseMetadata,
    SortOption,
    SortOrder,
    SuccessApiResponse,
)
from .repositories import AsyncDataRepository, DataRepository

__version__ = "0.1.0"

__all__ = [
    "AsyncDataClient",
    "AsyncDataRepository",
    "BadRequestError",
    "ConflictError",
    "DataClient",
    "DataFormatError",
    "DataRepository",
    "Document",
    "Filter",
    "ForbiddenError",
    "HttpError",
    "InvalidInputError",
    "NetworkError",
    "NotFoundError",
    "PaginatedResponse",
    "PaginationOptions",
    "ResponseMetadata",
    "ServerError",
    "SortOption",
    "SortOrder",
    "SuccessApiResponse",
    "UnauthorizedError",
    "UnknownError",
]
