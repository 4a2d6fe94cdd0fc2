"""Protocols for data clients.

A data client performs the actual data access (HTTP API, database, in-memory
store) for one item type. Implementations raise the exceptions from
``datarepo.exceptions``: an ``HttpError`` subclass when the request cannot be
fulfilled, ``DataFormatError`` when a payload cannot be deserialized.
"""

from typing import Protocol, TypeVar, runtime_checkable

from ..models import (
    Document,
    Filter,
    PaginatedResponse,
    PaginationOptions,
    SortOption,
    SuccessApiResponse,
)

T = TypeVar("T")


@runtime_checkable
class DataClient(Protocol[T]):
    """Interface for synchronous data clients.

    Every method takes keyword arguments only. ``user_id`` scopes the call to
    one user's data partition; None means unscoped (global) data.
    """

    def create(self, *, item: T, user_id: str | None = None) -> SuccessApiResponse[T]:
        """Create an item.

        Returns:
            Envelope around the created item as stored by the backend.
        """
        ...

    def read(self, *, item_id: str, user_id: str | None = None) -> SuccessApiResponse[T]:
        """Read a single item by ID.

        Raises:
            NotFoundError: No item with this ID exists.
        """
        ...

    def read_all(
        self,
        *,
        user_id: str | None = None,
        filter: Filter | None = None,
        pagination: PaginationOptions | None = None,
        sort: list[SortOption] | None = None,
    ) -> SuccessApiResponse[PaginatedResponse[T]]:
        """Read a page of items matching an optional filter and sort order."""
        ...

    def update(
        self, *, item_id: str, item: T, user_id: str | None = None
    ) -> SuccessApiResponse[T]:
        """Replace the item stored under ``item_id``.

        Raises:
            NotFoundError: No item with this ID exists.
        """
        ...

    def delete(self, *, item_id: str, user_id: str | None = None) -> None:
        """Delete an item by ID.

        Raises:
            NotFoundError: No item with this ID exists.
        """
        ...

    def count(
        self, *, user_id: str | None = None, filter: Filter | None = None
    ) -> SuccessApiResponse[int]:
        """Count items matching an optional filter."""
        ...

    def aggregate(
        self, *, pipeline: list[Document], user_id: str | None = None
    ) -> SuccessApiResponse[list[Document]]:
        """Run an aggregation pipeline and return the resulting documents."""
        ...


@runtime_checkable
class AsyncDataClient(Protocol[T]):
    """Interface for asynchronous data clients.

    Same contract as DataClient, with every method a coroutine.
    """

    async def create(self, *, item: T, user_id: str | None = None) -> SuccessApiResponse[T]: ...

    async def read(
        self, *, item_id: str, user_id: str | None = None
    ) -> SuccessApiResponse[T]: ...

    async def read_all(
        self,
        *,
        user_id: str | None = None,
        filter: Filter | None = None,
        pagination: PaginationOptions | None = None,
        sort: list[SortOption] | None = None,
    ) -> SuccessApiResponse[PaginatedResponse[T]]: ...

    async def update(
        self, *, item_id: str, item: T, user_id: str | None = None
    ) -> SuccessApiResponse[T]: ...

    async def delete(self, *, item_id: str, user_id: str | None = None) -> None: ...

    async def count(
        self, *, user_id: str | None = None, filter: Filter | None = None
    ) -> SuccessApiResponse[int]: ...

    async def aggregate(
        self, *, pipeline: list[Document], user_id: str | None = None
    ) -> SuccessApiResponse[list[Document]]: ...
