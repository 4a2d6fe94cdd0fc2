"""Generic repositories that delegate to an injected data client."""

from __future__ import annotations

import logging
from typing import Generic, TypeVar

from ..client import AsyncDataClient, DataClient
from ..models import Document, Filter, PaginatedResponse, PaginationOptions, SortOption

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DataRepository(Generic[T]):
    """Repository for items of type T backed by a DataClient.

    Each method makes exactly one call to the client with the arguments it
    was given and returns the payload of the client's SuccessApiResponse.

    Errors raised by the client (HttpError subclasses such as NotFoundError,
    DataFormatError, or anything else) propagate unchanged. The repository
    does no validation, retries or locking of its own; it is as safe for
    concurrent use as the client it wraps.
    """

    def __init__(self, data_client: DataClient[T]) -> None:
        """Initialize the repository.

        Args:
            data_client: Client performing the actual data access
        """
        self._data_client = data_client

    def create(self, item: T, user_id: str | None = None) -> T:
        """Create an item.

        Args:
            item: The item to create
            user_id: Optional user scope

        Returns:
            The created item as returned by the client.
        """
        logger.debug("create: user_id=%s", user_id)
        response = self._data_client.create(item=item, user_id=user_id)
        return response.data

    def read(self, item_id: str, user_id: str | None = None) -> T:
        """Read a single item by ID.

        Args:
            item_id: The item identifier
            user_id: Optional user scope

        Returns:
            The item.

        Raises:
            NotFoundError: Raised by the client when the item does not exist.
        """
        logger.debug("read: %s user_id=%s", item_id, user_id)
        response = self._data_client.read(item_id=item_id, user_id=user_id)
        return response.data

    def read_all(
        self,
        user_id: str | None = None,
        filter: Filter | None = None,
        pagination: PaginationOptions | None = None,
        sort: list[SortOption] | None = None,
    ) -> PaginatedResponse[T]:
        """Read a page of items.

        Filter, pagination and sort are forwarded verbatim; unset values are
        forwarded as None so the client applies its own defaults.

        Args:
            user_id: Optional user scope
            filter: Field constraints, opaque to the repository
            pagination: Cursor and page size
            sort: Sort fields, applied in list order

        Returns:
            The page of items with its cursor and has_more flag.
        """
        logger.debug(
            "read_all: user_id=%s filter=%s pagination=%s sort=%s",
            user_id,
            filter,
            pagination,
            sort,
        )
        response = self._data_client.read_all(
            user_id=user_id,
            filter=filter,
            pagination=pagination,
            sort=sort,
        )
        return response.data

    def update(self, item_id: str, item: T, user_id: str | None = None) -> T:
        """Update the item stored under ``item_id``.

        Args:
            item_id: The item identifier
            item: The replacement item
            user_id: Optional user scope

        Returns:
            The updated item as returned by the client.

        Raises:
            NotFoundError: Raised by the client when the item does not exist.
        """
        logger.debug("update: %s user_id=%s", item_id, user_id)
        response = self._data_client.update(item_id=item_id, item=item, user_id=user_id)
        return response.data

    def delete(self, item_id: str, user_id: str | None = None) -> None:
        """Delete an item by ID.

        Args:
            item_id: The item identifier
            user_id: Optional user scope

        Raises:
            NotFoundError: Raised by the client when the item does not exist.
        """
        logger.debug("delete: %s user_id=%s", item_id, user_id)
        self._data_client.delete(item_id=item_id, user_id=user_id)

    def count(self, filter: Filter | None = None, user_id: str | None = None) -> int:
        """Count items matching an optional filter.

        Args:
            filter: Field constraints, opaque to the repository
            user_id: Optional user scope

        Returns:
            The number of matching items.
        """
        logger.debug("count: user_id=%s filter=%s", user_id, filter)
        response = self._data_client.count(user_id=user_id, filter=filter)
        return response.data

    def aggregate(self, pipeline: list[Document], user_id: str | None = None) -> list[Document]:
        """Run an aggregation pipeline.

        Args:
            pipeline: Ordered aggregation stages, passed to the client as-is
            user_id: Optional user scope

        Returns:
            The resulting documents.
        """
        logger.debug("aggregate: pipeline=%s user_id=%s", pipeline, user_id)
        response = self._data_client.aggregate(pipeline=pipeline, user_id=user_id)
        return response.data


class AsyncDataRepository(Generic[T]):
    """Repository for items of type T backed by an AsyncDataClient.

    Same contract as DataRepository. The only suspension points are the
    awaited client calls; timeouts and cancellation are left to the client.
    """

    def __init__(self, data_client: AsyncDataClient[T]) -> None:
        self._data_client = data_client

    async def create(self, item: T, user_id: str | None = None) -> T:
        logger.debug("create: user_id=%s", user_id)
        response = await self._data_client.create(item=item, user_id=user_id)
        return response.data

    async def read(self, item_id: str, user_id: str | None = None) -> T:
        logger.debug("read: %s user_id=%s", item_id, user_id)
        response = await self._data_client.read(item_id=item_id, user_id=user_id)
        return response.data

    async def read_all(
        self,
        user_id: str | None = None,
        filter: Filter | None = None,
        pagination: PaginationOptions | None = None,
        sort: list[SortOption] | None = None,
    ) -> PaginatedResponse[T]:
        logger.debug(
            "read_all: user_id=%s filter=%s pagination=%s sort=%s",
            user_id,
            filter,
            pagination,
            sort,
        )
        response = await self._data_client.read_all(
            user_id=user_id,
            filter=filter,
            pagination=pagination,
            sort=sort,
        )
        return response.data

    async def update(self, item_id: str, item: T, user_id: str | None = None) -> T:
        logger.debug("update: %s user_id=%s", item_id, user_id)
        response = await self._data_client.update(item_id=item_id, item=item, user_id=user_id)
        return response.data

    async def delete(self, item_id: str, user_id: str | None = None) -> None:
        logger.debug("delete: %s user_id=%s", item_id, user_id)
        await self._data_client.delete(item_id=item_id, user_id=user_id)

    async def count(self, filter: Filter | None = None, user_id: str | None = None) -> int:
        logger.debug("count: user_id=%s filter=%s", user_id, filter)
        response = await self._data_client.count(user_id=user_id, filter=filter)
        return response.data

    async def aggregate(
        self, pipeline: list[Document], user_id: str | None = None
    ) -> list[Document]:
        logger.debug("aggregate: pipeline=%s user_id=%s", pipeline, user_id)
        response = await self._data_client.aggregate(pipeline=pipeline, user_id=user_id)
        return response.data
