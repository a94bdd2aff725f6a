from contextlib import asynccontextmanager
from typing import Any, AsyncIterator, Generic, List, Optional, Tuple, Type, TypeVar

from loguru import logger
from pydantic import ValidationError

from tire_pickup.Core.Models.base import CamelModel
from tire_pickup.Infrastructure.Storage.json_file import JsonFile

T = TypeVar("T", bound=CamelModel)


class JsonCollectionRepository(Generic[T]):
    """A list of entities stored as one JSON array."""

    model: Type[T]

    def __init__(self, data_path: str):
        self.data_path = data_path
        self.file = JsonFile(data_path)

    async def ensure_file_exists(self):
        if not self.file.exists():
            await self.file.write([])

    async def _load(self) -> Tuple[List[T], List[Any]]:
        """Returns the valid entities and, separately, the raw records that failed validation."""
        data = await self.file.read(default=[])
        if not isinstance(data, list):
            logger.warning(f"{self.data_path} does not hold a JSON array, treating as empty")
            return [], []

        items = []
        unreadable = []
        for raw in data:
            try:
                items.append(self.model(**raw))
            except (TypeError, ValidationError) as e:
                logger.warning(f"Skipping malformed {self.model.__name__} record: {e}")
                unreadable.append(raw)
        return items, unreadable

    async def list_all(self) -> List[T]:
        items, _ = await self._load()
        return items

    async def get(self, item_id: str) -> Optional[T]:
        for item in await self.list_all():
            if item.id == item_id:
                return item
        return None

    @asynccontextmanager
    async def batch(self) -> AsyncIterator[List[T]]:
        async with self.file.lock:
            items, unreadable = await self._load()
            yield items
            # Records that failed validation are written back untouched
            await self.file.write([item.to_json() for item in items] + unreadable)
