"""
Base repository with generic CRUD operations over a store collection.

All entity-specific repositories inherit from this.
"""
import json
from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from placement_portal.core.exceptions import NotFoundException, ValidationException
from placement_portal.core.logging import get_logger
from placement_portal.core.store import PortalStore
from placement_portal.models.base import Record

logger = get_logger(__name__)

RecordType = TypeVar("RecordType", bound=Record)


def coerce_id(value: Any) -> Optional[int]:
    """
    Normalize an identifier to int, tolerating "7" vs 7.

    Returns None for anything that can't be an ID.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _matches(actual: Any, expected: Any) -> bool:
    if isinstance(actual, int) and not isinstance(actual, bool) and isinstance(expected, str):
        return actual == coerce_id(expected)
    return actual == expected


def validation_error(exc: ValidationError, message: str) -> ValidationException:
    return ValidationException(
        message=message,
        details=json.loads(exc.json(include_url=False)),
    )


class BaseRepository(Generic[RecordType]):
    """
    Base repository providing standard CRUD operations.

    Usage:
        class JobRepository(BaseRepository[Job]):
            def __init__(self):
                super().__init__(Job, "jobs", JobNotFoundException)
    """

    def __init__(
        self,
        model: Type[RecordType],
        collection: str,
        not_found: Type[NotFoundException] = NotFoundException,
    ):
        self.model = model
        self.collection = collection
        self.not_found = not_found

    async def get_all(
        self,
        store: PortalStore,
    ) -> List[RecordType]:
        """All records in collection order."""
        rows = await store.collection(self.collection).read()
        return self._parse_rows(rows)

    async def find(
        self,
        store: PortalStore,
        **filters: Any,
    ) -> List[RecordType]:
        """
        Records whose fields equal every non-None filter value, in
        collection order. Keys may be snake_case or camelCase. A filter
        on a field the entity doesn't have matches nothing.
        """
        active = {to_snake(k): v for k, v in filters.items() if v is not None}
        records = await self.get_all(store)
        if not active:
            return records
        if any(key not in self.model.model_fields for key in active):
            return []
        return [
            record
            for record in records
            if all(_matches(getattr(record, key), value) for key, value in active.items())
        ]

    async def get_by_id(
        self,
        store: PortalStore,
        id: Any,
    ) -> Optional[RecordType]:
        """Get a single record by ID, or None."""
        record_id = coerce_id(id)
        if record_id is None:
            return None
        for record in await self.get_all(store):
            if record.id == record_id:
                return record
        return None

    async def count(
        self,
        store: PortalStore,
    ) -> int:
        """Count of records that parse; matches what get_all returns."""
        return len(await self.get_all(store))

    async def create(
        self,
        store: PortalStore,
        **kwargs: Any,
    ) -> RecordType:
        """
        Create a new record with id = max(existing ids) + 1.

        Raises:
            ValidationException: If the data doesn't form a valid record.
        """
        async with store.collection(self.collection).transaction() as rows:
            self._check_create(rows, kwargs)
            new_id = max((coerce_id(row.get("id")) or 0 for row in rows), default=0) + 1
            data = self._prepare_create(dict(kwargs, id=new_id))
            try:
                instance = self.model.model_validate(data)
            except ValidationError as e:
                raise validation_error(e, f"Invalid {self.model.__name__} data") from e
            rows.append(instance.to_storage())
        return instance

    async def update(
        self,
        store: PortalStore,
        id: Any,
        /,
        **changes: Any,
    ) -> RecordType:
        """
        Shallow-merge changes into an existing record.

        Raises:
            NotFoundException: If no record has this ID (entity-specific subclass).
            ValidationException: If the merged record is invalid.
        """
        changes.pop("id", None)

        def merge(record: RecordType) -> RecordType:
            data = record.model_dump()
            data.update(changes)
            return self.model.model_validate(data)

        def check(rows: List[Dict[str, Any]], index: int) -> None:
            self._check_update(rows, index, changes)

        return await self.apply(store, id, merge, check)

    async def apply(
        self,
        store: PortalStore,
        id: Any,
        mutation,
        check=None,
    ) -> RecordType:
        """
        Replace a record with mutation(record) and persist the collection.
        check(rows, index), if given, runs first under the same lock.

        Raises:
            NotFoundException: If no record has this ID.
            ValidationException: If the mutated record is invalid.
        """
        record_id = coerce_id(id)
        async with store.collection(self.collection).transaction() as rows:
            index = self._index_of(rows, record_id)
            if index is None:
                raise self.not_found()
            if check is not None:
                check(rows, index)
            try:
                instance = mutation(self.model.model_validate(rows[index]))
            except ValidationError as e:
                raise validation_error(e, f"Invalid {self.model.__name__} data") from e
            rows[index] = instance.to_storage()
        return instance

    async def delete(
        self,
        store: PortalStore,
        id: Any,
    ) -> bool:
        """Remove a record by ID. Returns False if it didn't exist."""
        record_id = coerce_id(id)
        async with store.collection(self.collection).transaction() as rows:
            index = self._index_of(rows, record_id)
            if index is None:
                return False
            del rows[index]
        return True

    def _check_create(self, rows: List[Dict[str, Any]], data: Dict[str, Any]) -> None:
        """Hook run under the collection lock before a create; raise to reject."""

    def _check_update(
        self, rows: List[Dict[str, Any]], index: int, changes: Dict[str, Any]
    ) -> None:
        """Hook run under the collection lock before an update; raise to reject."""

    def _prepare_create(self, data: Dict[str, Any]) -> Dict[str, Any]:
        """Hook for entity-specific defaults computed from the new ID."""
        return data

    @staticmethod
    def _index_of(rows: List[Dict[str, Any]], record_id: Optional[int]) -> Optional[int]:
        if record_id is None:
            return None
        for index, row in enumerate(rows):
            if coerce_id(row.get("id")) == record_id:
                return index
        return None

    def _parse_rows(self, rows: List[Dict[str, Any]]) -> List[RecordType]:
        records = []
        for row in rows:
            try:
                records.append(self.model.model_validate(row))
            except ValidationError as e:
                logger.warning(
                    "record_invalid",
                    collection=self.collection,
                    record_id=row.get("id"),
                    errors=e.error_count(),
                )
        return records
