from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from .database import Database, LoadState
from .interfaces import Record
from .path_access import get_path, set_path

logger = logging.getLogger(__name__)

Seeds = Callable[[], list[Record]]
Criteria = Callable[[Record], bool] | Mapping[str, Any]

_MISSING = object()


def _same(left: Any, right: Any) -> bool:
    """
    Deep equality over JSON-like values where booleans never equal numbers.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if isinstance(left, Mapping) and isinstance(right, Mapping):
        if left.keys() != right.keys():
            return False
        return all(_same(left[key], right[key]) for key in left)
    if isinstance(left, (str, bytes)) or isinstance(right, (str, bytes)):
        return left == right
    if isinstance(left, Sequence) and isinstance(right, Sequence):
        if len(left) != len(right):
            return False
        return all(_same(a, b) for a, b in zip(left, right))
    return left == right


def _matcher(criteria: Criteria | None, fields: Mapping[str, Any]) -> Callable[[Record], bool]:
    if callable(criteria):
        if fields:
            raise TypeError("pass either a predicate or field values, not both")
        return criteria

    expected = {**(criteria or {}), **fields}

    def predicate(record: Record) -> bool:
        if not isinstance(record, Mapping):
            return False
        return all(_same(record.get(key, _MISSING), value) for key, value in expected.items())

    return predicate


class ModelData:
    """
    Handle over one record of a Model.

    Handles are not cached: every query builds new ones, and two handles over
    the same record share the underlying dict. `is_new` and `is_saved` are
    bookkeeping only.
    """

    def __init__(self, model: Model, data: Record, is_new: bool):
        self.model = model
        self.data = data
        self.is_new = is_new
        self.is_saved = not is_new

    @property
    def index(self) -> int:
        # First match wins when identifiers are duplicated.
        id_field = self.model.id_field
        own_id = self.data.get(id_field, _MISSING)
        for position, record in enumerate(self.model.data):
            if not isinstance(record, Mapping):
                continue
            if _same(record.get(id_field, _MISSING), own_id):
                return position
        return -1

    def get(self, path: str, default: Any = None) -> Any:
        return get_path(self.data, path, default)

    def set(self, path: str, value: Any) -> Any:
        self.is_saved = False
        return set_path(self.data, path, value)

    def save(self) -> "ModelData":
        index = self.index
        if index < 0:
            self.model.data.append(self.data)
        else:
            self.model.data[index] = self.data
        self.is_new = False
        self.is_saved = True
        self.model.save()
        return self

    def update(self, values: Mapping[str, Any]) -> "ModelData":
        for key, value in values.items():
            set_path(self.data, key, value)
        return self.save()

    def destroy(self) -> "ModelData":
        index = self.index
        if index >= 0:
            del self.model.data[index]
        # Persist even when nothing was removed.
        self.model.save()
        return self

    def value_of(self) -> Record:
        return self.data

    def __repr__(self) -> str:
        return f"ModelData({self.data!r}, is_new={self.is_new}, is_saved={self.is_saved})"


@dataclass(frozen=True)
class Model:
    """
    Query/update API over one collection of records.

    The collection is read lazily on first access to `data` and cached until
    `reload()`. Every write persists the whole collection.
    """

    db: Database
    seeds: Seeds | None = None
    id_field: str = "id"

    @property
    def state(self) -> LoadState:
        return self.db.state

    @property
    def data(self) -> list[Record]:
        if self.db.state is LoadState.UNLOADED:
            self.reload()
        return self.db.data if self.db.data is not None else []

    def save(self) -> "Model":
        self.db.write()
        return self

    def reload(self) -> "Model":
        self.db.read()
        if self.db.data is None:
            self.db.data = self.seeds() if self.seeds is not None else []
            logger.info("MODEL LOAD: seeded %d records for %r", len(self.db.data), self.db.adapter)
        else:
            logger.debug("MODEL LOAD: %d records from %r", len(self.db.data), self.db.adapter)
        return self

    def _wrap(self, records: Iterable[Record]) -> list[ModelData]:
        return [ModelData(self, record, is_new=False) for record in records]

    def all(self) -> list[ModelData]:
        return self._wrap(self.data)

    def filter(self, criteria: Criteria | None = None, **fields: Any) -> list[ModelData]:
        predicate = _matcher(criteria, fields)
        return self._wrap(record for record in self.data if predicate(record))

    def find(self, criteria: Criteria | None = None, **fields: Any) -> ModelData | None:
        predicate = _matcher(criteria, fields)
        for record in self.data:
            if predicate(record):
                return ModelData(self, record, is_new=False)
        return None

    def first(self) -> ModelData | None:
        data = self.data
        return ModelData(self, data[0], is_new=False) if data else None

    def last(self) -> ModelData | None:
        data = self.data
        return ModelData(self, data[-1], is_new=False) if data else None

    def create(self, initial: Record) -> ModelData:
        return ModelData(self, initial, is_new=True)

    def add(self, initial: Record) -> ModelData:
        return self.create(initial).save()
