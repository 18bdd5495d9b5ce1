from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict

from .database import Database
from .disk_store import JSONFileAdapter
from .interfaces import Adapter
from .memory_store import MemoryAdapter
from .model import Model, Seeds
from .settings import get_settings

logger = logging.getLogger(__name__)


class InMemoryModelOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    seeds: Callable[[], list[dict[str, Any]]] | None = None
    id_field: str | None = None


class JSONFileModelOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    file: Path
    seeds: Callable[[], list[dict[str, Any]]] | None = None
    id_field: str | None = None


def _build(adapter: Adapter, seeds: Seeds | None, id_field: str | None) -> Model:
    return Model(db=Database(adapter), seeds=seeds, id_field=id_field or get_settings().id_field)


def define_model(
    *,
    seeds: Seeds | None = None,
    file: Path | str | None = None,
    id_field: str | None = None,
) -> Model:
    """
    Define a collection model.

    With `file` the collection lives in a JSON file at that path, otherwise in
    process memory. `seeds` populates the collection when nothing is persisted yet.
    """
    if file is None:
        return define_in_memory_model(InMemoryModelOptions(seeds=seeds, id_field=id_field))
    return define_in_json_file_model(JSONFileModelOptions(file=Path(file), seeds=seeds, id_field=id_field))


def define_in_memory_model(options: InMemoryModelOptions | Mapping[str, Any]) -> Model:
    opts = InMemoryModelOptions.model_validate(options)
    return _build(MemoryAdapter(), opts.seeds, opts.id_field)


def define_in_json_file_model(options: JSONFileModelOptions | Mapping[str, Any]) -> Model:
    opts = JSONFileModelOptions.model_validate(options)
    settings = get_settings()
    adapter = JSONFileAdapter(opts.file, indent=settings.json_indent, sort_keys=settings.json_sort_keys)
    logger.debug("MODEL DEFINE: %s", opts.file)
    return _build(adapter, opts.seeds, opts.id_field)
