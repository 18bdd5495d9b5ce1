from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .definitions import (
    InMemoryModelOptions,
    JSONFileModelOptions,
    define_in_json_file_model,
    define_in_memory_model,
)
from .model import Model
from .paths import collection_file

Schema = dict[str, Model]


class InMemorySchemaOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    models: dict[str, InMemoryModelOptions] = Field(default_factory=dict)


class SchemaFileModelOptions(BaseModel):
    """
    Like JSONFileModelOptions, but `file` may be left out: the model then lives
    at <data_dir>/<name><file_suffix>.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    file: Path | None = None
    seeds: Callable[[], list[dict[str, Any]]] | None = None
    id_field: str | None = None


class JSONFileSchemaOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    data_dir: Path | None = None
    models: dict[str, SchemaFileModelOptions | JSONFileModelOptions] = Field(default_factory=dict)


def define_in_memory_schema(options: InMemorySchemaOptions | Mapping[str, Any]) -> Schema:
    opts = InMemorySchemaOptions.model_validate(options)
    return {name: define_in_memory_model(model) for name, model in opts.models.items()}


def define_in_json_file_schema(options: JSONFileSchemaOptions | Mapping[str, Any]) -> Schema:
    opts = JSONFileSchemaOptions.model_validate(options)
    schema: Schema = {}
    for name, model in opts.models.items():
        file = model.file if model.file is not None else collection_file(name, opts.data_dir)
        schema[name] = define_in_json_file_model(
            JSONFileModelOptions(file=file, seeds=model.seeds, id_field=model.id_field)
        )
    return schema
