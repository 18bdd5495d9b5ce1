from __future__ import annotations

from .database import Database, LoadState
from .definitions import (
    InMemoryModelOptions,
    JSONFileModelOptions,
    define_in_json_file_model,
    define_in_memory_model,
    define_model,
)
from .disk_store import JSONFileAdapter
from .memory_store import MemoryAdapter
from .model import Model, ModelData
from .path_access import get_path, set_path
from .schema import (
    InMemorySchemaOptions,
    JSONFileSchemaOptions,
    Schema,
    define_in_json_file_schema,
    define_in_memory_schema,
)
from .settings import Settings, get_settings

__all__ = [
    "Database",
    "LoadState",
    "Model",
    "ModelData",
    "MemoryAdapter",
    "JSONFileAdapter",
    "InMemoryModelOptions",
    "JSONFileModelOptions",
    "InMemorySchemaOptions",
    "JSONFileSchemaOptions",
    "Schema",
    "define_model",
    "define_in_memory_model",
    "define_in_json_file_model",
    "define_in_memory_schema",
    "define_in_json_file_schema",
    "get_path",
    "set_path",
    "Settings",
    "get_settings",
]
