from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return int(raw)


@dataclass(frozen=True)
class Settings:
    # Schema-level file layout
    data_dir: Path
    file_suffix: str

    # Record identity
    id_field: str

    # JSON output
    json_indent: int
    json_sort_keys: bool


def get_settings() -> Settings:
    load_dotenv("local.env")

    data_dir = Path(os.getenv("DOCMODEL_DATA_DIR", "data"))
    file_suffix = os.getenv("DOCMODEL_FILE_SUFFIX", ".json")

    id_field = os.getenv("DOCMODEL_ID_FIELD", "id").strip() or "id"

    json_indent = _env_int("DOCMODEL_JSON_INDENT", 2)
    # Records keep their field order on disk unless asked otherwise.
    json_sort_keys = _env_bool("DOCMODEL_JSON_SORT_KEYS", False)

    return Settings(
        data_dir=data_dir,
        file_suffix=file_suffix,
        id_field=id_field,
        json_indent=json_indent,
        json_sort_keys=json_sort_keys,
    )
