from __future__ import annotations

from pathlib import Path

from .settings import get_settings


def ensure_dir(path: Path) -> Path:
    path.mkdir(parents=True, exist_ok=True)
    return path


def file_path_exists_or_create(file: Path) -> bool:
    # check-then-create; not guarded against other processes
    directory = file.parent
    if str(directory) and not directory.exists():
        ensure_dir(directory)
    return True


def collection_file(name: str, base: Path | None = None) -> Path:
    settings = get_settings()
    root = settings.data_dir if base is None else base
    return root / f"{name}{settings.file_suffix}"
