from __future__ import annotations

from pathlib import Path
import sys
from typing import Any, Callable

import pytest


# Ensure the repository root (parent of ./tests) is importable during pytest collection
# without an installed package.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))


def user_seeds() -> list[dict[str, Any]]:
    return [
        {"id": "1", "name": "John", "surname": "Doe", "roles": [{"name": "admin"}]},
        {"id": "2", "name": "Jane", "surname": "Doe", "roles": [{"name": "admin"}]},
    ]


@pytest.fixture
def seeds() -> Callable[[], list[dict[str, Any]]]:
    return user_seeds


@pytest.fixture(autouse=True)
def sandbox_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """
    Point settings at a temp data dir and clear overrides so tests never touch real ./data.
    """
    for name in (
        "DOCMODEL_ID_FIELD",
        "DOCMODEL_JSON_INDENT",
        "DOCMODEL_JSON_SORT_KEYS",
        "DOCMODEL_FILE_SUFFIX",
    ):
        monkeypatch.delenv(name, raising=False)
    data = tmp_path / "data"
    monkeypatch.setenv("DOCMODEL_DATA_DIR", str(data))
    return data


@pytest.fixture
def users_file(tmp_path: Path) -> Path:
    path = tmp_path / ".temp" / "users.db.json"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path
