from __future__ import annotations

import enum

from .interfaces import Adapter, Record


class LoadState(enum.Enum):
    UNLOADED = "unloaded"
    LOADED = "loaded"


class Database:
    """
    Binds an adapter to the in-memory buffer holding the current sequence.

    `data` stays None until the first read; `state` moves to LOADED on that read
    and never goes back.
    """

    def __init__(self, adapter: Adapter) -> None:
        self.adapter = adapter
        self.data: list[Record] | None = None
        self.state = LoadState.UNLOADED

    def read(self) -> None:
        self.data = self.adapter.read()
        self.state = LoadState.LOADED

    def write(self) -> None:
        if self.data is not None:
            self.adapter.write(self.data)

    def __repr__(self) -> str:
        return f"Database({self.adapter!r}, state={self.state.value})"
