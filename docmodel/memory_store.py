from __future__ import annotations

from .interfaces import Adapter, Record


class MemoryAdapter(Adapter):
    """
    Keeps the sequence in process memory. Nothing survives the process.

    The written list is stored by reference, so a reload hands back the same object.
    """

    def __init__(self) -> None:
        self._data: list[Record] | None = None

    def read(self) -> list[Record] | None:
        return self._data

    def write(self, data: list[Record]) -> None:
        self._data = data

    def __repr__(self) -> str:
        return "MemoryAdapter()"
