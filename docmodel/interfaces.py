from __future__ import annotations

from typing import Any, Protocol

Record = dict[str, Any]


class Adapter(Protocol):
    """
    Minimal backing-store interface: one ordered sequence of records persisted in full.
    """

    def read(self) -> list[Record] | None:
        """Return the persisted sequence, or None if nothing has been persisted yet."""
        ...

    def write(self, data: list[Record]) -> None:
        """Persist the full sequence."""
        ...
