from __future__ import annotations

import re
from collections.abc import Mapping, MutableMapping, MutableSequence, Sequence
from typing import Any

# roles[0].name -> roles.0.name
_BRACKET_INDEX = re.compile(r"\[(\d+)\]")


def split_path(path: str) -> list[str]:
    """
    Split a dotted path into segments.

    A single trailing "." is dropped and bracketed indices are rewritten to
    dotted form, so "roles[0].name." and "roles.0.name" are the same path.
    """
    if path.endswith("."):
        path = path[:-1]
    path = _BRACKET_INDEX.sub(r".\1", path)
    if path.startswith("."):
        path = path[1:]
    return path.split(".")


def _is_index(segment: str) -> bool:
    return segment.isdigit()


def _is_container(value: Any) -> bool:
    return isinstance(value, (MutableMapping, MutableSequence))


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray))


def _new_container(next_segment: str) -> dict[str, Any] | list[Any]:
    return [] if _is_index(next_segment) else {}


def get_path(record: Any, path: str, default: Any = None) -> Any:
    current = record
    for segment in split_path(path):
        if isinstance(current, Mapping):
            if segment not in current:
                return default
            current = current[segment]
        elif _is_sequence(current):
            if not _is_index(segment):
                return default
            index = int(segment)
            if index >= len(current):
                return default
            current = current[index]
        else:
            return default
    return current


def _child(container: Any, segment: str) -> Any:
    if isinstance(container, MutableMapping):
        return container.get(segment)
    if _is_index(segment) and int(segment) < len(container):
        return container[int(segment)]
    return None


def _assign(container: Any, segment: str, value: Any) -> None:
    if isinstance(container, MutableMapping):
        container[segment] = value
        return
    if not _is_index(segment):
        raise TypeError(f"cannot set key {segment!r} on a list")
    index = int(segment)
    if index >= len(container):
        container.extend([None] * (index - len(container) + 1))
    container[index] = value


def set_path(record: Any, path: str, value: Any) -> Any:
    """
    Assign `value` at `path`, creating intermediate containers as needed.

    A missing or scalar intermediate is replaced by a list when the following
    segment is numeric and by a dict otherwise. Returns the root, which is a
    new container when `record` is not one.
    """
    segments = split_path(path)
    root = record if _is_container(record) else _new_container(segments[0])

    current = root
    for position, segment in enumerate(segments[:-1]):
        child = _child(current, segment)
        if not _is_container(child):
            child = _new_container(segments[position + 1])
            _assign(current, segment, child)
        current = child

    _assign(current, segments[-1], value)
    return root
