from __future__ import annotations

from typing import Any, Callable, Hashable, Iterable, List, Mapping, Optional

PRIVATE_KEY_PREFIX = "_"


def _clone_without(value: Any, drop: Callable[[Hashable], bool]) -> Any:
    if isinstance(value, Mapping):
        return {k: _clone_without(v, drop) for k, v in value.items() if not drop(k)}
    if isinstance(value, list):
        return [_clone_without(v, drop) for v in value]
    if isinstance(value, tuple):
        return tuple(_clone_without(v, drop) for v in value)
    return value


def omit_deep_keys(collection: Any, exclude_keys: Iterable[Hashable]) -> Any:
    """Deep copy of collection with every listed key removed at any depth.

    The input is left untouched.
    """

    excluded = set(exclude_keys)
    return _clone_without(collection, lambda k: k in excluded)


def omit_private_keys(collection: Any) -> Any:
    """Deep copy of collection without keys starting with '_'."""

    return _clone_without(
        collection,
        lambda k: isinstance(k, str) and k.startswith(PRIVATE_KEY_PREFIX),
    )


def remove_dupes(collection1: Optional[Iterable[Any]], collection2: Optional[Iterable[Any]]) -> List[Any]:
    """Items of collection1 that have no structurally equal item in collection2."""

    others = list(collection2 or [])
    return [item for item in (collection1 or []) if item not in others]
