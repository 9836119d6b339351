"""Description dictionaries.

A :class:`DescriptionDictionary` is the merged view of an event payload
that hover, completion and expression validation consume: every known
field name maps to either the :data:`NULL` leaf marker or a nested
dictionary, together with an optional description.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, Union


class NullValue:
    """Leaf marker: the field exists, its value shape is not modeled."""

    _instance: NullValue | None = None

    def __new__(cls) -> NullValue:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NULL"


NULL = NullValue()

DescriptionValue = Union[NullValue, "DescriptionDictionary"]


@dataclass(frozen=True)
class DescriptionPair:
    """One entry of a :class:`DescriptionDictionary`."""

    key: str
    value: DescriptionValue
    description: str | None = None


class DescriptionDictionary:
    """Insert-only mapping of field name to value and description.

    The first value added under a key is kept; later adds with the same
    key are ignored.
    """

    def __init__(self, *pairs: DescriptionPair) -> None:
        self._pairs: dict[str, DescriptionPair] = {}
        for pair in pairs:
            self.add(pair.key, pair.value, pair.description)

    def add(self, key: str, value: DescriptionValue, description: str | None = None) -> bool:
        """Add *key* unless it is already present.

        Returns ``True`` when the entry was inserted.
        """
        if key in self._pairs:
            return False
        self._pairs[key] = DescriptionPair(key, value, description)
        return True

    def get(self, key: str) -> DescriptionValue | None:
        pair = self._pairs.get(key)
        return pair.value if pair is not None else None

    def get_pair(self, key: str) -> DescriptionPair | None:
        return self._pairs.get(key)

    def description(self, key: str) -> str | None:
        pair = self._pairs.get(key)
        return pair.description if pair is not None else None

    def pairs(self) -> list[DescriptionPair]:
        return list(self._pairs.values())

    def values(self) -> list[DescriptionValue]:
        return [pair.value for pair in self._pairs.values()]

    def keys(self) -> list[str]:
        return list(self._pairs)

    def to_dict(self) -> dict[str, Any]:
        """Plain nested dict view, leaves as ``None``."""
        result: dict[str, Any] = {}
        for key, pair in self._pairs.items():
            if isinstance(pair.value, DescriptionDictionary):
                result[key] = pair.value.to_dict()
            else:
                result[key] = None
        return result

    def __contains__(self, key: object) -> bool:
        return key in self._pairs

    def __iter__(self) -> Iterator[str]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self) -> str:
        return f"DescriptionDictionary({list(self._pairs)!r})"
