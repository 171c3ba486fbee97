"""A private copy of the process environment as ``NAME=value`` entries."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping


class Environment:
    """An ordered, independently owned list of ``NAME=value`` strings."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Iterable[str] | None = None) -> None:
        self._entries: list[str] = [str(entry) for entry in entries or ()]

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "Environment":
        """Build an environment from a name-to-value mapping, keeping its order."""
        return cls(f"{name}={value}" for name, value in mapping.items())

    def copy(self) -> "Environment":
        """Return a new environment holding the same entries."""
        return Environment(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Environment):
            return NotImplemented
        return self._entries == other._entries

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"