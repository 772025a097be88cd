"""The shell's environment: an ordered list of ``NAME=value`` entries."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from konosubash.textutils import is_alnum, is_alpha


def is_valid_identifier(identifier: str | None) -> bool:
    """True if ``identifier`` is a letter or underscore, then letters, digits or underscores."""
    if not identifier:
        return False
    head, rest = identifier[0], identifier[1:]
    if not (is_alpha(head) or head == "_"):
        return False
    return all(is_alnum(char) or char == "_" for char in rest)


class Environment:
    """Environment variables kept as ``NAME=value`` strings in insertion order."""

    def __init__(self, entries: Iterable[str] = ()) -> None:
        self._entries: list[str] = list(entries)

    def _index(self, name: str) -> int | None:
        prefix = name + "="
        for index, entry in enumerate(self._entries):
            if entry.startswith(prefix):
                return index
        return None

    def get(self, name: str | None) -> str | None:
        """Value of ``name``, or None when it is not set."""
        if name is None:
            return None
        index = self._index(name)
        if index is None:
            return None
        return self._entries[index][len(name) + 1 :]

    def set(self, name: str, value: str) -> None:
        """Replace the entry for ``name`` in place, or append a new one."""
        entry = f"{name}={value}"
        index = self._index(name)
        if index is None:
            self._entries.append(entry)
        else:
            self._entries[index] = entry

    def unset(self, name: str) -> bool:
        """Remove the entry for ``name``; return whether one was removed."""
        index = self._index(name)
        if index is None:
            return False
        del self._entries[index]
        return True

    def sorted_entries(self) -> list[str]:
        """The entries in character-code order, leaving this environment unchanged."""
        return sorted(self._entries)

    def entries(self) -> list[str]:
        """A copy of the entries in their current order."""
        return list(self._entries)

    def copy(self) -> Environment:
        """An independent copy of this environment."""
        return Environment(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self._index(name) is not None

    def __repr__(self) -> str:
        return f"Environment({self._entries!r})"