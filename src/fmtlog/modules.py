"""Prefix allow-set over module paths."""
from __future__ import annotations

from collections.abc import Iterable

__all__ = ['ModuleFilter', 'is_ancestor']

# ``a::b`` and dotted ``a.b`` paths
SEPARATORS = ('::', '.')


def is_ancestor(parent: str, child: str) -> bool:
    """True if ``child`` is ``parent`` or nested beneath it.

    >>> is_ancestor('app', 'app::db')
    True
    >>> is_ancestor('app', 'app.db')
    True
    >>> is_ancestor('net', 'network')
    False
    """
    if parent == child:
        return True
    return any(child.startswith(parent + sep) for sep in SEPARATORS)


class ModuleFilter:
    """Minimal set of module prefixes, each meaning "this module and below".

    An empty filter allows everything.
    """

    def __init__(self, prefixes: Iterable[str] = ()):
        self._prefixes: list[str] = []
        for prefix in prefixes:
            self.insert(prefix)

    def insert(self, prefix: str) -> None:
        """Add a prefix, keeping the set minimal."""
        if any(is_ancestor(p, prefix) for p in self._prefixes):
            return
        self._prefixes = [p for p in self._prefixes if not is_ancestor(prefix, p)]
        self._prefixes.append(prefix)

    def contains(self, module: str | None) -> bool:
        if not self._prefixes:
            return True
        if module is None:
            return False
        return any(is_ancestor(p, module) for p in self._prefixes)

    __contains__ = contains

    @property
    def prefixes(self) -> frozenset[str]:
        return frozenset(self._prefixes)

    def __len__(self) -> int:
        return len(self._prefixes)

    def __iter__(self):
        return iter(self._prefixes)

    def __repr__(self) -> str:
        return f'ModuleFilter({self._prefixes!r})'


if __name__ == '__main__':
    __import__('doctest').testmod(optionflags=4 | 8 | 32)
