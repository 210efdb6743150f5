"""sqlshim: Shared Namespace
---------------------------------------------------------
The explicit context object in which capabilities live once loaded. It maps a
capability name (``"SQL"``) to an opaque reference (usually a module) and is
passed to the resolver instead of being reached through a hidden global.

Public API
----------
``SharedNamespace`` : Mutable mapping with bind-once semantics and per-name locks
``shared_namespace`` : Process-wide default instance

Notes
-----
- A slot holding ``None`` counts as unbound.
- ``bind`` never replaces an existing binding; removing one is a host decision
  made explicitly through ``unbind``.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from .errors import NamespaceError

__all__ = [
    "SharedNamespace",
    "shared_namespace",
]


class SharedNamespace(MutableMapping[str, Any]):
    """Capability-name to reference mapping with at most one binding per name.

    Parameters
    ----------
    initial : Mapping[str, Any] or None
        Bindings to seed the namespace with. ``None`` values are skipped.

    Examples
    --------
    >>> ns = SharedNamespace()
    >>> ns.bind("SQL", object())
    >>> ns.is_bound("SQL")
    True

    """

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._slots: dict[str, Any] = {}
        self._locks: dict[str, threading.RLock] = {}
        self._guard = threading.Lock()
        for name, ref in (initial or {}).items():
            if ref is not None:
                self.bind(name, ref)

    # --------------------------- bindings ---------------------------
    def is_bound(self, name: str) -> bool:
        return self._slots.get(name) is not None

    def bind(self, name: str, ref: Any) -> None:
        """Bind ``ref`` under ``name``.

        Raises
        ------
        NamespaceError
            - [102] ``name`` is already bound.
        ValueError
            ``ref`` is ``None``.

        """
        if ref is None:
            raise ValueError(f"Cannot bind None under '{name}'")
        with self.lock_for(name):
            if self.is_bound(name):
                raise NamespaceError(f"[102] Capability '{name}' is already bound")
            self._slots[name] = ref

    def unbind(self, name: str) -> Any:
        """Remove and return the binding for ``name`` (``None`` if unbound)."""
        with self.lock_for(name):
            return self._slots.pop(name, None)

    def lock_for(self, name: str) -> threading.RLock:
        """Return the lock serializing check-acquire-bind for ``name``."""
        with self._guard:
            lock = self._locks.get(name)
            if lock is None:
                lock = self._locks[name] = threading.RLock()
            return lock

    # --------------------------- mapping protocol ---------------------------
    def __getitem__(self, name: str) -> Any:
        ref = self._slots.get(name)
        if ref is None:
            raise KeyError(name)
        return ref

    def __setitem__(self, name: str, ref: Any) -> None:
        self.bind(name, ref)

    def __delitem__(self, name: str) -> None:
        if self.unbind(name) is None:
            raise KeyError(name)

    def __iter__(self) -> Iterator[str]:
        return iter([name for name, ref in self._slots.items() if ref is not None])

    def __len__(self) -> int:
        return sum(1 for ref in self._slots.values() if ref is not None)

    def __repr__(self) -> str:
        return f"SharedNamespace({sorted(self)!r})"


# Global singleton
shared_namespace = SharedNamespace()
