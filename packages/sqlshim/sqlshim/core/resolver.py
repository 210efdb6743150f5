"""sqlshim: Capability Resolver
---------------------------------------------------------
Locates an external capability (by default the SQL engine) in a shared
namespace and, when it is missing, acquires it once from a module import and
binds it. If neither source yields the capability, a ``CapabilityUnavailable``
error is raised and the namespace is left exactly as it was.

Public API
----------
``is_bound`` : Predicate telling whether a namespace slot holds a capability
``ensure_capability`` : Return the bound capability or acquire and bind it once
``module_loader`` : Build an acquisition callable importing a dotted target
``require`` : Resolve a capability declared in the system configuration

Notes
-----
- Import targets accept ``module`` and ``module:attr`` forms.
- Failures are raised, never logged here; reporting is the caller's job.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Mapping, MutableMapping
from importlib import import_module
from typing import Any

from .config_loader import load_system_config
from .errors import CapabilityUnavailable, SqlShimConfigError, get_logger
from .namespace import shared_namespace
from .system_config import SystemConfig

__all__ = [
    "is_bound",
    "ensure_capability",
    "module_loader",
    "require",
]

logger = get_logger()

AcquireFn = Callable[[], Any]

# Per-(namespace, name) locks for namespaces that do not provide ``lock_for``
_fallback_locks: dict[tuple[int, str], threading.RLock] = {}
_fallback_guard = threading.Lock()


def is_bound(namespace: Mapping[str, Any], name: str) -> bool:
    """Return True when ``namespace`` holds a non-``None`` value for ``name``."""
    return namespace.get(name) is not None


def _lock_for(namespace: MutableMapping[str, Any], name: str) -> threading.RLock:
    """Return the lock serializing check-acquire-bind for ``name``."""
    lock_for = getattr(namespace, "lock_for", None)
    if callable(lock_for):
        return lock_for(name)
    key = (id(namespace), name)
    with _fallback_guard:
        lock = _fallback_locks.get(key)
        if lock is None:
            lock = _fallback_locks[key] = threading.RLock()
        return lock


def ensure_capability(
    namespace: MutableMapping[str, Any],
    capability_name: str,
    acquire_fn: AcquireFn,
    *,
    source: str | None = None,
    hint: str | None = None,
) -> Any:
    """Return the capability bound under ``capability_name``, acquiring it once.

    Parameters
    ----------
    namespace : MutableMapping[str, Any]
        The shared namespace. A ``SharedNamespace`` serializes resolution per
        name; any other mapping gets a lock per (mapping, name) pair held
        here.
    capability_name : str
        Non-empty name of the capability slot, e.g. ``"SQL"``.
    acquire_fn : Callable[[], Any]
        Zero-argument callable obtaining the capability. It may raise; a
        ``None`` result counts as a failure.
    source : str or None
        Identifier of the acquisition source, used in the error message.
    hint : str or None
        Replacement for the default error hint.

    Returns
    -------
    Any
        The bound capability reference, never ``None``.

    Raises
    ------
    CapabilityUnavailable
        - [000] The capability is unbound and ``acquire_fn`` raised or
          returned ``None``. The namespace is not modified.
    TypeError
        ``namespace`` is ``None``.
    ValueError
        ``capability_name`` is empty.

    Notes
    -----
    The lock for ``capability_name`` is held while ``acquire_fn`` runs. An
    acquisition that waits on another thread resolving the same name in the
    same namespace will deadlock; other names are not affected. If the
    acquisition binds the slot itself, that binding is returned as is.

    Examples
    --------
    >>> ns = {}
    >>> ensure_capability(ns, "SQL", lambda: "engine")
    'engine'
    >>> ensure_capability(ns, "SQL", lambda: 1 / 0)
    'engine'

    """
    if namespace is None:
        raise TypeError("namespace must not be None")
    if not isinstance(capability_name, str) or not capability_name.strip():
        raise ValueError("capability_name must be a non-empty string")

    ref = namespace.get(capability_name)
    if ref is not None:
        return ref

    lock = _lock_for(namespace, capability_name)
    with lock:
        # Another caller may have bound it while we waited
        ref = namespace.get(capability_name)
        if ref is not None:
            return ref

        try:
            ref = acquire_fn()
        except Exception as e:
            raise CapabilityUnavailable(
                capability_name, source=source, hint=hint
            ) from e
        if ref is None:
            raise CapabilityUnavailable(capability_name, source=source, hint=hint)

        # The acquisition itself may have bound the slot (a self-registering module)
        bound = namespace.get(capability_name)
        if bound is not None:
            return bound
        namespace[capability_name] = ref

    logger.debug(
        f"Acquired capability '{capability_name}'"
        + (f" from '{source}'" if source else "")
    )
    return ref


def module_loader(target: str) -> AcquireFn:
    """Return a callable importing ``target`` on invocation.

    Parameters
    ----------
    target : str
        ``"pkg.module"`` returns the module itself; ``"pkg.module:attr"``
        returns an attribute of it.

    Raises
    ------
    ValueError
        ``target`` is empty.

    Notes
    -----
    The returned callable raises ``ImportError`` when the module cannot be
    imported and ``SqlShimConfigError`` ([403]) when the attribute is missing.

    """
    if not target or not target.strip():
        raise ValueError("Import target must be a non-empty string")
    module_name, _, attr_name = target.strip().partition(":")

    def _acquire() -> Any:
        mod = import_module(module_name)
        if not attr_name:
            return mod
        if not hasattr(mod, attr_name):
            raise SqlShimConfigError(f"[403] Target '{target}' not found")
        return getattr(mod, attr_name)

    return _acquire


def require(
    name: str | None = None,
    *,
    namespace: MutableMapping[str, Any] | None = None,
    config: SystemConfig | None = None,
) -> Any:
    """Resolve a capability using the source declared in the system config.

    Parameters
    ----------
    name : str or None
        Capability name; defaults to ``config.default_capability`` (``"SQL"``).
    namespace : MutableMapping[str, Any] or None
        Target namespace; defaults to the process-wide ``shared_namespace``.
    config : SystemConfig or None
        Configuration declaring acquisition sources; loaded through
        ``load_system_config`` when omitted.

    Raises
    ------
    CapabilityUnavailable
        - [000] The capability is unbound and either no source is declared
          for it or loading the declared source failed.
    SqlShimConfigError
        The configuration has to be loaded (no ``config`` given and either
        ``name`` is omitted or unbound) and is invalid.

    Notes
    -----
    A named capability that is already bound is returned without loading
    the configuration.

    Examples
    --------
    >>> sql = require("SQL", namespace={})
    >>> sql.__name__
    'sqlite3'

    """
    if namespace is None:
        namespace = shared_namespace
    if name is not None:
        if not name.strip():
            raise ValueError("Capability name must be a non-empty string")
        if is_bound(namespace, name):
            return namespace[name]

    if config is None:
        config = load_system_config()
    if name is None:
        name = config.default_capability

    declared = config.capabilities.get(name)
    if declared is None:
        raise CapabilityUnavailable(
            name,
            hint=f"No acquisition source is configured for '{name}'; "
            "load it before using this module.",
        )

    return ensure_capability(
        namespace,
        name,
        module_loader(declared.module),
        source=declared.module,
        hint=declared.hint,
    )
