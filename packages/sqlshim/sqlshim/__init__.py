"""Lazy SQL Engine Resolution
==========================

Finds the SQL engine a program depends on in a shared namespace and, when it
is not there yet, imports it once and binds it. If the engine cannot be found
either way, a ``CapabilityUnavailable`` error says which capability is missing
and where it was expected to come from.

Capabilities declared in the system configuration are also exposed as lazy
module attributes, so ``sqlshim.SQL`` resolves the engine on first access.

Public API
----------
ensure_capability
    Return a bound capability or acquire and bind it once.
require
    Resolve a capability declared in the system configuration.
SharedNamespace, shared_namespace
    The namespace type and its process-wide instance.
CapabilityUnavailable
    Raised when a capability is absent and cannot be acquired.
"""

from typing import Any

from .core import (
    CapabilityConfig,
    CapabilityUnavailable,
    NamespaceError,
    SharedNamespace,
    SqlShimConfigError,
    SqlShimError,
    SystemConfig,
    configure_logging,
    ensure_capability,
    get_logger,
    is_bound,
    load_system_config,
    module_loader,
    require,
    shared_namespace,
)

__version__ = "0.3.0"

__all__ = [
    "CapabilityConfig",
    "CapabilityUnavailable",
    "NamespaceError",
    "SharedNamespace",
    "SqlShimConfigError",
    "SqlShimError",
    "SystemConfig",
    "configure_logging",
    "ensure_capability",
    "get_logger",
    "is_bound",
    "load_system_config",
    "module_loader",
    "require",
    "shared_namespace",
    "__version__",
]


def __getattr__(name: str) -> Any:
    """Resolve declared capabilities (e.g. ``SQL``) on first attribute access.

    A capability already bound in ``shared_namespace`` is returned without
    reading the configuration. An unreadable configuration surfaces as
    ``AttributeError`` (chained to the config error), so ``hasattr`` stays
    safe. A declared capability that cannot be acquired raises
    ``CapabilityUnavailable``, which ``hasattr`` does not swallow.
    """
    if name.startswith("_"):
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
    if is_bound(shared_namespace, name):
        return shared_namespace[name]
    try:
        declared = name in load_system_config().capabilities
    except SqlShimConfigError as e:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from e
    if declared:
        return require(name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
