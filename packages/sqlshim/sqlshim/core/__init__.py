"""sqlshim: core subpackage
---------------------------------------------------------
Capability resolution and its supporting pieces: the shared namespace, the
error taxonomy and logger, and the system configuration loader.
"""

from .config_loader import load_system_config
from .errors import (
    CapabilityUnavailable,
    NamespaceError,
    SqlShimConfigError,
    SqlShimError,
    SqlShimIOError,
    configure_logging,
    get_logger,
)
from .namespace import SharedNamespace, shared_namespace
from .resolver import ensure_capability, is_bound, module_loader, require
from .system_config import CapabilityConfig, SystemConfig

__all__ = [
    "CapabilityConfig",
    "CapabilityUnavailable",
    "NamespaceError",
    "SharedNamespace",
    "SqlShimConfigError",
    "SqlShimError",
    "SqlShimIOError",
    "SystemConfig",
    "configure_logging",
    "ensure_capability",
    "get_logger",
    "is_bound",
    "load_system_config",
    "module_loader",
    "require",
    "shared_namespace",
]
