"""sqlshim: Error Taxonomy and Logging
---------------------------------------------------------
Unified exception types and a shared logger for the shim. Errors carry a
bracketed numeric code at the start of their message so callers and log readers
can tell failure categories apart without string matching on prose.

Public API
----------
``SqlShimError`` : Root of the exception hierarchy
``CapabilityUnavailable`` : A required capability is absent and could not be acquired
``NamespaceError`` : Violation of the one-binding-per-name rule
``SqlShimConfigError``, ``SqlShimIOError`` : Configuration and file errors
``get_logger``, ``configure_logging`` : Shared ``"sqlshim"`` logger helpers

Notes
-----
- Code numbering: 0xx requirements, 1xx I/O and namespace, 4xx import targets,
  5xx configuration.
"""

from __future__ import annotations

import logging
import os

__all__ = [
    "SqlShimError",
    "SqlShimRequirementError",
    "CapabilityUnavailable",
    "SqlShimIOError",
    "NamespaceError",
    "SqlShimConfigError",
    "get_logger",
    "configure_logging",
]


# Exception hierarchy
class SqlShimError(Exception):
    pass


class SqlShimRequirementError(SqlShimError):  # Code Numbering: 0xx
    pass


class CapabilityUnavailable(SqlShimRequirementError):  # Code Numbering: 000
    """A capability is not bound and its acquisition failed.

    Attributes
    ----------
    capability_name : str
        Name of the missing capability slot (e.g. ``"SQL"``).
    source : str or None
        Module identifier the shim tried to load, when one is known.
    hint : str
        Human-readable instruction for supplying the capability.

    """

    def __init__(
        self,
        capability_name: str,
        *,
        source: str | None = None,
        hint: str | None = None,
    ) -> None:
        self.capability_name = capability_name
        self.source = source
        if hint is None:
            if source is not None:
                hint = f"Did you load {source}?"
            else:
                hint = f"Load the {capability_name} library before using this module."
        self.hint = hint
        super().__init__(
            f"[000] Cannot find capability '{capability_name}'. {hint}"
        )


class SqlShimIOError(SqlShimError):  # Code Numbering: 100-101
    pass


class NamespaceError(SqlShimError):  # Code Numbering: 102
    pass


class SqlShimConfigError(SqlShimError):  # Code Numbering: 403, 5xx
    pass


# Logger
_logger: logging.Logger | None = None

_TEXT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
_JSON_FORMAT = (
    '{"time":"%(asctime)s","level":"%(levelname)s",'
    '"logger":"%(name)s","msg":"%(message)s"}'
)


def get_logger() -> logging.Logger:
    """Get the shared sqlshim logger instance.

    Returns
    -------
    logging.Logger
        The singleton logger named ``"sqlshim"`` at INFO level with a console
        handler. Handlers are created lazily on first use.

    Examples
    --------
    >>> get_logger().name
    'sqlshim'

    """
    global _logger
    if _logger is None:
        _logger = logging.getLogger("sqlshim")
        _logger.setLevel(logging.INFO)
        if not _logger.handlers:
            h = logging.StreamHandler()
            h.setFormatter(logging.Formatter(_TEXT_FORMAT))
            _logger.addHandler(h)
    return _logger


def configure_logging(
    verbose: bool = False,
    log_file: str | None = None,
    as_json: bool = False,
    suppress_warnings: bool = False,
) -> None:
    """Configure the shared logger outputs and warning capture.

    Parameters
    ----------
    verbose : bool, default False
        When True, set logger level to DEBUG; otherwise INFO.
    log_file : str or None, default None
        Optional file path to append logs to.
    as_json : bool, default False
        Emit logs as compact JSON lines instead of plain text.
    suppress_warnings : bool, default False
        Raise captured Python warnings to ERROR level when True.

    Raises
    ------
    SqlShimIOError
        - [101] The log file cannot be opened.

    """
    logger = get_logger()
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)

    fmt = logging.Formatter(_JSON_FORMAT if as_json else _TEXT_FORMAT)
    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        try:
            fh = logging.FileHandler(os.fspath(log_file), encoding="utf-8")
        except OSError as e:
            raise SqlShimIOError(f"[101] Cannot open log file {log_file}: {e}") from e
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logging.captureWarnings(True)
    logging.getLogger("py.warnings").setLevel(
        logging.ERROR if suppress_warnings else logging.WARNING
    )
