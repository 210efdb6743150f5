from __future__ import annotations

import logging

import pytest
from sqlshim.core.errors import (
    CapabilityUnavailable,
    NamespaceError,
    SqlShimConfigError,
    SqlShimError,
    SqlShimIOError,
    SqlShimRequirementError,
    configure_logging,
    get_logger,
)


def test_error_hierarchy():
    for cls in (SqlShimRequirementError, SqlShimIOError, NamespaceError, SqlShimConfigError):
        assert issubclass(cls, SqlShimError)
    assert issubclass(CapabilityUnavailable, SqlShimRequirementError)


def test_capability_unavailable_message():
    err = CapabilityUnavailable("SQL", source="sqlite3")
    assert str(err) == "[000] Cannot find capability 'SQL'. Did you load sqlite3?"
    assert err.capability_name == "SQL"
    assert err.hint == "Did you load sqlite3?"

    err = CapabilityUnavailable("SQL")
    assert err.source is None
    assert "SQL" in err.hint
    assert str(err).startswith("[000] Cannot find capability 'SQL'.")


def test_shared_logger():
    logger = get_logger()
    assert logger.name == "sqlshim"
    assert get_logger() is logger


def test_configure_logging_levels_and_file(tmp_path):
    log_path = tmp_path / "sqlshim.log"
    configure_logging(verbose=True, log_file=str(log_path), as_json=True)
    logger = get_logger()
    assert logger.level == logging.DEBUG
    logger.debug("hello")
    for h in logger.handlers:
        h.flush()
    assert '"msg":"hello"' in log_path.read_text()

    configure_logging()
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 1


def test_configure_logging_bad_file(tmp_path):
    with pytest.raises(SqlShimIOError, match=r"\[101\]"):
        configure_logging(log_file=str(tmp_path / "missing-dir" / "x.log"))
    configure_logging()
