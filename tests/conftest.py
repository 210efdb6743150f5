"""Pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest
import yaml

# Add package and test-plugin paths to sys.path
packages_dir = Path(__file__).parent.parent / "packages"
sys.path.insert(0, str(packages_dir / "sqlshim"))
sys.path.insert(0, str(Path(__file__).parent / "plugins"))

from sqlshim.core import config_loader  # noqa: E402
from sqlshim.core.config_loader import ENV_VAR, load_system_config  # noqa: E402
from sqlshim.core.errors import configure_logging  # noqa: E402
from sqlshim.core.namespace import SharedNamespace, shared_namespace  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the user's home config and environment out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setattr(Path, "home", lambda: home)
    monkeypatch.delenv(ENV_VAR, raising=False)
    # Fresh config cache per test; monkeypatch restores it afterwards
    monkeypatch.setattr(config_loader, "_SYSTEM_CONFIG_CACHE", None)
    yield home
    configure_logging()


@pytest.fixture(autouse=True)
def clean_shared_namespace():
    """Leave the process-wide namespace as the test found it."""
    before = dict(shared_namespace)
    yield shared_namespace
    for name in list(shared_namespace):
        if name not in before:
            shared_namespace.unbind(name)


@pytest.fixture
def namespace():
    """A fresh, empty shared namespace."""
    return SharedNamespace()


@pytest.fixture
def write_config(tmp_path):
    """Write a system config YAML file and return its path."""

    def _write(data, name="system.yaml"):
        path = tmp_path / name
        with open(path, "w") as f:
            yaml.dump(data, f)
        return path

    return _write


@pytest.fixture
def env_config(write_config, monkeypatch):
    """Point SQLSHIM_SYSTEM_CONFIG at a config declaring the fake engine."""
    path = write_config(
        {
            "default_capability": "SQL",
            "capabilities": {
                "SQL": {"module": "fake_engine"},
                "ENGINE": {"module": "fake_engine:Engine"},
                "MISSING": {
                    "module": "no_such_sql_engine",
                    "hint": "Install no_such_sql_engine first.",
                },
            },
        },
        name="env.yaml",
    )
    monkeypatch.setenv(ENV_VAR, str(path))
    load_system_config(force_reload=True)
    return path
