"""
Shared pytest fixtures for the wpdesktop test suite.

The policy, router and dispatcher are pure Python, so these fixtures build
them from the default settings and a mocked HostServices; nothing here needs
a display or Qt.
"""

import copy
import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from wpdesktop.external_links import LinkDispatcher
from wpdesktop.host.backend import HostServices
from wpdesktop.navigation_policy import NavigationPolicy
from wpdesktop.settings import DEFAULTS
from wpdesktop.url_router import URLRouter


@pytest.fixture
def settings():
    return copy.deepcopy(DEFAULTS)


@pytest.fixture
def router():
    return URLRouter(internal_host="127.0.0.1", public_host="wordpress.com")


@pytest.fixture
def policy(settings, router):
    return NavigationPolicy.from_settings(settings, router)


@pytest.fixture
def host():
    return MagicMock(spec=HostServices)


@pytest.fixture
def dispatcher(policy, host):
    return LinkDispatcher(policy, host)


@pytest.fixture
def config_home(tmp_path, monkeypatch):
    """Point the settings store at a temporary home directory."""
    monkeypatch.setattr(Path, "home", classmethod(lambda cls: tmp_path))
    return tmp_path / ".config" / "wpdesktop"
