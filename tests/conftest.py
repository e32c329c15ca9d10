"""pytest configuration and fixtures for AutoWire Forms tests."""

import io

import pytest
from rich.console import Console

from aw_application import TApplication
from aw_logger import TLogRouter, set_log_router
from aw_sys import set_env_mapping


@pytest.fixture(autouse=True)
def env():
    """Isolated ENV mapping instead of os.environ."""
    mapping = {}
    set_env_mapping(mapping)
    yield mapping
    set_env_mapping(None)


@pytest.fixture(autouse=True)
def log_lines():
    """Quiet log router; every written line lands in the returned list."""
    lines = []
    router = TLogRouter(console=Console(file=io.StringIO()), echo=False)
    router.add_subscriber(lambda msg, window: lines.append(msg))
    prev = set_log_router(router)
    yield lines
    set_log_router(prev)


@pytest.fixture(autouse=True)
def app(env, log_lines):
    """Fresh Application singleton per test."""
    TApplication.reset()
    application = TApplication.app()
    yield application
    TApplication.reset()
