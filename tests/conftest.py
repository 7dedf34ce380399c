import logging

import pytest

from htmlbuilder import Compiler, EventRegistry


@pytest.fixture(autouse=True)
def reset_package_logger():
    """The CLI replaces handlers on the package logger; undo that per test."""
    yield
    logger = logging.getLogger("htmlbuilder")
    logger.handlers = []
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def registry():
    return EventRegistry()


@pytest.fixture
def compiler(registry):
    return Compiler(registry=registry)
