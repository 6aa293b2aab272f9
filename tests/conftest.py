"""Shared test fixtures"""
import logging
import pytest
import structlog


@pytest.fixture(autouse=True)
def reset_logging():
    """Undo any logging setup a test performed"""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) in (logging.StreamHandler, logging.FileHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def sample_payload():
    """The four metric types, one per line"""
    return b"gorets:1|c\nglork:320|ms\ngaugor:333|g\nuniques:765|s"
