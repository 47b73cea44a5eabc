"""
Shared pytest fixtures.
"""

import pytest

from core.application import Application
from tests.fixtures import CounterStore, LogStore, mock_factory


@pytest.fixture
def app():
    """Application with the mock root component and test stores."""
    return Application(app_component=mock_factory, stores=[CounterStore, LogStore])


@pytest.fixture
def context(app):
    """Fresh context from the test application."""
    return app.create_context()


@pytest.fixture
def dimensions():
    return {"foo": "bar"}
