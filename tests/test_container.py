"""
Tests for the dependency injection container.
"""

from unittest.mock import Mock

import pytest

from di import DIContainer
from interfaces import IDispatcher


class TestDIContainer:
    """Test service registration and resolution."""

    def test_factory_runs_per_resolve(self):
        container = DIContainer()
        factory = Mock(side_effect=lambda context: object())
        container.register_factory(IDispatcher, factory)

        first = container.resolve(IDispatcher, "ctx-1")
        second = container.resolve(IDispatcher, "ctx-2")

        assert first is not second
        assert [c.args for c in factory.call_args_list] == [("ctx-1",), ("ctx-2",)]

    def test_factory_is_replaced(self):
        container = DIContainer()
        container.register_factory(IDispatcher, lambda: "first")
        container.register_factory(IDispatcher, lambda: "second")

        assert container.resolve(IDispatcher) == "second"
        assert container.get_factory(IDispatcher)() == "second"

    def test_unregistered_service(self):
        container = DIContainer()

        with pytest.raises(ValueError):
            container.resolve(IDispatcher)
        with pytest.raises(ValueError):
            container.get_factory(IDispatcher)

    def test_factory_must_be_callable(self):
        with pytest.raises(TypeError):
            DIContainer().register_factory(IDispatcher, "nope")
