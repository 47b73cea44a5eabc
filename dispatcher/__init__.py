"""
Default dispatcher: routes actions to stores and carries their state
through dehydrate/rehydrate.
"""

from .dispatcher import Dispatcher, DispatcherFactory, get_store_name

__all__ = ['Dispatcher', 'DispatcherFactory', 'get_store_name']
