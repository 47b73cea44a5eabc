"""
Abstract interfaces for the context runtime collaborators.
"""

from .idispatcher import IDispatcher
from .istore import IStore

__all__ = [
    'IDispatcher',
    'IStore'
]
