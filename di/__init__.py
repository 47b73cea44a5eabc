"""
Dependency injection container for runtime collaborators.
"""

from .container import DIContainer

__all__ = ['DIContainer']
