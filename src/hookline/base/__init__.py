"""Shared base classes.

Exposes:
- `Loggable`: mixin providing a per-class standard library logger
"""

from .loggable import Loggable

__all__ = ["Loggable"]
