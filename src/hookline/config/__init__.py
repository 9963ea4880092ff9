"""Configuration package exports.

Exposes:
- `Settings`: Pydantic settings for plugin resolution
"""

from .settings import Settings

__all__ = ["Settings"]
