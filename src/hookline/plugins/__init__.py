"""Plugin system exports.

Exposes:
- `BasePlugin`, `PluginInstance`: plugin interfaces
- `PluginResolver`: ordered candidate lookup for plugin identifiers
- `instantiate`: construct a plugin from a resolved module
- `PluginManager`, `load_plugin`: resolve-then-construct entry points
- `try_require`: the default module loading primitive
"""

from .base import BasePlugin, PluginInstance
from .instantiator import instantiate
from .loader import try_require
from .manager import PluginManager, load_plugin
from .resolver import PluginResolver

__all__ = [
    "BasePlugin",
    "PluginInstance",
    "PluginManager",
    "PluginResolver",
    "instantiate",
    "load_plugin",
    "try_require",
]
