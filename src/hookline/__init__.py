"""hookline package public API and version.

Exposes convenient imports for host applications:
- `Settings`: plugin resolution configuration
- `PluginManager`, `load_plugin`: resolve and construct plugins by identifier
- `BasePlugin`: optional base class for plugin authors
- `create_logger`: build the host logger channels
- `get_host_logger`: the host logger channels as the application configured them
"""

__version__ = "1.0.0"

from .config.settings import Settings
from .core.logger import HostLogger, create_logger, get_host_logger
from .plugins.base import BasePlugin
from .plugins.manager import PluginManager, load_plugin

__all__ = [
    "Settings",
    "HostLogger",
    "create_logger",
    "get_host_logger",
    "BasePlugin",
    "PluginManager",
    "load_plugin",
]
