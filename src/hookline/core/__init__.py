"""Core logging exports.

Exposes:
- `HostLogger`: the log/verbose/very_verbose channels used during resolution
- `create_logger`, `configure_logging`: helpers to build and wire them
- `get_host_logger`: the channels as configured by the application
"""

from .logger import HostLogger, configure_logging, create_logger, get_host_logger

__all__ = ["HostLogger", "configure_logging", "create_logger", "get_host_logger"]
