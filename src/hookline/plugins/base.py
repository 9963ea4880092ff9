"""Plugin interfaces for hookline.

This module defines the contract a constructed plugin fulfils:

- `PluginInstance`: a runtime-checkable protocol describing what the host
  relies on (a `name` and an `apply(host)` hook).
- `BasePlugin`: an optional abstract base class plugin authors may inherit
  from; it stores the construction options and provides a no-op `init`.
- `PluginConstructor`: the callable shape the instantiator invokes with the
  plugin options.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from typing_extensions import Protocol, runtime_checkable

PluginOptions = Any
PluginConstructor = Callable[[PluginOptions], "PluginInstance"]


@runtime_checkable
class PluginInstance(Protocol):
    """Structural type of a constructed plugin.

    `init(initializer)` is optional and therefore not part of the protocol;
    callers should look it up with `getattr` before using it.
    """

    name: str

    def apply(self, host: Any) -> None:
        ...


class BasePlugin(ABC):
    """Convenience base class for plugins loaded by hookline.

    Subclasses set `name` and implement `apply()`. The options given to the
    plugin reference are available as `self.options`.
    """

    name: str = ""

    def __init__(self, options: Optional[Dict[str, Any]] = None):
        self.options: Dict[str, Any] = dict(options or {})

    @abstractmethod
    def apply(self, host: Any) -> None:
        """Register the plugin's behaviour with the host application."""
        pass

    def init(self, initializer: Any) -> None:
        """Hook into the host's interactive setup (override if needed)."""
        pass
