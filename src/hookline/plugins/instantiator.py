"""Build plugin instances from resolved modules."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Union

from ..core.logger import HostLogger
from .base import PluginOptions

DEFAULT_EXPORT = "default"


@dataclass(frozen=True)
class DirectConstructor:
    """The resolved module is itself the plugin constructor."""

    constructor: Callable[..., Any]


@dataclass(frozen=True)
class DefaultExportContainer:
    """The resolved module holds the constructor in its default-export slot."""

    container: Any
    constructor: Callable[..., Any]


ResolvedPlugin = Union[DirectConstructor, DefaultExportContainer]


def classify(resolved: Any, default_export: str = DEFAULT_EXPORT) -> ResolvedPlugin:
    """Decide how a resolved module provides its plugin constructor.

    A module (or mapping) whose `default_export` slot holds a value other
    than None is treated as a container; anything else is called directly.
    """
    if isinstance(resolved, Mapping):
        exported = resolved.get(default_export)
    else:
        exported = getattr(resolved, default_export, None)

    if exported is not None:
        return DefaultExportContainer(container=resolved, constructor=exported)
    return DirectConstructor(constructor=resolved)


def instantiate(
    resolved: Any,
    options: PluginOptions,
    identifier: str,
    host_logger: HostLogger,
    default_export: str = DEFAULT_EXPORT,
) -> Any:
    """Construct a plugin from a resolved module.

    Args:
        resolved: The module returned by the resolver.
        options: Passed unchanged as the constructor's only argument.
        identifier: The identifier the user supplied, used in error reports.
        host_logger: Receives an error message if construction fails.
        default_export: Name of the default-export slot.

    Returns:
        Any: The constructed plugin instance.

    Raises:
        Exception: Whatever the plugin constructor raised, unchanged.
    """
    target = classify(resolved, default_export)
    try:
        return target.constructor(options)
    except Exception:
        host_logger.log.error(
            f"Plugin at the following path encountered an error: {identifier}"
        )
        raise
