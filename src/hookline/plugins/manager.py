"""Plugin loading entry points for hookline hosts.

`load_plugin()` turns a plugin reference from the host configuration into a
plugin instance: the resolver finds a module for the identifier, and only if
that succeeds the instantiator constructs the plugin with its options.

The two failure modes are handled differently:

- a plugin that cannot be found is logged as a warning and reported as None,
  so the host can carry on without it;
- a plugin whose constructor raises is logged as an error and the exception
  propagates, since that usually means a bug in the plugin itself.
"""

from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from ..base.loggable import Loggable
from ..config.settings import Settings
from ..core.logger import HostLogger, get_host_logger
from .base import PluginOptions
from .instantiator import instantiate
from .loader import try_require
from .resolver import ModuleLoaderFn, PluginResolver
from .validator import PluginValidator

PluginReference = Union[str, Tuple[str, PluginOptions], Sequence[Any]]


def normalize_reference(plugin: PluginReference) -> Tuple[str, PluginOptions]:
    """Return ``(identifier, options)`` for a bare or paired plugin reference.

    Raises:
        TypeError: If the reference is neither a string nor a pair.
    """
    if isinstance(plugin, str):
        return plugin, {}
    if isinstance(plugin, (tuple, list)) and len(plugin) == 2:
        identifier, options = plugin
        if isinstance(identifier, str):
            return identifier, options
    raise TypeError(
        f"Plugin reference must be a name or a (name, options) pair, got: {plugin!r}"
    )


class PluginManager(Loggable):
    """Resolve and construct plugins for a host application.

    Each call is independent: nothing resolved or constructed is kept between
    calls.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        host_logger: Optional[HostLogger] = None,
        loader: ModuleLoaderFn = try_require,
        cwd: Optional[str] = None,
        base_dir: Optional[str] = None,
    ):
        super().__init__()
        self.settings = settings or Settings()
        self.host_logger = host_logger or get_host_logger()
        self.resolver = PluginResolver(
            settings=self.settings,
            host_logger=self.host_logger,
            loader=loader,
            cwd=cwd,
            base_dir=base_dir,
        )
        self.validator = (
            PluginValidator() if self.settings.enable_plugin_validation else None
        )

    def load_plugin(
        self, plugin: PluginReference, extended_location: Optional[str] = None
    ) -> Optional[Any]:
        """Resolve and construct a single plugin.

        Args:
            plugin: ``"name"`` or ``("name", options)``.
            extended_location: Extra search location for the module loader;
                defaults to ``settings.extended_location``.

        Returns:
            Any | None: The plugin instance, or None if it could not be found.

        Raises:
            Exception: Whatever the plugin constructor raised.
        """
        identifier, options = normalize_reference(plugin)
        location = extended_location or self.settings.extended_location

        resolved = self.resolver.resolve(identifier, location)
        if resolved is None:
            return None

        instance = instantiate(
            resolved,
            options,
            identifier,
            self.host_logger,
            default_export=self.settings.default_export,
        )

        if self.validator:
            for problem in self.validator.validate_instance(instance):
                self.host_logger.log.warning(f"Plugin {identifier}: {problem}")

        return instance

    def load_plugins(
        self,
        plugins: Iterable[PluginReference],
        extended_location: Optional[str] = None,
    ) -> List[Any]:
        """Load several plugins in order, skipping those that cannot be found.

        A constructor error stops the batch and propagates.
        """
        loaded = []
        missing = []

        for plugin in plugins:
            instance = self.load_plugin(plugin, extended_location)
            if instance is None:
                missing.append(normalize_reference(plugin)[0])
            else:
                loaded.append(instance)

        self.logger.debug(f"Loaded {len(loaded)} plugin(s), missing: {missing}")
        return loaded


def load_plugin(
    plugin: PluginReference,
    logger: Optional[HostLogger] = None,
    extended_location: Optional[str] = None,
    settings: Optional[Settings] = None,
) -> Optional[Any]:
    """Resolve and construct a plugin with a one-off `PluginManager`.

    Args:
        plugin: ``"name"`` or ``("name", options)``.
        logger: Host logger channels; the `hookline` loggers as the
            application configured them when omitted.
        extended_location: Extra search location for the module loader.
        settings: Resolution settings; read from the environment when omitted.

    Returns:
        Any | None: The plugin instance, or None if it could not be found.
    """
    manager = PluginManager(settings=settings, host_logger=logger)
    return manager.load_plugin(plugin, extended_location)

