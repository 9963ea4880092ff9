"""Plugin resolution: map a short identifier to a loaded module.

The resolver tries an ordered list of candidate locations and stops at the
first one the module loader can load:

1. the identifier itself (local paths only)
2. the identifier joined to the working directory (local paths only); a
   local identifier that still fails here is reported and not looked up as
   a package
3. the bundled plugins directory shipped next to hookline
4. the identifier with the vendor prefix (``hookline-plugin-<id>``)
5. the identifier under the official scope (``@hookline-plugins/<id>``)
6. the identifier under the canary scope (``@hookline-canary/<id>``)
7. the raw identifier, when it is already a fully qualified plugin package
"""

import os
import posixpath
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional, Tuple

from ..config.settings import Settings
from ..core.logger import HostLogger, get_host_logger
from .loader import is_local_path, try_require

ModuleLoaderFn = Callable[[str, Optional[str]], Optional[Any]]

# Directory of the installed hookline package; bundled plugins live relative to it.
INSTALL_DIR = Path(__file__).resolve().parents[1]


@dataclass(frozen=True)
class ResolutionContext:
    """Inputs shared by every candidate of a single resolution call."""

    identifier: str
    cwd: str
    base_dir: str
    extended_location: Optional[str] = None

    @property
    def is_local(self) -> bool:
        return is_local_path(self.identifier)

    @property
    def cwd_path(self) -> str:
        # Absolute identifiers are re-rooted under cwd rather than replacing it.
        return os.path.join(self.cwd, self.identifier.lstrip("/" + os.sep))


def bundled_candidate(context: ResolutionContext, settings: Settings) -> Optional[str]:
    return os.path.join(
        context.base_dir,
        settings.bundled_offset,
        settings.bundled_plugins_dir,
        context.identifier,
        settings.bundled_entry,
    )


def vendor_candidate(context: ResolutionContext, settings: Settings) -> Optional[str]:
    return f"{settings.vendor_prefix}{context.identifier}"


def official_scope_candidate(
    context: ResolutionContext, settings: Settings
) -> Optional[str]:
    return posixpath.join(settings.official_scope, context.identifier)


def canary_scope_candidate(
    context: ResolutionContext, settings: Settings
) -> Optional[str]:
    return posixpath.join(settings.canary_scope, context.identifier)


def qualified_candidate(context: ResolutionContext, settings: Settings) -> Optional[str]:
    """Return the raw identifier if it already names a plugin package."""
    identifier = context.identifier
    if (
        f"/{settings.vendor_prefix}" in identifier
        or identifier.startswith(settings.vendor_prefix)
        or identifier.startswith(settings.official_scope)
    ):
        return identifier
    return None


PACKAGE_CANDIDATES: Tuple[
    Callable[[ResolutionContext, Settings], Optional[str]], ...
] = (
    bundled_candidate,
    vendor_candidate,
    official_scope_candidate,
    canary_scope_candidate,
    qualified_candidate,
)


class PluginResolver:
    """Resolve plugin identifiers to loaded modules.

    The working directory and install directory are injectable so resolution
    can be exercised without touching process state. When `cwd` is None the
    process working directory is read at each call.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        host_logger: Optional[HostLogger] = None,
        loader: ModuleLoaderFn = try_require,
        cwd: Optional[str] = None,
        base_dir: Optional[str] = None,
    ):
        self.settings = settings or Settings()
        self.host_logger = host_logger or get_host_logger()
        self.loader = loader
        self.cwd = cwd
        self.base_dir = base_dir or str(INSTALL_DIR)

    def make_context(
        self, identifier: str, extended_location: Optional[str] = None
    ) -> ResolutionContext:
        return ResolutionContext(
            identifier=identifier,
            cwd=self.cwd or os.getcwd(),
            base_dir=self.base_dir,
            extended_location=extended_location,
        )

    def resolve(
        self, identifier: str, extended_location: Optional[str] = None
    ) -> Optional[Any]:
        """Load the first candidate module for `identifier`.

        Args:
            identifier: Path, bare name or scoped package name of the plugin.
            extended_location: Passed through to the module loader untouched.

        Returns:
            Any | None: The loaded module, or None if no candidate loaded.
            Resolution failures are logged as warnings, never raised.
        """
        context = self.make_context(identifier, extended_location)

        if context.is_local:
            plugin = self._attempt(context.identifier, context)
            if plugin is None:
                plugin = self._attempt(context.cwd_path, context)
            if plugin is None:
                self.host_logger.log.warning(
                    f"Could not find plugin from path: {context.cwd_path}"
                )
            return plugin

        for make_candidate in PACKAGE_CANDIDATES:
            candidate = make_candidate(context, self.settings)
            if candidate is None:
                continue
            plugin = self._attempt(candidate, context)
            if plugin is not None:
                return plugin

        self.host_logger.log.warning(f"Could not find plugin: {identifier}")
        return None

    def _attempt(self, candidate: str, context: ResolutionContext) -> Optional[Any]:
        plugin = self.loader(candidate, context.extended_location)
        if plugin is not None:
            self.host_logger.verbose.info(f"Found plugin using: {candidate}")
        return plugin
