"""Module loading primitive used by the plugin resolver.

`try_require()` loads a module from either a filesystem path or a package
specifier and returns `None` instead of raising when that fails. The resolver
relies on this contract to probe candidate locations one after another.

Package specifiers use the host's naming conventions and are translated to
dotted module names before importing:

- ``hookline-plugin-npm`` -> ``hookline_plugin_npm``
- ``@hookline-plugins/npm`` -> ``hookline_plugins.npm``
"""

import importlib
import importlib.util
import os
import re
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Iterator, Optional

from ..base.loggable import Loggable

_WINDOWS_PATH = re.compile(r"^[A-Z]:\\")


def is_local_path(identifier: str) -> bool:
    """Return True if the identifier names a filesystem location.

    Relative paths start with ``.``, POSIX absolute paths with ``/`` and
    Windows absolute paths with a drive letter followed by ``:\\``.
    """
    return (
        identifier.startswith(".")
        or identifier.startswith("/")
        or bool(_WINDOWS_PATH.match(identifier))
    )


def specifier_to_module_name(specifier: str) -> str:
    """Translate a package specifier into an importable dotted module name."""
    return specifier.lstrip("@").replace("/", ".").replace("-", "_")


class ModuleLoader(Loggable):
    """Load plugin modules by path or specifier without raising.

    Nothing is cached here: module specifiers go through the normal import
    system, and file modules are re-executed on every call.
    """

    def try_require(
        self, target: str, extended_location: Optional[str] = None
    ) -> Optional[Any]:
        """Load the module at `target`, or return None if it cannot be loaded.

        Args:
            target: A filesystem path or a package specifier.
            extended_location: Directory used to resolve relative paths and
                searched first for package specifiers.

        Returns:
            Any | None: The loaded module, or None on any failure.
        """
        try:
            if is_local_path(target) or os.path.isabs(target):
                return self._load_from_path(target, extended_location)
            return self._load_from_specifier(target, extended_location)
        except (Exception, SystemExit) as e:
            self.logger.debug(f"Could not load {target}: {e!r}")
            return None

    def load_module(self, module_name: str, file_path: Path) -> Any:
        """Execute a Python source file as a module.

        Directories' ``__init__.py`` files are loaded as packages so relative
        imports inside a plugin keep working. The module is registered in
        `sys.modules` while it executes and removed again if execution fails.

        Raises:
            ImportError: If a spec cannot be created.
        """
        search_locations = (
            [str(file_path.parent)] if file_path.name == "__init__.py" else None
        )
        spec = importlib.util.spec_from_file_location(
            module_name, file_path, submodule_search_locations=search_locations
        )
        if not spec or not spec.loader:
            raise ImportError(f"Cannot load module from {file_path}")

        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
        return module

    def _load_from_path(self, target: str, extended_location: Optional[str]) -> Any:
        base = extended_location or os.getcwd()
        path = Path(os.path.join(base, target))

        file_path = self._find_source(path)
        if file_path is None:
            raise ModuleNotFoundError(f"No module found at {path}")

        return self.load_module(self._module_name_for(file_path), file_path)

    @staticmethod
    def _find_source(path: Path) -> Optional[Path]:
        if path.is_dir():
            init_file = path / "__init__.py"
            return init_file if init_file.is_file() else None
        if path.is_file():
            return path
        with_suffix = path.with_name(path.name + ".py")
        if with_suffix.is_file():
            return with_suffix
        return None

    @staticmethod
    def _module_name_for(file_path: Path) -> str:
        resolved = file_path.resolve()
        stem = resolved.parent.name if resolved.name == "__init__.py" else resolved.stem
        stem = re.sub(r"\W", "_", stem)
        return f"hookline_local_{stem}_{abs(hash(str(resolved))):x}"

    def _load_from_specifier(
        self, target: str, extended_location: Optional[str]
    ) -> Any:
        module_name = specifier_to_module_name(target)
        with _search_path(extended_location):
            module = importlib.import_module(module_name)

        # A bare directory imports as a namespace package with no code in it.
        origin = getattr(module.__spec__, "origin", None)
        if origin is None or origin == "namespace":
            sys.modules.pop(module_name, None)
            raise ModuleNotFoundError(f"{module_name} is a namespace package")
        return module


@contextmanager
def _search_path(location: Optional[str]) -> Iterator[None]:
    """Temporarily put `location` at the front of `sys.path`."""
    if not location or location in sys.path:
        yield
        return

    sys.path.insert(0, location)
    try:
        yield
    finally:
        if location in sys.path:
            sys.path.remove(location)


_default_loader: Optional[ModuleLoader] = None


def get_module_loader() -> ModuleLoader:
    """Get or create the shared module loader instance."""
    global _default_loader
    if _default_loader is None:
        _default_loader = ModuleLoader()
    return _default_loader


def try_require(target: str, extended_location: Optional[str] = None) -> Optional[Any]:
    """Load a module by path or specifier; return None instead of raising."""
    return get_module_loader().try_require(target, extended_location)
