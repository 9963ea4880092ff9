"""Structural checks for constructed plugin instances.

The validator never rejects a plugin. It reports what a host would trip over
later (a missing `name`, an `apply` that cannot be called) so the problem is
visible at load time instead of when the host first uses the plugin.
"""

from typing import Any, List

from ..base.loggable import Loggable


class PluginValidator(Loggable):
    """Check that a plugin instance exposes the hooks the host relies on."""

    def validate_instance(self, instance: Any) -> List[str]:
        """Validate a constructed plugin.

        Args:
            instance: The object returned by the plugin constructor.

        Returns:
            List[str]: Descriptions of the problems found; empty if valid.
        """
        errors = []
        kind = type(instance).__name__

        name = getattr(instance, "name", None)
        if not isinstance(name, str) or not name.strip():
            errors.append(f"{kind} does not define a non-empty string 'name'")

        if not callable(getattr(instance, "apply", None)):
            errors.append(f"{kind} does not define a callable 'apply'")

        init_hook = getattr(instance, "init", None)
        if init_hook is not None and not callable(init_hook):
            errors.append(f"{kind} defines 'init' but it is not callable")

        if errors:
            self.logger.debug(f"Validation of {kind} found {len(errors)} issue(s)")
        return errors
