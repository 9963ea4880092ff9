"""Logging mixin shared by hookline components."""

import logging


class Loggable:
    """Give subclasses a ``self.logger`` named after their module and class.

    The logger is a plain standard-library ``logging.Logger``; hookline never
    installs handlers on it, so output follows whatever the application
    configured (see ``hookline.core.logger.configure_logging``).
    """

    def __init__(self):
        cls = type(self)
        self.logger = logging.getLogger(f"{cls.__module__}.{cls.__name__}")
