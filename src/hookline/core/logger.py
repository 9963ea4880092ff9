"""Host logger channels used while resolving and constructing plugins.

A ``HostLogger`` bundles three standard library loggers:

- ``log``: user-facing messages (warnings about missing plugins, errors from
  plugin constructors).
- ``verbose``: diagnostic trace, e.g. which candidate location a plugin was
  found at. Silent unless the level is ``verbose`` or ``veryVerbose``.
- ``very_verbose``: the noisiest trace, enabled only for ``veryVerbose``.
"""

import logging
from dataclasses import dataclass

LOGGER_NAME = "hookline"

_LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"
_HANDLER_NAME = "hookline-console"

# level name -> (log, verbose, very_verbose)
_CHANNEL_LEVELS = {
    "quiet": (logging.ERROR, logging.CRITICAL + 1, logging.CRITICAL + 1),
    "info": (logging.INFO, logging.CRITICAL + 1, logging.CRITICAL + 1),
    "verbose": (logging.INFO, logging.INFO, logging.CRITICAL + 1),
    "veryVerbose": (logging.DEBUG, logging.DEBUG, logging.DEBUG),
}


@dataclass(frozen=True)
class HostLogger:
    """The logging sink handed to the resolver and instantiator."""

    log: logging.Logger
    verbose: logging.Logger
    very_verbose: logging.Logger


def get_host_logger(name: str = LOGGER_NAME) -> HostLogger:
    """Return the channels under `name` without touching their levels.

    Used when the caller does not pass a logger, so the application's own
    logging configuration stays in charge.
    """
    return HostLogger(
        log=logging.getLogger(name),
        verbose=logging.getLogger(f"{name}.verbose"),
        very_verbose=logging.getLogger(f"{name}.very_verbose"),
    )


def create_logger(log_level: str = "info", name: str = LOGGER_NAME) -> HostLogger:
    """Create a ``HostLogger`` and set the level of each channel.

    Args:
        log_level: One of ``quiet``, ``info``, ``verbose`` or ``veryVerbose``.
        name: Base logger name; channels are ``<name>``, ``<name>.verbose``
            and ``<name>.very_verbose``.

    Returns:
        HostLogger: The configured channels.

    Raises:
        ValueError: If ``log_level`` is unknown.
    """
    if log_level not in _CHANNEL_LEVELS:
        raise ValueError(f"Unknown log level: {log_level}")

    log_lvl, verbose_lvl, very_verbose_lvl = _CHANNEL_LEVELS[log_level]

    host_logger = get_host_logger(name)
    host_logger.log.setLevel(log_lvl)
    host_logger.verbose.setLevel(verbose_lvl)
    host_logger.very_verbose.setLevel(very_verbose_lvl)

    return host_logger


def configure_logging(level_name: str = "info") -> HostLogger:
    """Attach a stream handler to the hookline logger and set channel levels.

    Calling this more than once does not add duplicate handlers.
    """
    host_logger = create_logger(level_name)

    root = host_logger.log
    if not any(h.get_name() == _HANDLER_NAME for h in root.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_LOG_FORMAT))
        root.addHandler(handler)

    return host_logger
