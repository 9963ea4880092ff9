import logging

import pytest

from hookline.core.logger import LOGGER_NAME, configure_logging, create_logger, get_host_logger


@pytest.mark.parametrize(
    "level, log_info, verbose_info, very_verbose_debug",
    [
        ("quiet", False, False, False),
        ("info", True, False, False),
        ("verbose", True, True, False),
        ("veryVerbose", True, True, True),
    ],
)
def test_channel_levels(level, log_info, verbose_info, very_verbose_debug):
    host_logger = create_logger(level, name="hookline_test_channels")

    assert host_logger.log.isEnabledFor(logging.INFO) is log_info
    assert host_logger.verbose.isEnabledFor(logging.INFO) is verbose_info
    assert host_logger.very_verbose.isEnabledFor(logging.DEBUG) is very_verbose_debug


def test_quiet_still_reports_errors():
    host_logger = create_logger("quiet", name="hookline_test_quiet")

    assert not host_logger.log.isEnabledFor(logging.WARNING)
    assert host_logger.log.isEnabledFor(logging.ERROR)


def test_channel_names():
    host_logger = create_logger("info", name="hookline_test_names")

    assert host_logger.log.name == "hookline_test_names"
    assert host_logger.verbose.name == "hookline_test_names.verbose"
    assert host_logger.very_verbose.name == "hookline_test_names.very_verbose"


def test_unknown_level_rejected():
    with pytest.raises(ValueError):
        create_logger("chatty")


def console_handlers(logger):
    return [h for h in logger.handlers if h.get_name() == "hookline-console"]


def test_configure_logging_adds_one_handler():
    root = logging.getLogger(LOGGER_NAME)
    existing = list(root.handlers)
    try:
        configure_logging("verbose")
        configure_logging("verbose")

        assert len(console_handlers(root)) == 1
    finally:
        for handler in [h for h in root.handlers if h not in existing]:
            root.removeHandler(handler)


def test_configure_logging_ignores_file_handlers(tmp_path):
    root = logging.getLogger(LOGGER_NAME)
    existing = list(root.handlers)
    file_handler = logging.FileHandler(tmp_path / "hookline.log")
    root.addHandler(file_handler)
    try:
        configure_logging("info")

        assert len(console_handlers(root)) == 1
        assert file_handler in root.handlers
    finally:
        for handler in [h for h in root.handlers if h not in existing]:
            root.removeHandler(handler)
        file_handler.close()


def test_get_host_logger_leaves_levels_alone():
    log = logging.getLogger("hookline_test_untouched")
    log.setLevel(logging.DEBUG)

    host_logger = get_host_logger("hookline_test_untouched")

    assert host_logger.log is log
    assert log.level == logging.DEBUG
    assert host_logger.verbose.level == logging.NOTSET
