"""Fakes and sample plugins shared by the test modules."""

import logging
import os
from types import SimpleNamespace

CWD = os.path.join(os.sep, "work", "project")
BASE_DIR = os.path.join(os.sep, "opt", "hookline", "src", "hookline")


class SamplePlugin:
    name = "sample"

    def __init__(self, options=None):
        self.options = options

    def apply(self, host):
        host.append(self.name)


class RecordingLoader:
    """Fake module loader returning preset modules and recording every attempt."""

    def __init__(self, modules=None):
        self.modules = dict(modules or {})
        self.calls = []

    def __call__(self, target, extended_location=None):
        self.calls.append((target, extended_location))
        return self.modules.get(target)

    @property
    def targets(self):
        return [target for target, _ in self.calls]


def plugin_module(constructor=SamplePlugin):
    return SimpleNamespace(default=constructor)


def bundled_path(identifier, base_dir=BASE_DIR):
    return os.path.join(base_dir, "..", "plugins", identifier, "__init__.py")


def warning_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno == logging.WARNING]


def error_messages(caplog):
    return [r.getMessage() for r in caplog.records if r.levelno == logging.ERROR]
