import pytest
from pydantic import ValidationError

from hookline.config.settings import Settings


def test_defaults():
    settings = Settings(_env_file=None)

    assert settings.log_level == "info"
    assert settings.vendor_prefix == "hookline-plugin-"
    assert settings.official_scope == "@hookline-plugins"
    assert settings.canary_scope == "@hookline-canary"
    assert settings.bundled_entry == "__init__.py"
    assert settings.default_export == "default"
    assert settings.extended_location is None
    assert settings.enable_plugin_validation is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("HOOKLINE_VENDOR_PREFIX", "acme-plugin-")
    monkeypatch.setenv("HOOKLINE_OFFICIAL_SCOPE", "@acme")
    monkeypatch.setenv("HOOKLINE_ENABLE_PLUGIN_VALIDATION", "false")

    settings = Settings(_env_file=None)

    assert settings.vendor_prefix == "acme-plugin-"
    assert settings.official_scope == "@acme"
    assert settings.enable_plugin_validation is False


def test_env_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("HOOKLINE_LOG_LEVEL=veryVerbose\n")

    settings = Settings(_env_file=str(env_file))

    assert settings.log_level == "veryVerbose"


@pytest.mark.parametrize(
    "field, value",
    [
        ("log_level", "loud"),
        ("official_scope", "hookline-plugins"),
        ("canary_scope", "@scope/nested"),
        ("vendor_prefix", "  "),
        ("bundled_entry", ""),
    ],
)
def test_invalid_values_rejected(field, value):
    with pytest.raises(ValidationError):
        Settings(_env_file=None, **{field: value})


def test_assignment_is_validated():
    settings = Settings(_env_file=None)

    with pytest.raises(ValidationError):
        settings.canary_scope = "canary"
