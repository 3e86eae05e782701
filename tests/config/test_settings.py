import pytest

from sqlweave import DialectConfigurationError, DialectSettings, SQLiteDialect


def test_defaults_are_permissive():
    settings = DialectSettings()
    assert settings.strict_literals is False
    assert settings.require_order_for_paging is False


def test_from_env_reads_prefixed_flags():
    settings = DialectSettings.from_env(
        environ={"SQLWEAVE_STRICT_LITERALS": "yes", "SQLWEAVE_REQUIRE_ORDER_FOR_PAGING": "0"}
    )
    assert settings.strict_literals is True
    assert settings.require_order_for_paging is False


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("APP_REQUIRE_ORDER_FOR_PAGING", "on")
    settings = DialectSettings.from_env("APP_")
    assert settings.require_order_for_paging is True


def test_explicit_arguments_override_environment():
    settings = DialectSettings.from_env(
        environ={"SQLWEAVE_STRICT_LITERALS": "true"}, strict_literals=False
    )
    assert settings.strict_literals is False


def test_invalid_boolean_raises():
    with pytest.raises(DialectConfigurationError):
        DialectSettings.from_env(environ={"SQLWEAVE_STRICT_LITERALS": "maybe"})


def test_dialect_keeps_settings():
    settings = DialectSettings(strict_literals=True)
    assert SQLiteDialect(settings).settings is settings
    assert SQLiteDialect().settings == DialectSettings()
