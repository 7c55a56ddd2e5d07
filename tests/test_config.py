import importlib

import pytest

import storefront.config

KEYS = (
    "CURRENCY",
    "DECIMALS",
    "MONEY_DECIMALS",
    "EXPORT_DIR",
    "INVOICE_DIR",
    "INVOICE_EXPORT",
    "LOG_LEVEL",
)


@pytest.fixture
def env(monkeypatch):
    for k in KEYS:
        monkeypatch.delenv(k, raising=False)
    yield monkeypatch
    monkeypatch.undo()
    importlib.reload(storefront.config)


def _reload():
    return importlib.reload(storefront.config).settings


def test_defaults(env):
    s = _reload()
    assert s.currency == "USD"
    assert s.decimals == 2
    assert s.invoice_export is False
    assert s.log_level == "INFO"
    assert s.export_dir == str(storefront.config.ROOT_DIR / "exports")


def test_decimals_alias(env):
    env.setenv("MONEY_DECIMALS", "3")
    assert _reload().decimals == 3

    env.setenv("DECIMALS", "1")
    assert _reload().decimals == 1


def test_export_dir_alias(env, tmp_path):
    env.setenv("INVOICE_DIR", str(tmp_path / "inv"))
    assert _reload().export_dir == str(tmp_path / "inv")

    env.setenv("EXPORT_DIR", str(tmp_path / "exp"))
    assert _reload().export_dir == str(tmp_path / "exp")


@pytest.mark.parametrize(
    "raw, expected",
    [("true", True), ("1", True), ("Yes", True), ("on", True), ("false", False), ("0", False)],
)
def test_invoice_export_parsed(env, raw, expected):
    env.setenv("INVOICE_EXPORT", raw)
    assert _reload().invoice_export is expected


def test_log_level_uppercased(env):
    env.setenv("LOG_LEVEL", "debug")
    assert _reload().log_level == "DEBUG"


def test_negative_decimals_rejected(env):
    env.setenv("DECIMALS", "-1")
    with pytest.raises(RuntimeError):
        _reload()


def test_unknown_log_level_rejected(env):
    env.setenv("LOG_LEVEL", "bogus")
    with pytest.raises(RuntimeError):
        _reload()
