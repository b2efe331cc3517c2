import pytest
from pydantic import ValidationError

from app.config import Environment, Settings


def test_defaults():
    s = Settings(_env_file=None)

    assert s.app_name == "SmartCart"
    assert s.cart_file == "cart.json"
    assert s.operation_log_file == "cart_error.log"
    assert s.autosave_on_shutdown is False


def test_environment_variables_use_prefix(monkeypatch):
    monkeypatch.setenv("SMARTCART_CART_FILE", "/tmp/other-cart.json")
    monkeypatch.setenv("SMARTCART_ENVIRONMENT", "PRODUCTION")

    s = Settings(_env_file=None)

    assert s.cart_file == "/tmp/other-cart.json"
    assert s.environment == Environment.PRODUCTION
    assert s.is_production()


def test_log_level_normalized():
    assert Settings(_env_file=None, log_level="debug").log_level == "DEBUG"


def test_unknown_log_level_rejected():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_level="chatty")
