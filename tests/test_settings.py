import logging

import pytest

from board_backend.config import settings as config_module
from board_backend.config.logging_config import setup_logging
from board_backend.config.settings import BoardSettings, get_config


@pytest.mark.parametrize(
    "env,expected",
    [
        ("development", "DevelopmentConfig"),
        ("testing", "TestingConfig"),
        ("production", "ProductionConfig"),
        ("staging", "DevelopmentConfig"),
    ],
)
def test_get_config_selects_class_by_name(env, expected):
    assert get_config(env) is getattr(config_module, expected)


def test_get_config_reads_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")

    assert get_config() is config_module.ProductionConfig


def test_board_settings_follow_selected_config():
    settings = BoardSettings.from_config(get_config("testing"))

    assert settings.upload_path == config_module.TestingConfig.UPLOAD_PATH
    assert settings.default_image_url.endswith("/defaultImage.png")


def test_setup_logging_adds_handlers_once():
    root = logging.getLogger()

    setup_logging("INFO")
    handlers = list(root.handlers)
    setup_logging("DEBUG")

    assert root.handlers == handlers
    assert logging.getLogger("board_backend").level == logging.DEBUG
