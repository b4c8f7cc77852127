import logging

import pytest

from graphwalker import config as gw_config
from graphwalker.logging import get_logger


def test_logger_respects_runtime_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRAPHWALKER_LOG_LEVEL", "DEBUG")
    gw_config.reset_runtime_config_cache()

    logger = get_logger("tests.logging")

    assert logger.level == logging.DEBUG
    assert logger.name == "graphwalker.tests.logging"

    monkeypatch.delenv("GRAPHWALKER_LOG_LEVEL")
    gw_config.reset_runtime_config_cache()


def test_package_logger_has_single_handler():
    gw_config.reset_runtime_config_cache()
    gw_config.runtime_config()
    gw_config.reset_runtime_config_cache()
    gw_config.runtime_config()

    assert len(logging.getLogger("graphwalker").handlers) == 1
    assert get_logger().name == "graphwalker"
