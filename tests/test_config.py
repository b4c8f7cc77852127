import pytest

from graphwalker import config as gw_config


def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in [
        "GRAPHWALKER_LOG_LEVEL",
        "GRAPHWALKER_BLOOM_CAPACITY",
        "GRAPHWALKER_BLOOM_ERROR_RATE",
        "GRAPHWALKER_BLOOM_SEED",
    ]:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch: pytest.MonkeyPatch):
    _clear_env(monkeypatch)
    gw_config.reset_runtime_config_cache()
    yield
    gw_config.reset_runtime_config_cache()


def test_runtime_config_defaults():
    runtime = gw_config.runtime_config()
    bloom = gw_config.bloom_config()

    assert runtime.log_level == "INFO"
    assert bloom.capacity == 1_000_000
    assert bloom.error_rate == 0.01
    assert bloom.seed is None
    assert bloom.resolved_seed == 0


def test_runtime_config_is_cached():
    assert gw_config.runtime_config() is gw_config.runtime_config()


def test_log_level_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRAPHWALKER_LOG_LEVEL", "debug")
    gw_config.reset_runtime_config_cache()

    assert gw_config.runtime_config().log_level == "DEBUG"


def test_invalid_log_level(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRAPHWALKER_LOG_LEVEL", "chatty")
    gw_config.reset_runtime_config_cache()

    with pytest.raises(ValueError):
        gw_config.runtime_config()


def test_bloom_overrides(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("GRAPHWALKER_BLOOM_CAPACITY", "4096")
    monkeypatch.setenv("GRAPHWALKER_BLOOM_ERROR_RATE", "0.001")
    monkeypatch.setenv("GRAPHWALKER_BLOOM_SEED", "123")
    gw_config.reset_runtime_config_cache()

    bloom = gw_config.bloom_config()

    assert bloom.capacity == 4096
    assert bloom.error_rate == 0.001
    assert bloom.seed == 123
    assert bloom.resolved_seed == 123


@pytest.mark.parametrize(
    "key, value",
    [
        ("GRAPHWALKER_BLOOM_CAPACITY", "lots"),
        ("GRAPHWALKER_BLOOM_CAPACITY", "0"),
        ("GRAPHWALKER_BLOOM_ERROR_RATE", "often"),
        ("GRAPHWALKER_BLOOM_ERROR_RATE", "1.5"),
        ("GRAPHWALKER_BLOOM_SEED", "seven"),
    ],
)
def test_invalid_bloom_settings_only_fail_bloom_config(
    monkeypatch: pytest.MonkeyPatch, key: str, value: str
):
    monkeypatch.setenv(key, value)
    gw_config.reset_runtime_config_cache()

    assert gw_config.runtime_config().log_level == "INFO"
    with pytest.raises(ValueError):
        gw_config.bloom_config()


def test_bloom_config_is_not_read_by_runtime_config(monkeypatch: pytest.MonkeyPatch):
    gw_config.runtime_config()
    monkeypatch.setenv("GRAPHWALKER_BLOOM_CAPACITY", "32")

    assert gw_config.bloom_config().capacity == 32
