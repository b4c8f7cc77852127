from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

_SUPPORTED_LOG_LEVELS = {"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"}

_DEFAULT_BLOOM_CAPACITY = 1_000_000
_DEFAULT_BLOOM_ERROR_RATE = 0.01


def _parse_optional_int(raw: str | None) -> int | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid integer value '{raw}'") from exc


def _parse_optional_float(raw: str | None) -> float | None:
    if raw is None or raw.strip() == "":
        return None
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"Invalid float value '{raw}'") from exc


def _normalise_log_level(value: str | None) -> str:
    if value is None:
        return "INFO"
    value = value.strip().upper()
    if value not in _SUPPORTED_LOG_LEVELS:
        raise ValueError(
            f"Unsupported log level '{value}'. Expected one of {sorted(_SUPPORTED_LOG_LEVELS)}."
        )
    return value


def _infer_bloom_capacity_from_env() -> int:
    capacity = _parse_optional_int(os.getenv("GRAPHWALKER_BLOOM_CAPACITY"))
    if capacity is None:
        return _DEFAULT_BLOOM_CAPACITY
    if capacity < 1:
        raise ValueError(f"Bloom filter capacity must be positive, got {capacity}.")
    return capacity


def _infer_bloom_error_rate_from_env() -> float:
    error_rate = _parse_optional_float(os.getenv("GRAPHWALKER_BLOOM_ERROR_RATE"))
    if error_rate is None:
        return _DEFAULT_BLOOM_ERROR_RATE
    if not 0.0 < error_rate < 1.0:
        raise ValueError(f"Bloom filter error rate must lie in (0, 1), got {error_rate}.")
    return error_rate


@dataclass(frozen=True)
class RuntimeConfig:
    log_level: str


@dataclass(frozen=True)
class BloomConfig:
    capacity: int
    error_rate: float
    seed: int | None

    @property
    def resolved_seed(self) -> int:
        return 0 if self.seed is None else self.seed


def _configure_logging(level: str) -> None:
    logger = logging.getLogger("graphwalker")
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setLevel(level)
        formatter = logging.Formatter("%(levelname)s %(name)s: %(message)s")
        handler.setFormatter(formatter)
        logger.addHandler(handler)


@lru_cache(maxsize=None)
def runtime_config() -> RuntimeConfig:
    config = RuntimeConfig(log_level=_normalise_log_level(os.getenv("GRAPHWALKER_LOG_LEVEL")))
    _configure_logging(config.log_level)
    return config


@lru_cache(maxsize=None)
def bloom_config() -> BloomConfig:
    """Bloom filter defaults, read only when a `BloomFilterTracker` needs them."""

    return BloomConfig(
        capacity=_infer_bloom_capacity_from_env(),
        error_rate=_infer_bloom_error_rate_from_env(),
        seed=_parse_optional_int(os.getenv("GRAPHWALKER_BLOOM_SEED")),
    )


def reset_runtime_config_cache() -> None:
    runtime_config.cache_clear()
    bloom_config.cache_clear()
