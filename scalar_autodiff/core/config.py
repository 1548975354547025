"""
Engine configuration.

Tuning knobs for the convenience helpers and the update step live here, so
the rest of the package reads them from one place. Values can be overridden
through environment variables with `EngineConfig.from_env()`.
"""

import logging
import os
from dataclasses import dataclass, replace

UPDATE_SCOPES = ("parameters", "all")

_ENV_PREFIX = "SCALAR_AUTODIFF_"


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the scalar autodiff engine."""

    # Seed written into the output gradient by grad()/grads()/grads_list()
    default_seed: float = 1.0

    # apply_gradient() scope when none is passed: "parameters" or "all"
    update_scope: str = "parameters"

    # Level used by configure_logging()
    log_level: str = "WARNING"

    def __post_init__(self):
        if self.update_scope not in UPDATE_SCOPES:
            raise ValueError(f"update_scope must be one of {UPDATE_SCOPES}, got {self.update_scope!r}")

    @classmethod
    def from_env(cls, environ=None) -> "EngineConfig":
        """Build a config from SCALAR_AUTODIFF_* variables, falling back to defaults."""
        environ = os.environ if environ is None else environ
        overrides = {}
        if _ENV_PREFIX + "DEFAULT_SEED" in environ:
            overrides["default_seed"] = float(environ[_ENV_PREFIX + "DEFAULT_SEED"])
        if _ENV_PREFIX + "UPDATE_SCOPE" in environ:
            overrides["update_scope"] = environ[_ENV_PREFIX + "UPDATE_SCOPE"].strip().lower()
        if _ENV_PREFIX + "LOG_LEVEL" in environ:
            overrides["log_level"] = environ[_ENV_PREFIX + "LOG_LEVEL"].strip().upper()
        return cls(**overrides)

    def with_overrides(self, **changes) -> "EngineConfig":
        return replace(self, **changes)


_config = EngineConfig()


def get_config() -> EngineConfig:
    return _config


def set_config(config: EngineConfig) -> EngineConfig:
    """Install `config` process-wide and return the previous one."""
    global _config
    if not isinstance(config, EngineConfig):
        raise TypeError(f"expected EngineConfig, got {type(config)}")
    prev, _config = _config, config
    return prev


def configure_logging(level=None):
    """Attach a stderr handler to the package logger at `level` (config default)."""
    level = level or get_config().log_level
    logger = logging.getLogger("scalar_autodiff")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger
