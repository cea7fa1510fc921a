import os
from dataclasses import asdict, dataclass, field
from typing import Dict


def _env(name: str, default: str = "") -> str:
    return os.getenv(name, default)


def _env_int(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, default))
    except (TypeError, ValueError):
        return default


@dataclass
class BaseConfig:
    DEBUG: bool = False
    TESTING: bool = False
    GEMINI_API_KEY: str = field(default_factory=lambda: _env("GEMINI_API_KEY"))
    GEMINI_MODEL: str = field(default_factory=lambda: _env("GEMINI_MODEL", "gemini-2.5-flash"))
    GEMINI_TIMEOUT: int = field(default_factory=lambda: _env_int("GEMINI_TIMEOUT", 60))
    CORS_ORIGINS: str = field(default_factory=lambda: _env("CORS_ORIGINS", "*"))
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "INFO"))


@dataclass
class DevelopmentConfig(BaseConfig):
    DEBUG: bool = True
    LOG_LEVEL: str = field(default_factory=lambda: _env("LOG_LEVEL", "DEBUG"))


@dataclass
class TestingConfig(BaseConfig):
    TESTING: bool = True


CONFIG_MAP = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": BaseConfig
}


def load_config(name: str) -> Dict[str, object]:
    config_class = CONFIG_MAP.get(name, BaseConfig)
    return asdict(config_class())
