"""Configuration for zimcheck."""

from zimcheck.config.loader import load_config
from zimcheck.config.schema import BaseConfig, CheckerConfig

__all__ = ["BaseConfig", "CheckerConfig", "load_config"]
