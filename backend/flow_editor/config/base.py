"""
Config Base — registry and common interface for dataclass configs.

Each config is a ``@dataclass`` subclass of ``BaseConfig`` declaring
an ``_ENV_MAP`` (field → environment variable). ``get_config`` returns
the registered config populated from the current environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import Dict, Type, TypeVar

logger = getLogger(__name__)

C = TypeVar("C", bound="BaseConfig")

_config_registry: Dict[str, Type["BaseConfig"]] = {}


@dataclass
class BaseConfig:
    """Common interface of every config dataclass."""

    _ENV_MAP = {}

    @classmethod
    def get_default_instance(cls: Type[C]) -> C:
        return cls()

    @classmethod
    def get_config_name(cls) -> str:
        raise NotImplementedError

    @classmethod
    def get_display_name(cls) -> str:
        return cls.get_config_name()

    @classmethod
    def get_description(cls) -> str:
        return ""

    @classmethod
    def get_category(cls) -> str:
        return "general"


def register_config(cls: Type[C]) -> Type[C]:
    """Class decorator: make a config available through ``get_config``."""
    name = cls.get_config_name()
    if name in _config_registry:
        logger.warning(f"Config '{name}' re-registered")
    _config_registry[name] = cls
    return cls


def get_config(name: str) -> BaseConfig:
    """Return the named config, populated from the environment.

    Raises:
        KeyError: If no config is registered under ``name``.
    """
    return _config_registry[name].get_default_instance()
