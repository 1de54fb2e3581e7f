"""
Загрузчик конфигурации wydra.yaml.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .model import WydraConfig
from .paths import config_path
from ..errors import ConfigError

DEBUG_ENV = "WYDRA_DEBUG"

_yaml = YAML(typ="safe")


def _read_yaml_map(path: Path) -> dict:
    """Читает YAML файл и возвращает словарь."""
    if not path.is_file():
        return {}
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8")) or {}
    except YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")
    return raw


def debug_from_env() -> bool:
    return os.environ.get(DEBUG_ENV, "").strip().lower() in ("1", "true", "yes", "on")


def configure_logging(cfg: WydraConfig) -> None:
    """В режиме отладки логгер пакета переключается на DEBUG."""
    if cfg.debug:
        logging.getLogger("wydra").setLevel(logging.DEBUG)


def load_config(root: Path) -> WydraConfig:
    """
    Загружает конфигурацию из <root>/wydra.yaml.

    Отсутствующий файл означает настройки по умолчанию.
    Переменная окружения WYDRA_DEBUG принудительно включает debug.

    Raises:
        ConfigError: Если файл не является корректным YAML-словарём
    """
    cfg = WydraConfig.from_dict(_read_yaml_map(config_path(root)))
    if debug_from_env():
        cfg.debug = True
    configure_logging(cfg)
    return cfg
