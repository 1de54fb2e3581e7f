"""
Wydra - рекурсивный движок шорткодов с данными в YAML.

Шорткоды разрешаются в html-элементы, файлы шаблонов Jinja2 или
именованные блоки данных; вложенное содержимое раскрывается рекурсивно
через хост.
"""

from __future__ import annotations

from .config import WydraConfig, load_config
from .data import DataStore, array_path, extract, parse_yaml, unwrap
from .engine import Wydra
from .errors import ConfigError, EmptyStackError, TemplateRenderError, WydraUserError
from .host import ExpansionHost
from .instance import InstanceStack, RenderInstance
from .registry import HandlerKind, MarkerDefinition, MarkerRegistry
from .scanner import TemplateRecord, scan_templates

__all__ = [
    "Wydra",
    "WydraConfig",
    "load_config",
    "ExpansionHost",
    "MarkerRegistry",
    "MarkerDefinition",
    "HandlerKind",
    "TemplateRecord",
    "scan_templates",
    "RenderInstance",
    "InstanceStack",
    "DataStore",
    "extract",
    "parse_yaml",
    "unwrap",
    "array_path",
    "WydraUserError",
    "ConfigError",
    "TemplateRenderError",
    "EmptyStackError",
]
