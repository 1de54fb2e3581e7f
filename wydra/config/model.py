"""
Модель конфигурации движка шорткодов.
Поддерживает загрузку из YAML-словаря и обратную сериализацию.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

from ..errors import ConfigError

DEFAULT_ELEMENT_TAGS = ["pre", "tag", "div", "span", "p"]
DEFAULT_MAX_DEPTH = 5
# Порядок важен: при совпадении алиасов побеждает последний префикс
DEFAULT_PREFIXES = ["wydra", "w"]
DEFAULT_TEMPLATE_PATHS = ["templates"]
TPL_SUFFIX = ".tpl.html"


def _str_list(data: Dict[str, Any], key: str, default: List[str]) -> List[str]:
    value = data.get(key, default)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise ConfigError(f"{key}: expected a list of strings, got {type(value).__name__}")
    return [str(v) for v in value]


def _bool(data: Dict[str, Any], key: str) -> bool:
    value = data.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"{key}: expected true or false, got {value!r}")
    return value


@dataclass
class WydraConfig:
    """
    Настройки движка.

    element_tags         - html-подобные шорткоды (pre, tag и обычные элементы)
    max_depth            - верхняя граница суффиксов вложенности (w-div-0..w-div-N)
    depth_overrides      - индивидуальная глубина для отдельных тегов
    prefixes             - префиксы имён шорткодов (полный и короткий)
    separator            - разделитель между префиксом и кодом
    template_paths       - каталоги с файлами шаблонов
    template_suffix      - суффикс файлов шаблонов
    debug                - подробная диагностика ошибок разбора YAML
    define_dump_instance - w-define выводит маркер с хешем вместо пустой строки
    """
    element_tags: List[str] = field(default_factory=lambda: list(DEFAULT_ELEMENT_TAGS))
    max_depth: int = DEFAULT_MAX_DEPTH
    depth_overrides: Dict[str, int] = field(default_factory=dict)
    prefixes: List[str] = field(default_factory=lambda: list(DEFAULT_PREFIXES))
    separator: str = "-"
    template_paths: List[str] = field(default_factory=lambda: list(DEFAULT_TEMPLATE_PATHS))
    template_suffix: str = TPL_SUFFIX
    debug: bool = False
    define_dump_instance: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "WydraConfig":
        """Создание экземпляра из словаря (из YAML)."""
        try:
            max_depth = int(data.get("max_depth", DEFAULT_MAX_DEPTH))
        except (TypeError, ValueError):
            raise ConfigError(f"max_depth: expected an integer, got {data.get('max_depth')!r}")
        if max_depth < 1:
            raise ConfigError(f"max_depth: must be >= 1, got {max_depth}")

        overrides = data.get("depth_overrides", {}) or {}
        if not isinstance(overrides, dict):
            raise ConfigError("depth_overrides: expected a mapping tag -> depth")
        try:
            overrides = {str(k): int(v) for k, v in overrides.items()}
        except (TypeError, ValueError):
            raise ConfigError(f"depth_overrides: depths must be integers, got {overrides!r}")

        return cls(
            element_tags=_str_list(data, "element_tags", DEFAULT_ELEMENT_TAGS),
            max_depth=max_depth,
            depth_overrides=overrides,
            prefixes=_str_list(data, "prefixes", DEFAULT_PREFIXES),
            separator=str(data.get("separator", "-")),
            template_paths=_str_list(data, "template_paths", DEFAULT_TEMPLATE_PATHS),
            template_suffix=str(data.get("template_suffix", TPL_SUFFIX)),
            debug=_bool(data, "debug"),
            define_dump_instance=_bool(data, "define_dump_instance"),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Сериализация в словарь для YAML."""
        result: Dict[str, Any] = {
            "element_tags": list(self.element_tags),
            "max_depth": self.max_depth,
            "prefixes": list(self.prefixes),
            "separator": self.separator,
            "template_paths": list(self.template_paths),
            "template_suffix": self.template_suffix,
        }
        if self.depth_overrides:
            result["depth_overrides"] = dict(self.depth_overrides)
        if self.debug:
            result["debug"] = True
        if self.define_dump_instance:
            result["define_dump_instance"] = True
        return result


__all__ = ["WydraConfig", "DEFAULT_ELEMENT_TAGS", "DEFAULT_MAX_DEPTH", "DEFAULT_PREFIXES", "TPL_SUFFIX"]
