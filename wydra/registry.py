"""
Реестр шорткодов и разрешение алиасов.

Каждый канонический код (div, define, имя шаблона) публикуется под набором
поверхностных имён: с каждым префиксом и, для элементов с ограничением
вложенности, с числовым суффиксом глубины (w-div-0 … w-div-5).
"""

from __future__ import annotations

import enum
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List, Mapping, Optional, Pattern, Sequence, Tuple

from .scanner import TemplateRecord

logger = logging.getLogger(__name__)

DEFINE_CODE = "define"


class HandlerKind(enum.Enum):
    ELEMENT = "element"
    DATA_DEFINE = "define"
    TEMPLATE = "template"


@dataclass(frozen=True)
class MarkerDefinition:
    """Каноническое описание шорткода."""
    code: str
    kind: HandlerKind
    template_path: Optional[Path] = None
    max_depth: Optional[int] = None


def clamp_depth(depth: int, bound: int) -> int:
    """Приводит глубину к диапазону [1, bound]."""
    return min(max(int(depth), 1), bound)


class MarkerRegistry:
    """
    Таблица канонических определений и плоская таблица алиасов.

    Строится один раз и дальше только читается.
    """

    def __init__(self, prefixes: Sequence[str], separator: str = "-"):
        self.prefixes: Tuple[str, ...] = tuple(prefixes)
        self.separator = separator
        self.definitions: Dict[str, MarkerDefinition] = {}
        self.aliases: Dict[str, str] = {}
        # Элементы в порядке конфигурации с регулярками для element_tag_for
        self._element_patterns: List[Tuple[str, Pattern[str]]] = []

    @classmethod
    def build(
        cls,
        element_tags: Sequence[str],
        max_depth: int,
        template_records: Iterable[TemplateRecord],
        prefixes: Sequence[str],
        separator: str = "-",
        depth_overrides: Optional[Mapping[str, int]] = None,
    ) -> "MarkerRegistry":
        """
        Строит реестр: элементы, define, шаблоны, затем все алиасы.

        Args:
            element_tags: Имена html-подобных шорткодов
            max_depth: Верхняя граница суффиксов глубины
            template_records: Результат сканирования каталогов шаблонов
            prefixes: Префиксы поверхностных имён
            separator: Разделитель префикса и кода
            depth_overrides: Индивидуальная глубина тегов (будет ограничена max_depth)
        """
        registry = cls(prefixes, separator)
        overrides = depth_overrides or {}

        for tag in element_tags:
            depth = clamp_depth(overrides.get(tag, max_depth), max_depth)
            registry._define(MarkerDefinition(code=tag, kind=HandlerKind.ELEMENT, max_depth=depth))

        registry._define(MarkerDefinition(code=DEFINE_CODE, kind=HandlerKind.DATA_DEFINE))

        for record in template_records:
            registry._define(MarkerDefinition(
                code=record.code,
                kind=HandlerKind.TEMPLATE,
                template_path=record.file_path,
            ))

        for definition in registry.definitions.values():
            registry._register_aliases(definition)

        registry._compile_element_patterns(element_tags)
        return registry

    def _define(self, definition: MarkerDefinition) -> None:
        if definition.code in self.definitions:
            logger.debug(
                "Shortcode '%s' (%s) replaces %s definition",
                definition.code, definition.kind.value, self.definitions[definition.code].kind.value,
            )
        self.definitions[definition.code] = definition

    def _surface(self, prefix: str, code: str) -> str:
        return f"{prefix}{self.separator}{code}"

    def _register_aliases(self, definition: MarkerDefinition) -> None:
        code = definition.code
        for prefix in self.prefixes:
            self.aliases[self._surface(prefix, code)] = code

        if definition.max_depth:
            # суффиксы глубины включительно: w-div-0 … w-div-N
            for i in range(definition.max_depth + 1):
                for prefix in self.prefixes:
                    self.aliases[f"{self._surface(prefix, code)}-{i}"] = code

    def _compile_element_patterns(self, element_tags: Sequence[str]) -> None:
        prefix_group = "|".join(re.escape(p) for p in self.prefixes)
        sep = re.escape(self.separator)
        self._element_patterns = [
            (tag, re.compile(rf"^(?:{prefix_group}){sep}{re.escape(tag)}(?:-\d+)?$"))
            for tag in element_tags
        ]

    # ---- Чтение ----

    def resolve(self, surface_name: str) -> Optional[str]:
        """Канонический код по поверхностному имени или None."""
        return self.aliases.get(surface_name)

    def definition(self, surface_name: str) -> Optional[MarkerDefinition]:
        """Определение по поверхностному имени или каноническому коду."""
        code = self.resolve(surface_name)
        if code is None:
            code = surface_name
        return self.definitions.get(code)

    def template_for(self, surface_name: str) -> Optional[Path]:
        """Путь к файлу шаблона по имени шорткода или None."""
        definition = self.definition(surface_name)
        if definition is None:
            return None
        return definition.template_path

    def element_tag_for(self, surface_name: str) -> Optional[str]:
        """
        Имя html-тега по поверхностному имени шорткода.

        Суффикс глубины отбрасывается: w-div-2 → div.
        """
        for tag, pattern in self._element_patterns:
            if pattern.match(surface_name):
                return tag
        return None

    def aliases_for(self, code: str) -> List[str]:
        """Все поверхностные имена канонического кода в порядке регистрации."""
        return [alias for alias, target in self.aliases.items() if target == code]

    def surface_names(self) -> List[str]:
        """Все зарегистрированные имена - для регистрации в токенизаторе хоста."""
        return list(self.aliases.keys())


__all__ = ["HandlerKind", "MarkerDefinition", "MarkerRegistry", "DEFINE_CODE", "clamp_depth"]
