"""
Тестовый хост для движка шорткодов.

Находит в тексте конструкции [name attrs]content[/name] и [name attrs],
передаёт известные движку шорткоды в Wydra.dispatch и подставляет результат.
Вложенные одноимённые шорткоды не поддерживаются: для них предназначены
суффиксы глубины (w-div-1 внутри w-div).
"""

from __future__ import annotations

import re
from typing import Dict, List, Optional, Union

from wydra import Wydra

_SHORTCODE_RE = re.compile(
    r"\[(?P<name>[\w-]+)(?P<attrs>[^\]]*)\](?:(?P<content>.*?)\[/(?P=name)\])?",
    re.DOTALL,
)

_ATTR_RE = re.compile(
    r'(?P<key>[\w-]+)\s*=\s*"(?P<qval>[^"]*)"'
    r'|(?P<key2>[\w-]+)\s*=\s*(?P<val>[^\s"]+)'
    r'|"(?P<qpos>[^"]*)"'
    r'|(?P<pos>\S+)'
)


def parse_attrs(text: str) -> Dict[Union[str, int], str]:
    """Разбирает атрибуты шорткода; позиционные получают целые ключи."""
    attrs: Dict[Union[str, int], str] = {}
    index = 0
    for m in _ATTR_RE.finditer(text):
        if m.group("key") is not None:
            attrs[m.group("key")] = m.group("qval")
        elif m.group("key2") is not None:
            attrs[m.group("key2")] = m.group("val")
        else:
            value = m.group("qpos") if m.group("qpos") is not None else m.group("pos")
            attrs[index] = value
            index += 1
    return attrs


class FakeHost:
    """
    Хост с раскрытием по регулярному выражению.

    engine устанавливается после создания движка.
    """

    def __init__(self, pages: Optional[Dict[str, str]] = None, page_name: Optional[str] = None):
        self.engine: Optional[Wydra] = None
        self.pages: Dict[str, str] = dict(pages or {})
        self.page_name = page_name
        # глубина стека движка при каждом вызове expand_markers
        self.depths: List[int] = []

    def expand_markers(self, text: str) -> str:
        assert self.engine is not None, "engine is not attached to the host"
        engine = self.engine
        self.depths.append(engine.stack.depth)

        def _replace(m: re.Match) -> str:
            name = m.group("name")
            if engine.registry.resolve(name) is None:
                return m.group(0)
            return engine.dispatch(name, parse_attrs(m.group("attrs")), m.group("content") or "")

        return _SHORTCODE_RE.sub(_replace, text)

    def fetch_external_content(self, page: str) -> Optional[str]:
        return self.pages.get(page)

    def current_page_name(self) -> Optional[str]:
        return self.page_name
