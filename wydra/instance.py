"""
Экземпляр рендеринга шорткода и стек экземпляров.

Стек позволяет коду шаблона обращаться к атрибутам и содержимому текущего
шорткода без явной передачи экземпляра. Глубина стека равна текущей
глубине рекурсивного раскрытия; между вызовами верхнего уровня стек пуст.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Union

from .errors import EmptyStackError
from .rendering import render_element

# Целые ключи - позиционные атрибуты ([w-tag section] → {0: "section"})
AttrKey = Union[str, int]
Attrs = Dict[AttrKey, str]
Expander = Callable[[str], str]


def _is_positional(key: AttrKey) -> bool:
    if isinstance(key, int):
        return True
    return key.isdigit()


@dataclass
class RenderInstance:
    """
    Контекст одного вызова шорткода.

    tag_value - путь к файлу шаблона или имя html-тега.
    """
    tag_value: str
    attrs: Attrs
    content: str
    expander: Expander = field(repr=False)
    result: str = ""

    def attr(self, code: AttrKey, default: Any = None) -> Any:
        """
        Значение именованного атрибута.

        Если такого ключа нет, но позиционный атрибут равен code,
        атрибут считается флагом и возвращается True.
        """
        if not self.attrs:
            return default
        if code in self.attrs:
            return self.attrs[code]
        for key, value in self.attrs.items():
            if _is_positional(key) and value == code:
                return True
        return default

    def render_content(self) -> str:
        """Внутреннее содержимое с раскрытыми вложенными шорткодами."""
        return self.expander(self.content)

    def render(self, run_template: Callable[["RenderInstance"], str]) -> str:
        """
        Формирует результат: файл шаблона исполняется через run_template,
        всё остальное выводится как html-элемент.
        """
        if os.path.isfile(self.tag_value):
            self.result = run_template(self)
        else:
            self.result = render_element(self)
        return self.result


class InstanceStack:
    """LIFO-стек экземпляров рендеринга одного прохода."""

    def __init__(self):
        self._items: List[RenderInstance] = []

    def push(
        self,
        tag_value: str,
        attrs: Optional[Mapping[AttrKey, str]],
        content: Optional[str],
        expander: Expander,
    ) -> RenderInstance:
        instance = RenderInstance(
            tag_value=tag_value,
            attrs=dict(attrs or {}),
            content=content or "",
            expander=expander,
        )
        self._items.append(instance)
        return instance

    def pop(self) -> RenderInstance:
        if not self._items:
            raise EmptyStackError("pop() on empty render instance stack")
        return self._items.pop()

    def current(self) -> RenderInstance:
        """
        Текущий (верхний) экземпляр.

        Raises:
            EmptyStackError: Вызов вне рендеринга шорткода
        """
        if not self._items:
            raise EmptyStackError("No shortcode is being rendered")
        return self._items[-1]

    @contextmanager
    def entered(
        self,
        tag_value: str,
        attrs: Optional[Mapping[AttrKey, str]],
        content: Optional[str],
        expander: Expander,
    ) -> Iterator[RenderInstance]:
        """Кладёт экземпляр на стек и гарантированно снимает его на выходе."""
        instance = self.push(tag_value, attrs, content, expander)
        try:
            yield instance
        finally:
            self.pop()

    @property
    def depth(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)


__all__ = ["RenderInstance", "InstanceStack", "AttrKey", "Attrs", "Expander"]
