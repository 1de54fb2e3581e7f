"""
Протокол хоста, в который встроен движок.

Хост находит шорткоды в тексте и вызывает точки входа движка; движок, в свою
очередь, обращается к хосту для рекурсивного раскрытия вложенного содержимого.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ExpansionHost(Protocol):
    """
    Обратные вызовы, которые движок получает от хоста.
    """

    def expand_markers(self, text: str) -> str:
        """
        Раскрывает все шорткоды в тексте (может рекурсивно вызвать движок).
        """
        ...

    def fetch_external_content(self, page: str) -> Optional[str]:
        """
        Возвращает текст другой страницы (атрибут source-page) или None.
        """
        ...

    def current_page_name(self) -> Optional[str]:
        """
        Имя текущей страницы - имя блока данных w-define по умолчанию.
        """
        ...


__all__ = ["ExpansionHost"]
