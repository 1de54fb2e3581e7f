"""
Рендеринг шорткодов: html-элементы и файлы шаблонов Jinja2.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional, Sequence

from jinja2 import Environment, FileSystemLoader, Template, TemplateError
from markupsafe import escape

from .data.extract import unwrap
from .errors import TemplateRenderError

if TYPE_CHECKING:
    from .instance import RenderInstance

logger = logging.getLogger(__name__)

# Шорткод, который только снимает <pre> с содержимого
PRE_TAG = "pre"
# Шорткод с произвольным именем тега в первом позиционном атрибуте
GENERIC_TAG = "tag"


def _pop_tag_name(attrs: Dict[Any, str]) -> Optional[str]:
    for key in (0, "0"):
        if key in attrs:
            return attrs.pop(key)
    return None


def format_attributes(attrs: Mapping[Any, Any]) -> str:
    """key="value" через пробел, ключи и значения экранированы."""
    return " ".join(f'{escape(str(k))}="{escape(str(v))}"' for k, v in attrs.items())


def render_element(instance: RenderInstance) -> str:
    """
    Рендерит шорткод как html-элемент.

    Особые случаи:
    - pre: содержимое освобождается от <pre> и выводится без обёртки;
    - tag: имя тега берётся из первого позиционного атрибута.
    """
    tag = instance.tag_value

    if tag == PRE_TAG:
        instance.content = unwrap(instance.content)
        return instance.render_content()

    if tag == GENERIC_TAG:
        if not instance.attrs:
            return instance.render_content()
        name = _pop_tag_name(instance.attrs)
        if not name:
            return instance.render_content()
        tag = name

    attributes = format_attributes(instance.attrs)
    return (
        f"<{tag}"
        + (f" {attributes}" if attributes else "")
        + f">{instance.render_content()}</{tag}>"
    )


class TemplateRenderer:
    """
    Исполняет файлы шаблонов через Jinja2.

    Скомпилированные шаблоны кэшируются по пути. Каталоги шаблонов
    подключены к загрузчику, поэтому {% include %} и {% extends %}
    работают относительно них.
    """

    def __init__(self, search_paths: Sequence[Path]):
        self.env = Environment(
            loader=FileSystemLoader([str(p) for p in search_paths]),
            autoescape=False,
            keep_trailing_newline=True,
        )
        self._cache: Dict[Path, Template] = {}

    def _load(self, path: Path) -> Template:
        template = self._cache.get(path)
        if template is None:
            source = path.read_text(encoding="utf-8")
            template = self.env.from_string(source)
            self._cache[path] = template
        return template

    def render(self, path: Path, context: Mapping[str, Any]) -> str:
        """
        Рендерит шаблон с переданным контекстом.

        Raises:
            TemplateRenderError: Ошибка компиляции или выполнения шаблона
        """
        try:
            return self._load(path).render(**context)
        except TemplateError as e:
            logger.debug("Template %s failed: %s", path, e)
            raise TemplateRenderError(str(e), template_path=path, cause=e) from e


__all__ = ["render_element", "format_attributes", "TemplateRenderer", "PRE_TAG", "GENERIC_TAG"]
