"""
Извлечение структурированных данных (YAML) из текста страницы.

Текст приходит из визуального редактора: либо обёрнутым в <pre>, либо
html-экранированным с переносами <br />. Эвристика приводит его к чистому
YAML и разбирает безопасным загрузчиком ruamel.
"""

from __future__ import annotations

import logging
import re
import uuid
from typing import Any

from markupsafe import Markup
from ruamel.yaml import YAML

logger = logging.getLogger(__name__)

PRE_OPEN = "<pre>"
PRE_CLOSE = "</pre>"
# Типографское длинное тире, которое редактор подставляет вместо "-"
EM_DASH_ENTITY = "&#8212;"

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

_yaml = YAML(typ="safe")


def unwrap(content: str) -> str:
    """
    Извлекает текст между первым <pre> и последним </pre>.
    Без такой пары возвращает исходный текст.
    """
    start = content.find(PRE_OPEN)
    end = content.rfind(PRE_CLOSE)
    if start >= 0 and start + len(PRE_OPEN) <= end:
        return content[start + len(PRE_OPEN):end]
    return content


def parse_yaml(raw_content: str, debug: bool = False) -> Any:
    """
    Разбирает YAML из строки.

    Ошибки разбора не пробрасываются: возвращается пустой словарь,
    подробности пишутся в лог только в режиме отладки.
    """
    try:
        data = _yaml.load(raw_content)
    except Exception as e:
        if debug:
            logger.warning("YAML parse error /EOF\n%s\n/EOF; %s", raw_content, e)
        return {}
    if data is None:
        return {}
    return data


def _decode_rich_text(content: str) -> str:
    content = content.replace(EM_DASH_ENTITY, "-")
    content = _BR_RE.sub("", content)
    return Markup(content).unescape()


def extract(raw: str, debug: bool = False) -> Any:
    """
    Превращает «грязный» текст страницы в разобранные данные.

    1. Содержимое <pre> берётся как есть, иначе текст декодируется из html.
    2. Длинные тире заменяются на дефис, пробелы по краям срезаются.
    3. Документ-список ("- a") оборачивается во временный ключ,
       т.к. корневой список разбирается неустойчиво; после разбора
       обёртка снимается.

    Всегда возвращает значение (возможно пустой словарь), никогда не бросает.
    """
    content = unwrap(raw)
    if len(content) == len(raw):
        # <pre> не найден - это экранированный rich text
        content = _decode_rich_text(raw)

    content = content.replace(EM_DASH_ENTITY, "-").strip()

    list_wrap = None
    if content.startswith("- "):
        list_wrap = f"wydra_list_{uuid.uuid4().hex}"
        lines = content.splitlines()
        content = f"{list_wrap}:\n" + "".join(f"  {line}\n" for line in lines)

    data = parse_yaml(content, debug=debug)
    if list_wrap is not None and isinstance(data, dict) and data.get(list_wrap):
        data = data[list_wrap]
    return data


__all__ = ["unwrap", "extract", "parse_yaml", "EM_DASH_ENTITY"]
