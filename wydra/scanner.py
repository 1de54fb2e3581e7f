"""
Сканер файлов шаблонов.

Каждый файл <code><suffix> в каталоге шаблонов становится шорткодом <code>.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, List

from .config.model import TPL_SUFFIX

logger = logging.getLogger(__name__)

# Файлы с такими первыми символами не публикуются как шорткоды
EXCLUDE_PREFIXES = (".", "!", "~", "-")


@dataclass(frozen=True)
class TemplateRecord:
    """Найденный файл шаблона."""
    code: str
    source_name: str  # имя файла как в каталоге
    file_path: Path


def scan_templates(paths: Iterable[Path], suffix: str = TPL_SUFFIX) -> List[TemplateRecord]:
    """
    Собирает шаблоны из каталогов в порядке их перечисления.

    Несуществующие каталоги пропускаются. Одноимённый шаблон из более
    позднего каталога заменяет найденный ранее.
    """
    found: Dict[str, TemplateRecord] = {}
    for path in paths:
        if not path.is_dir():
            logger.debug("Template path %s does not exist, skipped", path)
            continue
        for file in sorted(path.iterdir(), key=lambda p: p.name):
            name = file.name
            if name.startswith(EXCLUDE_PREFIXES):
                continue
            if not file.is_file() or not name.endswith(suffix):
                continue
            code = name[: -len(suffix)]
            if not code:
                continue
            if code in found:
                logger.debug("Template '%s' from %s overrides %s", code, file, found[code].file_path)
            found[code] = TemplateRecord(code=code, source_name=name, file_path=file)
    return list(found.values())


__all__ = ["TemplateRecord", "scan_templates", "EXCLUDE_PREFIXES"]
