"""
Именованное хранилище данных, объявленных через w-define.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Optional

from .extract import extract

logger = logging.getLogger(__name__)


def content_hash(raw_content: str, name: str) -> str:
    """md5 от содержимого и имени блока."""
    return hashlib.md5((raw_content + name).encode("utf-8")).hexdigest()


@dataclass
class DataEntry:
    name: str
    hash: str
    data: Any


class DataStore:
    """
    Хранилище блоков данных.

    Ключ - имя блока. Повторное объявление с тем же именем не перезаписывает
    первое: новый блок ложится под ключ "<name>-<hash>".
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self._entries: Dict[str, DataEntry] = {}

    def define(self, name: str, raw_content: str) -> str:
        """
        Разбирает и сохраняет блок данных.

        Returns:
            Ключ, под которым блок сохранён
        """
        digest = content_hash(raw_content, name)
        key = name
        if key in self._entries:
            key = f"{name}-{digest}"
            logger.debug("Data block '%s' already defined, stored as '%s'", name, key)
        self._entries[key] = DataEntry(name=name, hash=digest, data=extract(raw_content, debug=self.debug))
        return key

    def lookup(self, name_or_hash: str) -> Optional[Any]:
        """Данные первого блока с таким именем или хешем (в порядке объявления)."""
        for entry in self._entries.values():
            if entry.name == name_or_hash or entry.hash == name_or_hash:
                return entry.data
        return None

    def get(self, key: str) -> Optional[DataEntry]:
        """Запись по ключу хранения."""
        return self._entries.get(key)

    def entries(self) -> List[DataEntry]:
        return list(self._entries.values())

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)


__all__ = ["DataStore", "DataEntry", "content_hash"]
