"""
Структурированные данные: извлечение YAML из текста и именованное хранилище.
"""

from __future__ import annotations

from .extract import extract, parse_yaml, unwrap
from .paths import array_path
from .store import DataEntry, DataStore, content_hash

__all__ = [
    "extract",
    "parse_yaml",
    "unwrap",
    "array_path",
    "DataEntry",
    "DataStore",
    "content_hash",
]
