"""
Base exceptions for user-facing errors.

Problems a site author can fix (bad configuration, broken template files)
inherit from WydraUserError.

Integration bugs, such as asking for the current render instance outside
of any render, must NOT inherit from WydraUserError: they propagate with
full tracebacks.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class WydraUserError(Exception):
    """
    Base class for all user-facing errors in Wydra.
    """
    pass


class ConfigError(WydraUserError):
    """Ошибка загрузки конфигурации wydra.yaml."""
    pass


class TemplateRenderError(WydraUserError):
    """Шаблон шорткода не компилируется или падает при рендеринге."""

    def __init__(self, message: str, template_path: Optional[Path] = None, cause: Optional[Exception] = None):
        super().__init__(f"Template render error in '{template_path}': {message}")
        self.template_path = template_path
        self.cause = cause


class EmptyStackError(RuntimeError):
    """
    Запрос текущего экземпляра рендеринга при пустом стеке.

    Означает ошибку интеграции (хелпер вызван вне обработчика шорткода),
    а не проблему во входных данных.
    """
    pass


__all__ = ["WydraUserError", "ConfigError", "TemplateRenderError", "EmptyStackError"]
