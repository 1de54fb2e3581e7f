"""
Configuration loading for Wydra.
"""

from __future__ import annotations

from .load import load_config, configure_logging
from .model import WydraConfig, TPL_SUFFIX
from .paths import config_path, template_dirs

__all__ = [
    "WydraConfig",
    "TPL_SUFFIX",
    "load_config",
    "configure_logging",
    "config_path",
    "template_dirs",
]
