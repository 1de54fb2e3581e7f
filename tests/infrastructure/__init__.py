"""
Unified test infrastructure for Wydra.

Modules:
- file_utils: Utilities for creating files and directories
- host_utils: Fake host that finds shortcodes in text and drives the engine
"""

from .file_utils import write, write_template
from .host_utils import FakeHost, parse_attrs

__all__ = [
    # File utilities
    "write", "write_template",

    # Host utilities
    "FakeHost", "parse_attrs",
]
