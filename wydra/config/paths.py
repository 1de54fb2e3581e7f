from __future__ import annotations

from pathlib import Path
from typing import List

# Single source of truth for the configuration file location.
CONFIG_FILE = "wydra.yaml"


def config_path(root: Path) -> Path:
    """Path to the configuration file <root>/wydra.yaml."""
    return (root / CONFIG_FILE).resolve()


def template_dirs(root: Path, template_paths: List[str]) -> List[Path]:
    """
    Absolute template directories in configured order.
    Relative entries are resolved against the project root.
    """
    out: List[Path] = []
    for raw in template_paths:
        p = Path(raw).expanduser()
        if not p.is_absolute():
            p = root / p
        out.append(p.resolve())
    return out
