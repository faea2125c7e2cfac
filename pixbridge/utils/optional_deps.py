"""Optional dependency helpers.

The core `pixbridge` install only needs numpy and Pillow. YAML config files
need the ``yaml`` extra.
"""

from __future__ import annotations

from importlib import import_module
from types import ModuleType
from typing import Optional, Tuple


def optional_import(module_name: str) -> Tuple[Optional[ModuleType], Optional[BaseException]]:
    """Attempt to import a module, returning (module, error)."""

    try:
        return import_module(module_name), None
    except ImportError as exc:
        return None, exc


def require(module_name: str, *, extra: str, purpose: Optional[str] = None) -> ModuleType:
    """Import `module_name` or raise ImportError naming the pixbridge extra to install."""

    module, error = optional_import(module_name)
    if module is not None:
        return module

    context = f" for {purpose}" if purpose else ""
    raise ImportError(
        f"Optional dependency '{module_name}' is required{context}.\n"
        f"Install it via:\n  pip install 'pixbridge[{extra}]'\n"
        f"Original error: {error}"
    ) from error
