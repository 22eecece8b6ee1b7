"""Color & style helpers.

Decisions:
- Swatches are single background-colored spaces, one column wide.
- Colors are on by default; NO_COLOR disables them unless FORCE_COLOR=1.
- Layout code never builds escapes itself: it asks for a swatch by Color.
"""
from __future__ import annotations
import os
from enum import Enum
from typing import Optional

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = _FORCE or not _NO_COLOR


class Color(Enum):
    """Swatch colors; values are ANSI bright background codes."""
    RED = '101'
    GREEN = '102'
    YELLOW = '103'
    BLUE = '104'


def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m"

RESET = _code('0')


def swatch(value: Optional[Color], enabled: Optional[bool] = None) -> str:
    """Return a one-column colored cell for ``value``.

    ``None`` (an unrecognised priority) and disabled colors both give a
    plain space so the table keeps its width.
    """
    if enabled is None:
        enabled = _ENABLE
    if value is None or not enabled:
        return ' '
    return _code(value.value) + ' ' + RESET


def plain_swatch(value: Optional[Color]) -> str:
    """Escape-free swatch: the color's initial, or a space."""
    return value.name[0] if value is not None else ' '


__all__ = ['Color', 'RESET', 'swatch', 'plain_swatch', '_ENABLE', '_FORCE']
