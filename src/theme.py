"""Color & style helpers for the task table.

Decisions:
- Truecolor preferred; falls back to 256-color cube if unsupported.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- Supports palette overrides via environment or project .env file.
"""
from __future__ import annotations
import os, sys

from config import load_environment
from models import STATUS_COMPLETED, STATUS_INCOMPLETE

load_environment()

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR
_COLORTERM = os.environ.get("COLORTERM", "").lower()
_USE_TRUECOLOR = _ENABLE and any(tok in _COLORTERM for tok in ("truecolor", "24bit"))

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m" if _ENABLE else ''

def _hex_to_rgb(hex_code: str) -> tuple[int,int,int]:
    """Convert a hex color code to an RGB tuple."""
    h = hex_code.lstrip('#')
    return int(h[0:2],16), int(h[2:4],16), int(h[4:6],16)

def _valid_hex(value: str) -> bool:
    h = value.lstrip('#')
    return len(h) == 6 and all(c in '0123456789abcdefABCDEF' for c in h)

def _fg_truecolor(r: int, g: int, b: int) -> str:
    return f"\033[38;2;{r};{g};{b}m"

def _fg_256(r: int, g: int, b: int) -> str:
    """Approximate RGB to xterm 256-color cube."""
    def to_6(x: int) -> int:
        return int(round(x / 255 * 5))
    r6, g6, b6 = to_6(r), to_6(g), to_6(b)
    idx = 16 + 36 * r6 + 6 * g6 + b6
    return f"\033[38;5;{idx}m"

def _from_hex(hex_code: str) -> str:
    """Convert a hex color code to an ANSI escape sequence."""
    if not _ENABLE:
        return ''
    r, g, b = _hex_to_rgb(hex_code)
    if _USE_TRUECOLOR:
        return _fg_truecolor(r, g, b)
    return _fg_256(r, g, b)

def _env_hex(name: str, default: str) -> str:
    value = os.environ.get(name, '').strip()
    return '#' + value.lstrip('#') if _valid_hex(value) else default

RESET = _code('0')
BOLD = _code('1')

HEX_PRIMARY_DEFAULT = '#476EAE'
HEX_DONE_DEFAULT = '#A7E399'
HEX_PENDING_DEFAULT = '#F6FF99'

HEX_PRIMARY = _env_hex('TODO_COLOR_PRIMARY', HEX_PRIMARY_DEFAULT)
HEX_DONE = _env_hex('TODO_COLOR_DONE', HEX_DONE_DEFAULT)
HEX_PENDING = _env_hex('TODO_COLOR_PENDING', HEX_PENDING_DEFAULT)

PRIMARY = _from_hex(HEX_PRIMARY)
C_DONE = _from_hex(HEX_DONE)
C_PENDING = _from_hex(HEX_PENDING)

STATUS_COLOR = {
    STATUS_COMPLETED: C_DONE,
    STATUS_INCOMPLETE: C_PENDING,
}

HEADER_COLOR = PRIMARY

def color(text: str, *styles: str) -> str:
    """Apply ANSI styles to a given text."""
    if not _ENABLE:
        return text
    return ''.join(styles) + text + RESET

__all__ = ['color', 'BOLD', 'STATUS_COLOR', 'HEADER_COLOR']
