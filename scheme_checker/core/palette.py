"""Terminal colour helpers: bold ANSI styles and 24-bit swatch escapes.

Scheme colours are bare hex strings such as '2B2B2B' (no '#'). Only the
first six characters are read; anything that is not valid hex produces no
escape at all rather than an error.
"""

import re

RESET = '\x1b[0m'

_HEX = re.compile(r'[0-9a-fA-F]+')


def _bold(code: int, s: str) -> str:
    return f'\x1b[1;{code}m{s}{RESET}'


def red(s: str) -> str:
    return _bold(31, s)


def green(s: str) -> str:
    return _bold(32, s)


def yellow(s: str) -> str:
    return _bold(33, s)


def cyan(s: str) -> str:
    return _bold(36, s)


def hex_to_rgb(hex_color: str | None) -> tuple[int, int, int] | None:
    """Convert 'RRGGBB' (extra characters ignored) to an (r, g, b) tuple.

    Returns None for missing or non-hex input.
    """
    if not hex_color:
        return None
    digits = hex_color[:6]
    if not _HEX.fullmatch(digits):
        return None
    value = int(digits, 16)
    return (value >> 16 & 0xFF, value >> 8 & 0xFF, value & 0xFF)


def rgb(hex_color: str | None, background: bool = False) -> str:
    """24-bit foreground (or background) escape for a hex colour, '' if unparseable."""
    parsed = hex_to_rgb(hex_color)
    if parsed is None:
        return ''
    r, g, b = parsed
    layer = 4 if background else 3
    return f'\x1b[{layer}8;2;{r};{g};{b}m'
