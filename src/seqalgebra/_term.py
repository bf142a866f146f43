"""ANSI styling for the checker report.

Colour is on when stdout is a terminal, unless ``NO_COLOR`` is set or
``TERM=dumb``. ``FORCE_COLOR`` turns it on regardless.
"""

from __future__ import annotations

import os
import sys

_COLOR: bool | None = None

_STATUS_CODES: dict[str, tuple[int, ...]] = {
    "pass": (32,),
    "fail": (31, 1),
    "error": (31,),
    "skip": (33,),
}


def supports_color() -> bool:
    global _COLOR
    if _COLOR is None:
        if os.environ.get("FORCE_COLOR", "") != "":
            _COLOR = True
        elif os.environ.get("NO_COLOR", "") != "" or os.environ.get("TERM", "") == "dumb":
            _COLOR = False
        else:
            _COLOR = bool(getattr(sys.stdout, "isatty", None) and sys.stdout.isatty())
    return _COLOR


def force_color(enabled: bool | None) -> None:
    global _COLOR
    _COLOR = enabled


def style(text: str, *codes: int) -> str:
    if not codes or not supports_color():
        return text
    return f"\033[{';'.join(map(str, codes))}m{text}\033[0m"


def status(name: str) -> str:
    """Upper-cased status label, padded to five columns before colouring."""
    label = name.upper()
    return " " * (5 - len(label)) + style(label, *_STATUS_CODES.get(name, ()))


def dim(text: str) -> str:
    return style(text, 2)


def bold(text: str) -> str:
    return style(text, 1)
