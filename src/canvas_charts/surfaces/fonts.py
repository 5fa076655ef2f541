"""Parsing helpers for canvas font strings such as 'bold 11px sans-serif'."""

import re
from dataclasses import dataclass

_FONT_RE = re.compile(
    r"^\s*(?P<style>italic\s+)?(?P<weight>bold\s+|\d{3}\s+)?"
    r"(?P<size>\d+(?:\.\d+)?)px\s+(?P<family>.+?)\s*$"
)

DEFAULT_FONT_SIZE = 10.0


@dataclass(frozen=True)
class FontSpec:
    size: float = DEFAULT_FONT_SIZE
    weight: str = "normal"
    style: str = "normal"
    family: str = "sans-serif"


def parse_font(font: str) -> FontSpec:
    """Split a canvas font string; unparseable strings give the default spec."""
    match = _FONT_RE.match(font or "")
    if not match:
        return FontSpec()
    return FontSpec(
        size=float(match.group("size")),
        weight=(match.group("weight") or "normal").strip(),
        style="italic" if match.group("style") else "normal",
        family=match.group("family"),
    )
