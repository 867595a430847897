"""Text scanning — find ASCII alphanumeric runs and restyle them in place."""

from __future__ import annotations

import re
from dataclasses import dataclass

from mathfont.mapper import convert_char
from mathfont.styles import NO_CONV, StyleSpec

_RUN_RE = re.compile(r"[A-Za-z0-9]+")


@dataclass(frozen=True, slots=True)
class TextRun:
    """A maximal run of ASCII letters and digits, 0-based half-open span."""

    start: int
    end: int
    text: str


def find_runs(text: str) -> list[TextRun]:
    """Return every maximal ``[A-Za-z0-9]+`` run in *text*, in order."""
    return [TextRun(m.start(), m.end(), m.group()) for m in _RUN_RE.finditer(text)]


def transform(text: str, style: StyleSpec = NO_CONV) -> str:
    """Restyle each alphanumeric run of *text*; copy everything else verbatim."""
    if style is NO_CONV:
        return text

    parts: list[str] = []
    pos = 0
    for run in find_runs(text):
        parts.append(text[pos : run.start])
        parts.extend(convert_char(style, ch) for ch in run.text)
        pos = run.end
    parts.append(text[pos:])
    return "".join(parts)
