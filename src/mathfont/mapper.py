"""Per-character conversion through a style, plus ASCII classification helpers."""

from __future__ import annotations

from mathfont.styles import StyleKind, StyleSpec


def is_upper(ch: str) -> bool:
    """Return True if ch is an ASCII capital letter."""
    return "A" <= ch <= "Z"


def is_lower(ch: str) -> bool:
    """Return True if ch is an ASCII small letter."""
    return "a" <= ch <= "z"


def is_digit(ch: str) -> bool:
    """Return True if ch is an ASCII digit."""
    return "0" <= ch <= "9"


def convert_char(style: StyleSpec, ch: str) -> str:
    """Map a single character through *style*.

    Anything that is not an ASCII letter or digit is returned unchanged, as
    are digits under ALPHA_ONLY styles and small letters under styles with no
    small base.
    """
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")

    if is_upper(ch):
        return chr(style.capital + ord(ch) - ord("A"))

    if is_lower(ch):
        if style.small is None:
            return ch
        return chr(style.small + ord(ch) - ord("a"))

    if is_digit(ch):
        return _convert_digit(style, ch)

    return ch


def _convert_digit(style: StyleSpec, ch: str) -> str:
    if style.kind == StyleKind.ALPHA_ONLY or style.digit is None:
        return ch
    if style.kind == StyleKind.ENCLOSED:
        # Zero has its own code point; 1-9 are contiguous from style.digit
        if ch == "0":
            assert style.zero is not None
            return chr(style.zero)
        return chr(style.digit + ord(ch) - ord("1"))
    return chr(style.digit + ord(ch) - ord("0"))


def describe_style(style: StyleSpec) -> str:
    """Render the style's letter and digit ranges, e.g. ``𝐀-𝐙 𝐚-𝐳 𝟎-𝟗``."""

    def span(first: str, last: str) -> str:
        return f"{convert_char(style, first)}-{convert_char(style, last)}"

    return f"{span('A', 'Z')} {span('a', 'z')} {span('0', '9')}"
