"""Style registry — named mappings from ASCII alphanumerics to Unicode blocks."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum, auto
from types import MappingProxyType

# Letters per case in every block
ALPHABET_LEN = 26


class StyleKind(Enum):
    ALPHA_ONLY = auto()  # letters remapped, digits pass through
    ALPHA_NUMERIC = auto()  # letters and a 10-digit block
    ENCLOSED = auto()  # digit zero lives apart from 1-9


@dataclass(frozen=True, slots=True)
class StyleSpec:
    """A named style and the base code points of its mapped ranges.

    ``digit`` is the base for ``0`` in ALPHA_NUMERIC styles and the base for
    ``1`` in ENCLOSED styles, where ``zero`` holds the isolated code point for
    ``0``. ``small`` is None when lowercase letters are not remapped.
    """

    name: str
    kind: StyleKind
    capital: int
    small: int | None
    digit: int | None = None
    zero: int | None = None


# Identity style: every character maps onto itself
NO_CONV = StyleSpec("", StyleKind.ALPHA_NUMERIC, ord("A"), ord("a"), ord("0"))


def _make_styles() -> Mapping[str, StyleSpec]:
    defs: dict[str, StyleSpec] = {}

    def math(name: str, capital: int, digit: int | None = None) -> None:
        kind = StyleKind.ALPHA_ONLY if digit is None else StyleKind.ALPHA_NUMERIC
        defs[name] = StyleSpec(name, kind, capital, capital + ALPHABET_LEN, digit)

    def enclosed(name: str, capital: int, small: int | None, one: int, zero: int) -> None:
        defs[name] = StyleSpec(name, StyleKind.ENCLOSED, capital, small, one, zero)

    # Mathematical Alphanumeric Symbols (U+1D400 block)
    math("-bold", 0x1D400, 0x1D7CE)
    math("-italic", 0x1D434)
    math("-bold-italic", 0x1D468)
    math("-script", 0x1D49C)
    math("-bold-script", 0x1D4D0)
    math("-fraktur", 0x1D504)
    math("-double-struck", 0x1D538, 0x1D7D8)
    math("-bold-fraktur", 0x1D56C)
    math("-sans-serif", 0x1D5A0, 0x1D7E2)
    math("-sans-serif-bold", 0x1D5D4, 0x1D7EC)
    math("-sans-serif-italic", 0x1D608)
    math("-sans-serif-bold-italic", 0x1D63C)
    math("-monospace", 0x1D670, 0x1D7F6)

    # Enclosed Alphanumerics, Dingbats, Enclosed Alphanumeric Supplement
    enclosed("-enclosed", 0x24B6, 0x24D0, 0x2460, 0x24EA)
    # Lowercase is not remapped here; negative circled small letters do not exist
    enclosed("-black-enclosed", 0x1F150, None, 0x2776, 0x24FF)

    return MappingProxyType(defs)


STYLES: Mapping[str, StyleSpec] = _make_styles()


def lookup(name: str) -> StyleSpec | None:
    """Return the style registered under the exact flag *name*, or None."""
    return STYLES.get(name)
