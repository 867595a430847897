"""Convert ASCII letters and digits to styled Unicode symbols."""

from __future__ import annotations

__version__ = "0.1.0"


def convert(text: str, style: str = "-bold") -> str:
    """Restyle *text* with the style registered under the flag name *style*."""
    from mathfont.errors import UnknownOptionError
    from mathfont.styles import lookup
    from mathfont.transform import transform

    spec = lookup(style)
    if spec is None:
        raise UnknownOptionError(style)
    return transform(text, spec)
