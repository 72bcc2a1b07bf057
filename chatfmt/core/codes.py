"""Colour-code scanner and legacy-to-hex normalisation.

Two marker forms are recognised in chat templates:

  &X        legacy code, X one hex digit (0-9, a-f, case-insensitive)
  &#RRGGBB  hex code, exactly six hex digits

`iter_tokens` walks a string once, left to right, and yields markers and
the literal runs between them. `normalize` rewrites every legacy marker
to its hex form so later stages only deal with one marker kind.
"""

from collections.abc import Iterator
from typing import NamedTuple

from chatfmt.core.palette import HEX_DIGITS, legacy_colour

LEGACY = 'legacy'
HEX = 'hex'
TEXT = 'text'

MARKER_CHAR = '&'
HEX_PREFIX = '&#'
HEX_LEN = 6


class Token(NamedTuple):
    kind: str  # LEGACY, HEX or TEXT
    text: str  # source text of the token
    colour: str | None = None  # '#RRGGBB' for markers


def hex_marker_at(text: str, i: int) -> str | None:
    """Return the '#RRGGBB' colour if a hex marker starts at i."""
    if not text.startswith(HEX_PREFIX, i):
        return None
    digits = text[i + 2 : i + 2 + HEX_LEN]
    if len(digits) == HEX_LEN and all(c in HEX_DIGITS for c in digits):
        return '#' + digits.upper()
    return None


def iter_tokens(text: str, legacy: bool = True) -> Iterator[Token]:
    """Split text into marker and literal tokens.

    With legacy=False only hex markers are recognised; `&X` is literal.
    Markers never overlap: once a marker is consumed scanning resumes
    right after it.
    """
    n = len(text)
    run_start = 0
    i = 0
    while i < n:
        if text[i] != MARKER_CHAR:
            i += 1
            continue

        colour = hex_marker_at(text, i)
        if colour is not None:
            kind, width = HEX, 2 + HEX_LEN
        elif legacy and i + 1 < n and text[i + 1] in HEX_DIGITS:
            kind, width = LEGACY, 2
            colour = legacy_colour(text[i + 1])
        else:
            i += 1
            continue

        if i > run_start:
            yield Token(TEXT, text[run_start:i])
        yield Token(kind, text[i : i + width], colour)
        i += width
        run_start = i

    if run_start < n:
        yield Token(TEXT, text[run_start:])


def normalize(text: str) -> str:
    """Rewrite every legacy marker as the equivalent '&#RRGGBB' marker."""
    out = []
    for tok in iter_tokens(text):
        if tok.kind == LEGACY:
            out.append(HEX_PREFIX + tok.colour[1:])
        else:
            out.append(tok.text)
    return ''.join(out)
