"""Split normalised text into coloured segments at hex marker boundaries."""

from chatfmt.core.codes import HEX, iter_tokens
from chatfmt.core.palette import DEFAULT_COLOUR
from chatfmt.core.types import ColorSegment


def build_segments(normalized: str, original: str | None = None) -> tuple[ColorSegment, ...]:
    """Walk `normalized` and return its (text, colour) runs in order.

    Each run takes the colour of the nearest preceding hex marker, or
    white before the first one. Marker text is consumed, never emitted.
    If nothing printable is left (empty or all-marker input) the result
    is a single default-coloured segment holding `original`, the text as
    it was before normalisation.
    """
    segments = []
    colour = DEFAULT_COLOUR
    for tok in iter_tokens(normalized, legacy=False):
        if tok.kind == HEX:
            colour = tok.colour
        elif tok.text:
            segments.append(ColorSegment(tok.text, colour))

    if not segments:
        fallback = normalized if original is None else original
        return (ColorSegment(fallback, DEFAULT_COLOUR),)
    return tuple(segments)
