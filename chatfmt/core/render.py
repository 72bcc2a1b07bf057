"""Output encoders for RichMessage: plain text, ANSI terminal, JSON chat components."""

import json
from typing import Any

from chatfmt.core.palette import hex_to_rgb
from chatfmt.core.types import RichMessage

ANSI_RESET = '\x1b[0m'


def to_plain(message: RichMessage) -> str:
    return message.plain


def to_ansi(message: RichMessage) -> str:
    """Render with 24-bit foreground colour escapes, one per segment."""
    parts = []
    for seg in message:
        r, g, b = hex_to_rgb(seg.colour)
        parts.append(f'\x1b[38;2;{r};{g};{b}m{seg.text}')
    parts.append(ANSI_RESET)
    return ''.join(parts)


def to_component(message: RichMessage) -> dict[str, Any]:
    """Build a JSON chat component.

    A single segment is a bare coloured text component. Several segments
    are joined as `extra` children of an empty root, in order.
    """
    children = [{'text': seg.text, 'color': seg.colour} for seg in message]
    if message.is_single:
        return children[0]
    return {'text': '', 'extra': children}


def to_json(message: RichMessage) -> str:
    return json.dumps(to_component(message), ensure_ascii=False)


def component_to_plain(component: dict[str, Any]) -> str:
    """Flatten a chat component (and its `extra` children) to text."""
    out = component.get('text', '')
    for child in component.get('extra', ()):
        out += component_to_plain(child)
    return out
