"""Print the formatted message as a JSON chat component.

One segment prints as {"text": ..., "color": "#RRGGBB"}. Several
segments print as {"text": "", "extra": [...]} with children in order.

Example:
    chatfmt json "hello there" --player Ann
"""

from chatfmt.core.render import to_json
from chatfmt.core.types import Renderer, RichMessage

renderer = Renderer(name='json', help='JSON chat component ({"text", "color", "extra"}).')


@renderer.run
def run(message: RichMessage, args) -> str:
    return to_json(message)
