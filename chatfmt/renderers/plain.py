"""Print the formatted message as plain text, colour codes stripped.

Example:
    chatfmt plain "hello there" --player Ann --group vip
"""

from chatfmt.core.render import to_plain
from chatfmt.core.types import Renderer, RichMessage

renderer = Renderer(name='plain', help='Plain text, colours dropped.')


@renderer.run
def run(message: RichMessage, args) -> str:
    return to_plain(message)
