"""Print the formatted message in colour using 24-bit ANSI escapes.

Needs a terminal with truecolor support (most modern terminals).

Example:
    chatfmt ansi "hello there" --player Ann --group admin
"""

from chatfmt.core.render import to_ansi
from chatfmt.core.types import Renderer, RichMessage

renderer = Renderer(name='ansi', help='24-bit colour terminal output.')


@renderer.run
def run(message: RichMessage, args) -> str:
    return to_ansi(message)
