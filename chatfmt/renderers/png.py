"""Draw the formatted message onto a PNG preview strip.

Segments are drawn left to right in their own colour on a dark
background, using Pillow's built-in font. The image is written to
<out>/message.png (default out dir: current directory) and the path is
printed.

Example:
    chatfmt png "hello there" --player Ann --group vip --out ./tmp
"""

import os

from PIL import Image, ImageDraw, ImageFont

from chatfmt.core.palette import hex_to_rgb
from chatfmt.core.types import Renderer, RichMessage

renderer = Renderer(name='png', help='Draw the message to <out>/message.png (Pillow).')

BACKGROUND = (24, 24, 24)
PADDING = 6
FONT_SIZE = 16


def draw_message(message: RichMessage, font_size: int = FONT_SIZE) -> Image.Image:
    """Return an RGB image with the message drawn on one line."""
    font = ImageFont.load_default(size=font_size)
    measure = ImageDraw.Draw(Image.new('RGB', (1, 1)))

    widths = [measure.textlength(seg.text, font=font) for seg in message]
    _left, top, _right, bottom = measure.textbbox((0, 0), message.plain or ' ', font=font)
    width = int(sum(widths)) + 2 * PADDING + 1
    height = int(bottom - min(top, 0)) + 2 * PADDING

    image = Image.new('RGB', (width, height), BACKGROUND)
    draw = ImageDraw.Draw(image)
    x = float(PADDING)
    for seg, seg_width in zip(message, widths):
        draw.text((x, PADDING), seg.text, fill=hex_to_rgb(seg.colour), font=font)
        x += seg_width
    return image


@renderer.run
def run(message: RichMessage, args) -> str:
    out_dir = getattr(args, 'out', None) or '.'
    os.makedirs(out_dir, exist_ok=True)
    path = os.path.join(out_dir, 'message.png')
    image = draw_message(message)
    image.save(path)
    return f'{path} ({image.width}x{image.height})'
