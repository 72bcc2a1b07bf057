"""Legacy colour table: the 16 single-digit chat colours and their hex values."""

DEFAULT_COLOUR = '#FFFFFF'

# Indexed by the hex value of the code digit: &0 .. &f
LEGACY_COLOURS: tuple[str, ...] = (
    '#000000',  # &0
    '#0000AA',  # &1
    '#00AA00',  # &2
    '#00AAAA',  # &3
    '#AA0000',  # &4
    '#AA00AA',  # &5
    '#FFAA00',  # &6
    '#AAAAAA',  # &7
    '#555555',  # &8
    '#5555FF',  # &9
    '#55FF55',  # &a
    '#55FFFF',  # &b
    '#FF5555',  # &c
    '#FF55FF',  # &d
    '#FFFF55',  # &e
    '#FFFFFF',  # &f
)

LEGACY_NAMES: tuple[str, ...] = (
    'black',
    'dark_blue',
    'dark_green',
    'dark_aqua',
    'dark_red',
    'dark_purple',
    'gold',
    'gray',
    'dark_gray',
    'blue',
    'green',
    'aqua',
    'red',
    'light_purple',
    'yellow',
    'white',
)

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def legacy_colour(digit: str) -> str:
    """Return the '#RRGGBB' value for a legacy code digit (case-insensitive)."""
    if len(digit) != 1 or digit not in HEX_DIGITS:
        raise ValueError(f'Not a legacy colour digit: {digit!r}')
    return LEGACY_COLOURS[int(digit, 16)]


def hex_to_rgb(hex_str: str) -> tuple[int, int, int]:
    """'#RRGGBB', 'RRGGBB' or short '#RGB' to (r, g, b). Invalid input returns black."""
    h = hex_str.lstrip('#')
    if len(h) == 3:
        h = ''.join(c * 2 for c in h)
    if len(h) != 6:
        return (0, 0, 0)
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        return (0, 0, 0)
