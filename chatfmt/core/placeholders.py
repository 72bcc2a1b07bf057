"""Literal %player% / %message% substitution."""

PLAYER_TOKEN = '%player%'
MESSAGE_TOKEN = '%message%'


def substitute(template: str, player: str, message: str) -> str:
    """Insert player name and message into a template.

    %player% is replaced first, then %message%. Whatever `player` or
    `message` contain is inserted verbatim, so a name like '%message%'
    stays literal.
    """
    if not player:
        # Nothing is inserted for %player%, so a %message% formed by the
        # template text around it is still template text
        return template.replace(PLAYER_TOKEN, '').replace(MESSAGE_TOKEN, message)
    pieces = template.split(PLAYER_TOKEN)
    return player.join(p.replace(MESSAGE_TOKEN, message) for p in pieces)
