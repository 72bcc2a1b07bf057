"""Hooking the formatter into a host's chat events.

The host owns the event bus. Anything with `subscribe(event_type, listener)`
works. Registration happens once: if chat formatting is disabled at that
point nothing is subscribed and the host keeps its own rendering.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass

from chatfmt.core.formatter import ChatFormatter, format_plain
from chatfmt.core.types import RichMessage, Sender

logger = logging.getLogger(__name__)

PLAYER_CHAT = 'player_chat'


@dataclass
class ChatEvent:
    """An outgoing chat line. Listeners may swap in their own formatter."""

    sender: Sender
    content: str
    formatter: Callable[[Sender, str], RichMessage] | None = None

    def render(self) -> RichMessage:
        if self.formatter is None:
            return format_plain(self.sender, self.content)
        return self.formatter(self.sender, self.content)


def register_chat_formatting(bus, chat_formatter: ChatFormatter) -> bool:
    """Subscribe the formatter to PLAYER_CHAT events. Returns False when disabled."""
    if not chat_formatter.is_enabled:
        return False

    def on_chat(event: ChatEvent) -> None:
        event.formatter = chat_formatter.create_formatter()

    bus.subscribe(PLAYER_CHAT, on_chat)
    logger.info('Chat formatting enabled.')
    return True
