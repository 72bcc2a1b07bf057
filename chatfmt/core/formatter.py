"""Chat formatting pipeline: template → placeholders → colour codes → segments.

`format_message` is the pure pipeline. `ChatFormatter` wraps it for a
host: it owns the current `ChatSettings` snapshot and the group lookup,
and hands out the per-event formatter callback.

Reloading replaces the snapshot reference in one assignment. A call to
`format` reads that reference once, so it sees either the old or the new
settings, never a mix.
"""

import logging
from collections.abc import Callable, Iterable, Mapping

from chatfmt.core.codes import normalize
from chatfmt.core.placeholders import substitute
from chatfmt.core.resolver import resolve_template
from chatfmt.core.segments import build_segments
from chatfmt.core.types import ChatSettings, RichMessage, Sender

logger = logging.getLogger(__name__)

GroupLookup = Callable[[object], Iterable[str]]


def format_message(
    player: str,
    groups: Iterable[str],
    message: str,
    table: Mapping[str, str],
    fallback: str,
) -> RichMessage:
    """Format one chat line for `player` into a RichMessage."""
    template = resolve_template(groups, table, fallback)
    return render_template(template, player, message)


def render_template(template: str, player: str, message: str) -> RichMessage:
    """Fill in an already chosen template and colour it."""
    text = substitute(template, player, message)
    return RichMessage(build_segments(normalize(text), original=text))


def format_plain(sender: Sender, content: str) -> RichMessage:
    """The host's rendering when chat formatting is switched off."""
    return RichMessage.raw(f'{sender.name}: {content}')


class ChatFormatter:
    """Formats chat for a host using the current settings snapshot."""

    def __init__(self, settings: ChatSettings, group_lookup: GroupLookup):
        self._settings = settings
        self._group_lookup = group_lookup

    @property
    def settings(self) -> ChatSettings:
        return self._settings

    @property
    def is_enabled(self) -> bool:
        return self._settings.enabled

    def reload(self, settings: ChatSettings) -> None:
        """Publish a new settings snapshot."""
        self._settings = settings
        logger.debug('Chat settings reloaded: %d formats', len(settings.formats))

    def template_for(self, sender: Sender, settings: ChatSettings | None = None) -> str:
        """The template `sender` would get under `settings` (default: current)."""
        settings = settings or self._settings
        if not settings.formats:
            # No group formats configured: skip the permission lookup entirely
            return settings.fallback_format
        groups = self._group_lookup(sender.id)
        return resolve_template(groups, settings.table, settings.fallback_format)

    def format(self, sender: Sender, content: str) -> RichMessage:
        settings = self._settings
        template = self.template_for(sender, settings)
        return render_template(template, sender.name, content)

    def create_formatter(self) -> Callable[[Sender, str], RichMessage]:
        """Callback for a chat event: (sender, content) -> RichMessage."""
        return self.format
