"""Shared types for chatfmt: ColorSegment, RichMessage, Sender, ChatSettings, Renderer."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from chatfmt.core.palette import DEFAULT_COLOUR

DEFAULT_FALLBACK_FORMAT = '&7%player%&f: %message%'


@dataclass(frozen=True)
class ColorSegment:
    """A run of text drawn in a single colour."""

    text: str
    colour: str = DEFAULT_COLOUR  # '#RRGGBB', upper-case


@dataclass(frozen=True)
class RichMessage:
    """Ordered, non-empty sequence of coloured segments."""

    segments: tuple[ColorSegment, ...]

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError('RichMessage needs at least one segment')

    @classmethod
    def raw(cls, text: str, colour: str = DEFAULT_COLOUR) -> RichMessage:
        return cls((ColorSegment(text, colour),))

    @property
    def is_single(self) -> bool:
        """True when the message collapses to one bare coloured string."""
        return len(self.segments) == 1

    @property
    def plain(self) -> str:
        return ''.join(s.text for s in self.segments)

    def __iter__(self) -> Iterator[ColorSegment]:
        return iter(self.segments)

    def __len__(self) -> int:
        return len(self.segments)


@dataclass(frozen=True)
class Sender:
    """Identity of a chat sender. `id` is opaque; only the group lookup reads it."""

    id: Any
    name: str


@dataclass(frozen=True)
class ChatSettings:
    """Immutable config snapshot. Replace the whole object to reload."""

    enabled: bool = True
    fallback_format: str = DEFAULT_FALLBACK_FORMAT
    formats: tuple[tuple[str, str], ...] = ()  # (group, template) in priority order

    @property
    def table(self) -> dict[str, str]:
        """Group → template, in configuration order."""
        return dict(self.formats)


class Renderer:
    """A self-registering output renderer.

    Usage in a renderer module:

        renderer = Renderer(name='ansi', help='24-bit terminal colours')

        @renderer.run
        def run(message, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, message: RichMessage, args: Any) -> str | None:
        """Execute the renderer's run function. Returns text to print, if any."""
        if self._run_fn is None:
            raise RuntimeError(f'Renderer {self.name} has no run function')
        return self._run_fn(message, args)
