"""chatfmt — group-aware chat message formatting with legacy and hex colour codes."""

__version__ = '0.1.0'
