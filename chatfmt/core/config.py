"""TOML configuration loading for chat formatting.

File layout:

    [chat]
    enabled = true
    fallback-format = "&7%player%&f: %message%"

    [chat.formats]
    admin = "&c[Admin] %player%&f: %message%"
    vip = "&6[VIP] %player%&f: %message%"

Groups under [chat.formats] are matched in the order they appear in the
file; the first one a sender belongs to wins. Group names are lower-cased.

Path resolution (first wins):
  1. Explicit path (--config).
  2. CHATFMT_CONFIG environment variable.
  3. ./config.toml

A missing file is created from DEFAULT_CONFIG. Unreadable or invalid
files are logged and replaced by defaults; loading never raises.
"""

import logging
import os
import tomllib
from pathlib import Path
from typing import Any

from chatfmt.core.types import DEFAULT_FALLBACK_FORMAT, ChatSettings

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = 'CHATFMT_CONFIG'
DEFAULT_CONFIG_NAME = 'config.toml'

DEFAULT_CONFIG = """\
[chat]
# Set to false to leave chat rendering to the host
enabled = true

# Used when a player is in none of the groups below
fallback-format = "&7%player%&f: %message%"

# Group formats, highest priority first.
# Colours: &0-&9 and &a-&f, or &#RRGGBB for any hex colour.
[chat.formats]
# admin = "&c[Admin] %player%&f: %message%"
# vip = "&6[VIP] &#FFD700%player%&f: %message%"
"""


def resolve_config_path(explicit: str | None = None) -> Path:
    """Return the config path to use."""
    if explicit:
        return Path(explicit)
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return Path.cwd() / DEFAULT_CONFIG_NAME


def _create_default(path: Path) -> bool:
    """Write DEFAULT_CONFIG to path. Returns True on success."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(DEFAULT_CONFIG, encoding='utf-8')
    except OSError as e:
        logger.error('Failed to create default config: %s', e)
        return False
    logger.info('Created default config at %s', path)
    return True


def _typed(table: dict[str, Any], key: str, expected: type, default: Any) -> Any:
    """table[key] if it has the expected type, else default (with a warning)."""
    if key not in table:
        return default
    value = table[key]
    if not isinstance(value, expected):
        logger.warning(
            'Config key chat.%s should be %s, got %s; using default',
            key,
            expected.__name__,
            type(value).__name__,
        )
        return default
    return value


def _parse_formats(raw: Any) -> tuple[tuple[str, str], ...]:
    if raw is None:
        return ()
    if not isinstance(raw, dict):
        logger.warning('Config key chat.formats should be a table; ignoring it')
        return ()

    # dict keeps first-insertion position when a later key overwrites it
    formats: dict[str, str] = {}
    for group, template in raw.items():
        if not isinstance(template, str):
            logger.warning('Chat format for group %r is not a string; skipping', group)
            continue
        formats[group.lower()] = template
    return tuple(formats.items())


def settings_from_dict(data: dict[str, Any]) -> ChatSettings:
    """Build ChatSettings from an already parsed TOML document."""
    chat = data.get('chat', {})
    if not isinstance(chat, dict):
        logger.warning('Config key chat should be a table; using defaults')
        return ChatSettings()

    return ChatSettings(
        enabled=_typed(chat, 'enabled', bool, True),
        fallback_format=_typed(chat, 'fallback-format', str, DEFAULT_FALLBACK_FORMAT),
        formats=_parse_formats(chat.get('formats')),
    )


def load_settings(path: str | Path | None = None) -> ChatSettings:
    """Load chat settings from disk, creating a default file if missing."""
    config_path = path if isinstance(path, Path) else resolve_config_path(path)

    if not config_path.exists() and not _create_default(config_path):
        logger.warning('Using default config values.')
        return ChatSettings()

    try:
        text = config_path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        logger.error('Failed to load config: %s', e)
        logger.warning('Using default config values.')
        return ChatSettings()

    try:
        data = tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        logger.error('Config error: %s', e)
        logger.warning('Using default config values due to errors.')
        return ChatSettings()

    settings = settings_from_dict(data)
    logger.info(
        'Config loaded: chat_enabled=%s, chat_formats=%d',
        settings.enabled,
        len(settings.formats),
    )
    return settings
