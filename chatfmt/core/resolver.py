"""Pick the chat template for a sender from their group memberships."""

from collections.abc import Iterable, Mapping


def resolve_template(groups: Iterable[str], table: Mapping[str, str], fallback: str) -> str:
    """Return the template of the first configured group the sender belongs to.

    `table` is walked in its own (configuration) order, so the earliest
    configured group wins no matter how `groups` iterates. Group names
    compare case-insensitively. Falls back when nothing matches.
    """
    if not table:
        return fallback

    member_of = {g.lower() for g in groups}
    for group_name, template in table.items():
        if group_name.lower() in member_of:
            return template
    return fallback
