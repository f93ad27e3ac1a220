"""
Directory matching: decides which records belong to which actor.

Records carry display names, not stable identifiers, so ownership is a
case-insensitive comparison of trimmed names. Two people sharing a display
name are indistinguishable here.
"""

from typing import Iterable, List, TypeVar

T = TypeVar("T")


def normalize_name(name: str) -> str:
    """Canonical form used for comparisons."""
    return (name or "").strip().casefold()


def matches(record_name: str, actor_name: str) -> bool:
    """True when ``record_name`` and ``actor_name`` name the same person.

    An empty actor name only matches records whose name is empty too.
    """
    return normalize_name(record_name) == normalize_name(actor_name)


def filter_owned(items: Iterable[T], field: str, *names: str) -> List[T]:
    """Keep the items whose ``field`` matches any of ``names``."""
    wanted = {normalize_name(name) for name in names}
    return [item for item in items if normalize_name(getattr(item, field)) in wanted]
