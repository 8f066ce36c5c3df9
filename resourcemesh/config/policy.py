"""
Registry policy definitions and constants.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Type, TypeVar, Union


class DuplicatePolicy(str, Enum):
    """
    What ``add_resource`` / ``add_project`` do when the id is already taken.

    Using ``str`` as a mixin keeps plain string literals working in YAML and
    keyword arguments.
    """

    REJECT = "reject"
    OVERWRITE = "overwrite"


class ReallocationPolicy(str, Enum):
    """How allocating an already-allocated resource is treated."""

    # Append to the new project and leave the old membership in place.
    PRESERVE = "preserve"
    DETACH = "detach"
    REJECT = "reject"


DUPLICATE_POLICY_ALIASES: Dict[str, str] = {
    "fail": DuplicatePolicy.REJECT.value,
    "error": DuplicatePolicy.REJECT.value,
    "strict": DuplicatePolicy.REJECT.value,
    "replace": DuplicatePolicy.OVERWRITE.value,
    "last-wins": DuplicatePolicy.OVERWRITE.value,
    "last_wins": DuplicatePolicy.OVERWRITE.value,
}


REALLOCATION_POLICY_ALIASES: Dict[str, str] = {
    "compat": ReallocationPolicy.PRESERVE.value,
    "legacy": ReallocationPolicy.PRESERVE.value,
    "move": ReallocationPolicy.DETACH.value,
    "transfer": ReallocationPolicy.DETACH.value,
    "fail": ReallocationPolicy.REJECT.value,
    "exclusive": ReallocationPolicy.REJECT.value,
}

_PolicyT = TypeVar("_PolicyT", DuplicatePolicy, ReallocationPolicy)


def _normalize(
    value: Union[str, _PolicyT, None],
    enum_cls: Type[_PolicyT],
    aliases: Dict[str, str],
) -> Optional[_PolicyT]:
    if value is None:
        return None
    if isinstance(value, enum_cls):
        return value
    if not isinstance(value, str):
        return None
    raw = value.strip().lower()
    if not raw:
        return None
    try:
        return enum_cls(aliases.get(raw, raw))
    except ValueError:
        return None


def normalize_duplicate_policy(value: Union[str, DuplicatePolicy, None]) -> Optional[DuplicatePolicy]:
    """
    Convert user input into :class:`DuplicatePolicy`.

    Args:
        value: Enum instance or case-insensitive string (aliases accepted).

    Returns:
        The normalised enum value, or ``None`` if the input is invalid.
    """
    return _normalize(value, DuplicatePolicy, DUPLICATE_POLICY_ALIASES)


def normalize_reallocation_policy(
    value: Union[str, ReallocationPolicy, None],
) -> Optional[ReallocationPolicy]:
    """Convert user input into :class:`ReallocationPolicy`, or ``None`` if invalid."""
    return _normalize(value, ReallocationPolicy, REALLOCATION_POLICY_ALIASES)
