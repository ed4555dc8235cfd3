"""Key casing conversion for JSON-shaped data."""

import re
from collections.abc import Callable, Mapping
from typing import Any

_SNAKE_BOUNDARY = re.compile(r"(?<=[A-Za-z0-9])_([a-z])")
_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


def snake_to_camel(key: str) -> str:
    """Convert ``decision_maker_role`` to ``decisionMakerRole``.

    Keys without snake_case boundaries (including keys that are already
    camelCase) are returned unchanged, so the conversion is idempotent.
    Leading underscores are preserved.
    """
    return _SNAKE_BOUNDARY.sub(lambda m: m.group(1).upper(), key)


def camel_to_snake(key: str) -> str:
    """Convert ``decisionMakerRole`` to ``decision_maker_role``."""
    return _CAMEL_BOUNDARY.sub(lambda m: "_" + m.group(1).lower(), key)


def recase_keys(value: Any, convert: Callable[[str], str] = snake_to_camel) -> Any:
    """Recursively rename every mapping key in ``value`` with ``convert``.

    Mappings and lists are rebuilt (the input is never mutated); scalars are
    returned as-is. When two keys of one mapping convert to the same name, the
    key that was already in the target form wins regardless of position.
    """
    if isinstance(value, Mapping):
        recased: dict = {}
        for key, item in value.items():
            new_key = convert(key) if isinstance(key, str) else key
            if new_key != key and new_key in recased:
                continue
            recased[new_key] = recase_keys(item, convert)
        return recased
    if isinstance(value, (list, tuple)):
        return [recase_keys(item, convert) for item in value]
    return value
