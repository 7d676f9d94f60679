# topmark:header:start
#
#   project      : TOML Maid
#   file         : guards.py
#   file_relpath : src/tomlmaid/config/io/guards.py
#   license      : MIT
#   copyright    : (c) 2025 TOML Maid contributors
#
# topmark:header:end

"""Type guards for values coming out of TOML parsing.

These `TypeGuard` predicates let type checkers narrow the plain Python values
returned by ``tomlkit``'s ``unwrap()`` before the config layer trusts them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeGuard

if TYPE_CHECKING:
    from .types import TomlTable


def is_toml_table(obj: object) -> TypeGuard[TomlTable]:
    """Type guard for a TOML table-like mapping.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[TomlTable]: ``True`` if ``obj`` is a ``dict[str, Any]``.
    """
    return isinstance(obj, dict)


def is_any_list(obj: object) -> TypeGuard[list[Any]]:
    """Type guard for a generic list value (item types are not checked)."""
    return isinstance(obj, list)


def is_str_list(obj: object) -> TypeGuard[list[str]]:
    """Type guard for a string list value.

    Args:
        obj (object): Value to test.

    Returns:
        TypeGuard[list[str]]: True if obj is a list[str].
    """
    return is_any_list(obj) and all(isinstance(x, str) for x in obj)


def is_bool(obj: object) -> TypeGuard[bool]:
    """Type guard for a TOML boolean."""
    return isinstance(obj, bool)
