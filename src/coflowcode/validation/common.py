"""Primitive type checks over decoded JSON values.

JSON booleans decode to ``bool``, which Python treats as an ``int``; a
boolean is never accepted where a number is expected.
"""

from __future__ import annotations

from typing import Any, Callable

Check = Callable[[Any], bool]


def is_object(value: Any) -> bool:
    """True for a JSON object (a dict), false for arrays and null."""
    return isinstance(value, dict)


def is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_string(value: Any) -> bool:
    return isinstance(value, str)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, list)


def is_array_of(value: Any, check: Check) -> bool:
    """True for a list whose every element satisfies *check*."""
    return isinstance(value, list) and all(check(v) for v in value)


def has(data: dict[str, Any], key: str, check: Check) -> bool:
    """Required field: present and satisfying *check*."""
    return key in data and check(data[key])


def optional(data: dict[str, Any], key: str, check: Check) -> bool:
    """Optional field: absent, or present and satisfying *check*."""
    return key not in data or check(data[key])


def is_code_file(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "name", is_string)
        and has(value, "language", is_string)
        and has(value, "content", is_string)
        and has(value, "isInstructorFile", is_boolean)
    )
