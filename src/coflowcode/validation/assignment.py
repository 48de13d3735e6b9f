"""Structural validation of imported assignment documents."""

from __future__ import annotations

from typing import Any

from ..items.models import ItemType
from .common import (
    has,
    is_array,
    is_array_of,
    is_boolean,
    is_code_file,
    is_number,
    is_object,
    is_string,
    optional,
)


def _is_rubric_criteria(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "level", is_number)
        and has(value, "name", is_string)
        and has(value, "description", is_string)
        and has(value, "points", is_number)
    )


def _is_rubric(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "title", is_string)
        and has(value, "description", is_string)
        and has(value, "criteria", lambda c: is_array_of(c, _is_rubric_criteria))
    )


def _is_grading_config(value: Any) -> bool:
    return (
        is_object(value)
        and optional(value, "enableAnswerCheck", is_boolean)
        and optional(value, "testFileName", is_string)
        and optional(value, "rubric", _is_rubric)
        and optional(value, "aiPrompt", is_string)
    )


def _validate_text(item: dict[str, Any]) -> bool:
    return has(item, "content", is_string)


def _validate_multiple_choice(item: dict[str, Any]) -> bool:
    return (
        has(item, "question", is_string)
        and has(item, "choices", lambda v: is_array_of(v, is_string))
        and has(item, "correctAnswers", lambda v: is_array_of(v, is_number))
        and optional(item, "shuffle", is_boolean)
        and optional(item, "choiceFeedback", lambda v: is_array_of(v, is_string))
    )


def _validate_fill_in_blank(item: dict[str, Any]) -> bool:
    return (
        has(item, "question", is_string)
        and has(item, "acceptedAnswers", lambda v: is_array_of(v, is_string))
        and optional(item, "regexPattern", is_string)
        and optional(item, "caseSensitive", is_boolean)
        and optional(item, "trimWhitespace", is_boolean)
    )


def _validate_essay(item: dict[str, Any]) -> bool:
    return has(item, "prompt", is_string)


def _validate_code_cell(item: dict[str, Any]) -> bool:
    return (
        has(item, "prompt", is_string)
        and has(item, "files", lambda v: is_array_of(v, is_code_file))
        and optional(item, "starterCode", is_string)
    )


def _validate_page_break(item: dict[str, Any]) -> bool:
    return optional(item, "requireAllCorrect", is_boolean)


_ITEM_VALIDATORS = {
    ItemType.TEXT.value: _validate_text,
    ItemType.MULTIPLE_CHOICE.value: _validate_multiple_choice,
    ItemType.FILL_IN_BLANK.value: _validate_fill_in_blank,
    ItemType.ESSAY.value: _validate_essay,
    ItemType.CODE_CELL.value: _validate_code_cell,
    ItemType.PAGE_BREAK.value: _validate_page_break,
}


def validate_item(item: Any) -> bool:
    """Return True if *item* is a structurally valid assignment item."""
    if not is_object(item):
        return False
    if not has(item, "id", is_number) or not has(item, "type", is_string):
        return False

    validator = _ITEM_VALIDATORS.get(item["type"])
    if validator is None:
        return False
    if not validator(item):
        return False

    if item["type"] == ItemType.PAGE_BREAK.value:
        return True
    return optional(item, "gradingConfig", _is_grading_config)


def validate_assignment(value: Any) -> bool:
    """Return True if *value* is a structurally valid assignment document.

    Required: ``id`` (number), ``title`` (string), ``items`` (array). The
    optional ``description``, ``notes`` (strings) and ``estimatedTime``
    (number) are rejected when present with the wrong type. Every item is
    checked; fields not named by the schema are ignored.
    """
    if not is_object(value):
        return False

    if not (
        has(value, "id", is_number)
        and has(value, "title", is_string)
        and has(value, "items", is_array)
    ):
        return False

    if not (
        optional(value, "description", is_string)
        and optional(value, "notes", is_string)
        and optional(value, "estimatedTime", is_number)
    ):
        return False

    return all(validate_item(item) for item in value["items"])
