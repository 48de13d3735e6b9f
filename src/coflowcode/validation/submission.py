"""Structural validation of imported submission bundles."""

from __future__ import annotations

from typing import Any

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


def _numbers(value: Any) -> bool:
    return is_array_of(value, is_number)


def _strings(value: Any) -> bool:
    return is_array_of(value, is_string)


def validate_collaborator(value: Any) -> bool:
    return is_object(value) and has(value, "name", is_string) and has(value, "email", is_string)


def validate_student_answer(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "itemId", is_number)
        and optional(value, "mcqAnswer", _numbers)
        and optional(value, "fillInBlankAnswer", is_string)
        and optional(value, "essayAnswer", is_string)
        and optional(value, "codeFiles", lambda v: is_array_of(v, is_code_file))
    )


def _is_mcq_result(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "passed", is_boolean)
        and has(value, "selectedAnswers", _numbers)
        and has(value, "correctAnswers", _numbers)
        and has(value, "feedbackPerChoice", _strings)
    )


def _is_fill_in_blank_result(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "passed", is_boolean)
        and has(value, "studentAnswer", is_string)
        and has(value, "acceptedAnswers", _strings)
    )


def validate_submitted_result(value: Any) -> bool:
    """Return True for an item result; embedded grading results are optional."""
    return (
        is_object(value)
        and has(value, "itemId", is_number)
        and optional(value, "mcqResult", _is_mcq_result)
        and optional(value, "fillInBlankResult", _is_fill_in_blank_result)
    )


def validate_attempt(value: Any) -> bool:
    return (
        is_object(value)
        and has(value, "attemptNumber", is_number)
        and has(value, "timestamp", is_string)
        and has(value, "results", lambda v: is_array_of(v, validate_submitted_result))
    )


def validate_attempt_history(value: Any) -> bool:
    """A mapping from page index to that page's list of attempts."""
    if not is_object(value):
        return False
    return all(is_array_of(attempts, validate_attempt) for attempts in value.values())


def validate_submission(value: Any) -> bool:
    """Return True if *value* is a structurally valid submission bundle.

    ``attemptHistory`` must be an object (not an array), since pages with
    attempts can be sparse. The optional ``assignmentDescription`` (string)
    and ``assignmentEstimatedTime`` (number) are rejected when present with
    the wrong type.
    """
    if not is_object(value):
        return False

    if not (
        has(value, "assignmentId", is_number)
        and has(value, "assignmentTitle", is_string)
        and has(value, "timestamp", is_string)
        and has(value, "currentPage", is_number)
        and has(value, "totalPages", is_number)
        and has(value, "collaborators", is_array)
        and has(value, "answers", is_array)
        and has(value, "submittedResults", is_array)
        and has(value, "attemptHistory", is_object)
        and has(value, "pendingGradingItems", is_array)
    ):
        return False

    if not (
        optional(value, "assignmentDescription", is_string)
        and optional(value, "assignmentEstimatedTime", is_number)
    ):
        return False

    return (
        all(validate_collaborator(c) for c in value["collaborators"])
        and all(validate_student_answer(a) for a in value["answers"])
        and all(validate_submitted_result(r) for r in value["submittedResults"])
        and validate_attempt_history(value["attemptHistory"])
        and all(is_number(item_id) for item_id in value["pendingGradingItems"])
    )
