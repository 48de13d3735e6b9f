"""Deterministic auto-grading for multiple-choice and fill-in-blank items."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING

from ..items.models import (
    AssignmentItem,
    EssayItem,
    FillInBlankItem,
    MultipleChoiceItem,
    PageBreakItem,
)
from ..utils.logging import get_logger
from .results import FillInBlankResult, MCQResult, SubmittedResult

if TYPE_CHECKING:
    from ..submissions.models import StudentAnswer

logger = get_logger(__name__)

AUTO_GRADED_TYPES = (MultipleChoiceItem, FillInBlankItem)


def grade_multiple_choice(
    item: MultipleChoiceItem, selected_indices: Sequence[int]
) -> MCQResult:
    """Grade a multiple-choice response.

    The response passes when the selected indices are exactly the set of
    correct indices, in any order. With answer checking disabled the result
    never passes but still echoes the selection, the key and the feedback.

    Args:
        item: The multiple-choice item
        selected_indices: Indices of the choices the student checked

    Returns:
        MCQResult for the response
    """
    selected = list(selected_indices)
    feedback = list(item.choice_feedback or [])

    if not item.answer_check_enabled:
        return MCQResult(
            passed=False,
            selected_answers=selected,
            correct_answers=list(item.correct_answers),
            feedback_per_choice=feedback,
        )

    sorted_selected = sorted(selected)
    sorted_correct = sorted(item.correct_answers)
    passed = len(sorted_selected) == len(sorted_correct) and all(
        s == c for s, c in zip(sorted_selected, sorted_correct)
    )

    return MCQResult(
        passed=passed,
        selected_answers=selected,
        correct_answers=list(item.correct_answers),
        feedback_per_choice=feedback,
    )


def translate_answer_pattern(pattern: str) -> str:
    """Rewrite the JavaScript regex syntax answer patterns are authored in.

    ``$`` outside a character class only matches at the very end of the
    input (Python's ``$`` also matches before a trailing newline), and
    ``(?<name>...)`` / ``\\k<name>`` become Python's named-group syntax.
    """
    out = []
    in_class = False
    i = 0
    while i < len(pattern):
        ch = pattern[i]
        if ch == "\\":
            if not in_class and pattern.startswith("\\k<", i) and ">" in pattern[i + 3 :]:
                end = pattern.index(">", i + 3)
                out.append(f"(?P={pattern[i + 3 : end]})")
                i = end + 1
            else:
                out.append(pattern[i : i + 2])
                i += 2
            continue
        if in_class:
            in_class = ch != "]"
        elif ch == "[":
            in_class = True
        elif ch == "$":
            ch = r"\Z"
        elif pattern.startswith("(?<", i) and pattern[i + 3 : i + 4] not in ("=", "!"):
            ch = "(?P<"
            i += 2
        out.append(ch)
        i += 1
    return "".join(out)


def compile_answer_pattern(pattern: str, case_sensitive: bool = False) -> re.Pattern | None:
    """Compile an instructor-authored answer pattern.

    Returns ``None`` (after logging a warning) when the pattern is not a
    valid regular expression.
    """
    flags = 0 if case_sensitive else re.IGNORECASE
    try:
        return re.compile(translate_answer_pattern(pattern), flags)
    except re.error as e:
        logger.warning(f"Invalid regex pattern {pattern!r}: {e}")
        return None


def grade_fill_in_blank(item: FillInBlankItem, student_answer: str) -> FillInBlankResult:
    """Grade a fill-in-blank response.

    A non-blank ``regex_pattern`` that compiles decides the result on its
    own (searched anywhere in the answer, accepted answers ignored). An
    invalid pattern falls back to comparing against the accepted answers.

    Args:
        item: The fill-in-blank item
        student_answer: The raw answer; echoed unmodified in the result

    Returns:
        FillInBlankResult for the response
    """
    accepted = list(item.accepted_answers)

    if not item.answer_check_enabled:
        return FillInBlankResult(
            passed=False, student_answer=student_answer, accepted_answers=accepted
        )

    processed = student_answer.strip() if item.trims_whitespace else student_answer

    if item.regex_pattern and item.regex_pattern.strip():
        regex = compile_answer_pattern(item.regex_pattern, item.is_case_sensitive)
        if regex is not None:
            return FillInBlankResult(
                passed=regex.search(processed) is not None,
                student_answer=student_answer,
                accepted_answers=accepted,
            )

    passed = any(_answers_match(item, processed, candidate) for candidate in accepted)
    return FillInBlankResult(
        passed=passed, student_answer=student_answer, accepted_answers=accepted
    )


def _answers_match(item: FillInBlankItem, processed: str, accepted: str) -> bool:
    if item.trims_whitespace:
        accepted = accepted.strip()
    if item.is_case_sensitive:
        return processed == accepted
    return processed.lower() == accepted.lower()


def is_auto_graded(item: AssignmentItem) -> bool:
    return isinstance(item, AUTO_GRADED_TYPES)


def needs_manual_grading(item: AssignmentItem) -> bool:
    """Whether a submission of *item* waits on a human or AI reviewer."""
    if isinstance(item, PageBreakItem):
        return False
    if isinstance(item, EssayItem):
        return True
    return item.grading_config is not None and item.grading_config.has_manual_grading


def grade_item(item: AssignmentItem, answer: StudentAnswer | None) -> SubmittedResult | None:
    """Auto-grade one item; ``None`` for items that are not auto-graded.

    A missing answer grades as an empty selection or an empty string.
    """
    if isinstance(item, MultipleChoiceItem):
        selected = answer.mcq_answer if answer is not None and answer.mcq_answer else []
        return SubmittedResult(item_id=item.id, mcq_result=grade_multiple_choice(item, selected))

    if isinstance(item, FillInBlankItem):
        text = answer.fill_in_blank_answer if answer is not None else None
        return SubmittedResult(
            item_id=item.id, fill_in_blank_result=grade_fill_in_blank(item, text or "")
        )

    return None


def grade_items(
    items: Iterable[AssignmentItem], answers: Iterable[StudentAnswer]
) -> list[SubmittedResult]:
    """Grade every auto-graded item in *items*, in order."""
    by_id = {answer.item_id: answer for answer in answers}
    results = []
    for item in items:
        result = grade_item(item, by_id.get(item.id))
        if result is not None:
            results.append(result)
    return results
