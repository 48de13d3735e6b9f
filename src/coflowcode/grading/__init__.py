"""
Grading module.

Deterministic auto-grading for objective items. Subjective items are only
flagged as pending manual or AI-assisted grading.
"""

from .grader import (
    compile_answer_pattern,
    grade_fill_in_blank,
    grade_item,
    grade_items,
    grade_multiple_choice,
    is_auto_graded,
    needs_manual_grading,
    translate_answer_pattern,
)
from .results import FillInBlankResult, MCQResult, SubmittedResult

__all__ = [
    "FillInBlankResult",
    "MCQResult",
    "SubmittedResult",
    "compile_answer_pattern",
    "grade_fill_in_blank",
    "grade_item",
    "grade_items",
    "grade_multiple_choice",
    "is_auto_graded",
    "needs_manual_grading",
    "translate_answer_pattern",
]
