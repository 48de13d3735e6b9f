"""Grading prompts for assignment items.

Builds the placeholder context for an item and fills in the item's
``ai_prompt``. The available placeholders are ``question``, ``prompt``,
``studentAnswer``, ``testResults`` and ``rubric`` (the rubric rendered as
text, when the item has one).
"""

from __future__ import annotations

from ..items.models import (
    AssignmentItem,
    CodeCellItem,
    EssayItem,
    FillInBlankItem,
    MultipleChoiceItem,
    PageBreakItem,
)
from .templates import process_prompt_template

EXAMPLE_PROMPTS: dict[str, str] = {
    "essay": """
Please grade this essay response:

Question: {{question}}
Student's Answer: {{studentAnswer}}

Evaluate based on:
1. Clarity and coherence of argument
2. Use of relevant evidence and examples
3. Writing quality and grammar
4. Depth of analysis

Provide a score out of 10 and detailed feedback.
""",
    "code_with_tests": """
Code Assignment Grading:

Student's Code:
{{studentAnswer}}

Unit Test Results:
{{testResults}}

Please evaluate:
- Correctness (based on test results)
- Code style and readability
- Efficiency
- Best practices

Provide a score and specific suggestions for improvement.
""",
    "code_without_tests": """
Code Review:

Prompt: {{prompt}}

Student's Code:
{{studentAnswer}}

Please review the code for:
- Correctness and logic
- Code organization
- Naming conventions
- Comments and documentation

Provide constructive feedback.
""",
    "multiple_choice": """
Question: {{question}}
Student's answer: {{studentAnswer}}

This is an auto-graded multiple choice question.
Please provide additional qualitative feedback on common misconceptions
if the student got it wrong.
""",
}


def build_item_context(
    item: AssignmentItem,
    student_answer: str,
    test_results: str | None = None,
) -> dict[str, str]:
    """Placeholder values for grading *item*."""
    context = {"studentAnswer": student_answer}

    if isinstance(item, (EssayItem, CodeCellItem)):
        context["prompt"] = item.prompt
        context["question"] = item.prompt
    elif isinstance(item, (MultipleChoiceItem, FillInBlankItem)):
        context["question"] = item.question

    if test_results:
        context["testResults"] = test_results

    config = getattr(item, "grading_config", None)
    if config is not None and config.rubric is not None:
        context["rubric"] = config.rubric.to_prompt_text()

    return context


def process_item_grading_prompt(
    item: AssignmentItem,
    student_answer: str,
    test_results: str | None = None,
) -> str | None:
    """Fill in the item's AI grading prompt; ``None`` if it has none."""
    if isinstance(item, PageBreakItem) or item.grading_config is None:
        return None
    ai_prompt = item.grading_config.ai_prompt
    if not ai_prompt:
        return None
    return process_prompt_template(ai_prompt, build_item_context(item, student_answer, test_results))
