"""
Prompt templates module.

Placeholder substitution for manual and AI-assisted grading prompts.
"""

from .grading_prompts import EXAMPLE_PROMPTS, build_item_context, process_item_grading_prompt
from .loader import PromptLoader
from .templates import (
    PromptTemplate,
    PromptValidation,
    extract_placeholders,
    process_prompt_template,
    validate_prompt_template,
)

__all__ = [
    "EXAMPLE_PROMPTS",
    "PromptLoader",
    "PromptTemplate",
    "PromptValidation",
    "build_item_context",
    "extract_placeholders",
    "process_item_grading_prompt",
    "process_prompt_template",
    "validate_prompt_template",
]
