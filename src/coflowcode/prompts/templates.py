"""Prompt templates with ``{{placeholder}}`` substitution.

Templates are written by instructors for manual or AI-assisted grading.
Placeholders are bare word-character identifiers in double curly braces.
Unknown placeholders are left in the text untouched.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

PLACEHOLDER_RE = re.compile(r"\{\{(\w+)\}\}", re.ASCII)

PromptContext = Mapping[str, Any]


@dataclass
class PromptValidation:
    """Result of checking a template against a context."""

    is_valid: bool
    missing_placeholders: list[str] = field(default_factory=list)


def process_prompt_template(template: str, context: PromptContext) -> str:
    """Replace each ``{{name}}`` with ``context[name]``.

    Values are inserted verbatim and the result is not scanned again.
    Placeholders whose value is missing or ``None`` are kept as written.

    Example:
        >>> process_prompt_template("Grade this answer: {{studentAnswer}}",
        ...                         {"studentAnswer": "Hello World"})
        'Grade this answer: Hello World'
    """
    if not template:
        return ""

    def replace(match: re.Match) -> str:
        value = context.get(match.group(1))
        return match.group(0) if value is None else str(value)

    return PLACEHOLDER_RE.sub(replace, template)


def extract_placeholders(template: str) -> list[str]:
    """Placeholder names in order of appearance, duplicates included."""
    if not template:
        return []
    return PLACEHOLDER_RE.findall(template)


def validate_prompt_template(template: str, context: PromptContext) -> PromptValidation:
    """Check that every placeholder occurrence has a value in *context*."""
    missing = [name for name in extract_placeholders(template) if context.get(name) is None]
    return PromptValidation(is_valid=not missing, missing_placeholders=missing)


@dataclass
class PromptTemplate:
    """A named grading prompt template."""

    name: str
    content: str
    source_path: Path | None = None

    @property
    def placeholders(self) -> list[str]:
        """Placeholder names in order of first appearance."""
        return list(dict.fromkeys(extract_placeholders(self.content)))

    def render(self, context: PromptContext | None = None, **kwargs: Any) -> str:
        """Render the template, leaving unfilled placeholders as-is.

        Args:
            context: Placeholder values
            **kwargs: Additional placeholder values, overriding *context*

        Returns:
            Rendered prompt string
        """
        values = dict(context or {})
        values.update(kwargs)
        return process_prompt_template(self.content, values)

    def validate(self, context: PromptContext | None = None, **kwargs: Any) -> PromptValidation:
        values = dict(context or {})
        values.update(kwargs)
        return validate_prompt_template(self.content, values)

