"""
Validation module.

Decides whether imported assignment documents and submission bundles are
structurally trustworthy before they enter application state.
"""

from .assignment import validate_assignment, validate_item
from .parse import (
    load_assignment_file,
    load_submission_file,
    parse_assignment,
    parse_submission,
)
from .submission import validate_submission

__all__ = [
    "load_assignment_file",
    "load_submission_file",
    "parse_assignment",
    "parse_submission",
    "validate_assignment",
    "validate_item",
    "validate_submission",
]
