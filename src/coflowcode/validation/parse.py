"""Parse JSON text into trusted assignments and submission bundles.

Documents are validated as plain decoded JSON first; typed models are only
built from data that passed validation.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import InvalidSchemaError, MalformedJSONError
from ..items.models import Assignment
from ..submissions.models import SubmissionBundle
from ..utils.files import read_text
from ..utils.logging import get_logger
from .assignment import validate_assignment
from .submission import validate_submission

logger = get_logger(__name__)

INVALID_ASSIGNMENT_MESSAGE = (
    "Invalid assignment schema: The file does not contain a valid assignment structure."
)
INVALID_SUBMISSION_MESSAGE = (
    "Invalid submission schema: The file does not contain a valid submission bundle structure."
)


def _decode(json_text: str) -> Any:
    try:
        return json.loads(json_text)
    except json.JSONDecodeError as e:
        raise MalformedJSONError(f"Invalid JSON: {e}") from e


def parse_assignment(json_text: str) -> Assignment:
    """Parse and validate an assignment from a JSON string.

    Raises:
        MalformedJSONError: If the text is not valid JSON
        InvalidSchemaError: If the JSON is not a valid assignment
    """
    data = _decode(json_text)
    if not validate_assignment(data):
        raise InvalidSchemaError(INVALID_ASSIGNMENT_MESSAGE)
    return Assignment.from_dict(data)


def parse_submission(json_text: str) -> SubmissionBundle:
    """Parse and validate a submission bundle from a JSON string.

    Raises:
        MalformedJSONError: If the text is not valid JSON
        InvalidSchemaError: If the JSON is not a valid submission bundle
    """
    data = _decode(json_text)
    if not validate_submission(data):
        raise InvalidSchemaError(INVALID_SUBMISSION_MESSAGE)
    return SubmissionBundle.from_dict(data)


def load_assignment_file(path: str | Path) -> Assignment:
    """Read and parse an assignment file."""
    path = Path(path)
    logger.debug(f"Importing assignment from {path}")
    return parse_assignment(read_text(path))


def load_submission_file(path: str | Path) -> SubmissionBundle:
    """Read and parse a submission bundle file."""
    path = Path(path)
    logger.debug(f"Importing submission from {path}")
    return parse_submission(read_text(path))
