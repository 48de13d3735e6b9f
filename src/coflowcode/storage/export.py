"""Export assignments and submission bundles as JSON documents."""

import json
from pathlib import Path

from ..items.models import Assignment
from ..submissions.models import SubmissionBundle
from ..utils.files import safe_filename, write_text
from ..utils.logging import get_logger

logger = get_logger(__name__)


def export_assignment_json(assignment: Assignment) -> str:
    """Serialize an assignment with its items, grading config and files."""
    return json.dumps(assignment.to_dict(), indent=2, ensure_ascii=False)


def export_submission_json(bundle: SubmissionBundle) -> str:
    return json.dumps(bundle.to_dict(), indent=2, ensure_ascii=False)


def assignment_filename(assignment: Assignment) -> str:
    """Default download filename derived from the assignment title."""
    return safe_filename(assignment.title)


def save_assignment(
    assignment: Assignment, output_dir: Path, filename: str | None = None
) -> Path:
    """Write an assignment export to *output_dir*.

    Returns:
        Path of the written file
    """
    path = output_dir / (filename or assignment_filename(assignment))
    write_text(path, export_assignment_json(assignment))
    logger.info(f"Exported assignment {assignment.id} to {path}")
    return path


def save_submission(bundle: SubmissionBundle, path: Path) -> Path:
    write_text(path, export_submission_json(bundle))
    logger.info(f"Exported submission for assignment {bundle.assignment_id} to {path}")
    return path
