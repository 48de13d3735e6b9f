"""
Storage module.

JSON export of assignments and submissions, and a file-backed store.
"""

from .export import (
    assignment_filename,
    export_assignment_json,
    export_submission_json,
    save_assignment,
    save_submission,
)
from .store import AssignmentStore, sample_assignments

__all__ = [
    "AssignmentStore",
    "assignment_filename",
    "export_assignment_json",
    "export_submission_json",
    "sample_assignments",
    "save_assignment",
    "save_submission",
]
