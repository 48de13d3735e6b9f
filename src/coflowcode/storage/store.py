"""File-backed assignment store.

Every save replaces the whole stored document.
"""

import json
from pathlib import Path

from ..errors import ImportValidationError, StoreCorruptedError
from ..items.models import Assignment
from ..utils.files import write_text
from ..utils.logging import get_logger
from ..validation.assignment import validate_assignment
from ..validation.parse import load_assignment_file

logger = get_logger(__name__)


def sample_assignments() -> list[Assignment]:
    """Assignments shown before anything has been saved."""
    return [
        Assignment(
            id=1,
            title="Introduction to TypeScript",
            description="Learn the basics of TypeScript and type annotations",
        ),
        Assignment(
            id=2,
            title="React Hooks",
            description="Master useState, useEffect, and custom hooks",
        ),
        Assignment(id=3, title="Advanced React Patterns"),
    ]


class AssignmentStore:
    """Persists the list of assignments as one JSON file."""

    def __init__(self, path: Path):
        """Initialize the store.

        Args:
            path: JSON file holding the stored assignments
        """
        self.path = path

    def load(self) -> list[Assignment]:
        """Load stored assignments, or the samples if nothing usable is stored.

        An unusable store file is logged and left on disk untouched.
        """
        try:
            return self._read()
        except StoreCorruptedError as e:
            logger.error(f"Error loading assignments from {self.path}: {e.reason}")
            return sample_assignments()

    def _read(self) -> list[Assignment]:
        """Read the store strictly; samples only when no file exists yet.

        Raises:
            StoreCorruptedError: If the file exists but is unreadable or
                holds an entry that is not a valid assignment
        """
        if not self.path.exists():
            return sample_assignments()

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StoreCorruptedError(self.path, str(e)) from e

        if not isinstance(data, list):
            raise StoreCorruptedError(self.path, "expected a list of assignments")
        for index, entry in enumerate(data):
            if not validate_assignment(entry):
                raise StoreCorruptedError(self.path, f"entry {index} is not a valid assignment")

        return [Assignment.from_dict(a) for a in data]

    def save(self, assignments: list[Assignment]) -> None:
        """Replace the stored assignments."""
        content = json.dumps([a.to_dict() for a in assignments], ensure_ascii=False)
        try:
            write_text(self.path, content)
        except OSError as e:
            logger.error(f"Error saving assignments to {self.path}: {e}")
            raise

    def get(self, assignment_id: int) -> Assignment | None:
        for assignment in self.load():
            if assignment.id == assignment_id:
                return assignment
        return None

    def next_id(self) -> int:
        """Next free assignment id; raises StoreCorruptedError on an unusable store."""
        return max((a.id for a in self._read()), default=0) + 1

    def upsert(self, assignment: Assignment) -> None:
        """Save *assignment*, replacing a stored one with the same id.

        Raises:
            StoreCorruptedError: If the existing store file is unusable
        """
        assignments = self._read()
        for index, existing in enumerate(assignments):
            if existing.id == assignment.id:
                assignments[index] = assignment
                break
        else:
            assignments.append(assignment)
        self.save(assignments)

    def import_file(self, path: Path, assign_new_id: bool = False) -> Assignment:
        """Import an assignment file into the store.

        The file is fully validated before anything is written; a rejected
        file leaves the store unchanged.

        Args:
            path: Assignment JSON file
            assign_new_id: Give the imported assignment the next free id
                instead of replacing a stored assignment with the same id

        Raises:
            MalformedJSONError: If the file is not valid JSON
            InvalidSchemaError: If the file is not a valid assignment
            StoreCorruptedError: If the existing store file is unusable
        """
        try:
            assignment = load_assignment_file(path)
        except ImportValidationError:
            logger.warning(f"Rejected assignment import from {path}")
            raise

        if assign_new_id:
            assignment.id = self.next_id()
        self.upsert(assignment)
        logger.info(f"Imported assignment {assignment.id} ({assignment.title!r})")
        return assignment
