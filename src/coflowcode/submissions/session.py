"""In-memory state of a student taking an assignment."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from ..errors import PageLockedError
from ..grading.grader import grade_items, is_auto_graded, needs_manual_grading
from ..grading.results import SubmittedResult
from ..items.models import (
    Assignment,
    AssignmentItem,
    CodeCellItem,
    CodeFile,
    EssayItem,
    FillInBlankItem,
    MultipleChoiceItem,
)
from ..items.pages import page_gate, split_pages
from ..utils.logging import get_logger
from .models import AttemptHistory, Collaborator, StudentAnswer, SubmissionBundle

logger = get_logger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class TakingSession:
    """Answers, results and navigation for one attempt at an assignment.

    The state is mutated as the student works and only becomes a
    :class:`SubmissionBundle` when exported with :meth:`to_bundle`.
    """

    def __init__(
        self,
        assignment: Assignment,
        collaborators: Iterable[Collaborator] | None = None,
        clock: Callable[[], datetime] | None = None,
    ):
        """Initialize the session.

        Args:
            assignment: The assignment being taken
            collaborators: Students working on the attempt
            clock: Source of timestamps, defaults to the current UTC time
        """
        self.assignment = assignment
        self.collaborators = list(collaborators or [])
        self.clock = clock or _utc_now
        self.pages = split_pages(assignment.items)
        self.current_page = 0
        self.submitted_results: list[SubmittedResult] = []
        self.attempt_history: dict[str, list[AttemptHistory]] = {}
        self.pending_grading_items: set[int] = set()
        self._answers: dict[int, StudentAnswer] = {}

    @property
    def total_pages(self) -> int:
        return len(self.pages)

    @property
    def current_items(self) -> list[AssignmentItem]:
        return self.pages[self.current_page]

    @property
    def answers(self) -> list[StudentAnswer]:
        """Answers in assignment order."""
        return [
            self._answers[item.id] for item in self.assignment.items if item.id in self._answers
        ]

    def get_answer(self, item_id: int) -> StudentAnswer | None:
        return self._answers.get(item_id)

    def get_result(self, item_id: int) -> SubmittedResult | None:
        for result in self.submitted_results:
            if result.item_id == item_id:
                return result
        return None

    # ------------------------------------------------------------------
    # Answers
    # ------------------------------------------------------------------

    def _item(self, item_id: int, kind: type) -> AssignmentItem:
        item = self.assignment.get_item(item_id)
        if item is None:
            raise KeyError(f"No item with id {item_id}")
        if not isinstance(item, kind):
            raise TypeError(f"Item {item_id} is a {item.type.value} item")
        return item

    def _answer(self, item_id: int) -> StudentAnswer:
        if item_id not in self._answers:
            self._answers[item_id] = StudentAnswer(item_id=item_id)
        return self._answers[item_id]

    def set_mcq_choice(self, item_id: int, index: int, checked: bool) -> list[int]:
        """Check or uncheck one choice; returns the current selection."""
        item = self._item(item_id, MultipleChoiceItem)
        if not 0 <= index < len(item.choices):
            raise IndexError(f"Item {item_id} has no choice {index}")

        answer = self._answer(item_id)
        selected = [i for i in (answer.mcq_answer or []) if i != index]
        if checked:
            selected.append(index)
        answer.mcq_answer = selected
        return list(selected)

    def set_fill_in_blank_answer(self, item_id: int, text: str) -> None:
        self._item(item_id, FillInBlankItem)
        self._answer(item_id).fill_in_blank_answer = text

    def set_essay_answer(self, item_id: int, text: str) -> None:
        self._item(item_id, EssayItem)
        self._answer(item_id).essay_answer = text

    def set_code_files(self, item_id: int, files: Iterable[CodeFile]) -> None:
        """Store the student's files; instructor files are never kept."""
        self._item(item_id, CodeCellItem)
        self._answer(item_id).code_files = [f for f in files if not f.is_instructor_file]

    # ------------------------------------------------------------------
    # Submitting
    # ------------------------------------------------------------------

    def submit_page(self) -> AttemptHistory:
        """Grade the current page and record the attempt.

        Results replace earlier results for the same items. Items that need
        manual or AI-assisted grading are added to the pending set.
        """
        items = self.current_items
        results = grade_items(items, self._answers.values())

        graded_ids = {r.item_id for r in results}
        self.submitted_results = [
            r for r in self.submitted_results if r.item_id not in graded_ids
        ] + results

        for item in items:
            if needs_manual_grading(item):
                self.pending_grading_items.add(item.id)

        key = str(self.current_page)
        history = self.attempt_history.setdefault(key, [])
        attempt = AttemptHistory(
            attempt_number=len(history) + 1,
            timestamp=self.clock().isoformat(),
            results=results,
        )
        history.append(attempt)

        passed = sum(1 for r in results if r.passed)
        logger.info(
            f"Page {self.current_page + 1} attempt {attempt.attempt_number}: "
            f"{passed}/{len(results)} auto-graded items passed"
        )
        return attempt

    def page_passed(self, page_index: int) -> bool:
        """True when every auto-graded item on the page has a passing result."""
        for item in self.pages[page_index]:
            if not is_auto_graded(item):
                continue
            result = self.get_result(item.id)
            if result is None or not result.passed:
                return False
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def can_advance(self) -> bool:
        if self.current_page >= self.total_pages - 1:
            return False
        gate = page_gate(self.assignment.items, self.current_page)
        if gate is not None and gate.require_all_correct:
            return self.page_passed(self.current_page)
        return True

    def next_page(self) -> int:
        """Move to the next page.

        Raises:
            PageLockedError: If the page requires all answers to be correct
                and they are not
        """
        if self.current_page >= self.total_pages - 1:
            return self.current_page
        if not self.can_advance():
            raise PageLockedError(self.current_page)
        self.current_page += 1
        logger.debug(f"Moved to page {self.current_page + 1}")
        return self.current_page

    def previous_page(self) -> int:
        if self.current_page > 0:
            self.current_page -= 1
        return self.current_page

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def to_bundle(self) -> SubmissionBundle:
        """Snapshot the session as a submission bundle."""
        return SubmissionBundle(
            assignment_id=self.assignment.id,
            assignment_title=self.assignment.title,
            assignment_description=self.assignment.description,
            assignment_estimated_time=self.assignment.estimated_time,
            timestamp=self.clock().isoformat(),
            current_page=self.current_page,
            total_pages=self.total_pages,
            collaborators=[
                Collaborator(name=c.name, email=c.email, role=c.role) for c in self.collaborators
            ],
            answers=[StudentAnswer.from_dict(a.to_dict()) for a in self.answers],
            submitted_results=[SubmittedResult.from_dict(r.to_dict()) for r in self.submitted_results],
            attempt_history={
                page: [AttemptHistory.from_dict(a.to_dict()) for a in attempts]
                for page, attempts in self.attempt_history.items()
            },
            pending_grading_items=sorted(self.pending_grading_items),
        )
