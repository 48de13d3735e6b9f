"""Submission bundle data models."""

from dataclasses import dataclass, field
from typing import Any

from ..grading.results import SubmittedResult
from ..items.models import CodeFile


@dataclass
class Collaborator:
    """A student working on the submission."""

    name: str
    email: str
    role: Any = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Collaborator":
        return cls(name=data["name"], email=data["email"], role=data.get("role"))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "email": self.email}
        if self.role is not None:
            data["role"] = self.role
        return data


@dataclass
class StudentAnswer:
    """A student's response to one item."""

    item_id: int
    mcq_answer: list[int] | None = None
    fill_in_blank_answer: str | None = None
    essay_answer: str | None = None
    code_files: list[CodeFile] | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StudentAnswer":
        mcq = data.get("mcqAnswer")
        files = data.get("codeFiles")
        return cls(
            item_id=data["itemId"],
            mcq_answer=list(mcq) if mcq is not None else None,
            fill_in_blank_answer=data.get("fillInBlankAnswer"),
            essay_answer=data.get("essayAnswer"),
            code_files=[CodeFile.from_dict(f) for f in files] if files is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"itemId": self.item_id}
        if self.mcq_answer is not None:
            data["mcqAnswer"] = list(self.mcq_answer)
        if self.fill_in_blank_answer is not None:
            data["fillInBlankAnswer"] = self.fill_in_blank_answer
        if self.essay_answer is not None:
            data["essayAnswer"] = self.essay_answer
        if self.code_files is not None:
            data["codeFiles"] = [f.to_dict() for f in self.code_files]
        return data


@dataclass
class AttemptHistory:
    """One submit action on a page and the results it produced."""

    attempt_number: int
    timestamp: str
    results: list[SubmittedResult] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AttemptHistory":
        return cls(
            attempt_number=data["attemptNumber"],
            timestamp=data["timestamp"],
            results=[SubmittedResult.from_dict(r) for r in data["results"]],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "attemptNumber": self.attempt_number,
            "timestamp": self.timestamp,
            "results": [r.to_dict() for r in self.results],
        }


@dataclass
class SubmissionBundle:
    """A self-contained export of one student's attempt.

    ``attempt_history`` is keyed by the stringified page index; pages
    without attempts have no key.
    """

    assignment_id: int
    assignment_title: str
    timestamp: str
    current_page: int = 0
    total_pages: int = 1
    assignment_description: str | None = None
    assignment_estimated_time: int | None = None
    collaborators: list[Collaborator] = field(default_factory=list)
    answers: list[StudentAnswer] = field(default_factory=list)
    submitted_results: list[SubmittedResult] = field(default_factory=list)
    attempt_history: dict[str, list[AttemptHistory]] = field(default_factory=dict)
    pending_grading_items: list[int] = field(default_factory=list)

    def get_answer(self, item_id: int) -> StudentAnswer | None:
        for answer in self.answers:
            if answer.item_id == item_id:
                return answer
        return None

    def get_result(self, item_id: int) -> SubmittedResult | None:
        for result in self.submitted_results:
            if result.item_id == item_id:
                return result
        return None

    def attempts_for_page(self, page_index: int) -> list[AttemptHistory]:
        return self.attempt_history.get(str(page_index), [])

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SubmissionBundle":
        return cls(
            assignment_id=data["assignmentId"],
            assignment_title=data["assignmentTitle"],
            assignment_description=data.get("assignmentDescription"),
            assignment_estimated_time=data.get("assignmentEstimatedTime"),
            timestamp=data["timestamp"],
            current_page=data["currentPage"],
            total_pages=data["totalPages"],
            collaborators=[Collaborator.from_dict(c) for c in data["collaborators"]],
            answers=[StudentAnswer.from_dict(a) for a in data["answers"]],
            submitted_results=[SubmittedResult.from_dict(r) for r in data["submittedResults"]],
            attempt_history={
                str(page): [AttemptHistory.from_dict(a) for a in attempts]
                for page, attempts in data["attemptHistory"].items()
            },
            pending_grading_items=list(data["pendingGradingItems"]),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "assignmentId": self.assignment_id,
            "assignmentTitle": self.assignment_title,
        }
        if self.assignment_description is not None:
            data["assignmentDescription"] = self.assignment_description
        if self.assignment_estimated_time is not None:
            data["assignmentEstimatedTime"] = self.assignment_estimated_time
        data.update(
            {
                "timestamp": self.timestamp,
                "currentPage": self.current_page,
                "totalPages": self.total_pages,
                "collaborators": [c.to_dict() for c in self.collaborators],
                "answers": [a.to_dict() for a in self.answers],
                "submittedResults": [r.to_dict() for r in self.submitted_results],
                "attemptHistory": {
                    page: [a.to_dict() for a in attempts]
                    for page, attempts in self.attempt_history.items()
                },
                "pendingGradingItems": list(self.pending_grading_items),
            }
        )
        return data
