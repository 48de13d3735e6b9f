"""Auto-grading result models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class MCQResult:
    """Outcome of grading a multiple-choice response."""

    passed: bool
    selected_answers: list[int] = field(default_factory=list)
    correct_answers: list[int] = field(default_factory=list)
    feedback_per_choice: list[str] = field(default_factory=list)

    def feedback_for(self, index: int) -> str | None:
        """Feedback for choice *index*; ``None`` where none was authored."""
        if 0 <= index < len(self.feedback_per_choice):
            return self.feedback_per_choice[index]
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MCQResult":
        return cls(
            passed=data["passed"],
            selected_answers=list(data["selectedAnswers"]),
            correct_answers=list(data["correctAnswers"]),
            feedback_per_choice=list(data["feedbackPerChoice"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "selectedAnswers": list(self.selected_answers),
            "correctAnswers": list(self.correct_answers),
            "feedbackPerChoice": list(self.feedback_per_choice),
        }


@dataclass
class FillInBlankResult:
    """Outcome of grading a fill-in-blank response."""

    passed: bool
    student_answer: str = ""
    accepted_answers: list[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FillInBlankResult":
        return cls(
            passed=data["passed"],
            student_answer=data["studentAnswer"],
            accepted_answers=list(data["acceptedAnswers"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "passed": self.passed,
            "studentAnswer": self.student_answer,
            "acceptedAnswers": list(self.accepted_answers),
        }


@dataclass
class SubmittedResult:
    """The auto-grading result recorded for one item."""

    item_id: int
    mcq_result: MCQResult | None = None
    fill_in_blank_result: FillInBlankResult | None = None

    @property
    def passed(self) -> bool | None:
        """Whether the item passed; ``None`` when no result is attached."""
        if self.mcq_result is not None:
            return self.mcq_result.passed
        if self.fill_in_blank_result is not None:
            return self.fill_in_blank_result.passed
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SubmittedResult":
        mcq = data.get("mcqResult")
        fib = data.get("fillInBlankResult")
        return cls(
            item_id=data["itemId"],
            mcq_result=MCQResult.from_dict(mcq) if mcq is not None else None,
            fill_in_blank_result=FillInBlankResult.from_dict(fib) if fib is not None else None,
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"itemId": self.item_id}
        if self.mcq_result is not None:
            data["mcqResult"] = self.mcq_result.to_dict()
        if self.fill_in_blank_result is not None:
            data["fillInBlankResult"] = self.fill_in_blank_result.to_dict()
        return data
