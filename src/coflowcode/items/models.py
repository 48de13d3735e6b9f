"""Assignment and assignment item data models.

Item dictionaries use the camelCase keys of the exported JSON documents.
``from_dict`` expects data that already passed
:func:`coflowcode.validation.validate_assignment`; ``to_dict`` leaves out
optional fields that are not set so an export can be re-imported unchanged.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar, Union

from ..config.models import GradingConfig


class ItemType(str, Enum):
    """Tags of the assignment item variants."""

    TEXT = "text"
    MULTIPLE_CHOICE = "multiple-choice"
    FILL_IN_BLANK = "fill-in-blank"
    ESSAY = "essay"
    CODE_CELL = "code-cell"
    PAGE_BREAK = "page-break"


ITEM_TYPES = frozenset(t.value for t in ItemType)


def _put(data: dict[str, Any], key: str, value: Any) -> None:
    if value is not None:
        data[key] = value


def _config_to_dict(data: dict[str, Any], config: GradingConfig | None) -> None:
    config = GradingConfig.collapse(config)
    if config is not None:
        data["gradingConfig"] = config.to_dict()


@dataclass
class CodeFile:
    """A source file attached to a code cell."""

    name: str
    language: str
    content: str
    is_instructor_file: bool = False  # hidden from students, e.g. test harnesses

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CodeFile":
        return cls(
            name=data["name"],
            language=data["language"],
            content=data["content"],
            is_instructor_file=data["isInstructorFile"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "language": self.language,
            "content": self.content,
            "isInstructorFile": self.is_instructor_file,
        }


@dataclass
class TextItem:
    """A block of markdown text."""

    type: ClassVar[ItemType] = ItemType.TEXT

    id: int
    content: str = ""
    grading_config: GradingConfig | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "TextItem":
        return cls(
            id=data["id"],
            content=data["content"],
            grading_config=GradingConfig.from_dict(data.get("gradingConfig")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type.value, "content": self.content}
        _config_to_dict(data, self.grading_config)
        return data


@dataclass
class MultipleChoiceItem:
    """A question with one or more correct choices."""

    type: ClassVar[ItemType] = ItemType.MULTIPLE_CHOICE

    id: int
    question: str = ""
    choices: list[str] = field(default_factory=list)
    correct_answers: list[int] = field(default_factory=list)
    shuffle: bool | None = None
    choice_feedback: list[str] | None = None
    grading_config: GradingConfig | None = None

    @property
    def answer_check_enabled(self) -> bool:
        return self.grading_config is None or self.grading_config.answer_check_enabled

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MultipleChoiceItem":
        feedback = data.get("choiceFeedback")
        return cls(
            id=data["id"],
            question=data["question"],
            choices=list(data["choices"]),
            correct_answers=list(data["correctAnswers"]),
            shuffle=data.get("shuffle"),
            choice_feedback=list(feedback) if feedback is not None else None,
            grading_config=GradingConfig.from_dict(data.get("gradingConfig")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "question": self.question,
            "choices": list(self.choices),
            "correctAnswers": list(self.correct_answers),
        }
        _put(data, "shuffle", self.shuffle)
        if self.choice_feedback is not None:
            data["choiceFeedback"] = list(self.choice_feedback)
        _config_to_dict(data, self.grading_config)
        return data


@dataclass
class FillInBlankItem:
    """A short free-text answer checked against a list or a pattern."""

    type: ClassVar[ItemType] = ItemType.FILL_IN_BLANK

    id: int
    question: str = ""
    accepted_answers: list[str] = field(default_factory=list)
    regex_pattern: str | None = None
    case_sensitive: bool | None = None
    trim_whitespace: bool | None = None
    grading_config: GradingConfig | None = None

    @property
    def answer_check_enabled(self) -> bool:
        return self.grading_config is None or self.grading_config.answer_check_enabled

    @property
    def is_case_sensitive(self) -> bool:
        return bool(self.case_sensitive)

    @property
    def trims_whitespace(self) -> bool:
        return self.trim_whitespace is not False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FillInBlankItem":
        return cls(
            id=data["id"],
            question=data["question"],
            accepted_answers=list(data["acceptedAnswers"]),
            regex_pattern=data.get("regexPattern"),
            case_sensitive=data.get("caseSensitive"),
            trim_whitespace=data.get("trimWhitespace"),
            grading_config=GradingConfig.from_dict(data.get("gradingConfig")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "question": self.question,
            "acceptedAnswers": list(self.accepted_answers),
        }
        _put(data, "regexPattern", self.regex_pattern)
        _put(data, "caseSensitive", self.case_sensitive)
        _put(data, "trimWhitespace", self.trim_whitespace)
        _config_to_dict(data, self.grading_config)
        return data


@dataclass
class EssayItem:
    """An open-ended written response, graded manually."""

    type: ClassVar[ItemType] = ItemType.ESSAY

    id: int
    prompt: str = ""
    grading_config: GradingConfig | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EssayItem":
        return cls(
            id=data["id"],
            prompt=data["prompt"],
            grading_config=GradingConfig.from_dict(data.get("gradingConfig")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type.value, "prompt": self.prompt}
        _config_to_dict(data, self.grading_config)
        return data


@dataclass
class CodeCellItem:
    """A programming exercise made of one or more files."""

    type: ClassVar[ItemType] = ItemType.CODE_CELL

    id: int
    prompt: str = ""
    files: list[CodeFile] = field(default_factory=list)
    starter_code: str | None = None  # legacy single-file starter
    grading_config: GradingConfig | None = None

    @property
    def student_files(self) -> list[CodeFile]:
        return [f for f in self.files if not f.is_instructor_file]

    @property
    def test_file(self) -> CodeFile | None:
        """The instructor file named by the grading config, if any."""
        if self.grading_config is None or not self.grading_config.test_file_name:
            return None
        for f in self.files:
            if f.is_instructor_file and f.name == self.grading_config.test_file_name:
                return f
        return None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CodeCellItem":
        return cls(
            id=data["id"],
            prompt=data["prompt"],
            files=[CodeFile.from_dict(f) for f in data["files"]],
            starter_code=data.get("starterCode"),
            grading_config=GradingConfig.from_dict(data.get("gradingConfig")),
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "id": self.id,
            "type": self.type.value,
            "prompt": self.prompt,
            "files": [f.to_dict() for f in self.files],
        }
        _put(data, "starterCode", self.starter_code)
        _config_to_dict(data, self.grading_config)
        return data


@dataclass
class PageBreakItem:
    """Separates pages; optionally gates navigation to the next page."""

    type: ClassVar[ItemType] = ItemType.PAGE_BREAK

    id: int
    require_all_correct: bool | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PageBreakItem":
        return cls(id=data["id"], require_all_correct=data.get("requireAllCorrect"))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "type": self.type.value}
        _put(data, "requireAllCorrect", self.require_all_correct)
        return data


AssignmentItem = Union[
    TextItem,
    MultipleChoiceItem,
    FillInBlankItem,
    EssayItem,
    CodeCellItem,
    PageBreakItem,
]

ITEM_CLASSES: dict[ItemType, type] = {
    ItemType.TEXT: TextItem,
    ItemType.MULTIPLE_CHOICE: MultipleChoiceItem,
    ItemType.FILL_IN_BLANK: FillInBlankItem,
    ItemType.ESSAY: EssayItem,
    ItemType.CODE_CELL: CodeCellItem,
    ItemType.PAGE_BREAK: PageBreakItem,
}


def item_from_dict(data: dict[str, Any]) -> AssignmentItem:
    """Build the item variant named by ``data["type"]``.

    Raises:
        ValueError: If the type tag is not a known item type
    """
    try:
        item_type = ItemType(data["type"])
    except ValueError:
        raise ValueError(f"Unknown item type: {data['type']!r}") from None
    return ITEM_CLASSES[item_type].from_dict(data)


def create_default_item(item_type: ItemType | str, item_id: int) -> AssignmentItem:
    """Create an empty item of the given type, as the editor does."""
    item_type = ItemType(item_type)
    if item_type is ItemType.MULTIPLE_CHOICE:
        return MultipleChoiceItem(id=item_id, choices=["", "", "", ""])
    return ITEM_CLASSES[item_type](id=item_id)


@dataclass
class Assignment:
    """An ordered collection of items; order determines page layout."""

    id: int
    title: str
    description: str | None = None
    estimated_time: int | None = None  # minutes
    notes: str | None = None  # instructor-private
    items: list[AssignmentItem] = field(default_factory=list)

    def get_item(self, item_id: int) -> AssignmentItem | None:
        """Return the item with the given *item_id*, or ``None``."""
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    def next_item_id(self) -> int:
        """Id for a newly added item: one past the largest id in use."""
        return max((item.id for item in self.items), default=0) + 1

    def add_item(self, item_type: ItemType | str) -> AssignmentItem:
        """Append a default item of *item_type* and return it."""
        item = create_default_item(item_type, self.next_item_id())
        self.items.append(item)
        return item

    @property
    def pages(self) -> list[list[AssignmentItem]]:
        from .pages import split_pages

        return split_pages(self.items)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Assignment":
        return cls(
            id=data["id"],
            title=data["title"],
            description=data.get("description"),
            estimated_time=data.get("estimatedTime"),
            notes=data.get("notes"),
            items=[item_from_dict(item) for item in data["items"]],
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"id": self.id, "title": self.title}
        _put(data, "description", self.description)
        _put(data, "estimatedTime", self.estimated_time)
        _put(data, "notes", self.notes)
        data["items"] = [item.to_dict() for item in self.items]
        return data
