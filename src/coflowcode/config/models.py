"""Configuration data models."""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from ..rubrics.models import Rubric


@dataclass
class GradingConfig:
    """How an item is graded.

    ``enable_answer_check`` is three-way: ``None`` means "not set", which
    behaves like ``True`` for multiple-choice and fill-in-blank items.
    """

    enable_answer_check: bool | None = None
    test_file_name: str | None = None
    rubric: Rubric | None = None
    ai_prompt: str | None = None

    @property
    def answer_check_enabled(self) -> bool:
        return self.enable_answer_check is not False

    @property
    def has_manual_grading(self) -> bool:
        return bool(self.rubric) or bool(self.ai_prompt)

    @property
    def is_empty(self) -> bool:
        """No field set. Empty strings count as unset, ``False`` does not."""
        return (
            self.enable_answer_check is None
            and not self.test_file_name
            and self.rubric is None
            and not self.ai_prompt
        )

    @staticmethod
    def collapse(config: "GradingConfig | None") -> "GradingConfig | None":
        """Return ``None`` for a config with none of its fields set."""
        if config is None or config.is_empty:
            return None
        return config

    def update(self, **changes: Any) -> "GradingConfig | None":
        """Return a copy with *changes* applied, collapsed when empty."""
        values = {
            "enable_answer_check": self.enable_answer_check,
            "test_file_name": self.test_file_name,
            "rubric": self.rubric,
            "ai_prompt": self.ai_prompt,
        }
        unknown = set(changes) - set(values)
        if unknown:
            raise TypeError(f"Unknown grading config fields: {sorted(unknown)}")
        values.update(changes)
        return GradingConfig.collapse(GradingConfig(**values))

    def remove_criteria(self, index: int) -> "GradingConfig | None":
        """Return a copy without the rubric criterion at *index*.

        A rubric left with no criteria, title or description is dropped, and
        the config collapses to ``None`` when nothing else is set.
        """
        if self.rubric is None:
            return self
        rubric = Rubric.from_dict(self.rubric.to_dict())
        rubric.remove_criteria(index)
        return self.update(rubric=None if rubric.is_empty else rubric)

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "GradingConfig | None":
        if not data:
            return None
        rubric = data.get("rubric")
        return cls.collapse(
            cls(
                enable_answer_check=data.get("enableAnswerCheck"),
                test_file_name=data.get("testFileName"),
                rubric=Rubric.from_dict(rubric) if rubric is not None else None,
                ai_prompt=data.get("aiPrompt"),
            )
        )

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {}
        if self.enable_answer_check is not None:
            data["enableAnswerCheck"] = self.enable_answer_check
        if self.test_file_name is not None:
            data["testFileName"] = self.test_file_name
        if self.rubric is not None:
            data["rubric"] = self.rubric.to_dict()
        if self.ai_prompt is not None:
            data["aiPrompt"] = self.ai_prompt
        return data


@dataclass
class Settings:
    """Application settings for the command-line tools."""

    data_dir: Path = field(default_factory=lambda: Path("data"))
    store_file: str = "assignments.json"
    prompts_dir: Path = field(default_factory=lambda: Path("prompts"))
    log_level: str = "INFO"
    log_file: Path | None = None

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.store_file

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Settings":
        defaults = cls()
        log_file = data.get("log_file")
        return cls(
            data_dir=Path(data.get("data_dir", defaults.data_dir)),
            store_file=data.get("store_file", defaults.store_file),
            prompts_dir=Path(data.get("prompts_dir", defaults.prompts_dir)),
            log_level=str(data.get("log_level", defaults.log_level)).upper(),
            log_file=Path(log_file) if log_file else None,
        )
