"""Rubric data models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class RubricCriteria:
    """A single scoring level within a rubric."""

    level: int
    name: str = ""
    description: str = ""
    points: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RubricCriteria":
        return cls(
            level=data["level"],
            name=data["name"],
            description=data["description"],
            points=data["points"],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": self.level,
            "name": self.name,
            "description": self.description,
            "points": self.points,
        }


@dataclass
class Rubric:
    """A grading rubric: an ordered list of point-weighted criteria."""

    title: str = ""
    description: str = ""
    criteria: list[RubricCriteria] = field(default_factory=list)

    @property
    def max_points(self) -> int:
        """Sum of the points of every criterion.

        Informational only; scores are never capped against it.
        """
        return sum(c.points for c in self.criteria)

    @property
    def is_empty(self) -> bool:
        return not self.criteria and not self.title and not self.description

    def add_criteria(
        self, name: str = "", description: str = "", points: int = 0
    ) -> RubricCriteria:
        """Append a criterion numbered after the existing ones."""
        criteria = RubricCriteria(
            level=len(self.criteria) + 1,
            name=name,
            description=description,
            points=points,
        )
        self.criteria.append(criteria)
        return criteria

    def remove_criteria(self, index: int) -> None:
        """Remove the criterion at *index*."""
        del self.criteria[index]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Rubric":
        return cls(
            title=data["title"],
            description=data["description"],
            criteria=[RubricCriteria.from_dict(c) for c in data["criteria"]],
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "description": self.description,
            "criteria": [c.to_dict() for c in self.criteria],
        }

    def to_prompt_text(self) -> str:
        """Convert rubric to text for inclusion in AI prompts."""
        lines = [f"# Rubric: {self.title or 'Rubric'}", ""]
        if self.description:
            lines.extend([self.description, ""])

        lines.append("## Criteria:")
        for criteria in self.criteria:
            lines.append(f"\n### Level {criteria.level}: {criteria.name} ({criteria.points} pts)")
            if criteria.description:
                lines.append(criteria.description)

        lines.append(f"\nMaximum Points: {self.max_points}")
        return "\n".join(lines)
