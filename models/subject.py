# models/subject.py

"""
Represents a single subject performance entry within a student record.

The letter grade is always derived from the score through `classify_score()`;
a grade found in serialized data is ignored on import and recomputed.
"""

from __future__ import annotations

from typing import Any

from core.utils import require_number
from models.grades import Grade, classify_score


class Subject:

    def __init__(self, name: str, score: float):
        self._name: str = name
        self._score: float = score

    # === properties ===

    @property
    def name(self) -> str:
        return self._name

    @property
    def score(self) -> float:
        return self._score

    @property
    def grade(self) -> Grade:
        return classify_score(self._score)

    # === persistence and import ===

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self._name,
            "score": self._score,
            "grade": self.grade.value,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Subject:
        return cls(
            name=data["name"],
            score=Subject.validate_score_input(data["score"]),
        )

    # === dunder methods ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Subject):
            return NotImplemented
        return self._name == other._name and self._score == other._score

    def __repr__(self) -> str:
        return f"Subject({self._name}, {self._score})"

    def __str__(self) -> str:
        return f"SUBJECT: {self._name} - {self._score} ({self.grade.value})"

    # === data validators ===

    @staticmethod
    def validate_score_input(score: float) -> float:
        """
        Validates that a subject score lies within [0, 100].

        Raises:
            TypeError: If the score is not a number.
            ValueError: If the score is out of range.
        """
        require_number(score, "Score")
        if not 0 <= score <= 100:
            raise ValueError("Invalid input. Score must be between 0 and 100.")
        return score
