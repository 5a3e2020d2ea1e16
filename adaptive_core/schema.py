# adaptive_core/schema.py

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Union


class CognitiveLevel(Enum):
    """Cognitive-level tag of an item (Bloom levels 1..3)."""
    RECALL = 1
    COMPREHENSION = 2
    APPLICATION = 3

    @classmethod
    def parse(cls, value: Union["CognitiveLevel", int, str]) -> "CognitiveLevel":
        """
        Accepts an enum member, a Bloom level (1..3, also as a digit string)
        or a level name. Raises ValueError for anything else.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool):
            raise ValueError(f"Invalid cognitive level: {value!r}")
        if isinstance(value, int):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().lower()
            if key.isdigit():
                return cls(int(key))
            if key in _LEVEL_ALIASES:
                return _LEVEL_ALIASES[key]
        raise ValueError(f"Invalid cognitive level: {value!r}")


_LEVEL_ALIASES = {
    "recall": CognitiveLevel.RECALL,
    "remember": CognitiveLevel.RECALL,
    "comprehension": CognitiveLevel.COMPREHENSION,
    "understand": CognitiveLevel.COMPREHENSION,
    "application": CognitiveLevel.APPLICATION,
    "apply": CognitiveLevel.APPLICATION,
}


class DifficultyLabel(Enum):
    """Authoring difficulty label of an item."""
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @classmethod
    def parse(cls, value: Union["DifficultyLabel", str]) -> "DifficultyLabel":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        raise ValueError(f"Invalid difficulty label: {value!r}")


class SessionStatus(Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass(frozen=True)
class Item:
    """
    An assessment item as supplied by the host:
    - id: stable identifier
    - cognitive_level / difficulty_label: tags used for calibration
    - content: presentation data (text, options, answer key...), opaque to the engine
    """
    id: str
    cognitive_level: CognitiveLevel
    difficulty_label: DifficultyLabel
    content: Mapping[str, Any] = field(default_factory=dict, compare=False)


@dataclass(frozen=True)
class ItemParams:
    """Rasch parameter of an item, derived from its tags only."""
    item_id: str
    b: float
    cognitive_level: CognitiveLevel
    difficulty_label: DifficultyLabel


@dataclass(frozen=True)
class ResponseRecord:
    """
    One recorded response. `b` is the item difficulty at the time of
    recording and is never recomputed.
    """
    item_id: str
    correct: bool
    time_taken: float
    b: float
    theta_after: float

    def to_dict(self) -> dict:
        return {
            "item_id": self.item_id,
            "correct": self.correct,
            "time_taken": self.time_taken,
            "b": self.b,
            "theta_after": self.theta_after,
        }
