# adaptive_core/summary.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Mapping, Sequence

from .schema import CognitiveLevel, DifficultyLabel, ItemParams, ResponseRecord


# ============================
# Ability bands
# ============================

# (upper bound, label); the last band is open-ended
ABILITY_BANDS = (
    (-1.5, "Below Average"),
    (-0.5, "Slightly Below Average"),
    (0.5, "Average"),
    (1.5, "Above Average"),
)
TOP_BAND = "Excellent"


def ability_label(theta: float) -> str:
    """Qualitative label for θ, one of five ordered bands."""
    for upper, label in ABILITY_BANDS:
        if theta < upper:
            return label
    return TOP_BAND


# ============================
# Response statistics
# ============================

@dataclass
class BreakdownCounter:
    """Attempted / correct counts for one tag value."""
    attempted: int = 0
    correct: int = 0

    @property
    def percentage(self) -> float:
        if self.attempted == 0:
            return 0.0
        return round(100.0 * self.correct / self.attempted, 1)

    def to_dict(self) -> dict:
        return {"attempted": self.attempted, "correct": self.correct, "percentage": self.percentage}


def _level_counters() -> Dict[CognitiveLevel, BreakdownCounter]:
    return {level: BreakdownCounter() for level in CognitiveLevel}


def _label_counters() -> Dict[DifficultyLabel, BreakdownCounter]:
    return {label: BreakdownCounter() for label in DifficultyLabel}


@dataclass
class SessionStatistics:
    total_responses: int = 0
    correct_count: int = 0
    total_time: float = 0.0
    by_cognitive_level: Dict[CognitiveLevel, BreakdownCounter] = field(default_factory=_level_counters)
    by_difficulty_label: Dict[DifficultyLabel, BreakdownCounter] = field(default_factory=_label_counters)

    @property
    def incorrect_count(self) -> int:
        return self.total_responses - self.correct_count

    @property
    def accuracy(self) -> float:
        """Percentage of correct responses, 0 when nothing was answered."""
        if self.total_responses == 0:
            return 0.0
        return round(100.0 * self.correct_count / self.total_responses, 1)

    @property
    def average_time(self) -> float:
        if self.total_responses == 0:
            return 0.0
        return self.total_time / self.total_responses

    def to_dict(self) -> dict:
        return {
            "total_responses": self.total_responses,
            "correct_count": self.correct_count,
            "incorrect_count": self.incorrect_count,
            "accuracy": self.accuracy,
            "average_time": self.average_time,
            "by_cognitive_level": {
                level.name.lower(): counter.to_dict()
                for level, counter in self.by_cognitive_level.items()
            },
            "by_difficulty_label": {
                label.value: counter.to_dict()
                for label, counter in self.by_difficulty_label.items()
            },
        }


def build_statistics(
    responses: Sequence[ResponseRecord],
    irt_params: Mapping[str, ItemParams],
) -> SessionStatistics:
    """Aggregate a response history into summary statistics."""
    stats = SessionStatistics()

    for resp in responses:
        stats.total_responses += 1
        stats.total_time += resp.time_taken
        if resp.correct:
            stats.correct_count += 1

        pars = irt_params[resp.item_id]
        for counter in (
            stats.by_cognitive_level[pars.cognitive_level],
            stats.by_difficulty_label[pars.difficulty_label],
        ):
            counter.attempted += 1
            if resp.correct:
                counter.correct += 1

    return stats
