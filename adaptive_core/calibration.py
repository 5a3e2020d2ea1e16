# adaptive_core/calibration.py

from typing import Dict, Iterable

from .schema import CognitiveLevel, DifficultyLabel, Item, ItemParams

# Scale: -2.0 (easiest) .. +2.0 (hardest)
BASE_OFFSET: Dict[CognitiveLevel, float] = {
    CognitiveLevel.RECALL: -1.5,
    CognitiveLevel.COMPREHENSION: 0.0,
    CognitiveLevel.APPLICATION: 1.5,
}

ADJUST: Dict[DifficultyLabel, float] = {
    DifficultyLabel.EASY: -0.5,
    DifficultyLabel.MEDIUM: 0.0,
    DifficultyLabel.HARD: 0.5,
}


def difficulty(cognitive_level: CognitiveLevel, difficulty_label: DifficultyLabel) -> float:
    """Difficulty b of an item from its cognitive level and difficulty label."""
    return BASE_OFFSET[cognitive_level] + ADJUST[difficulty_label]


def calibrate(item: Item) -> ItemParams:
    return ItemParams(
        item_id=item.id,
        b=difficulty(item.cognitive_level, item.difficulty_label),
        cognitive_level=item.cognitive_level,
        difficulty_label=item.difficulty_label,
    )


def calibrate_pool(items: Iterable[Item]) -> Dict[str, ItemParams]:
    """
    Compute parameters for a whole pool, keyed by item id in pool order.
    Raises ValueError when two items share an id.
    """
    params: Dict[str, ItemParams] = {}
    for item in items:
        if item.id in params:
            raise ValueError(f"Duplicate item id in pool: {item.id!r}")
        params[item.id] = calibrate(item)
    return params
