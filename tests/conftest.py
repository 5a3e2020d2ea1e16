# tests/conftest.py

import pytest

from adaptive_core.schema import CognitiveLevel, DifficultyLabel, Item


def make_item(item_id: str, level: int, label: str) -> Item:
    return Item(
        id=item_id,
        cognitive_level=CognitiveLevel(level),
        difficulty_label=DifficultyLabel(label),
        content={"text": f"Question {item_id}"},
    )


@pytest.fixture
def three_item_pool():
    """b = -2.0, 0.0, +2.0"""
    return [
        make_item("easy", 1, "easy"),
        make_item("mid", 2, "medium"),
        make_item("hard", 3, "hard"),
    ]


@pytest.fixture
def full_pool():
    """Two items for every (level, label) pair, 18 in total."""
    items = []
    for level in (1, 2, 3):
        for label in ("easy", "medium", "hard"):
            for k in range(2):
                items.append(make_item(f"L{level}-{label}-{k}", level, label))
    return items


@pytest.fixture
def item_factory():
    return make_item
