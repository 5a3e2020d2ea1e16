# adaptive_core/item_bank.py

import json
import logging
import os
from typing import Any, Dict, List, Union

from .schema import CognitiveLevel, DifficultyLabel, Item

logger = logging.getLogger(__name__)

# Accepted spellings of the tag fields; all other keys become item content
LEVEL_KEYS = ("cognitive_level", "bloomLevel", "bloom_level")
LABEL_KEYS = ("difficulty_label", "difficulty")


def _first_present(raw: Dict[str, Any], keys) -> Any:
    for key in keys:
        if key in raw:
            return raw[key]
    return None


def parse_item(raw: Dict[str, Any]) -> Item:
    """Build an Item from one bank entry. Raises ValueError if it is malformed."""
    if not isinstance(raw, dict):
        raise ValueError(f"Item entry must be an object, got {type(raw).__name__}")
    if raw.get("id") in (None, ""):
        raise ValueError("Item entry has no id")

    level = _first_present(raw, LEVEL_KEYS)
    label = _first_present(raw, LABEL_KEYS)
    if level is None or label is None:
        raise ValueError(f"Item {raw['id']!r} is missing its cognitive level or difficulty tag")

    tag_keys = {"id", *LEVEL_KEYS, *LABEL_KEYS}
    content = {k: v for k, v in raw.items() if k not in tag_keys}
    return Item(
        id=str(raw["id"]),
        cognitive_level=CognitiveLevel.parse(level),
        difficulty_label=DifficultyLabel.parse(label),
        content=content,
    )


def load_item_bank(path: Union[str, os.PathLike]) -> List[Item]:
    """
    Load an item pool from a JSON list. Malformed entries are skipped with a
    warning; a missing or unreadable file raises.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON list of items")

    items: List[Item] = []
    seen = set()
    for idx, raw in enumerate(data):
        try:
            item = parse_item(raw)
        except ValueError as e:
            logger.warning("Skipping entry %d in %s: %s", idx, path, e)
            continue
        if item.id in seen:
            logger.warning("Skipping entry %d in %s: duplicate id %r", idx, path, item.id)
            continue
        seen.add(item.id)
        items.append(item)

    logger.info("Loaded %d items from %s", len(items), path)
    return items
