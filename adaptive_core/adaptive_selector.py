# adaptive_core/adaptive_selector.py

from __future__ import annotations

import logging
from typing import Collection, Dict, Iterable, Optional

from .schema import Item, ItemParams
from .irt_engine import item_information

logger = logging.getLogger(__name__)


# ============================
# Item selection
# ============================

def select_first_item(
    items: Iterable[Item],
    irt_params: Dict[str, ItemParams],
    asked_ids: Collection[str] = (),
) -> Optional[Item]:
    """
    Opening item: the unused item whose b is closest to 0 (population-average
    difficulty). Ties keep the earlier item in pool order.
    """
    best_item: Optional[Item] = None
    best_distance = float("inf")

    for item in items:
        if item.id in asked_ids:
            continue
        pars = irt_params.get(item.id)
        if pars is None:
            continue

        distance = abs(pars.b)
        if distance < best_distance:
            best_distance = distance
            best_item = item

    if best_item is None:
        logger.debug("No item available for the opening selection.")
    else:
        logger.debug("First item id=%s |b|=%.3f", best_item.id, best_distance)
    return best_item


def select_next_item(
    theta: float,
    items: Iterable[Item],
    irt_params: Dict[str, ItemParams],
    asked_ids: Collection[str],
) -> Optional[Item]:
    """
    Maximum-information rule: among items not in `asked_ids`, pick the one
    with the highest I(θ, b). Ties keep the first in iteration order.

    Returns None once every item has been used; that is the normal end of
    the adaptive phase, not an error.
    """
    best_item: Optional[Item] = None
    best_info: float = -1.0

    for item in items:
        if item.id in asked_ids:
            continue
        pars = irt_params.get(item.id)
        if pars is None:
            continue

        info = item_information(theta, pars.b)
        if info > best_info:
            best_info = info
            best_item = item

    if best_item is None:
        logger.debug("Item pool exhausted.")
        return None

    logger.debug("Next item id=%s info=%.4f at theta=%.3f", best_item.id, best_info, theta)
    return best_item
