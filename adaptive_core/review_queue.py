# adaptive_core/review_queue.py

"""
Host-side "mark for review" list.

The engine has no notion of review. A host that lets the test-taker defer
an item keeps it here, keeps asking the session for new items, and records
the deferred response through AdaptiveSession.record_response once the
test-taker commits an answer.
"""

from collections import OrderedDict
from typing import List, Optional

from .schema import Item


class ReviewQueue:
    def __init__(self):
        self._items: "OrderedDict[str, Item]" = OrderedDict()

    def defer(self, item: Item) -> None:
        """Add an item to the end of the queue; deferring twice keeps its place."""
        if item.id not in self._items:
            self._items[item.id] = item

    def peek(self) -> Optional[Item]:
        """Oldest deferred item, or None when the queue is empty."""
        for item in self._items.values():
            return item
        return None

    def commit(self, item_id: str) -> Item:
        """Remove a deferred item once its answer is committed."""
        try:
            return self._items.pop(item_id)
        except KeyError:
            raise KeyError(f"Item {item_id!r} is not marked for review") from None

    @property
    def pending_ids(self) -> List[str]:
        return list(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items
