# adaptive_core/session_engine.py

"""
Adaptive test session: one instance per test attempt.

Lifecycle:
    NOT_STARTED --start()--> IN_PROGRESS --finish()--> COMPLETED

θ starts at 0 and only moves by folding the ability update over the
recorded responses. SE and convergence are derived from the full history
each time they are read.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Set, Tuple

from .adaptive_selector import select_first_item, select_next_item
from .calibration import calibrate_pool
from .config import EngineConfig
from .irt_engine import has_converged, prob_correct, standard_error, update_theta
from .schema import Item, ItemParams, ResponseRecord, SessionStatus
from .summary import SessionStatistics, ability_label, build_statistics

logger = logging.getLogger(__name__)


# ============================
# Errors
# ============================

class AdaptiveEngineError(Exception):
    """Base class for misuse of the adaptive engine API."""


class InvalidStateError(AdaptiveEngineError):
    """An operation was called in a state that does not allow it."""

    def __init__(self, operation: str, status: SessionStatus):
        super().__init__(f"Cannot {operation} a session in state {status.value!r}")
        self.operation = operation
        self.status = status


class UnknownItemError(AdaptiveEngineError):
    """The item id is not part of the calibrated pool."""

    def __init__(self, item_id: str):
        super().__init__(f"Item {item_id!r} is not in the session item pool")
        self.item_id = item_id


class DuplicateResponseError(AdaptiveEngineError):
    """A response for this item has already been recorded."""

    def __init__(self, item_id: str):
        super().__init__(f"A response for item {item_id!r} has already been recorded")
        self.item_id = item_id


# ============================
# Final snapshot
# ============================

@dataclass(frozen=True)
class SessionSnapshot:
    """Read-only view of a session, handed to the host for persistence."""
    status: SessionStatus
    theta: float
    standard_error: float
    has_converged: bool
    ability_label: str
    theta_trajectory: Tuple[float, ...]
    responses: Tuple[ResponseRecord, ...]
    statistics: SessionStatistics

    def to_dict(self) -> dict:
        return {
            "status": self.status.value,
            "theta": self.theta,
            "standard_error": self.standard_error,
            "has_converged": self.has_converged,
            "ability_label": self.ability_label,
            "theta_trajectory": list(self.theta_trajectory),
            "responses": [r.to_dict() for r in self.responses],
            "statistics": self.statistics.to_dict(),
        }


# ============================
# Session engine
# ============================

class AdaptiveSession:
    """
    Rasch-based adaptive testing engine for a single attempt.

    The item pool is fixed at construction. Parameters are calibrated once at
    start(); every response stores the b it was scored against.
    """

    def __init__(self, items: Iterable[Item], config: Optional[EngineConfig] = None):
        self.config = config or EngineConfig()
        self._items: List[Item] = list(items)
        self._params: Dict[str, ItemParams] = {}
        self._status = SessionStatus.NOT_STARTED

        self._responses: List[ResponseRecord] = []
        self._trajectory: List[float] = [0.0]
        self._presented: Set[str] = set()
        self._recorded: Set[str] = set()

    # ------------------------------
    # State transitions
    # ------------------------------
    def start(self) -> Optional[Item]:
        """Calibrate the pool and return the opening item (None for an empty pool)."""
        self._require(SessionStatus.NOT_STARTED, "start")

        self._params = calibrate_pool(self._items)
        self._status = SessionStatus.IN_PROGRESS
        logger.info("Adaptive session started with %d items", len(self._items))

        first = select_first_item(self._items, self._params, self._presented)
        if first is not None:
            self._presented.add(first.id)
        return first

    def record_response(self, item_id: str, correct: bool, time_taken: float) -> Optional[Item]:
        """
        Record a response, update θ and return the next item, or None when
        no unpresented item is left.
        """
        self._require(SessionStatus.IN_PROGRESS, "record a response in")

        pars = self._params.get(item_id)
        if pars is None:
            raise UnknownItemError(item_id)
        if item_id in self._recorded:
            raise DuplicateResponseError(item_id)
        if not math.isfinite(time_taken) or time_taken < 0:
            raise ValueError(f"time_taken must be a finite non-negative number, got {time_taken}")

        theta_new = update_theta(
            self.theta, pars.b, correct,
            learning_rate=self.config.learning_rate,
            bounds=self.config.bounds,
        )
        self._responses.append(ResponseRecord(
            item_id=item_id,
            correct=bool(correct),
            time_taken=float(time_taken),
            b=pars.b,
            theta_after=theta_new,
        ))
        self._trajectory.append(theta_new)
        self._recorded.add(item_id)
        self._presented.add(item_id)

        logger.debug(
            "Recorded item=%s correct=%s b=%.2f -> theta=%.3f",
            item_id, bool(correct), pars.b, theta_new,
        )
        return self.next_item()

    def next_item(self) -> Optional[Item]:
        """
        Select and mark the next item at the current θ without recording
        anything, e.g. after the host deferred the current item for review.
        """
        self._require(SessionStatus.IN_PROGRESS, "select an item in")

        item = select_next_item(self.theta, self._items, self._params, self._presented)
        if item is not None:
            self._presented.add(item.id)
        return item

    def finish(self) -> SessionSnapshot:
        self._require(SessionStatus.IN_PROGRESS, "finish")
        self._status = SessionStatus.COMPLETED
        logger.info(
            "Adaptive session finished: %d responses, theta=%.3f, SE=%.3f",
            len(self._responses), self.theta, self.standard_error,
        )
        return self.snapshot()

    def _require(self, expected: SessionStatus, operation: str) -> None:
        if self._status is not expected:
            raise InvalidStateError(operation, self._status)

    # ------------------------------
    # Observations
    # ------------------------------
    @property
    def status(self) -> SessionStatus:
        return self._status

    @property
    def theta(self) -> float:
        return self._trajectory[-1]

    @property
    def theta_trajectory(self) -> Tuple[float, ...]:
        """θ before any response followed by θ after each response."""
        return tuple(self._trajectory)

    @property
    def standard_error(self) -> float:
        return standard_error(self.theta, (r.b for r in self._responses))

    @property
    def has_converged(self) -> bool:
        return has_converged(self.standard_error, self.config.se_threshold)

    @property
    def ability_label(self) -> str:
        return ability_label(self.theta)

    @property
    def responses(self) -> Tuple[ResponseRecord, ...]:
        return tuple(self._responses)

    @property
    def presented_ids(self) -> frozenset:
        return frozenset(self._presented)

    @property
    def pending_ids(self) -> frozenset:
        """Presented items without a recorded response."""
        return frozenset(self._presented - self._recorded)

    @property
    def remaining_items(self) -> List[Item]:
        return [it for it in self._items if it.id not in self._presented]

    def item_params(self, item_id: str) -> ItemParams:
        pars = self._params.get(item_id)
        if pars is None:
            raise UnknownItemError(item_id)
        return pars

    def predict_success(self, item_id: str) -> float:
        """Probability of a correct answer on `item_id` at the current θ."""
        return prob_correct(self.theta, self.item_params(item_id).b)

    def statistics(self) -> SessionStatistics:
        return build_statistics(self._responses, self._params)

    def snapshot(self) -> SessionSnapshot:
        se = self.standard_error
        return SessionSnapshot(
            status=self._status,
            theta=self.theta,
            standard_error=se,
            has_converged=has_converged(se, self.config.se_threshold),
            ability_label=self.ability_label,
            theta_trajectory=self.theta_trajectory,
            responses=self.responses,
            statistics=self.statistics(),
        )
