# adaptive_core/__init__.py

"""
Core module for the Rasch adaptive assessment engine

Includes:
- Item calibration from cognitive level + difficulty label
- Rasch (1PL) response model and ability update
- Maximum-information item selection
- Session state machine with summary statistics

Common exports:
    Item, ItemParams, ResponseRecord, CognitiveLevel, DifficultyLabel
    difficulty, prob_correct, item_information, update_theta, standard_error
    select_first_item, select_next_item
    AdaptiveSession, EngineConfig, ReviewQueue, load_item_bank
"""

# Schema models
from .schema import (
    CognitiveLevel,
    DifficultyLabel,
    Item,
    ItemParams,
    ResponseRecord,
    SessionStatus,
)

# Calibration
from .calibration import (
    difficulty,
    calibrate,
    calibrate_pool,
)

# IRT computation & scoring
from .irt_engine import (
    prob_correct,
    item_information,
    update_theta,
    replay_theta,
    standard_error,
    has_converged,
)

# Adaptive selection algorithm
from .adaptive_selector import (
    select_first_item,
    select_next_item,
)

# Session engine
from .config import EngineConfig
from .summary import SessionStatistics, ability_label, build_statistics
from .session_engine import (
    AdaptiveSession,
    SessionSnapshot,
    AdaptiveEngineError,
    InvalidStateError,
    UnknownItemError,
    DuplicateResponseError,
)

# Host-side helpers
from .review_queue import ReviewQueue
from .item_bank import load_item_bank, parse_item


__all__ = [
    # Schema
    "CognitiveLevel",
    "DifficultyLabel",
    "Item",
    "ItemParams",
    "ResponseRecord",
    "SessionStatus",

    # Calibration
    "difficulty",
    "calibrate",
    "calibrate_pool",

    # IRT
    "prob_correct",
    "item_information",
    "update_theta",
    "replay_theta",
    "standard_error",
    "has_converged",

    # Adaptive selector
    "select_first_item",
    "select_next_item",

    # Session
    "EngineConfig",
    "SessionStatistics",
    "ability_label",
    "build_statistics",
    "AdaptiveSession",
    "SessionSnapshot",
    "AdaptiveEngineError",
    "InvalidStateError",
    "UnknownItemError",
    "DuplicateResponseError",

    # Host helpers
    "ReviewQueue",
    "load_item_bank",
    "parse_item",
]
