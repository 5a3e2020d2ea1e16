# adaptive_core/irt_engine.py

import math
from typing import Iterable, Tuple

# Rasch (1PL) model: no discrimination scaling, no guessing asymptote
THETA_MIN, THETA_MAX = -3.0, 3.0
LEARNING_RATE = 0.4
SE_THRESHOLD = 0.3
EPS = 1e-9


# ============================
# Response model
# ============================

def sigmoid_stable(x: float) -> float:
    """
    Numerically stable sigmoid: exp() is only ever called on a non-positive
    argument, so it cannot overflow.
    """
    if x >= 0:
        z = math.exp(-x)
        return 1.0 / (1.0 + z)
    else:
        z = math.exp(x)
        return z / (1.0 + z)


def prob_correct(theta: float, b: float) -> float:
    """P(correct) = σ(θ - b), kept strictly inside (0, 1)."""
    p = sigmoid_stable(theta - b)
    return min(max(p, EPS), 1.0 - EPS)


def item_information(theta: float, b: float) -> float:
    """Item information p(1 - p), in (0, 0.25] with its peak at b == θ."""
    p = prob_correct(theta, b)
    return p * (1.0 - p)


# ============================
# Ability estimation
# ============================

def clamp_theta(theta: float, bounds: Tuple[float, float] = (THETA_MIN, THETA_MAX)) -> float:
    lo, hi = bounds
    return min(max(theta, lo), hi)


def update_theta(
    theta: float,
    b: float,
    correct: bool,
    learning_rate: float = LEARNING_RATE,
    bounds: Tuple[float, float] = (THETA_MIN, THETA_MAX),
) -> float:
    """
    One gradient-style correction step:
        θ_new = θ + α * (r - P(θ, b))
    then clamped to `bounds`.
    """
    r = 1.0 if correct else 0.0
    p = prob_correct(theta, b)
    return clamp_theta(theta + learning_rate * (r - p), bounds)


def replay_theta(
    history: Iterable[Tuple[float, bool]],
    learning_rate: float = LEARNING_RATE,
    bounds: Tuple[float, float] = (THETA_MIN, THETA_MAX),
    initial: float = 0.0,
) -> float:
    """Re-derive θ by folding `update_theta` over (b, correct) pairs in order."""
    theta = initial
    for b, correct in history:
        theta = update_theta(theta, b, correct, learning_rate, bounds)
    return theta


def total_information(theta: float, bs: Iterable[float]) -> float:
    """Sum of item information at θ over the recorded difficulties."""
    return sum(item_information(theta, b) for b in bs)


def standard_error(theta: float, bs: Iterable[float]) -> float:
    """
    SE(θ) = 1 / sqrt(Σ I(θ, b_i)), recomputed from the full history.
    No responses means no information: SE is infinite.
    """
    total = total_information(theta, bs)
    if total <= 0:
        return math.inf
    return 1.0 / math.sqrt(total)


def has_converged(se: float, threshold: float = SE_THRESHOLD) -> bool:
    return se < threshold
