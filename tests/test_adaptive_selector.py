# tests/test_adaptive_selector.py

from adaptive_core.adaptive_selector import select_first_item, select_next_item
from adaptive_core.calibration import calibrate_pool
from adaptive_core.irt_engine import item_information


def test_first_item_closest_to_zero(three_item_pool):
    params = calibrate_pool(three_item_pool)
    assert select_first_item(three_item_pool, params).id == "mid"


def test_first_item_tie_keeps_pool_order(item_factory):
    # b = -1.0 and b = +1.0
    pool = [item_factory("apply-easy", 3, "easy"), item_factory("recall-hard", 1, "hard")]
    params = calibrate_pool(pool)
    assert select_first_item(pool, params).id == "apply-easy"
    assert select_first_item(list(reversed(pool)), params).id == "recall-hard"


def test_first_item_is_deterministic(full_pool):
    params = calibrate_pool(full_pool)
    picks = {select_first_item(full_pool, params).id for _ in range(10)}
    assert picks == {"L2-medium-0"}


def test_first_item_empty_pool():
    assert select_first_item([], {}) is None


def test_next_item_maximizes_information(full_pool):
    params = calibrate_pool(full_pool)
    theta = 1.2
    chosen = select_next_item(theta, full_pool, params, asked_ids=set())
    best = max(item_information(theta, p.b) for p in params.values())
    assert item_information(theta, params[chosen.id].b) == best
    # b = 1.0 is the closest difficulty to 1.2
    assert params[chosen.id].b == 1.0


def test_next_item_tie_first_in_order(item_factory):
    pool = [item_factory("x", 2, "medium"), item_factory("y", 2, "medium")]
    params = calibrate_pool(pool)
    assert select_next_item(0.0, pool, params, set()).id == "x"


def test_next_item_skips_asked(three_item_pool):
    params = calibrate_pool(three_item_pool)
    chosen = select_next_item(0.0, three_item_pool, params, {"mid"})
    assert chosen.id in {"easy", "hard"}


def test_scenario_easy_item_wins_after_incorrect(three_item_pool):
    params = calibrate_pool(three_item_pool)
    theta = -0.2
    assert item_information(theta, -2.0) > item_information(theta, 2.0)
    assert select_next_item(theta, three_item_pool, params, {"mid"}).id == "easy"


def test_next_item_exhaustion(three_item_pool):
    params = calibrate_pool(three_item_pool)
    assert select_next_item(0.0, three_item_pool, params, {"easy", "mid", "hard"}) is None
