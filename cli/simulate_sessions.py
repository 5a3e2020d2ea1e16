"""
cli/simulate_sessions.py
-----------------------------------
Simulated test-takers with a known true ability answer adaptive sessions
by drawing from the Rasch model. Reports how close the final θ lands and
how fast the estimate converges.
"""

import os
import math
import random
import logging
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table
from tqdm import tqdm

from adaptive_core import (
    AdaptiveSession,
    CognitiveLevel,
    DifficultyLabel,
    EngineConfig,
    Item,
    prob_correct,
)

BASE_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
load_dotenv(dotenv_path=os.path.join(BASE_DIR, ".env"))
logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(levelname)s - %(message)s")

console = Console()


@dataclass
class SimulationResult:
    true_theta: float
    theta: float
    standard_error: float
    converged: bool
    items_used: int

    @property
    def abs_error(self) -> float:
        return abs(self.theta - self.true_theta)


def make_synthetic_bank(copies: int = 10) -> List[Item]:
    """`copies` items for every (cognitive level, difficulty label) pair."""
    items = []
    for level in CognitiveLevel:
        for label in DifficultyLabel:
            for k in range(copies):
                item_id = f"{level.name.lower()}-{label.value}-{k:03d}"
                items.append(Item(id=item_id, cognitive_level=level, difficulty_label=label,
                                  content={"text": f"Synthetic item {item_id}"}))
    return items


def simulate_one(
    items: List[Item],
    true_theta: float,
    rng: random.Random,
    config: Optional[EngineConfig] = None,
    max_items: int = 30,
) -> SimulationResult:
    """Run one session, stopping on convergence, `max_items` or exhaustion."""
    session = AdaptiveSession(items, config)
    item = session.start()
    used = 0

    while item is not None and used < max_items:
        b = session.item_params(item.id).b
        correct = rng.random() < prob_correct(true_theta, b)
        item = session.record_response(item.id, correct, rng.uniform(20.0, 90.0))
        used += 1
        if session.has_converged:
            break

    snapshot = session.finish()
    return SimulationResult(
        true_theta=true_theta,
        theta=snapshot.theta,
        standard_error=snapshot.standard_error,
        converged=snapshot.has_converged,
        items_used=used,
    )


def run_simulation(
    n_takers: int = 200,
    copies: int = 10,
    max_items: int = 30,
    seed: int = 2025,
    config: Optional[EngineConfig] = None,
) -> List[SimulationResult]:
    rng = random.Random(seed)
    items = make_synthetic_bank(copies)
    config = config or EngineConfig.from_env()
    logging.info(f"Simulating {n_takers} test-takers on a bank of {len(items)} items")

    results = []
    for _ in tqdm(range(n_takers), desc="Sessions"):
        true_theta = max(config.theta_min, min(config.theta_max, rng.gauss(0.0, 1.0)))
        results.append(simulate_one(items, true_theta, rng, config, max_items))
    return results


def print_report(results: List[SimulationResult]) -> None:
    if not results:
        console.print("[yellow]No simulation results.[/yellow]")
        return
    n = len(results)
    finite_se = [r.standard_error for r in results if math.isfinite(r.standard_error)]

    table = Table(title=f"Simulation report ({n} sessions)")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Mean |θ - true θ|", f"{sum(r.abs_error for r in results) / n:.3f}")
    table.add_row("Mean SE", f"{sum(finite_se) / len(finite_se):.3f}" if finite_se else "n/a")
    table.add_row("Converged", f"{100.0 * sum(r.converged for r in results) / n:.1f}%")
    table.add_row("Mean items used", f"{sum(r.items_used for r in results) / n:.1f}")
    console.print(table)


if __name__ == "__main__":
    try:
        n = int(input("Number of simulated test-takers (Enter = 200): ").strip() or 200)
        max_items = int(input("Max items per session (Enter = 30): ").strip() or 30)
    except ValueError:
        n, max_items = 200, 30
    print_report(run_simulation(n_takers=n, max_items=max_items))
