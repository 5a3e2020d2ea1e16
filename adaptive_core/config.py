# adaptive_core/config.py

import math
import os
import pathlib
from dataclasses import dataclass
from typing import Mapping, Optional, Tuple

from dotenv import dotenv_values

from .irt_engine import LEARNING_RATE, SE_THRESHOLD, THETA_MAX, THETA_MIN

ROOT = pathlib.Path(__file__).parent
ENV_FILE = ROOT.parent / ".env"


def _float_env(env: Mapping[str, Optional[str]], name: str, default: float) -> float:
    raw = env.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


@dataclass(frozen=True)
class EngineConfig:
    """
    Tuning constants of a session:
    - learning_rate: step size α of the ability update
    - theta_min / theta_max: clamp range of θ
    - se_threshold: SE below which the estimate counts as converged
    """
    learning_rate: float = LEARNING_RATE
    theta_min: float = THETA_MIN
    theta_max: float = THETA_MAX
    se_threshold: float = SE_THRESHOLD

    def __post_init__(self):
        for name in ("learning_rate", "theta_min", "theta_max", "se_threshold"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be a finite number, got {value}")
        if not self.learning_rate > 0:
            raise ValueError(f"learning_rate must be positive, got {self.learning_rate}")
        # θ starts at 0, so the range has to contain it
        if not (self.theta_min < 0.0 < self.theta_max):
            raise ValueError(
                f"theta bounds must satisfy theta_min < 0 < theta_max, "
                f"got ({self.theta_min}, {self.theta_max})"
            )
        if not self.se_threshold > 0:
            raise ValueError(f"se_threshold must be positive, got {self.se_threshold}")

    @property
    def bounds(self) -> Tuple[float, float]:
        return self.theta_min, self.theta_max

    @classmethod
    def from_env(cls, env_file: Optional[os.PathLike] = None) -> "EngineConfig":
        """
        Build a config from CAT_* variables found in `.env` and the process
        environment. The process environment is left untouched.
        Variables already set in the process environment win over the file.
        """
        env = {**dotenv_values(env_file or ENV_FILE), **os.environ}
        return cls(
            learning_rate=_float_env(env, "CAT_LEARNING_RATE", LEARNING_RATE),
            theta_min=_float_env(env, "CAT_THETA_MIN", THETA_MIN),
            theta_max=_float_env(env, "CAT_THETA_MAX", THETA_MAX),
            se_threshold=_float_env(env, "CAT_SE_THRESHOLD", SE_THRESHOLD),
        )
