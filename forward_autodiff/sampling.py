"""
Sample Points

Evenly spaced sample points for tabulating an expression and its
derivative over an interval.
"""

import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class SamplingConfig:
    """Closed interval [start, stop] walked in increments of step"""
    start: float = 0.0
    stop: float = 5.0
    step: float = 0.05

    def validate(self) -> 'SamplingConfig':
        if not all(math.isfinite(v) for v in (self.start, self.stop, self.step)):
            raise ValueError("start, stop and step must be finite numbers")
        if self.step <= 0:
            raise ValueError(f"step must be positive, got {self.step}")
        if self.stop < self.start:
            raise ValueError(f"stop ({self.stop}) must not be less than start ({self.start})")
        return self

    def n_samples(self) -> int:
        # Tolerance keeps the end point when (stop - start) / step is integral.
        # An accumulating float32 loop would drift past stop and drop it.
        return int(math.floor((self.stop - self.start) / self.step + 1e-9)) + 1


def sample_points(config: SamplingConfig) -> np.ndarray:
    """start + k * step for every k whose point does not pass stop"""
    config.validate()
    return config.start + config.step * np.arange(config.n_samples(), dtype=np.float64)


@dataclass
class SampleTable:
    """Inputs with the forward value and derivative at each one"""
    inputs: np.ndarray
    values: np.ndarray
    derivatives: np.ndarray

    def __len__(self) -> int:
        return int(self.inputs.size)
