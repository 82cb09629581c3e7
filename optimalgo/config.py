from __future__ import annotations

from dataclasses import dataclass

from .enums import Topology


@dataclass(frozen=True)
class BenchmarkConfig:
    """Parameters for timing and repeating route computations."""

    repetitions: int = 10
    short_code_length: int = 3
    millisecond_threshold_ns: int = 1_000_000

    def __post_init__(self) -> None:
        if self.repetitions < 1:
            raise ValueError("repetitions must be at least 1")
        if self.short_code_length < 0:
            raise ValueError("short_code_length must be non-negative")
        if self.millisecond_threshold_ns <= 0:
            raise ValueError("millisecond_threshold_ns must be positive")


@dataclass(frozen=True)
class NetworkConfig:
    """Configurable parameters for a generated benchmark network."""

    num_cities: int = 50
    degree: int = 4
    topology: str = "random-regular"
    rewire_prob: float = 0.1
    scale_free_m: int | None = None
    time_min: float = 0.5
    time_max: float = 12.0
    cost_min: float = 100.0
    cost_max: float = 5000.0
    directed: bool = False
    city_prefix: str = "City"

    def __post_init__(self) -> None:
        if self.num_cities < 2:
            raise ValueError("num_cities must be at least 2")
        if self.degree >= self.num_cities:
            raise ValueError("degree must be less than num_cities")
        if self.topology not in {t.value for t in Topology}:
            raise ValueError(f"Unknown topology: {self.topology}")
        if not 0.0 <= self.rewire_prob <= 1.0:
            raise ValueError("rewire_prob must be between 0 and 1")
        if self.time_min < 0 or self.time_max < self.time_min:
            raise ValueError("time range must satisfy 0 <= time_min <= time_max")
        if self.cost_max < self.cost_min:
            raise ValueError("cost range must satisfy cost_min <= cost_max")
