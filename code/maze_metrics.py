"""Helpers for collecting instrumentation data while building mazes."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass
class KitOperationMetrics:
    """Aggregated metrics for a single kit operation across invocations."""

    name: str
    invocations: int = 0
    total_time: float = 0.0

    def record(self, duration: float) -> None:
        self.invocations += 1
        self.total_time += duration

    def to_dict(self) -> Dict[str, float | int]:
        average_time = self.total_time / self.invocations if self.invocations else 0.0
        return {
            "invocations": self.invocations,
            "total_time": self.total_time,
            "average_time": average_time,
        }


@dataclass
class BuildMetrics:
    """Container for kit operation metrics recorded during build runs."""

    operations: Dict[str, KitOperationMetrics] = field(default_factory=dict)
    builds: int = 0
    failed_builds: int = 0

    def record_operation(self, name: str, duration: float) -> None:
        metrics = self.operations.get(name)
        if metrics is None:
            metrics = KitOperationMetrics(name=name)
            self.operations[name] = metrics
        metrics.record(duration)

    def record_build(self, succeeded: bool) -> None:
        self.builds += 1
        if not succeeded:
            self.failed_builds += 1

    def invocations(self, name: str) -> int:
        metrics = self.operations.get(name)
        return metrics.invocations if metrics is not None else 0

    def snapshot(self) -> Dict[str, Dict[str, float | int]]:
        return {name: metrics.to_dict() for name, metrics in self.operations.items()}
