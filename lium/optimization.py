"""Pareto-frontier selection of executors over price and hardware metrics."""

from __future__ import annotations

from typing import Any, Callable, Generic, Iterable, Mapping, TypeVar

from .errors import LiumError
from .models import ExecutorInfo

T = TypeVar("T")

Metrics = dict[str, float]

_EXECUTOR_SPEC_METRICS = ("ram_gb", "cpu_cores", "storage_gb")
_JSON_SPEC_METRICS = ("cpu_cores", "memory_gb", "storage_gb", "gpu_memory_gb")
_JSON_PRICE_METRICS = ("price_per_hour", "price_per_gpu_hour")


def _as_number(value: Any) -> float | None:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return float(value)
    return None


def _numeric_fields(source: Any, keys: Iterable[str]) -> Metrics:
    if not isinstance(source, Mapping):
        return {}
    found: Metrics = {}
    for key in keys:
        number = _as_number(source.get(key))
        if number is not None:
            found[key] = number
    return found


def extract_executor_metrics(executor: ExecutorInfo) -> Metrics:
    """Return the comparison metrics of an executor; higher is always better."""
    metrics: Metrics = {
        "price_per_gpu_hour": -executor.price_per_gpu_hour,
        "gpu_count": float(executor.gpu_count),
    }
    metrics.update(_numeric_fields(executor.specs, _EXECUTOR_SPEC_METRICS))
    return metrics


class ParetoOptimizer(Generic[T]):
    """Finds items that no other item beats in every metric."""

    def __init__(
        self, extractor: Callable[[T], Mapping[str, float]] = extract_executor_metrics
    ) -> None:
        self.extractor = extractor

    def dominates(
        self, metrics_a: Mapping[str, float], metrics_b: Mapping[str, float]
    ) -> bool:
        """True when A is at least as good everywhere and strictly better somewhere."""
        strictly_better = False
        for key in metrics_a.keys() | metrics_b.keys():
            a_val = metrics_a.get(key, 0.0)
            b_val = metrics_b.get(key, 0.0)
            if a_val < b_val:
                return False
            if a_val > b_val:
                strictly_better = True
        return strictly_better

    def _metrics(self, item: T) -> Mapping[str, float] | None:
        try:
            return self.extractor(item)
        except LiumError:
            return None

    def calculate_pareto_frontier(self, items: Iterable[T]) -> list[tuple[T, bool]]:
        """Pair every item with whether it lies on the Pareto frontier."""
        entries = [(item, self._metrics(item)) for item in items]
        result: list[tuple[T, bool]] = []
        for i, (item, metrics) in enumerate(entries):
            if metrics is None:
                result.append((item, False))
                continue
            dominated = any(
                other is not None and self.dominates(other, metrics)
                for j, (_, other) in enumerate(entries)
                if j != i
            )
            result.append((item, not dominated))
        return result


def dominates(metrics_a: Mapping[str, float], metrics_b: Mapping[str, float]) -> bool:
    """Pareto dominance of metrics A over metrics B."""
    return ParetoOptimizer().dominates(metrics_a, metrics_b)


def calculate_pareto_frontier(
    executors: Iterable[ExecutorInfo],
) -> list[tuple[ExecutorInfo, bool]]:
    """Pair every executor with whether it lies on the Pareto frontier."""
    return ParetoOptimizer(extract_executor_metrics).calculate_pareto_frontier(executors)


def extract_metrics(executor_json: Any) -> Metrics:
    """Return comparison metrics of a raw executor record; prices are negated."""
    if not isinstance(executor_json, Mapping):
        return {}
    metrics = _numeric_fields(executor_json.get("specs"), _JSON_SPEC_METRICS)
    for key, price in _numeric_fields(executor_json, _JSON_PRICE_METRICS).items():
        metrics[key] = -price
    return metrics