"""Parsing, filtering, sorting and validation helpers for executors and inputs."""

from __future__ import annotations

import math
import re
import string
from typing import Iterable

from .errors import InvalidInputError
from .models import ExecutorInfo

_UNSIGNED = re.compile(r"\+?\d+")
_DOCKER_CHARS = frozenset(string.ascii_lowercase + string.digits + "/:.-_")


def _parse_unsigned(text: str) -> int | None:
    return int(text) if _UNSIGNED.fullmatch(text) else None


def _parse_float(text: str) -> float | None:
    if text != text.strip() or "_" in text or not text:
        return None
    try:
        return float(text)
    except ValueError:
        return None


def parse_executor_index(text: str, max_index: int) -> int:
    """Turn a 1-based index typed by the user into a 0-based one."""
    index = _parse_unsigned(text.strip())
    if index is None:
        raise InvalidInputError(f"Invalid index: {text}")
    if index == 0 or index > max_index:
        raise InvalidInputError(f"Index must be between 1 and {max_index}")
    return index - 1


def parse_gpu_filter(gpu_type: str) -> str:
    """Normalise a GPU type filter."""
    return gpu_type.upper()


def parse_price_range(text: str) -> tuple[float, float]:
    """Parse a 'min-max' price range."""
    parts = text.split("-")
    if len(parts) != 2:
        raise InvalidInputError(
            "Price range must be in format 'min-max' (e.g., '0.5-2.0')"
        )
    low_text, high_text = parts
    low = _parse_float(low_text)
    if low is None:
        raise InvalidInputError(f"Invalid minimum price: {low_text}")
    high = _parse_float(high_text)
    if high is None:
        raise InvalidInputError(f"Invalid maximum price: {high_text}")
    if low >= high:
        raise InvalidInputError("Minimum price must be less than maximum price")
    return low, high


def filter_by_gpu_type(executors: Iterable[ExecutorInfo], gpu_type: str) -> list[ExecutorInfo]:
    """Keep executors whose GPU type contains the filter, ignoring case."""
    wanted = parse_gpu_filter(gpu_type)
    return [e for e in executors if wanted in e.gpu_type.upper()]


def filter_by_price_range(
    executors: Iterable[ExecutorInfo], min_price: float, max_price: float
) -> list[ExecutorInfo]:
    """Keep executors whose per-GPU hourly price lies within the bounds."""
    return [e for e in executors if min_price <= e.price_per_gpu_hour <= max_price]


def filter_by_availability(
    executors: Iterable[ExecutorInfo], available_only: bool
) -> list[ExecutorInfo]:
    """Keep only available executors when asked to."""
    if available_only:
        return [e for e in executors if e.available]
    return list(executors)


def sort_by_price(executors: Iterable[ExecutorInfo]) -> list[ExecutorInfo]:
    """Return executors sorted by per-GPU hourly price, cheapest first."""
    items = list(executors)
    if any(math.isnan(e.price_per_gpu_hour) for e in items):
        raise InvalidInputError("Cannot sort executors with an undefined price")
    return sorted(items, key=lambda e: e.price_per_gpu_hour)


def sort_by_gpu_count(executors: Iterable[ExecutorInfo]) -> list[ExecutorInfo]:
    """Return executors sorted by GPU count, largest first."""
    return sorted(executors, key=lambda e: e.gpu_count, reverse=True)


def group_by_gpu_type(executors: Iterable[ExecutorInfo]) -> dict[str, list[ExecutorInfo]]:
    """Group executors by GPU type."""
    groups: dict[str, list[ExecutorInfo]] = {}
    for executor in executors:
        groups.setdefault(executor.gpu_type, []).append(executor)
    return groups


def _dominated(executor: ExecutorInfo, other: ExecutorInfo) -> bool:
    return (
        other.huid != executor.huid
        and other.price_per_gpu_hour <= executor.price_per_gpu_hour
        and other.gpu_count >= executor.gpu_count
        and (
            other.price_per_gpu_hour < executor.price_per_gpu_hour
            or other.gpu_count > executor.gpu_count
        )
    )


def find_pareto_optimal(executors: Iterable[ExecutorInfo]) -> list[ExecutorInfo]:
    """Return executors not beaten on both price and GPU count by another."""
    items = list(executors)
    return [e for e in items if not any(_dominated(e, other) for other in items)]


def validate_docker_image(image: str) -> None:
    """Check a Docker image reference for allowed characters."""
    if not image:
        raise InvalidInputError("Docker image cannot be empty")
    if not set(image) <= _DOCKER_CHARS:
        raise InvalidInputError("Docker image name contains invalid characters")


def parse_env_vars(text: str) -> dict[str, str]:
    """Parse 'KEY=VALUE,KEY2=VALUE2' into a dictionary."""
    env_vars: dict[str, str] = {}
    if not text.strip():
        return env_vars
    for pair in text.split(","):
        key, sep, value = pair.strip().partition("=")
        if not sep:
            raise InvalidInputError(
                f"Invalid environment variable format: '{pair}'. Use KEY=VALUE"
            )
        key = key.strip()
        if not key:
            raise InvalidInputError("Environment variable key cannot be empty")
        env_vars[key] = value.strip()
    return env_vars


def _valid_port(text: str) -> bool:
    port = _parse_unsigned(text)
    return port is not None and port <= 65535


def parse_port_mappings(text: str) -> dict[str, str]:
    """Parse 'HOST:CONTAINER,HOST:CONTAINER' port mappings."""
    mappings: dict[str, str] = {}
    if not text.strip():
        return mappings
    for mapping in text.split(","):
        host, sep, container = mapping.strip().partition(":")
        if not sep:
            raise InvalidInputError(
                f"Invalid port mapping format: '{mapping}'. Use HOST_PORT:CONTAINER_PORT"
            )
        host = host.strip()
        container = container.strip()
        if not _valid_port(host):
            raise InvalidInputError(f"Invalid host port: {host}")
        if not _valid_port(container):
            raise InvalidInputError(f"Invalid container port: {container}")
        mappings[host] = container
    return mappings