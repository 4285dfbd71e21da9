"""Resolution of user-typed targets (indices, HUIDs, names, 'all') to pods and executors."""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping, Sequence

from .errors import InvalidInputError, NotFoundError
from .models import PodInfo

_UNSIGNED = re.compile(r"\+?\d+")
_USIZE_LIMIT = 2**64


def _parse_index(text: str) -> int | None:
    if not _UNSIGNED.fullmatch(text):
        return None
    value = int(text)
    return value if value < _USIZE_LIMIT else None


def resolve_pod_targets(
    pods: Sequence[PodInfo], targets: Iterable[str]
) -> list[tuple[PodInfo, str]]:
    """Resolve targets to (pod, identifier) pairs; indices are 1-based."""
    targets = list(targets)
    resolved: list[tuple[PodInfo, str]] = []

    for target in targets:
        if target == "all":
            resolved.extend((pod, "all") for pod in pods)
            continue

        index = _parse_index(target)
        if index is not None:
            if index == 0 or index > len(pods):
                raise InvalidInputError(
                    f"Invalid pod index: {index}. Valid range: 1-{len(pods)}"
                )
            resolved.append((pods[index - 1], target))
            continue

        match = next(
            (pod for pod in pods if target in (pod.huid, pod.name, pod.id)),
            None,
        )
        if match is None:
            raise InvalidInputError(f"Pod not found: {target}")
        resolved.append((match, target))

    if not resolved and targets:
        raise InvalidInputError("No pods matched the specified targets")
    return resolved


def resolve_single_pod_target(pods: Sequence[PodInfo], target: str) -> PodInfo:
    """Resolve a target that must name exactly one pod."""
    resolved = resolve_pod_targets(pods, [target])
    if not resolved:
        raise NotFoundError(f"No pod found matching: {target}")
    if len(resolved) > 1:
        raise InvalidInputError(
            f"Multiple pods found matching '{target}'. Please be more specific."
        )
    return resolved[0][0]


def _field(entry: Any, key: str) -> str | None:
    if isinstance(entry, Mapping):
        value = entry.get(key)
        if isinstance(value, str):
            return value
    return None


def resolve_executor_indices(indices: Iterable[str], selection: Any) -> list[str]:
    """Resolve indices, HUIDs or ids against the last stored executor selection."""
    executors = selection.get("executors") if isinstance(selection, Mapping) else None
    if not isinstance(executors, list):
        raise InvalidInputError("No executor selection data found. Run 'lium ls' first.")

    resolved: list[str] = []
    for text in indices:
        index = _parse_index(text)
        if index is not None:
            if index == 0 or index > len(executors):
                raise InvalidInputError(
                    f"Invalid executor index: {index}. Valid range: 1-{len(executors)}"
                )
            executor_id = _field(executors[index - 1], "id")
            if executor_id is None:
                raise InvalidInputError("Invalid executor data in selection")
            resolved.append(executor_id)
            continue

        found = next(
            (
                executor_id
                for executor in executors
                if (executor_id := _field(executor, "id")) is not None
                and text in (_field(executor, "huid"), executor_id)
            ),
            None,
        )
        if found is None:
            raise InvalidInputError(f"Executor not found: {text}")
        resolved.append(found)

    return resolved