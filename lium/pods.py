"""Helpers for inspecting pods: readiness, executor identity and SSH details."""

from __future__ import annotations

from typing import Iterable, Mapping

from .errors import ParseError, ParseFailure
from .models import PodInfo
from .parsers import SshTarget, parse_ssh_command

_READY_STATES = frozenset({"running", "active", "ready", "up"})

DEFAULT_SSH_PORT = 22
DEFAULT_SSH_USER = "root"


def filter_ready_pods(pods: Iterable[PodInfo]) -> list[PodInfo]:
    """Return the pods whose status marks them as ready for operations."""
    return [pod for pod in pods if pod.status.lower() in _READY_STATES]


def get_executor_id_from_pod(pod: PodInfo) -> str:
    """Return the executor identifier recorded on a pod."""
    executor = pod.executor
    if isinstance(executor, Mapping):
        executor_id = executor.get("id")
        if isinstance(executor_id, str):
            return executor_id
    if isinstance(executor, str):
        return executor
    raise ParseError(
        ParseFailure.INVALID_FORMAT,
        f"Could not determine executor ID for pod '{pod.huid}'",
    )


def extract_ssh_details(pod: PodInfo) -> SshTarget:
    """Return the host, port and user to reach a pod over SSH."""
    if pod.ssh_cmd is not None:
        return parse_ssh_command(pod.ssh_cmd)
    return SshTarget(host=pod.huid, port=DEFAULT_SSH_PORT, user=DEFAULT_SSH_USER)