"""Domain models for executors, pods and templates, and their API conversions."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any, Mapping

from .errors import ParseError, ParseFailure

_SIMPLE_GPU_MODELS = (
    ("rtx", "RTX"),
    ("gtx", "GTX"),
    ("tesla", "Tesla"),
    ("h100", "H100"),
    ("a100", "A100"),
)

_INT_TEXT = re.compile(r"[+-]?\d+")
_I32_MAX = 2**31 - 1
_I32_MIN = -(2**31)

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt ](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)


@dataclass
class ExecutorInfo:
    id: str
    huid: str
    machine_name: str
    gpu_type: str
    gpu_count: int
    price_per_hour: float
    price_per_gpu_hour: float
    location: dict[str, str] = field(default_factory=dict)
    specs: Any = None
    status: str = "available"
    available: bool = True


@dataclass
class PodInfo:
    id: str
    name: str
    status: str
    huid: str
    ssh_cmd: str | None = None
    ports: dict[str, int] = field(default_factory=dict)
    created_at: datetime | None = None
    updated_at: datetime | None = None
    executor: Any = None
    template: Any = None


@dataclass
class TemplateInfo:
    id: str
    name: str
    docker_image: str
    docker_image_tag: str | None = None
    status: str | None = None
    description: str | None = None


def _simple_gpu_model(machine_name: str) -> str:
    lowered = machine_name.lower()
    return next(
        (label for needle, label in _SIMPLE_GPU_MODELS if needle in lowered),
        "Unknown",
    )


def _simple_human_id(uuid: str) -> str:
    return f"exec-{uuid[:8]}"


def _required(data: Mapping[str, Any], key: str) -> Any:
    value = data.get(key)
    if value is None:
        raise ParseError(ParseFailure.MISSING_FIELD, key)
    return value


def _string(data: Mapping[str, Any], key: str) -> str:
    value = _required(data, key)
    if not isinstance(value, str):
        raise ParseError(ParseFailure.INVALID_VALUE, f"{key} must be a string")
    return value


def _optional_string(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ParseError(ParseFailure.INVALID_VALUE, f"{key} must be a string")
    return value


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _number(data: Mapping[str, Any], key: str) -> float:
    value = _required(data, key)
    if not isinstance(value, (int, float)) or isinstance(value, bool):
        raise ParseError(ParseFailure.INVALID_VALUE, f"{key} must be a number")
    return float(value)


def _parse_i32(text: str) -> int | None:
    if not _INT_TEXT.fullmatch(text):
        return None
    value = int(text)
    return value if _I32_MIN <= value <= _I32_MAX else None


def _location_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":")).strip('"')


def _parse_rfc3339(text: str) -> datetime | None:
    match = _RFC3339.fullmatch(text)
    if match is None:
        return None
    year, month, day, hour, minute, second, fraction, zulu, sign, off_h, off_m = match.groups()
    micro = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        if zulu:
            offset = timedelta(0)
        else:
            offset = timedelta(hours=int(off_h), minutes=int(off_m))
            if sign == "-":
                offset = -offset
        moment = datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second),
            micro, tzinfo=timezone(offset),
        )
    except ValueError:
        return None
    return moment.astimezone(timezone.utc)


def determine_gpu_count(data: Mapping[str, Any]) -> int:
    """Work out the GPU count of a raw executor record, falling back to 1."""
    explicit = data.get("gpu_count", 1)
    if _is_int(explicit) and explicit > 0:
        return explicit

    specs = data.get("specs")
    if isinstance(specs, Mapping) and "gpu_count" in specs:
        gpu_info = specs["gpu_count"]
        if _is_int(gpu_info) and gpu_info > 0:
            return gpu_info
        if isinstance(gpu_info, str):
            parsed = _parse_i32(gpu_info)
            if parsed is not None and parsed > 0:
                return parsed

    machine = str(data.get("machine_name", "")).lower()
    x_pos = machine.find("x")
    if x_pos >= 0:
        before_x = machine[:x_pos]
        dash_pos = before_x.rfind("-")
        if dash_pos >= 0:
            parsed = _parse_i32(before_x[dash_pos + 1:])
            if parsed is not None and parsed > 0:
                return parsed

    return 1


def executor_from_api(data: Mapping[str, Any]) -> ExecutorInfo:
    """Build an ExecutorInfo from a raw API executor record."""
    executor_id = _string(data, "id")
    machine_name = _string(data, "machine_name")
    price_per_hour = _number(data, "price_per_hour")

    raw_count = data.get("gpu_count", 1)
    if not _is_int(raw_count):
        raise ParseError(ParseFailure.INVALID_VALUE, "gpu_count must be an integer")

    raw_location = data.get("location") or {}
    if not isinstance(raw_location, Mapping):
        raise ParseError(ParseFailure.INVALID_VALUE, "location must be an object")

    active = data.get("active")
    if active is not None and not isinstance(active, bool):
        raise ParseError(ParseFailure.INVALID_VALUE, "active must be a boolean")
    rented = bool(active)

    gpu_count = determine_gpu_count(data)
    price_per_gpu_hour = price_per_hour / gpu_count if gpu_count > 0 else price_per_hour

    return ExecutorInfo(
        id=executor_id,
        huid=_simple_human_id(executor_id),
        machine_name=machine_name,
        gpu_type=_simple_gpu_model(machine_name),
        gpu_count=gpu_count,
        price_per_hour=price_per_hour,
        price_per_gpu_hour=price_per_gpu_hour,
        location={key: _location_text(value) for key, value in raw_location.items()},
        specs=data.get("specs"),
        status="rented" if rented else "available",
        available=not rented,
    )


def pod_from_api(data: Mapping[str, Any]) -> PodInfo:
    """Build a PodInfo from a raw API pod record."""
    pod_id = _string(data, "id")
    ports = _required(data, "ports_mapping")
    if not isinstance(ports, Mapping) or not all(
        isinstance(key, str) and _is_int(value) for key, value in ports.items()
    ):
        raise ParseError(ParseFailure.INVALID_VALUE, "ports_mapping must map names to integers")
    if "executor" not in data:
        raise ParseError(ParseFailure.MISSING_FIELD, "executor")
    if "template" not in data:
        raise ParseError(ParseFailure.MISSING_FIELD, "template")

    return PodInfo(
        id=pod_id,
        name=_string(data, "pod_name"),
        status=_string(data, "status"),
        huid=_simple_human_id(pod_id),
        ssh_cmd=_optional_string(data, "ssh_connect_cmd"),
        ports=dict(ports),
        created_at=_parse_rfc3339(_string(data, "created_at")),
        updated_at=_parse_rfc3339(_string(data, "updated_at")),
        executor=data["executor"],
        template=data["template"],
    )


def template_from_api(data: Mapping[str, Any]) -> TemplateInfo:
    """Build a TemplateInfo from a raw API template record."""
    return TemplateInfo(
        id=_string(data, "id"),
        name=_string(data, "name"),
        docker_image=_string(data, "docker_image"),
        docker_image_tag=_optional_string(data, "docker_image_tag"),
        status=_optional_string(data, "status"),
        description=_optional_string(data, "description"),
    )