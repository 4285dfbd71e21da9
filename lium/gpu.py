"""Extraction of GPU model names from machine names."""

from __future__ import annotations

import re

_GPU_PATTERNS = tuple(
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"(RTX\s*\d+(?:\s*Ti)?(?:\s*Super)?)",
        r"(GTX\s*\d+(?:\s*Ti)?(?:\s*Super)?)",
        r"(Tesla\s*[A-Z]\d+)",
        r"(A\d+(?:\s*SXM)?)",
        r"(V\d+(?:\s*SXM)?)",
        r"(H\d+(?:\s*SXM)?)",
        r"(Quadro\s*\w+)",
        r"(T4)",
        r"(P100)",
        r"(K80)",
    )
)

_GPU_LIKE = re.compile(r"([A-Z]+\d+[A-Z]*\d*)", re.IGNORECASE)


def extract_gpu_model(machine_name: str) -> str:
    """Return the GPU model named in a machine name, or 'Unknown'."""
    for pattern in (*_GPU_PATTERNS, _GPU_LIKE):
        match = pattern.search(machine_name)
        if match:
            return match.group(1)
    return "Unknown"