"""Live runtime environment probe for the system info endpoint."""

from __future__ import annotations

import os
import platform

import psutil

_MEGABYTE = 1024 * 1024


def _to_megabytes(value: int) -> int:
    return value // _MEGABYTE


def collect_system_info() -> dict[str, str | int]:
    """Read interpreter, OS, memory and CPU facts at call time.

    Memory figures are whole megabytes (truncating). ``maxMemory`` is
    physical plus swap, ``totalMemory`` is physical, ``freeMemory`` is what
    is available to new processes, so ``free <= total <= max`` always holds.
    """
    memory = psutil.virtual_memory()
    swap = psutil.swap_memory()
    return {
        "pythonVersion": platform.python_version(),
        "pythonVendor": platform.python_implementation(),
        "osName": platform.system(),
        "osVersion": platform.release(),
        "totalMemory": _to_megabytes(memory.total),
        "freeMemory": _to_megabytes(min(memory.available, memory.total)),
        "maxMemory": _to_megabytes(memory.total + swap.total),
        "processors": psutil.cpu_count() or os.cpu_count() or 1,
    }
