"""Platform abstraction layer."""

from .process import (
    ProcessError,
    run,
    run_async,
)

__all__ = [
    "ProcessError",
    "run",
    "run_async",
]
