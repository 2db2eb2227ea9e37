"""Run execution domain exports."""

from .repack_use_case import RunExecutionError, execute_repack
from .run_contracts import RepackOutcome, RepackRequest

__all__ = [
    "RepackRequest",
    "RepackOutcome",
    "RunExecutionError",
    "execute_repack",
]
