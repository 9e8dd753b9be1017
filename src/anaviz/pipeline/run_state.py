"""Observable state of a single pipeline run."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, List, Optional

from anaviz.core.series import Point

__all__ = ['RunStatus', 'PipelineRun']


class RunStatus(str, Enum):
    """Lifecycle of a run: LOADING, then SUCCESS or ERROR."""
    LOADING = "loading"
    SUCCESS = "success"
    ERROR = "error"


@dataclass
class PipelineRun:
    """Ephemeral state owned by one run.

    ``analyzed_data`` is only set on success; ``error_message`` is the
    user-facing text and ``cause`` keeps the original exception for
    diagnostics.
    """
    run_id: int
    status: RunStatus = RunStatus.LOADING
    raw_data: Any = None
    validated_data: Any = None
    analyzed_data: Optional[List[Point]] = None
    error_message: Optional[str] = None
    cause: Optional[BaseException] = None
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None

    @property
    def diagnostic(self) -> Optional[str]:
        """Original failure message, for logs and developers."""
        if self.cause is None:
            return None
        return f"{type(self.cause).__name__}: {self.cause}"

    @property
    def done(self) -> bool:
        return self.status is not RunStatus.LOADING
