from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, Field


class RunContext(BaseModel):
    """Per-invocation context for log correlation and deadlines."""

    run_id: str = Field(default_factory=lambda: str(uuid4()))
    trace_id: str = Field(default_factory=lambda: str(uuid4()))
    started_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    deadline_seconds: Optional[float] = Field(default=None, gt=0)

    @classmethod
    def create(
        cls,
        run_id: str | None = None,
        deadline_seconds: float | None = None,
    ) -> "RunContext":
        if run_id:
            return cls(run_id=run_id, deadline_seconds=deadline_seconds)
        return cls(deadline_seconds=deadline_seconds)


__all__ = ["RunContext"]
