"""Stream phase and line classification models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class Phase(StrEnum):
    """Lifecycle of one pass over the diagnostic stream."""

    AWAITING_HEADER = "awaiting_header"
    PROMPT_PENDING = "prompt_pending"
    STEADY_STATE = "steady_state"
    TERMINATED = "terminated"


class LineKind(StrEnum):
    """Tag produced by the line classifier."""

    DURATION = "duration-metadata"
    FPS = "fps-metadata"
    PROGRESS = "progress-update"
    OVERWRITE_PROMPT = "overwrite-prompt"
    HEADER_END = "header-end"
    STREAM_END = "stream-end"
    UNRECOGNIZED = "unrecognized"


class Classification(BaseModel):
    """One extraction result for a line of diagnostic output."""

    kind: LineKind
    value: float | None = Field(default=None, ge=0)
    text: str = Field(default="")
