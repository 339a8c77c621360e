"""Data models for ffpb."""

from ffpb.models.errors import (
    FfpbError,
    LaunchError,
    MalformedMetricError,
    ReadError,
    StreamCaptureError,
    UnexpectedEndOfStreamError,
)
from ffpb.models.progress import ProgressSnapshot, ProgressState, UnitKind
from ffpb.models.run import RunResult
from ffpb.models.stream import Classification, LineKind, Phase

__all__ = [
    "Classification",
    "FfpbError",
    "LaunchError",
    "LineKind",
    "MalformedMetricError",
    "Phase",
    "ProgressSnapshot",
    "ProgressState",
    "ReadError",
    "RunResult",
    "StreamCaptureError",
    "UnexpectedEndOfStreamError",
    "UnitKind",
]
