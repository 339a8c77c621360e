"""Progress state and snapshot models."""

import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from ffpb.models.stream import Classification, LineKind

logger = logging.getLogger(__name__)


class UnitKind(StrEnum):
    """Scale used to express progress."""

    SECONDS = "seconds"
    FRAMES = "frames"


class ProgressSnapshot(BaseModel):
    """Read-only view of the progress state handed to renderers."""

    model_config = ConfigDict(frozen=True)

    current_units: int = Field(default=0, ge=0)
    total_units: int | None = Field(default=None, ge=0)
    unit_kind: UnitKind = Field(default=UnitKind.SECONDS)
    frame_rate: float | None = Field(default=None, gt=0)

    @property
    def fraction(self) -> float | None:
        """Completed fraction in [0, 1], or None while the total is unknown."""
        if not self.total_units:
            return None
        return min(1.0, self.current_units / self.total_units)

    @property
    def unit_label(self) -> str:
        return "frame" if self.unit_kind == UnitKind.FRAMES else "s"


class ProgressState(BaseModel):
    """Mutable progress record owned by the stream interpreter.

    Positions only move forward: a ``time=`` value below the current position
    is clamped to the previous maximum.
    """

    total_units: int | None = Field(default=None, ge=0)
    current_units: int = Field(default=0, ge=0)
    unit_kind: UnitKind = Field(default=UnitKind.SECONDS)
    frame_rate: float | None = Field(default=None, gt=0)

    def to_units(self, seconds: float) -> int:
        """Convert seconds to the current unit, truncating frames."""
        if self.frame_rate is None:
            return int(seconds)
        return int(seconds * self.frame_rate)

    def set_duration(self, seconds: float) -> bool:
        """Record the total duration. Ignored once a total is known."""
        if self.total_units is not None:
            return False
        self.total_units = self.to_units(seconds)
        logger.debug("Total set to %d %s", self.total_units, self.unit_kind)
        return True

    def set_frame_rate(self, fps: float) -> bool:
        """Switch to frame units, rescaling the total and position once."""
        if self.frame_rate is not None:
            return False
        self.frame_rate = fps
        self.unit_kind = UnitKind.FRAMES
        if self.total_units is not None:
            self.total_units = int(self.total_units * fps)
        self.current_units = int(self.current_units * fps)
        logger.debug("Frame rate %.2f, total rescaled to %s frames", fps, self.total_units)
        return True

    def advance_to(self, seconds: float) -> bool:
        """Move the position forward; smaller values leave it unchanged."""
        units = self.to_units(seconds)
        if units <= self.current_units:
            if units < self.current_units:
                logger.debug("Ignoring position %d behind %d", units, self.current_units)
            return False
        self.current_units = units
        return True

    def apply(self, classification: Classification) -> bool:
        """Apply a classifier result. Returns True when the state changed."""
        if classification.value is None:
            return False
        if classification.kind == LineKind.DURATION:
            return self.set_duration(classification.value)
        if classification.kind == LineKind.FPS:
            return self.set_frame_rate(classification.value)
        if classification.kind == LineKind.PROGRESS:
            return self.advance_to(classification.value)
        return False

    @property
    def complete(self) -> bool:
        return self.total_units is not None and self.current_units >= self.total_units

    def snapshot(self) -> ProgressSnapshot:
        return ProgressSnapshot(
            current_units=self.current_units,
            total_units=self.total_units,
            unit_kind=self.unit_kind,
            frame_rate=self.frame_rate,
        )
