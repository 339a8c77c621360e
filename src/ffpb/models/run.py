"""Run result data models."""

from pydantic import BaseModel, Field

from ffpb.models.progress import ProgressSnapshot


class RunResult(BaseModel):
    """Outcome of one wrapped ffmpeg invocation."""

    command: list[str] = Field(default_factory=list)
    returncode: int = Field(..., description="Exit status of the child process")
    snapshot: ProgressSnapshot = Field(default_factory=ProgressSnapshot)

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0
