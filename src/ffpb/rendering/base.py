"""Renderer interface consumed by the stream interpreter."""

from typing import Protocol

from ffpb.models.progress import ProgressSnapshot


class ProgressRenderer(Protocol):
    """Draws progress snapshots. Only ever reads the state it is given."""

    def update(self, snapshot: ProgressSnapshot) -> None: ...

    def write(self, text: str) -> None: ...

    def clear(self) -> None: ...

    def refresh(self) -> None: ...

    def close(self) -> None: ...
