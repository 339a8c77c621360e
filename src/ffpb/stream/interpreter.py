"""Phase-driven interpreter for ffmpeg's diagnostic stream."""

import logging
import time
from collections import deque
from collections.abc import Callable

from ffpb.config import Settings, get_settings
from ffpb.models.errors import UnexpectedEndOfStreamError
from ffpb.models.progress import ProgressSnapshot, ProgressState
from ffpb.models.stream import LineKind, Phase
from ffpb.rendering.base import ProgressRenderer
from ffpb.stream.classifier import LineClassifier
from ffpb.stream.prompt import PromptRelay
from ffpb.stream.reader import CARRIAGE_RETURN, NEWLINE, ByteCursorReader, EndOfStream

logger = logging.getLogger(__name__)


def stats_line(line: str) -> str:
    """The ffmpeg stats record within a chunk, without line terminators."""
    for part in line.splitlines():
        if "time=" in part:
            return part.strip()
    return line.strip()


class StreamInterpreter:
    """Turns ffmpeg's stderr into progress updates.

    Startup output is newline-framed. Once the ``Press [q]`` marker or the
    overwrite prompt has been seen, ffmpeg redraws its stats line with
    carriage returns, so records switch to ``\\r`` framing.

    Strict ordering: read -> classify -> update state -> render
    """

    def __init__(
        self,
        reader: ByteCursorReader,
        renderer: ProgressRenderer,
        classifier: LineClassifier | None = None,
        relay: PromptRelay | None = None,
        settings: Settings | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.reader = reader
        self.renderer = renderer
        self.classifier = classifier or LineClassifier()
        self.relay = relay or PromptRelay()
        self.settings = settings or get_settings()
        self.sleep = sleep
        self.state = ProgressState()
        self.phase = Phase.AWAITING_HEADER
        self.delimiter = NEWLINE
        self.header_tail: deque[str] = deque(maxlen=self.settings.stderr_tail_lines)

    def run(self) -> ProgressSnapshot:
        """Consume the stream until its end marker and return the final snapshot."""
        while self.phase != Phase.TERMINATED:
            self.step()
        return self.state.snapshot()

    def step(self) -> None:
        """Run one read/classify/update iteration."""
        prefix = b""
        if self.phase == Phase.AWAITING_HEADER:
            prefix = self._lookahead()
            kind = self.classifier.classify_prefix(prefix)
            if kind == LineKind.OVERWRITE_PROMPT:
                self._transition(Phase.PROMPT_PENDING)
                self.renderer.clear()
                self.relay.relay(prefix, self.reader)
                prefix = b""
                self._enter_steady_state()
            elif kind == LineKind.HEADER_END:
                self._enter_steady_state()
        else:
            self.sleep(self.settings.poll_interval)

        chunk = self.reader.read_until(self.delimiter)
        line = (prefix + chunk).decode("utf-8", errors="replace")
        if self.phase == Phase.AWAITING_HEADER and line.strip():
            self.header_tail.append(line.rstrip())

        for result in self.classifier.classify(
            line,
            want_duration=self.state.total_units is None,
            want_fps=self.state.frame_rate is None,
        ):
            if result.kind == LineKind.STREAM_END:
                self._terminate()
                return
            if self.state.apply(result):
                self.renderer.update(self.state.snapshot())
                if result.kind == LineKind.PROGRESS and self.state.complete:
                    self.renderer.write(stats_line(line))

    def _lookahead(self) -> bytes:
        try:
            return self.reader.read_exact(self.settings.lookahead_size)
        except EndOfStream as e:
            partial = e.partial.decode("utf-8", errors="replace").strip()
            if partial:
                self.header_tail.append(partial)
            message = "ffmpeg exited before processing started."
            if self.header_tail:
                message = f"{message} {self.header_tail[-1]}"
            raise UnexpectedEndOfStreamError(
                message,
                details={"stderr": "\n".join(self.header_tail)},
            )

    def _enter_steady_state(self) -> None:
        self.delimiter = CARRIAGE_RETURN
        self._transition(Phase.STEADY_STATE)

    def _terminate(self) -> None:
        self._transition(Phase.TERMINATED)
        self.renderer.refresh()

    def _transition(self, phase: Phase) -> None:
        logger.debug("Phase %s -> %s", self.phase, phase)
        self.phase = phase
