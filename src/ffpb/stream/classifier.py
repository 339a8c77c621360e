"""Pattern extraction for ffmpeg diagnostic lines."""

import logging
import re

from ffpb.models.errors import MalformedMetricError
from ffpb.models.stream import Classification, LineKind

logger = logging.getLogger(__name__)

DURATION_RE = re.compile(r"Duration: (\d{2}):(\d{2}):(\d{2})\.\d{2}")
FPS_RE = re.compile(r"(\d+(?:\.\d+)?) fps(?!=)")
PROGRESS_RE = re.compile(r"time=(\d{2}):(\d{2}):(\d{2})\.\d{2}")

# File 'out.mp4' already exists. Overwrite? [y/N]
OVERWRITE_PREFIX = b"File "
# Press [q] to stop, [?] for help
HEADER_END_PREFIX = b"Press"


def time_to_secs(match: re.Match, label: str) -> int:
    """Convert an HH:MM:SS match to whole seconds."""
    try:
        hours, minutes, seconds = (int(g) for g in match.group(1, 2, 3))
    except ValueError:
        raise MalformedMetricError(
            f"couldn't parse {label}.",
            details={"match": match.group(0)},
        )
    return ((hours * 60) + minutes) * 60 + seconds


class LineClassifier:
    """Tags lines of ffmpeg output with the metrics they carry."""

    def classify_prefix(self, prefix: bytes) -> LineKind | None:
        """Classify a lookahead prefix read while waiting for the header."""
        if prefix.startswith(OVERWRITE_PREFIX):
            return LineKind.OVERWRITE_PROMPT
        if prefix.startswith(HEADER_END_PREFIX):
            return LineKind.HEADER_END
        return None

    def parse_fps(self, match: re.Match) -> float:
        try:
            fps = float(match.group(1))
        except ValueError:
            fps = 0.0
        if fps <= 0:
            raise MalformedMetricError(
                "couldn't parse fps.",
                details={"match": match.group(0)},
            )
        return fps

    def classify(
        self,
        line: str,
        want_duration: bool = True,
        want_fps: bool = True,
    ) -> list[Classification]:
        """Run the duration, fps and progress extractions over one line.

        Duration and fps are only looked for while the caller still needs
        them; progress is extracted from every line.
        """
        if not line:
            return [Classification(kind=LineKind.STREAM_END)]

        results = []
        if want_duration:
            match = DURATION_RE.search(line)
            if match:
                seconds = time_to_secs(match, "total duration")
                logger.debug("Duration %ds", seconds)
                results.append(Classification(kind=LineKind.DURATION, value=seconds, text=line))

        if want_fps:
            match = FPS_RE.search(line)
            if match:
                fps = self.parse_fps(match)
                logger.debug("Frame rate %.2f", fps)
                results.append(Classification(kind=LineKind.FPS, value=fps, text=line))

        match = PROGRESS_RE.search(line)
        if match:
            seconds = time_to_secs(match, "current duration")
            results.append(Classification(kind=LineKind.PROGRESS, value=seconds, text=line))

        if not results:
            results.append(Classification(kind=LineKind.UNRECOGNIZED, text=line))
        return results
