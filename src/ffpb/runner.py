"""Launches ffmpeg and feeds its stderr to the stream interpreter."""

import logging
import subprocess
from collections.abc import Callable, Sequence

from ffpb.config import Settings, get_settings
from ffpb.models.errors import FfpbError, LaunchError, StreamCaptureError
from ffpb.models.run import RunResult
from ffpb.rendering.bar import TqdmRenderer
from ffpb.rendering.base import ProgressRenderer
from ffpb.stream.interpreter import StreamInterpreter
from ffpb.stream.reader import ByteCursorReader

logger = logging.getLogger(__name__)


class FFmpegRunner:
    """Runs one ffmpeg command with a live progress bar."""

    def __init__(
        self,
        settings: Settings | None = None,
        renderer_factory: Callable[[], ProgressRenderer] | None = None,
    ):
        self.settings = settings or get_settings()
        self.renderer_factory = renderer_factory or (lambda: TqdmRenderer(settings=self.settings))

    def build_command(self, args: Sequence[str]) -> list[str]:
        """Arguments are forwarded verbatim."""
        return [self.settings.ffmpeg_binary, *args]

    def run(self, args: Sequence[str]) -> RunResult:
        """Run ffmpeg to completion and return its exit status with the final progress."""
        cmd = self.build_command(args)

        try:
            process = subprocess.Popen(cmd, stderr=subprocess.PIPE)
        except FileNotFoundError:
            logger.error("ffmpeg binary not found: %s", cmd[0])
            raise LaunchError(
                "failed to launch ffmpeg binary.",
                details={"command": cmd[0]},
            )
        except OSError as e:
            logger.error("Could not start %s: %s", cmd[0], e)
            raise LaunchError(
                f"failed to launch ffmpeg binary: {e}",
                details={"command": cmd[0], "error": str(e)},
            )

        if process.stderr is None:
            self._shutdown(process)
            raise StreamCaptureError("failed to capture ffmpeg standard error.")

        reader = ByteCursorReader(process.stderr, chunk_size=self.settings.read_chunk_size)
        renderer = self.renderer_factory()
        try:
            interpreter = StreamInterpreter(reader, renderer, settings=self.settings)
            snapshot = interpreter.run()
        except FfpbError:
            self._shutdown(process)
            raise
        finally:
            renderer.close()

        process.stderr.close()
        returncode = process.wait()
        if returncode != 0:
            logger.warning("ffmpeg exited with code %d", returncode)
        return RunResult(command=cmd, returncode=returncode, snapshot=snapshot)

    def _shutdown(self, process: subprocess.Popen) -> None:
        """Stop reading and give the child a chance to exit before killing it."""
        if process.stderr is not None:
            process.stderr.close()
        try:
            process.wait(timeout=self.settings.shutdown_timeout)
        except subprocess.TimeoutExpired:
            logger.warning("ffmpeg did not exit after %.1fs, killing it", self.settings.shutdown_timeout)
            process.kill()
            process.wait()


def ffmpeg(args: Sequence[str], settings: Settings | None = None) -> RunResult:
    """Call ffmpeg with ``args`` and a progress bar.

    Example::

        ffmpeg(["-i", "test.mp4", "-c:v", "copy", "test.mkv"])
    """
    return FFmpegRunner(settings=settings).run(args)
