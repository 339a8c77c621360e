"""Shared test fixtures and synthetic ffmpeg output."""

import io

import pytest

from ffpb.config import Settings
from ffpb.models.progress import ProgressSnapshot
from ffpb.stream.interpreter import StreamInterpreter
from ffpb.stream.prompt import PromptRelay
from ffpb.stream.reader import ByteCursorReader

HEADER = (
    b"ffmpeg version 6.1.1 Copyright (c) 2000-2023 the FFmpeg developers\n"
    b"  built with gcc 13.2.0\n"
    b"Input #0, matroska,webm, from 'test.mkv':\n"
    b"  Metadata:\n"
    b"    encoder         : libebml v1.3.6 + libmatroska v1.4.9\n"
    b"  Duration: 00:00:20.00, start: 0.000000, bitrate: 860 kb/s\n"
    b"  Stream #0:0: Video: h264 (High), yuv420p, 1280x720, SAR 1:1 DAR 16:9, 25 fps, 25 tbr\n"
    b"    Metadata:\n"
    b"      DURATION-eng    : 00:00:19.960000000\n"
    b"Stream mapping:\n"
    b"  Stream #0:0 -> #0:0 (h264 (native) -> h264 (libx264))\n"
)

PRESS = b"Press [q] to stop, [?] for help\n"

PROGRESS = (
    b"Output #0, mp4, to 'test.mp4':\n"
    b"  Stream #0:0: Video: h264, yuv420p, 1280x720, q=2-31, 25 fps, 12800 tbn\n"
    b"frame=  100 fps= 50 q=28.0 size=     256kB time=00:00:04.00 bitrate= 524.3kbits/s speed=2x    \r"
    b"frame=  250 fps= 50 q=28.0 size=     640kB time=00:00:10.00 bitrate= 524.3kbits/s speed=2x    \r"
    b"frame=  500 fps= 50 q=-1.0 Lsize=    1280kB time=00:00:20.00 bitrate= 524.3kbits/s speed=2x    \n"
    b"[out#0/mp4 @ 0x55d0c0] video:1270kB audio:0kB muxing overhead: 0.787402%\n"
)

PROMPT = b"File 'test.mp4' already exists. Overwrite? [y/N] "


class RecordingRenderer:
    """Renderer double that keeps everything it is handed."""

    def __init__(self):
        self.snapshots: list[ProgressSnapshot] = []
        self.written: list[str] = []
        self.refreshes = 0
        self.clears = 0
        self.closed = False

    def update(self, snapshot: ProgressSnapshot) -> None:
        self.snapshots.append(snapshot)

    def write(self, text: str) -> None:
        self.written.append(text)

    def clear(self) -> None:
        self.clears += 1

    def refresh(self) -> None:
        self.refreshes += 1

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings():
    """Settings with the idle sleep disabled."""
    return Settings(poll_interval=0.0)


@pytest.fixture
def renderer():
    return RecordingRenderer()


@pytest.fixture
def prompt_output():
    return io.StringIO()


@pytest.fixture
def make_interpreter(settings, renderer, prompt_output):
    """Build an interpreter over an in-memory byte stream."""

    def _make(data: bytes, chunk_size: int = 4096) -> StreamInterpreter:
        reader = ByteCursorReader(io.BytesIO(data), chunk_size=chunk_size)
        return StreamInterpreter(
            reader,
            renderer,
            relay=PromptRelay(prompt_output),
            settings=settings,
            sleep=lambda _: None,
        )

    return _make
