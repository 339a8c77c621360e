"""Progress bar wrapper for the ffmpeg command line."""

__version__ = "0.1.0"

from ffpb.runner import FFmpegRunner, ffmpeg  # noqa: E402

__all__ = ["FFmpegRunner", "__version__", "ffmpeg"]
