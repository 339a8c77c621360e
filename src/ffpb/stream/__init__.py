"""Streaming interpretation of ffmpeg diagnostic output."""

from ffpb.stream.classifier import LineClassifier
from ffpb.stream.interpreter import StreamInterpreter
from ffpb.stream.prompt import PromptRelay
from ffpb.stream.reader import ByteCursorReader, EndOfStream

__all__ = [
    "ByteCursorReader",
    "EndOfStream",
    "LineClassifier",
    "PromptRelay",
    "StreamInterpreter",
]
