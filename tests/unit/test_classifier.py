"""Tests for the line classifier."""

import pytest

from ffpb.models.errors import MalformedMetricError
from ffpb.models.stream import LineKind
from ffpb.stream.classifier import LineClassifier


@pytest.fixture
def classifier():
    return LineClassifier()


def kinds(results):
    return [r.kind for r in results]


class TestClassifyPrefix:
    def test_overwrite_prompt(self, classifier):
        assert classifier.classify_prefix(b"File ") == LineKind.OVERWRITE_PROMPT

    def test_header_end(self, classifier):
        assert classifier.classify_prefix(b"Press") == LineKind.HEADER_END

    def test_other_prefix(self, classifier):
        assert classifier.classify_prefix(b"  Dur") is None
        assert classifier.classify_prefix(b"Files") is None


class TestClassify:
    def test_duration(self, classifier):
        results = classifier.classify("  Duration: 01:02:34.16, start: 0.000000, bitrate: 860 kb/s\n")
        assert kinds(results) == [LineKind.DURATION]
        assert results[0].value == 3754

    def test_duration_not_available(self, classifier):
        results = classifier.classify("  Duration: N/A, bitrate: N/A\n")
        assert kinds(results) == [LineKind.UNRECOGNIZED]

    def test_fps_decimal(self, classifier):
        line = "  Stream #0:0: Video: hevc (Main 10), 1280x720, SAR 1:1 DAR 16:9, 23.98 fps, 23.98 tbr\n"
        results = classifier.classify(line)
        assert kinds(results) == [LineKind.FPS]
        assert results[0].value == pytest.approx(23.98)

    def test_fps_integer(self, classifier):
        results = classifier.classify("  Stream #0:0: Video: h264, 25 fps, 25 tbr\n")
        assert results[0].value == 25.0

    def test_stats_fps_field_is_not_frame_rate(self, classifier):
        line = "frame=  120 fps= 30 q=28.0 size=    256kB time=00:00:05.00 bitrate= 419.4kbits/s\r"
        results = classifier.classify(line)
        assert kinds(results) == [LineKind.PROGRESS]
        assert results[0].value == 5

    def test_progress(self, classifier):
        results = classifier.classify("size=   59890kB time=00:09:23.44 bitrate= 870.7kbits/s speed=60.9x\r")
        assert kinds(results) == [LineKind.PROGRESS]
        assert results[0].value == 563

    def test_extractions_in_order(self, classifier):
        line = (
            "  Duration: 00:00:20.00, start: 0.000000\n"
            "  Stream #0:0: Video: h264, 25 fps\n"
            "frame=  100 time=00:00:04.00\r"
        )
        results = classifier.classify(line)
        assert kinds(results) == [LineKind.DURATION, LineKind.FPS, LineKind.PROGRESS]

    def test_skips_known_metrics(self, classifier):
        line = "  Duration: 00:00:20.00\n  Stream #0:0: Video: h264, 25 fps\n"
        results = classifier.classify(line, want_duration=False, want_fps=False)
        assert kinds(results) == [LineKind.UNRECOGNIZED]

    def test_empty_line_is_stream_end(self, classifier):
        assert kinds(classifier.classify("")) == [LineKind.STREAM_END]

    def test_unrecognized_keeps_text(self, classifier):
        results = classifier.classify("Stream mapping:\n")
        assert results[0].kind == LineKind.UNRECOGNIZED
        assert results[0].text == "Stream mapping:\n"

    def test_zero_fps_is_malformed(self, classifier):
        with pytest.raises(MalformedMetricError, match="fps"):
            classifier.classify("  Stream #0:0: Video: h264, 00 fps\n")

    def test_zero_fps_ignored_once_known(self, classifier):
        results = classifier.classify("  Stream #0:0: Video: h264, 00 fps\n", want_fps=False)
        assert kinds(results) == [LineKind.UNRECOGNIZED]
