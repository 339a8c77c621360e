"""Relay of ffmpeg's interactive overwrite question."""

import logging
import sys
from typing import TextIO

from ffpb.models.errors import UnexpectedEndOfStreamError
from ffpb.stream.reader import ByteCursorReader

logger = logging.getLogger(__name__)

PROMPT_CLOSE = b"]"
PROMPT_SUFFIX = "[y/N]"


class PromptRelay:
    """Copies the overwrite prompt to the user's terminal.

    ffmpeg waits on the shared stdin for the answer, so the text has to
    reach the terminal before anything else is read.
    """

    def __init__(self, output: TextIO | None = None):
        self.output = output

    def relay(self, prefix: bytes, reader: ByteCursorReader) -> str:
        """Assemble the prompt starting with ``prefix`` and write it out."""
        raw = bytearray(prefix)
        while not raw.decode("utf-8", errors="replace").endswith(PROMPT_SUFFIX):
            chunk = reader.read_until(PROMPT_CLOSE)
            if not chunk:
                raise UnexpectedEndOfStreamError(
                    "ffmpeg exited while asking to overwrite.",
                    details={"prompt": raw.decode("utf-8", errors="replace")},
                )
            raw.extend(chunk)

        text = raw.decode("utf-8", errors="replace")
        logger.debug("Relaying prompt: %s", text)
        output = self.output or sys.stderr
        output.write(text + " ")
        output.flush()
        return text
