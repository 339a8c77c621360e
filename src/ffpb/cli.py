"""Command line entry point."""

import logging
import sys
from collections.abc import Sequence

from ffpb import __version__
from ffpb.config import get_settings
from ffpb.models.errors import FfpbError
from ffpb.runner import FFmpegRunner

logger = logging.getLogger(__name__)

USAGE = f"""ffpb {__version__}
A progress bar for ffmpeg.

ffpb is an ffmpeg progress formatter. It will attempt to display a nice
progress bar in the output, based on the raw ffmpeg output, as well as an
adaptative ETA timer.

Any argument given to the ffpb command is transparently given to the ffmpeg
binary on your system, without any form of validation. So if you know how to
use the ffmpeg cli, you know how to use ffpb.

USAGE:
    ffpb [ffmpeg <OPTIONS>]

EXAMPLES:
    ffpb -i test.mkv test.mp4
    ffpb -i test.mkv -c:v copy test.mp4
"""


def main(argv: Sequence[str] | None = None) -> int:
    """Run ffmpeg with the given arguments. Returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)

    if not args or args[0] in ("-h", "--help"):
        sys.stdout.write(USAGE)
        return 0

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        result = FFmpegRunner(settings=settings).run(args)
    except FfpbError as e:
        logger.debug("Run failed in %s: %s", e.component, e.details)
        print(f"ffpb: error: {e.message}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print(file=sys.stderr)
        return 130
    return result.returncode
