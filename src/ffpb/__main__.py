import sys

from ffpb.cli import main

sys.exit(main())
