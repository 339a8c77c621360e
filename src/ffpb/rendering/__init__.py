"""Progress rendering."""

from ffpb.rendering.bar import TqdmRenderer
from ffpb.rendering.base import ProgressRenderer

__all__ = ["ProgressRenderer", "TqdmRenderer"]
