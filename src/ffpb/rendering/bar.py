"""Terminal progress bar backed by tqdm."""

import sys
from typing import TextIO

from tqdm import tqdm

from ffpb.config import Settings, get_settings
from ffpb.models.progress import ProgressSnapshot, UnitKind

BAR_FORMAT = "{l_bar}{bar}| {n_fmt}/{total_fmt} [{elapsed}<{remaining}{postfix}]"


class TqdmRenderer:
    """Draws percentage, counts, elapsed/remaining time and throughput."""

    def __init__(self, file: TextIO | None = None, settings: Settings | None = None):
        self.settings = settings or get_settings()
        self.file = file or sys.stderr
        self.unit_kind = UnitKind.SECONDS
        self.bar = tqdm(
            total=None,
            unit="s",
            file=self.file,
            dynamic_ncols=self.settings.dynamic_ncols,
            colour=self.settings.bar_colour,
            bar_format=BAR_FORMAT,
            leave=True,
        )

    def rate_label(self) -> str:
        rate = self.bar.format_dict.get("rate")
        if not rate:
            return "0 FPS" if self.unit_kind == UnitKind.FRAMES else "0.00x"
        if self.unit_kind == UnitKind.FRAMES:
            return f"{rate:.0f} FPS"
        return f"{rate:.2f}x"

    def update(self, snapshot: ProgressSnapshot) -> None:
        if snapshot.unit_kind != self.unit_kind:
            # Unit switch rescales the position; drop rate samples taken in the old unit.
            self.unit_kind = snapshot.unit_kind
            self.bar.unit = snapshot.unit_label
            self.bar.reset(total=snapshot.total_units)
            self.bar.n = snapshot.current_units
            self.bar.last_print_n = snapshot.current_units
        if snapshot.total_units is not None and self.bar.total != snapshot.total_units:
            self.bar.total = snapshot.total_units
        delta = snapshot.current_units - self.bar.n
        if delta > 0:
            self.bar.update(delta)
        self.bar.set_postfix_str(self.rate_label())

    def write(self, text: str) -> None:
        self.bar.write(text, file=self.file)

    def clear(self) -> None:
        """Blank the bar line and leave the cursor at its start."""
        self.bar.clear()
        self.file.flush()

    def refresh(self) -> None:
        self.bar.refresh()

    def close(self) -> None:
        self.bar.close()
