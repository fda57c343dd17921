"""Tunable options of the visualiser."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .utilities import int_pow, map_range

Color = tuple[float, float, float, float]


class PlotType(Enum):
    BARS = 0
    LINES = 1
    HEATMAP = 2


class BarsType(Enum):
    BARS = 0
    STEMS = 1
    BARS_AND_STEMS = 2


class Sampling(Enum):
    NONE = 0
    X2 = 1
    X4 = 2
    X8 = 3
    X16 = 4

    @property
    def factor(self) -> int:
        """How many source elements are merged into one."""
        return int_pow(2, self.value)


@dataclass
class Settings:
    """Mutable configuration; limits are class-level constants."""

    SHUFFLE_MAX_VALUE: ClassVar[int] = 65535
    SHUFFLE_MIN_COUNT: ClassVar[int] = 32
    SHUFFLE_MAX_COUNT: ClassVar[int] = 16384

    CURSOR_LINE_MIN_WIDTH: ClassVar[float] = 0.25
    CURSOR_LINE_MAX_WIDTH: ClassVar[float] = 8.0

    PLOT_MIN_DELAY: ClassVar[float] = 1.0 if sys.platform == "win32" else 0.01
    PLOT_MAX_DELAY: ClassVar[float] = 500.0
    PLOT_SINGULAR_LOOP_TIME_US: ClassVar[int] = 2_000_000
    PAUSE_SLEEP_MS: ClassVar[int] = 8

    shuffle_current_count: int = 128
    cursor_line_width: float = 0.67

    audio_min_frequency: float = 200.0
    audio_max_frequency: float = 400.0
    audio_min_amp: float = 0.5
    audio_max_amp: float = 1.0
    audio_min_pitch: float = 2.0
    audio_max_pitch: float = 4.0
    audio_wave_type: int = 0

    plot_type: PlotType = PlotType.BARS
    plot_show_scale: bool = True
    plot_heatmap_colors: str = "Hot"
    plot_heatmap_oneliner: bool = False

    plot_bars_type: BarsType = BarsType.BARS
    plot_bars_nogap: bool = False
    plot_bars_color: Color = (0.2, 0.41, 0.69, 1.0)
    plot_stems_marker: str = "Circle"
    plot_stems_color: Color = (0.2, 0.1, 0.69, 1.0)
    plot_stems_line_color: Color = (0.4, 0.1, 0.69, 1.0)
    plot_lines_filled: bool = False
    plot_lines_color: Color = (0.2, 0.41, 0.69, 1.0)
    plot_lines_filled_color: Color = (0.2, 0.1, 0.69, 0.25)

    plot_cursor_show: bool = True
    plot_cursor_color: Color = (1.0, 0.0, 0.0, 1.0)
    plot_cursor_is_bar: bool = True
    plot_cursor_marker: str = "Circle"
    plot_cursor_marker_size: float = 4.0

    plot_do_aftercheck: bool = True
    plot_shuffle_on_algo_change: bool = True
    plot_shuffle_animated: bool = True

    numbers_downsample: Sampling = Sampling.NONE
    cursor_downsample_value: bool = True

    antialiasing: bool = True

    def update_cursor_line_width(self) -> None:
        """Scale the cursor width to the configured element count."""
        self.update_cursor_line_width_dynamically(self.shuffle_current_count)

    def update_cursor_line_width_dynamically(self, count: int) -> None:
        """Scale the cursor width to ``count`` elements."""
        self.cursor_line_width = map_range(
            float(count),
            0,
            self.SHUFFLE_MAX_COUNT,
            self.CURSOR_LINE_MIN_WIDTH,
            self.CURSOR_LINE_MAX_WIDTH,
        )