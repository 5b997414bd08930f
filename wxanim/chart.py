"""Line chart layout with "nice" axis ranges, and a canvas widget that draws it."""

from __future__ import annotations

import math
import tkinter as tk
import tkinter.font as tkfont
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

Point = Tuple[float, float]

RANGE_MULTIPLIERS = (0.2, 0.25, 0.5, 1.0, 2.0, 2.5, 5.0)
MAX_SEGMENTS = 6
FALLBACK_SEGMENTS = 10

GRID_COLOUR = "#808080"
TEXT_COLOUR = "#000000"
LINE_COLOUR = "#0000ff"
HIGHLIGHT_COLOUR = "#ff0000"
LINE_WIDTH = 3
LABEL_MARGIN_DIP = 10
HIGHLIGHT_RADIUS_DIP = 5


def calculate_chart_segment_count_and_range(
    orig_low: float, orig_high: float
) -> Tuple[int, float, float]:
    """Pick a rounded value range and grid segment count covering ``orig_low..orig_high``.

    Returns ``(segments, low, high)``. The step between grid lines is a
    multiplier from :data:`RANGE_MULTIPLIERS` times a power of ten, and the
    first step giving at most :data:`MAX_SEGMENTS` segments wins.
    """
    if not orig_high > orig_low:
        raise ValueError("The high value must be greater than the low value")

    magnitude = math.floor(math.log10(orig_high - orig_low))
    for multiplier in RANGE_MULTIPLIERS:
        step = multiplier * 10.0**magnitude
        low = math.floor(orig_low / step) * step
        high = math.ceil(orig_high / step) * step
        segments = int(math.floor((high - low) / step + 0.5))
        if segments <= MAX_SEGMENTS:
            return segments, low, high

    return FALLBACK_SEGMENTS, orig_low, orig_high


@dataclass(frozen=True)
class GridLine:
    """A horizontal grid line: its pixel row, the value it marks and its label."""

    y: float
    value: float
    label: str


@dataclass(frozen=True)
class ChartLayout:
    """Pixel geometry of a chart laid out in a given area."""

    chart_left: float
    chart_top: float
    chart_width: float
    chart_height: float
    title_y: float
    segment_count: int
    range_low: float
    range_high: float
    grid_lines: List[GridLine]
    points: List[Point]
    highlight: Point

    @property
    def chart_right(self) -> float:
        return self.chart_left + self.chart_width

    @property
    def chart_bottom(self) -> float:
        return self.chart_top + self.chart_height

    @property
    def border_lines(self) -> List[Tuple[Point, Point]]:
        """The left and right vertical edges of the chart area."""
        return [
            ((self.chart_left, self.chart_top), (self.chart_left, self.chart_bottom)),
            ((self.chart_right, self.chart_top), (self.chart_right, self.chart_bottom)),
        ]


@dataclass
class Chart:
    """Data for a line chart: ``(x, y)`` values, a title and a highlighted point."""

    values: List[Point] = field(default_factory=list)
    title: str = ""
    highlighted_point: Point = (0.0, 0.0)
    min_x: float = 0.0
    max_x: float = 0.0

    def layout(
        self, width: float, height: float, title_height: float, label_margin: float
    ) -> ChartLayout:
        """Lay the chart out in a ``width`` x ``height`` area.

        ``title_height`` is the height of the rendered title. ``label_margin``
        is the gap between the axis labels and the chart area, and also the
        minimum space kept above and below the title.
        """
        if not self.values:
            raise ValueError("The chart has no values")
        x_span = self.max_x - self.min_x
        if x_span == 0:
            raise ValueError("min_x and max_x must differ")

        margin_x = width / 8.0
        margin_top = max(height / 8.0, label_margin * 2.0 + title_height)
        margin_bottom = height / 8.0

        left = margin_x
        top = margin_top
        area_width = width - 2 * margin_x
        area_height = height - margin_top - margin_bottom

        ys = [y for _, y in self.values]
        segments, range_low, range_high = calculate_chart_segment_count_and_range(
            min(ys), max(ys)
        )
        y_span = range_high - range_low

        grid_lines = []
        for i in range(segments + 1):
            norm_y = i / segments
            value = range_high - norm_y * y_span
            grid_lines.append(
                GridLine(y=top + norm_y * area_height, value=value, label=f"{value:.2f}")
            )

        def to_pixels(point: Point) -> Point:
            x, y = point
            norm_x = (x - self.min_x) / x_span
            norm_y = (range_high - y) / y_span
            return left + norm_x * area_width, top + norm_y * area_height

        return ChartLayout(
            chart_left=left,
            chart_top=top,
            chart_width=area_width,
            chart_height=area_height,
            title_y=(margin_top - title_height) / 2.0,
            segment_count=segments,
            range_low=range_low,
            range_high=range_high,
            grid_lines=grid_lines,
            points=[to_pixels(point) for point in self.values],
            highlight=to_pixels(self.highlighted_point),
        )


def _ellipsize_middle(text: str, font: tkfont.Font, max_width: float) -> str:
    if font.measure(text) <= max_width:
        return text
    head, tail = text[: len(text) // 2], text[len(text) // 2 :]
    while head or tail:
        if len(head) >= len(tail):
            head = head[:-1]
        else:
            tail = tail[1:]
        candidate = f"{head}\u2026{tail}"
        if font.measure(candidate) <= max_width:
            return candidate
    return ""


class ChartControl(tk.Canvas):
    """A canvas that draws :attr:`chart` and redraws itself when resized."""

    def __init__(self, master: tk.Misc, **kwargs) -> None:
        kwargs.setdefault("highlightthickness", 0)
        super().__init__(master, **kwargs)
        self.chart = Chart()
        self.bind("<Configure>", lambda _event: self.redraw())

    def _from_dip(self, value: float) -> int:
        return round(value * self.winfo_fpixels("1i") / 96.0)

    def redraw(self) -> None:
        """Clear the canvas and draw the chart at the current size."""
        self.delete("all")
        if not self.chart.values:
            return

        base_font = tkfont.nametofont("TkDefaultFont")
        title_font = base_font.copy()
        title_font.configure(size=base_font.cget("size") * 2, weight="bold")

        width = self.winfo_width()
        height = self.winfo_height()
        label_margin = self._from_dip(LABEL_MARGIN_DIP)
        layout = self.chart.layout(
            width, height, title_font.metrics("linespace"), label_margin
        )

        self.create_text(
            width / 2.0,
            layout.title_y,
            text=self.chart.title,
            font=title_font,
            fill=TEXT_COLOUR,
            anchor="n",
        )

        label_x = layout.chart_left - label_margin
        for line in layout.grid_lines:
            self.create_line(
                layout.chart_left, line.y, layout.chart_right, line.y, fill=GRID_COLOUR
            )
            label = _ellipsize_middle(line.label, base_font, label_x)
            self.create_text(
                label_x, line.y, text=label, font=base_font, fill=TEXT_COLOUR, anchor="e"
            )

        for (x0, y0), (x1, y1) in layout.border_lines:
            self.create_line(x0, y0, x1, y1, fill=GRID_COLOUR)

        if len(layout.points) > 1:
            coords = [c for point in layout.points for c in point]
            self.create_line(*coords, fill=LINE_COLOUR, width=LINE_WIDTH)

        radius = self._from_dip(HIGHLIGHT_RADIUS_DIP)
        hx, hy = layout.highlight
        self.create_oval(
            hx - radius,
            hy - radius,
            hx + radius,
            hy + radius,
            fill=HIGHLIGHT_COLOUR,
            outline=LINE_COLOUR,
            width=LINE_WIDTH,
        )


def _values_of(points: Sequence[Point]) -> List[Point]:
    return [(float(x), float(y)) for x, y in points]