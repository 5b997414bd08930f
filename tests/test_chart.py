import math

import pytest

from wxanim.chart import (
    MAX_SEGMENTS,
    RANGE_MULTIPLIERS,
    Chart,
    calculate_chart_segment_count_and_range,
)


def test_segment_range_for_zero_to_ten():
    assert calculate_chart_segment_count_and_range(0, 10) == (5, 0.0, 10.0)


@pytest.mark.parametrize(
    "low, high",
    [(0, 10), (1, 9), (-3.7, 12.2), (0.001, 0.0043), (120, 987), (-50, -20)],
)
def test_segment_range_covers_input(low, high):
    segments, range_low, range_high = calculate_chart_segment_count_and_range(low, high)
    assert range_low <= low
    assert range_high >= high
    assert 1 <= segments <= MAX_SEGMENTS


@pytest.mark.parametrize("low, high", [(1, 9), (-3.7, 12.2), (120, 987)])
def test_segment_step_is_nice(low, high):
    segments, range_low, range_high = calculate_chart_segment_count_and_range(low, high)
    step = (range_high - range_low) / segments
    mantissa = step / 10 ** math.floor(math.log10(step))
    assert any(
        mantissa == pytest.approx(m) or mantissa == pytest.approx(m / 10)
        or mantissa == pytest.approx(m * 10)
        for m in RANGE_MULTIPLIERS
    )


@pytest.mark.parametrize("low, high", [(5, 5), (7, 3)])
def test_segment_range_rejects_empty_span(low, high):
    with pytest.raises(ValueError):
        calculate_chart_segment_count_and_range(low, high)


def _chart():
    return Chart(
        values=[(0.0, 0.0), (5.0, 7.5), (10.0, 10.0)],
        title="Test",
        highlighted_point=(5.0, 7.5),
        min_x=0.0,
        max_x=10.0,
    )


def test_layout_grid_spans_chart_area():
    layout = _chart().layout(800, 400, 20, 10)
    assert layout.grid_lines[0].y == pytest.approx(layout.chart_top)
    assert layout.grid_lines[-1].y == pytest.approx(layout.chart_bottom)
    assert len(layout.grid_lines) == layout.segment_count + 1


def test_layout_grid_labels_run_from_high_to_low():
    layout = _chart().layout(800, 400, 20, 10)
    assert layout.grid_lines[0].label == "10.00"
    assert layout.grid_lines[-1].label == "0.00"
    values = [line.value for line in layout.grid_lines]
    assert values == sorted(values, reverse=True)


def test_layout_points_map_extremes_to_corners():
    layout = _chart().layout(800, 400, 20, 10)
    first, _, last = layout.points
    assert first == pytest.approx((layout.chart_left, layout.chart_bottom))
    assert last == pytest.approx((layout.chart_right, layout.chart_top))


def test_layout_highlight_matches_value_point():
    layout = _chart().layout(800, 400, 20, 10)
    assert layout.highlight == pytest.approx(layout.points[1])


def test_layout_margins_are_symmetric_horizontally():
    width = 800
    layout = _chart().layout(width, 400, 20, 10)
    assert layout.chart_left == pytest.approx(width - layout.chart_right)
    assert layout.chart_left == pytest.approx(width / 8)


def test_layout_title_is_centred_in_top_margin():
    title_height = 20
    layout = _chart().layout(800, 400, title_height, 10)
    assert layout.title_y * 2 + title_height == pytest.approx(layout.chart_top)


def test_layout_tall_title_pushes_chart_down():
    layout = _chart().layout(800, 400, 100, 10)
    assert layout.chart_top == pytest.approx(100 + 2 * 10)
    assert layout.chart_bottom == pytest.approx(400 - 400 / 8)


def test_layout_border_lines_are_vertical_edges():
    layout = _chart().layout(800, 400, 20, 10)
    (left_top, left_bottom), (right_top, right_bottom) = layout.border_lines
    assert left_top[0] == left_bottom[0] == pytest.approx(layout.chart_left)
    assert right_top[0] == right_bottom[0] == pytest.approx(layout.chart_right)


def test_layout_without_values_raises():
    with pytest.raises(ValueError):
        Chart(min_x=0, max_x=1).layout(800, 400, 20, 10)


def test_layout_with_empty_x_span_raises():
    chart = Chart(values=[(1.0, 1.0), (1.0, 2.0)], min_x=1.0, max_x=1.0)
    with pytest.raises(ValueError):
        chart.layout(800, 400, 20, 10)


def test_layout_with_constant_values_raises():
    chart = Chart(values=[(0.0, 3.0), (1.0, 3.0)], min_x=0.0, max_x=1.0)
    with pytest.raises(ValueError):
        chart.layout(800, 400, 20, 10)