"""Tests for the plotly chart builders."""

from datetime import date

from gudid_utils.aggregation import aggregate
from gudid_utils.charts import time_series_figure, top_devices_figure
from gudid_utils.records import Record
from gudid_utils.themes import get_style, resolve_colors

COLORS = resolve_colors(get_style("Monet"))


def sample_result():
    return aggregate([
        Record("S1", date(2024, 1, 2), "C1", "D2", 3, "M2"),
        Record("S1", date(2024, 1, 1), "C1", "D1", 5, "M1"),
    ])


def test_time_series_figure_follows_series_order():
    fig = time_series_figure(sample_result(), COLORS)
    assert len(fig.data) == 1
    assert list(fig.data[0].y) == [5, 3]
    assert fig.data[0].line.color == COLORS["primary"]


def test_top_devices_figure_is_horizontal_and_ranked():
    fig = top_devices_figure(sample_result(), COLORS, title="Top")
    bar = fig.data[0]
    assert bar.orientation == "h"
    assert list(bar.y) == ["D1", "D2"]
    assert list(bar.x) == [5, 3]
    assert fig.layout.title.text == "Top"


def test_empty_result_gives_annotated_empty_figures():
    empty = aggregate([])
    for fig in (time_series_figure(empty, COLORS), top_devices_figure(empty, COLORS)):
        assert len(fig.data) == 0
        assert fig.layout.annotations[0].text == "No data"
