import logging

import pytest

from asciiraster.errors import InvalidDimensionError
from asciiraster.planner import MAX_WIDTH, GridSize, plan_dimensions


def test_square_source():
    assert plan_dimensions(2, 2, 2) == GridSize(columns=2, rows=1)


def test_wide_source():
    # 50/100 * 100 * 0.55 = 27.5
    assert plan_dimensions(100, 50, 100) == GridSize(columns=100, rows=27)


def test_tall_source():
    # 200/100 * 40 * 0.55 = 44
    assert plan_dimensions(100, 200, 40).rows == 44


def test_rows_never_below_one():
    assert plan_dimensions(1000, 1, 10) == GridSize(columns=10, rows=1)


def test_width_is_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="asciiraster.planner"):
        size = plan_dimensions(10, 10, 1000)
    assert size.columns == MAX_WIDTH
    assert size.rows == int(MAX_WIDTH * 0.55)
    assert "clamping to 500" in caplog.text


def test_width_at_maximum_is_not_clamped(caplog):
    with caplog.at_level(logging.WARNING, logger="asciiraster.planner"):
        size = plan_dimensions(10, 10, MAX_WIDTH)
    assert size.columns == MAX_WIDTH
    assert caplog.text == ""


def test_overrides():
    assert plan_dimensions(10, 10, 20, cell_aspect=1.0) == GridSize(columns=20, rows=20)
    assert plan_dimensions(10, 10, 20, max_width=8).columns == 8


@pytest.mark.parametrize(
    "source_width,source_height,width",
    [(0, 10, 10), (10, 0, 10), (-1, 10, 10), (10, 10, 0), (10, 10, -3)],
)
def test_invalid_dimensions(source_width, source_height, width):
    with pytest.raises(InvalidDimensionError):
        plan_dimensions(source_width, source_height, width)
