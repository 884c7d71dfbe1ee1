import pytest

from snake_game.grid import Cell, GridGeometry


def test_default_geometry_is_twenty_by_twenty():
    geometry = GridGeometry()
    assert (geometry.cols, geometry.rows) == (20, 20)


def test_cell_to_canvas_uses_origin():
    geometry = GridGeometry(cell_size=20, origin=(0, 44))
    assert geometry.cell_to_canvas(Cell(3, 2)) == (60, 84)
    assert geometry.cell_center(Cell(0, 0)) == (10.0, 54.0)


def test_canvas_to_cell_inside_and_outside():
    geometry = GridGeometry(cell_size=20, origin=(0, 44))
    assert geometry.canvas_to_cell(59.9, 84) == Cell(2, 2)
    assert geometry.canvas_to_cell(10, 10) is None
    assert geometry.canvas_to_cell(400, 100) is None


@pytest.mark.parametrize(
    "cell, expected",
    [((0, 0), True), ((19, 19), True), ((20, 0), False), ((0, -1), False)],
)
def test_contains(cell, expected):
    assert GridGeometry().contains(cell) is expected


def test_rejects_canvas_smaller_than_a_cell():
    with pytest.raises(ValueError):
        GridGeometry(canvas_width=10, canvas_height=400, cell_size=20)
