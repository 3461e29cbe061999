import pytest

from arbitration_graphs.demo.maze import BaseCell, Maze, MazeAdapter, non_negative_modulus
from arbitration_graphs.demo.types import Position, TileType

CORRIDOR = "###" "   " "###"


@pytest.fixture
def corridor():
    return Maze.from_string(3, 3, CORRIDOR)


def test_non_negative_modulus_value():
    assert non_negative_modulus(-1, 10) == 9


@pytest.mark.parametrize("numerator", range(-20, 21))
def test_non_negative_modulus_range(numerator):
    result = non_negative_modulus(numerator, 7)
    assert 0 <= result < 7
    assert (result - numerator) % 7 == 0


def test_from_string_dimensions_and_tiles(corridor):
    assert corridor.width() == 3
    assert corridor.height() == 3
    assert corridor.at(Position(0, 1)) is TileType.EMPTY
    assert corridor[Position(0, 0)] is TileType.WALL
    assert corridor.is_wall(Position(2, 2))
    assert not corridor.is_dot(Position(1, 1))


def test_from_string_all_characters():
    maze = Maze.from_string(5, 1, "# .o-")
    assert [maze.at(Position(x, 0)) for x in range(5)] == [
        TileType.WALL,
        TileType.EMPTY,
        TileType.DOT,
        TileType.ENERGIZER,
        TileType.DOOR,
    ]


def test_from_string_wrong_length():
    with pytest.raises(ValueError):
        Maze.from_string(3, 3, "###")


def test_from_string_unknown_character():
    with pytest.raises(ValueError):
        Maze.from_string(1, 1, "x")


def test_ragged_rows_rejected():
    with pytest.raises(ValueError):
        Maze([[TileType.EMPTY], [TileType.EMPTY, TileType.WALL]])


def test_bounds(corridor):
    assert corridor.is_in_bounds(Position(2, 2))
    assert not corridor.is_in_bounds(Position(-1, 1))
    assert not corridor.is_in_bounds(Position(3, 1))
    assert not corridor.is_passable_cell(Position(3, 1))
    assert corridor.is_passable_cell(Position(1, 1))
    with pytest.raises(IndexError):
        corridor.at(Position(-1, 0))


def test_tunnel_wraps_to_passable_cell(corridor):
    assert corridor.position_considering_tunnel(Position(-1, 1)) == Position(2, 1)


def test_tunnel_clamps_when_wrapped_cell_is_wall(corridor):
    assert corridor.position_considering_tunnel(Position(1, -1)) == Position(1, 0)


def test_tunnel_keeps_inner_positions(corridor):
    for x in range(3):
        assert corridor.position_considering_tunnel(Position(x, 1)) == Position(x, 1)


def test_base_cell():
    cell = BaseCell(Position(1, 1), TileType.DOT)
    assert cell.is_consumable()
    assert BaseCell(Position(0, 0), TileType.ENERGIZER).is_consumable()
    assert not BaseCell(Position(0, 0), TileType.EMPTY).is_consumable()
    assert cell.manhattan_distance(Position(1, 1)) == 0
    assert cell.manhattan_distance(Position(4, 5)) == BaseCell(Position(4, 5), TileType.WALL).manhattan_distance(
        Position(1, 1)
    )


def test_maze_adapter_caches_cells(corridor):
    adapter = MazeAdapter(corridor)
    cell = adapter.cell(Position(1, 1))
    assert adapter.cell(Position(1, 1)) is cell
    assert cell.type is corridor.at(Position(1, 1))
    assert cell.position == Position(1, 1)
    with pytest.raises(IndexError):
        adapter.cell(Position(5, 5))