import pytest

from amazons.board import Board, Cell
from amazons.player import Player
from amazons.position import Position


@pytest.fixture
def standard_board():
    board = Board()
    board.initialize_standard_position()
    return board


def test_default_constructor_is_empty():
    board = Board()
    assert all(
        board.get_cell(row, col) is Cell.EMPTY
        for row in range(8)
        for col in range(8)
    )


def test_initialize_standard_position(standard_board):
    for row, col in [(0, 2), (2, 0), (5, 0), (7, 2)]:
        assert standard_board.get_cell(row, col) is Cell.BLACK_AMAZON
    for row, col in [(0, 5), (2, 7), (5, 7), (7, 5)]:
        assert standard_board.get_cell(row, col) is Cell.WHITE_AMAZON
    assert standard_board.get_cell(0, 0) is Cell.EMPTY
    assert standard_board.get_cell(4, 4) is Cell.EMPTY
    assert standard_board.get_cell(7, 7) is Cell.EMPTY


def test_is_valid_position():
    board = Board()
    assert board.is_valid_position(0, 0)
    assert board.is_valid_position(7, 7)
    assert board.is_valid_position(4, 4)
    assert not board.is_valid_position(-1, 0)
    assert not board.is_valid_position(0, -1)
    assert not board.is_valid_position(8, 4)
    assert not board.is_valid_position(4, 8)


def test_set_and_get_cell():
    board = Board()
    board.set_cell(0, 0, Cell.WHITE_AMAZON)
    board.set_cell(4, 4, Cell.BLACK_AMAZON)
    board.set_cell(7, 7, Cell.ARROW)
    assert board.get_cell(0, 0) is Cell.WHITE_AMAZON
    assert board.get_cell(4, 4) is Cell.BLACK_AMAZON
    assert board.get_cell(7, 7) is Cell.ARROW
    board.set_cell(4, 4, Cell.EMPTY)
    assert board.get_cell(4, 4) is Cell.EMPTY


def test_item_access_by_position():
    board = Board()
    board[Position(2, 3)] = Cell.ARROW
    assert board[Position(2, 3)] is Cell.ARROW
    assert board.get_cell(2, 3) is Cell.ARROW


def test_off_board_reads_empty_and_writes_are_ignored():
    board = Board()
    board.set_cell(8, 8, Cell.ARROW)
    assert board.get_cell(8, 8) is Cell.EMPTY
    assert board == Board()


def test_legal_moves_on_empty_board():
    board = Board()
    board.set_cell(4, 4, Cell.WHITE_AMAZON)
    moves = board.legal_moves(Position(4, 4))
    assert len(moves) > 0
    assert Position(4, 7) in moves
    assert Position(7, 4) in moves
    assert Position(7, 7) in moves


def test_legal_moves_with_obstacles(standard_board):
    moves = standard_board.legal_moves(Position(2, 7))
    assert len(moves) > 0
    assert all(standard_board[pos] is Cell.EMPTY for pos in moves)


def test_legal_moves_from_empty_or_invalid_square(standard_board):
    assert standard_board.legal_moves(Position(4, 4)) == []
    assert standard_board.legal_moves(Position(-1, 4)) == []


def test_legal_moves_stop_at_blockers():
    board = Board()
    board.set_cell(0, 0, Cell.WHITE_AMAZON)
    board.set_cell(0, 2, Cell.ARROW)
    moves = board.legal_moves(Position(0, 0))
    assert Position(0, 1) in moves
    assert Position(0, 2) not in moves
    assert Position(0, 3) not in moves


def test_legal_shots_match_moves_for_occupied_square(standard_board):
    origin = Position(5, 7)
    assert standard_board.legal_shots(origin) == standard_board.legal_moves(origin)


def test_legal_shots_from_empty_square(standard_board):
    assert len(standard_board.legal_shots(Position(4, 4))) > 0
    assert standard_board.legal_shots(Position(8, 0)) == []


def test_count_reachable_squares(standard_board):
    assert standard_board.count_reachable_squares(Player.WHITE) > 0
    assert standard_board.count_reachable_squares(Player.BLACK) > 0


def test_count_reachable_squares_single_amazon_matches_moves():
    board = Board()
    board.set_cell(3, 3, Cell.BLACK_AMAZON)
    board.set_cell(3, 5, Cell.ARROW)
    expected = len(board.legal_moves(Position(3, 3)))
    assert board.count_reachable_squares(Player.BLACK) == expected
    assert board.count_reachable_squares(Player.WHITE) == 0


def test_copy_is_independent(standard_board):
    clone = standard_board.copy()
    assert clone == standard_board
    clone.set_cell(4, 4, Cell.ARROW)
    assert clone != standard_board
    assert standard_board.get_cell(4, 4) is Cell.EMPTY