"""
Tests for BoardState class.
"""
import numpy as np
import pytest
from tictak.core.board import BoardState, Mark, Move, WIN_PATTERNS
from tictak.core.errors import InvalidMove

H = Mark.HUMAN
C = Mark.COMPUTER


def test_board_initialization():
    """Test that a board is initialized correctly."""
    board = BoardState()

    assert board.size == 9
    assert board.state.shape == (9,)
    assert board.state.dtype == np.int8
    assert np.all(board.state == 0)

    assert board.available_squares() == list(range(9))
    assert board.winner() is None
    assert not board.is_full()


def test_place_records_move():
    """Test that placing a mark fills exactly that square."""
    board = BoardState()

    board.place(H, 4)
    board.place(C, 0)

    assert board.state[4] == 1
    assert board.state[0] == -1
    assert board.is_occupied(4)
    assert board.is_occupied(0)
    assert not board.is_occupied(8)
    assert board.moves_of(H) == {4}
    assert board.moves_of(C) == {0}


def test_place_rejects_occupied_square():
    """Test that an occupied square cannot be overwritten."""
    board = BoardState()
    board.place(H, 3)

    with pytest.raises(InvalidMove):
        board.place(C, 3)
    with pytest.raises(InvalidMove):
        board.place(H, 3)

    # Original mark remains
    assert board.moves_of(H) == {3}
    assert board.moves_of(C) == set()


@pytest.mark.parametrize("index", [-1, 9, 20, 2.0, "4", True, None])
def test_place_rejects_bad_index(index):
    """Test that indices outside 0-8 are rejected."""
    board = BoardState()

    with pytest.raises(InvalidMove):
        board.place(H, index)

    assert np.all(board.state == 0)


def test_place_requires_mark():
    """Test that only Mark values can be placed."""
    board = BoardState()

    with pytest.raises(TypeError):
        board.place(1, 0)


def test_available_squares_is_ascending_and_restartable():
    """Test that available squares are sorted and can be read repeatedly."""
    board = BoardState()
    for index in (7, 2, 5):
        board.place(H, index)

    first = board.available_squares()
    second = board.available_squares()

    assert first == [0, 1, 3, 4, 6, 8]
    assert first == second

    # Mutating the returned list does not touch the board
    first.clear()
    assert board.available_squares() == [0, 1, 3, 4, 6, 8]


def test_moves_slots_match_indices():
    """Test that each stored move sits in the slot of its own index."""
    board = BoardState.from_marks([H, None, C, None, H, None, None, None, C])

    moves = board.moves
    assert len(moves) == 9
    for index, move in enumerate(moves):
        if move is not None:
            assert move.index == index

    assert moves[0] == Move(H, 0)
    assert moves[2] == Move(C, 2)
    assert moves[1] is None


def test_no_duplicate_moves_over_full_game():
    """Test that a full sequence of moves never doubles up a square."""
    board = BoardState()
    order = [4, 0, 8, 2, 1, 7, 6, 3, 5]

    for turn, index in enumerate(order):
        mark = H if turn % 2 == 0 else C
        board.place(mark, index)
        occupied = [m.index for m in board.moves if m is not None]
        assert len(occupied) == len(set(occupied)) == turn + 1

    assert board.is_full()


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
def test_each_pattern_wins_for_human(pattern):
    """Test that every one of the 8 lines is a win on its own."""
    board = BoardState()
    for index in pattern:
        board.place(H, index)

    assert board.winner() is H
    assert board.has_won(H)
    assert not board.has_won(C)


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
def test_each_pattern_wins_for_computer(pattern):
    """Test that every line wins for the computer too."""
    board = BoardState()
    for index in pattern:
        board.place(C, index)

    assert board.winner() is C


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
def test_two_of_three_is_not_a_win(pattern):
    """Test that two marks on a line are not enough."""
    board = BoardState()
    for index in pattern[:2]:
        board.place(H, index)

    assert board.winner() is None


def test_win_patterns_are_the_eight_lines():
    """Test the fixed line set and its enumeration order."""
    assert len(WIN_PATTERNS) == 8
    assert WIN_PATTERNS[:3] == ((0, 1, 2), (3, 4, 5), (6, 7, 8))
    assert WIN_PATTERNS[3:6] == ((0, 3, 6), (1, 4, 7), (2, 5, 8))
    assert WIN_PATTERNS[6:] == ((0, 4, 8), (2, 4, 6))


def test_mixed_line_is_not_a_win():
    """Test that a line shared by both marks wins for nobody."""
    board = BoardState.from_marks([H, C, H, None, None, None, None, None, None])

    assert board.winner() is None


def test_winner_on_superset():
    """Test that extra marks beyond a line still count as a win."""
    board = BoardState.from_marks([H, H, H, H, C, C, None, C, None])

    assert board.winner() is H


def test_is_full_only_with_nine_moves():
    """Test that the board is full exactly when all 9 squares are taken."""
    board = BoardState()
    order = [0, 1, 2, 4, 3, 5, 7, 6, 8]

    for turn, index in enumerate(order):
        assert not board.is_full()
        board.place(H if turn % 2 == 0 else C, index)

    assert board.is_full()
    assert board.available_squares() == []


def test_reset_clears_board():
    """Test that reset empties every square."""
    board = BoardState.from_marks([H, C, H, C, H, C, None, None, None])

    board.reset()

    assert np.all(board.state == 0)
    assert board.available_squares() == list(range(9))
    assert board.winner() is None


def test_copy_is_independent():
    """Test that a copy does not share storage with the original."""
    board = BoardState()
    board.place(H, 0)

    clone = board.copy()
    clone.place(C, 1)

    assert not board.is_occupied(1)
    assert clone.is_occupied(0)


def test_from_marks_requires_nine_squares():
    """Test that from_marks checks the square count."""
    with pytest.raises(ValueError):
        BoardState.from_marks([H, C])


def test_render():
    """Test ASCII rendering."""
    board = BoardState.from_marks([H, None, C, None, H, None, None, None, C])

    assert board.render() == "X . O\n. X .\n. . O"


def test_mark_opponent():
    """Test that each mark's opponent is the other one."""
    assert H.opponent() is C
    assert C.opponent() is H
