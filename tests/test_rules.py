import pytest

from gridttt.core import BoardInvariantError, BoardState, MatchResult, has_line_of, outcome, winner

PIECES = ("X", "O", "~", "!")


def board_from_rows(rows):
    """Build a board from strings, '.' marks an empty cell."""
    board = BoardState(len(rows), PIECES)
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell != ".":
                board.place(board.to_1d(r, c), cell)
    return board


def test_empty_board_continues() -> None:
    board = BoardState(3, PIECES)
    assert winner(board) is None
    assert outcome(board, "X") == MatchResult.CONTINUE


def test_completing_a_row_wins() -> None:
    board = board_from_rows(["XX.", "OO.", "..."])
    assert outcome(board, "O") == MatchResult.CONTINUE
    board.place(2, "X")
    assert winner(board) == "X"
    assert outcome(board, "X") == MatchResult.WIN


def test_column_win() -> None:
    board = board_from_rows(["O.X", "O.X", "O.."])
    assert winner(board) == "O"
    assert outcome(board, "O") == MatchResult.WIN


def test_diagonal_wins() -> None:
    assert winner(board_from_rows(["X.O", ".XO", "..X"])) == "X"
    assert winner(board_from_rows(["X.O", ".OX", "O.."])) == "O"


def test_four_by_four_row_needs_four() -> None:
    board = board_from_rows(["~~~.", "....", "....", "...."])
    assert winner(board) is None
    assert has_line_of(board, "~", 3)
    board.place(3, "~")
    assert winner(board) == "~"


def test_full_board_without_line_is_tie() -> None:
    board = board_from_rows(["XOX", "XOO", "OXX"])
    assert board.is_full()
    assert winner(board) is None
    assert outcome(board, "X") == MatchResult.TIE


def test_win_on_last_cell_beats_tie() -> None:
    board = board_from_rows(["XOX", "OXO", "OX."])
    board.place(8, "X")
    assert board.is_full()
    assert outcome(board, "X") == MatchResult.WIN


def test_outcome_only_reports_the_movers_win() -> None:
    board = board_from_rows(["XXX", "OO.", "..."])
    assert outcome(board, "O") == MatchResult.CONTINUE


def test_has_line_of_counts_exactly() -> None:
    board = board_from_rows(["X..", ".X.", "..."])
    assert has_line_of(board, "X", 2)
    assert has_line_of(board, "X", 1)
    assert not has_line_of(board, "X", 3)
    assert not has_line_of(board, "O", 1)


def test_two_winners_is_a_defect() -> None:
    board = board_from_rows(["XX", "OO"])
    with pytest.raises(BoardInvariantError):
        winner(board)
