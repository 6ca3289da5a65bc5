import io
import sys

import pytest

from progbasics.tictactoe import (
    BOARD_DIMENSION,
    Board,
    CellValue,
    Position,
    main,
    parse_coordinate,
    play,
)


def test_symbols():
    assert CellValue.EMPTY.symbol() == "_"
    assert CellValue.X.symbol() == "X"
    assert CellValue.O.symbol() == "O"


def test_new_board_is_empty():
    board = Board()
    assert board.first_empty() == Position(0, 0)
    assert not board.is_full()
    assert all(
        board[Position(x, y)] is CellValue.EMPTY
        for x in range(BOARD_DIMENSION)
        for y in range(BOARD_DIMENSION)
    )


def test_set_and_get_round_trip():
    board = Board()
    board[Position(2, 1)] = CellValue.O
    assert board[Position(2, 1)] is CellValue.O
    assert board[Position(1, 2)] is CellValue.EMPTY


def test_out_of_range_position_raises():
    board = Board()
    with pytest.raises(IndexError):
        board[Position(-1, -1)]
    with pytest.raises(IndexError):
        board[Position(BOARD_DIMENSION, 0)] = CellValue.X


def test_first_empty_scans_rows_first():
    board = Board()
    board[Position(0, 0)] = CellValue.X
    board[Position(1, 0)] = CellValue.O
    assert board.first_empty() == Position(2, 0)
    board[Position(2, 0)] = CellValue.X
    assert board.first_empty() == Position(0, 1)


def test_full_board():
    board = Board()
    for y in range(BOARD_DIMENSION):
        for x in range(BOARD_DIMENSION):
            board[Position(x, y)] = CellValue.X if (x + y) % 2 else CellValue.O
    assert board.is_full()
    assert board.first_empty() is None


@pytest.mark.parametrize(
    "cells, move",
    [
        ([(0, 1), (1, 1), (2, 1)], (1, 1)),
        ([(2, 0), (2, 1), (2, 2)], (2, 0)),
        ([(0, 0), (1, 1), (2, 2)], (2, 2)),
        ([(2, 0), (1, 1), (0, 2)], (0, 2)),
    ],
)
def test_winning_lines(cells, move):
    board = Board()
    for x, y in cells:
        board[Position(x, y)] = CellValue.X
    assert board.has_winning_line(Position(*move))


def test_no_winning_line():
    board = Board()
    board[Position(0, 0)] = CellValue.X
    board[Position(1, 1)] = CellValue.X
    board[Position(2, 2)] = CellValue.O
    assert not board.has_winning_line(Position(1, 1))
    assert not board.has_winning_line(Position(2, 2))


def test_off_diagonal_move_ignores_diagonal():
    board = Board()
    board[Position(0, 0)] = CellValue.X
    board[Position(1, 1)] = CellValue.X
    board[Position(2, 2)] = CellValue.X
    board[Position(1, 0)] = CellValue.O
    assert not board.has_winning_line(Position(1, 0))


def test_render_shape():
    board = Board()
    board[Position(1, 0)] = CellValue.X
    lines = board.render().splitlines()
    assert len(lines) == BOARD_DIMENSION
    assert lines[0].split() == ["_", "X", "_"]
    assert all(line.endswith(" ") for line in lines)


def test_parse_coordinate_valid():
    assert [parse_coordinate(str(i)) for i in range(BOARD_DIMENSION)] == list(
        range(BOARD_DIMENSION)
    )


@pytest.mark.parametrize(
    "text, message",
    [
        ("abc", "Invalid input."),
        ("-1", "Position must be positive."),
        ("3", "Position must be less than 3."),
    ],
)
def test_parse_coordinate_errors(text, message):
    with pytest.raises(ValueError, match=message):
        parse_coordinate(text)


def test_human_wins_column():
    output = io.StringIO()
    winner = play(["0 0\n", "0 1\n", "0 2\n"], output)
    assert winner is CellValue.X
    assert output.getvalue().endswith("Player 0 won.\n")


def test_computer_wins_row():
    output = io.StringIO()
    winner = play(["2 2\n", "2 1\n", "0 2\n"], output)
    assert winner is CellValue.O
    assert "Player 1 won." in output.getvalue()


def test_bad_inputs_are_reported_and_retried():
    output = io.StringIO()
    winner = play(["abc -1 5 0 0\n", "0 1 0 2\n"], output)
    text = output.getvalue()
    assert winner is CellValue.X
    assert "Invalid input." in text
    assert "Position must be positive." in text
    assert "Position must be less than 3." in text


def test_occupied_cell_is_rejected():
    output = io.StringIO()
    winner = play(["0 0\n", "0 0\n", "0 1\n", "0 2\n"], output)
    assert winner is CellValue.X
    assert "Input position not empty!" in output.getvalue()


def test_input_running_out_raises():
    with pytest.raises(EOFError):
        play(["0 0\n"], io.StringIO())


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0 0\n0 1\n0 2\n"))
    assert main([]) == 0
    assert "Player 0 won." in capsys.readouterr().out


def test_main_reports_early_end(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n"))
    assert main([]) == 1