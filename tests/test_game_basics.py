import pytest

from tictactoe.game_basics import (
    WIN_PATTERNS,
    Mark,
    board_to_string,
    current_player,
    deserialize_board,
    empty_cells,
    get_winner,
    is_draw,
    is_valid_state,
    is_win,
    new_board,
    serialize_board,
)

X, O = Mark.CROSS, Mark.CIRCLE


@pytest.mark.parametrize("pattern", WIN_PATTERNS)
@pytest.mark.parametrize("mark", [X, O])
def test_each_line_is_detected(pattern, mark):
    b = new_board()
    for i in pattern:
        b[i] = mark
    assert is_win(b, mark) is True
    assert is_win(b, mark.opponent()) is False


def test_eight_distinct_lines():
    assert len(set(WIN_PATTERNS)) == 8
    assert all(len(p) == 3 for p in WIN_PATTERNS)


@pytest.mark.parametrize("mark", [X, O])
def test_empty_board_has_no_win(mark):
    assert is_win(new_board(), mark) is False


def test_no_false_positive_on_mixed_line():
    b = deserialize_board("121000000")
    assert not is_win(b, X)
    assert not is_win(b, O)
    # full draw board has no line for either mark
    draw = deserialize_board("112221121")
    assert not is_win(draw, X)
    assert not is_win(draw, O)
    assert is_draw(draw)


def test_two_in_a_row_is_not_a_win():
    b = deserialize_board("110220000")
    assert not is_win(b, X)
    assert not is_win(b, O)


def test_opponent_involution():
    for m in Mark:
        assert m.opponent().opponent() is m
        assert m.opponent() is not m


def test_serialize_roundtrip_and_symbols():
    raw = "102010200"
    b = deserialize_board(raw)
    assert b[0] is X and b[2] is O and b[1] is None
    assert serialize_board(b) == raw
    assert str(X) == "X" and str(O) == "O"


@pytest.mark.parametrize("bad", ["abc", "012345678", "0123456789", "12345678x", ""])
def test_deserialize_rejects_malformed(bad):
    with pytest.raises(ValueError):
        deserialize_board(bad)


def test_validity_and_side_to_move():
    assert is_valid_state(new_board())
    assert current_player(new_board()) is X
    assert current_player(deserialize_board("100000000")) is O
    # O has two more than X
    assert not is_valid_state(deserialize_board("220000000"))
    # both marks win
    assert not is_valid_state(deserialize_board("111222000"))
    # X won but O moved afterwards
    assert not is_valid_state(deserialize_board("111220200"))
    assert get_winner(deserialize_board("111220000")) is X


def test_empty_cells_ascending():
    b = deserialize_board("120000021")
    assert empty_cells(b) == [2, 3, 4, 5, 6]


def test_board_to_string_hints_indices():
    b = deserialize_board("100020000")
    plain = board_to_string(b, color=False)
    assert plain.splitlines() == ["X  1  2", "3  O  5", "6  7  8"]
    styled = board_to_string(b, color=True)
    assert "\033[1mX\033[0m" in styled
    assert "\033[37m8\033[0m" in styled
