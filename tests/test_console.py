import pytest

from gridmatch.console import describe_outcome, parse_move, play_console, render_board
from gridmatch.game_logic import MatchStatus, OutcomeKind, TurnOutcome


def feed(lines):
    """fake input() returning lines then EOF"""
    it = iter(lines)

    def _read(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError
    return _read


def test_render_empty_board(controller):
    text = render_board(controller.get_board_snapshot())
    assert text.splitlines() == [
        "-------------",
        "0  0 | 1 | 2",
        "  -----------",
        "1  0 | 1 | 2",
        "  -----------",
        "2  0 | 1 | 2",
        "   0   1   2",
        "-------------",
    ]


def test_render_shows_marks(controller):
    controller.play_turn(2, 1)
    assert "1  0 | 1 | X" in render_board(controller.get_board_snapshot())


@pytest.mark.parametrize("text,expected", [("0,2", (0, 2)), (" 1 , 1 ", (1, 1))])
def test_parse_move(text, expected):
    assert parse_move(text) == expected


@pytest.mark.parametrize("text", ["", "1", "1,2,3", "a,b"])
def test_parse_move_rejects(text):
    with pytest.raises(ValueError):
        parse_move(text)


def test_describe_outcome(controller, players):
    assert describe_outcome(TurnOutcome(OutcomeKind.WIN, players[0]), controller) == "Ann has won!!"
    assert describe_outcome(TurnOutcome(OutcomeKind.CONTINUE, players[1]), controller) == "Bob's turn..."
    assert "between 0 and 2" in describe_outcome(TurnOutcome(OutcomeKind.INVALID_COORDINATE), controller)


def test_console_game_to_win(controller):
    out = []
    moves = ["0,0", "0,0", "oops", "5,5", "1,0", "0,1", "1,1", "0,2"]
    status = play_console(controller, read=feed(moves), write=out.append)
    assert status.status is MatchStatus.WON
    assert out[-1] == "Ann has won!!"
    assert "!! Cell already taken. Try again." in out
    assert any(line.startswith("!! Invalid input") for line in out)
    assert any(line.startswith("!! Invalid column/row") for line in out)


def test_console_stops_on_eof(controller):
    out = []
    status = play_console(controller, read=feed(["1,1"]), write=out.append)
    assert not status.is_over
    assert out[-1].strip() == "Game ended."


def test_console_quit(controller):
    out = []
    play_console(controller, read=feed(["q"]), write=out.append)
    assert out[-1] == "Game ended."
