import pytest

pytest.importorskip("PySide6.QtWidgets")

import main
from gridmatch.game_logic import MatchController


def test_default_args():
    args = main.parse_args([])
    assert (args.player_one, args.player_two) == ("Player One", "Player Two")
    assert not args.console and not args.verbose


def test_match_factory_builds_fresh_matches():
    new_match = main.match_factory(main.parse_args(["--player-one", "Ann", "--player-two", "Bob"]))
    first, second = new_match(), new_match()
    assert isinstance(first, MatchController)
    assert first is not second
    assert [(p.name, p.mark) for p in first.players] == [("Ann", 'X'), ("Bob", 'O')]
    first.play_turn(0, 0)
    assert second.get_board_snapshot()[0][0] == ''


def test_console_mode(monkeypatch, capsys):
    moves = iter(["0,0", "1,0", "0,1", "1,1", "0,2"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(moves))
    assert main.main(["--console"]) == 0
    assert "Player One has won!!" in capsys.readouterr().out
