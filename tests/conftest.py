import pytest

from gridmatch.game_logic import MatchController, Player


@pytest.fixture()
def players():
    return (Player("Ann", 'X'), Player("Bob", 'O'))


@pytest.fixture()
def controller(players):
    return MatchController(players)


@pytest.fixture()
def play(controller):
    """play a list of (column, row) moves, returning the outcomes"""
    def _play(moves):
        return [controller.play_turn(c, r) for c, r in moves]
    return _play
