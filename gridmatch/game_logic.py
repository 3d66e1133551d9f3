import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import BOARD_SIZE, DEFAULT_PLAYERS, EMPTY
from .errors import InvalidCoordinateError
from .grid import Grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Player:
    """one side of the match"""
    name: str
    mark: str


class MatchStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAW = "draw"


@dataclass(frozen=True)
class MatchState:
    """
    snapshot of whose turn it is and how the match stands
    """
    active_player_index: int
    status: MatchStatus = MatchStatus.IN_PROGRESS
    winner_index: Optional[int] = None    # set only when status is WON

    @property
    def is_over(self):
        return self.status is not MatchStatus.IN_PROGRESS


class OutcomeKind(Enum):
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    NO_OP = "no_op"                        # cell already taken
    INVALID_COORDINATE = "invalid_coordinate"
    ALREADY_CONCLUDED = "already_concluded"


@dataclass(frozen=True)
class TurnOutcome:
    """
    result of one play_turn call
    player: next to move for CONTINUE, winner for WIN, else None
    """
    kind: OutcomeKind
    player: Optional[Player] = None

    @property
    def placed(self):
        # true if the turn put a mark on the board
        return self.kind in (OutcomeKind.CONTINUE, OutcomeKind.WIN, OutcomeKind.DRAW)


class MatchController:
    """
    tic-tac-toe rules and turn order for one match
    """
    def __init__(self, players=None, size=BOARD_SIZE):
        """
        init board, players and state
        players: two Player, defaults to DEFAULT_PLAYERS
        """
        if players is None:
            players = [Player(name, mark) for name, mark in DEFAULT_PLAYERS]
        players = tuple(players)
        if len(players) != 2:
            raise ValueError(f"a match needs exactly two players, got {len(players)}")
        if players[0].mark == players[1].mark:
            raise ValueError(f"players need distinct marks, both use {players[0].mark!r}")
        if EMPTY in (players[0].mark, players[1].mark):
            raise ValueError("a player mark cannot be empty")
        self._players = players
        self._grid = Grid(size, size)
        self._state = MatchState(active_player_index=0)
        logger.debug("new match %s vs %s on %dx%d",
                     players[0].name, players[1].name, size, size)

    @property
    def players(self):
        return self._players

    @property
    def board_size(self):
        return self._grid.rows

    def play_turn(self, column, row):
        """
        place the active player's mark, then check result
        returns: TurnOutcome, never raises for bad coords
        """
        if self._state.is_over:
            logger.debug("move (%s, %s) ignored, match already over", column, row)
            return TurnOutcome(OutcomeKind.ALREADY_CONCLUDED)

        player = self.get_active_player()
        logger.debug("dropping %s's %s at column %s, row %s",
                     player.name, player.mark, column, row)
        try:
            placed = self._grid.place(column, row, player.mark)
        except InvalidCoordinateError as e:
            logger.debug("rejected move: %s", e)
            return TurnOutcome(OutcomeKind.INVALID_COORDINATE)
        if not placed:
            logger.debug("rejected move: cell (%s, %s) taken", column, row)
            return TurnOutcome(OutcomeKind.NO_OP)

        # win is judged for the mark just placed, before the turn passes
        active = self._state.active_player_index
        if self.check_win(player.mark):
            self._state = MatchState(active, MatchStatus.WON, winner_index=active)
            logger.info("%s has won the game", player.name)
            return TurnOutcome(OutcomeKind.WIN, player)
        if self._grid.is_full():
            self._state = MatchState(active, MatchStatus.DRAW)
            logger.info("match drawn")
            return TurnOutcome(OutcomeKind.DRAW)

        self._state = MatchState(1 - active)
        nxt = self.get_active_player()
        logger.debug("%s's turn", nxt.name)
        return TurnOutcome(OutcomeKind.CONTINUE, nxt)

    def check_win(self, mark=None):
        """
        scan rows, cols, diags for a full line
        mark: only count lines of this mark, any mark if None
        """
        return self.winning_line(mark) is not None

    def winning_line(self, mark=None):
        """
        first complete line as (column, row) tuples, or None
        """
        board = self._grid.snapshot()
        for line in self._grid.lines():
            values = {board[r][c] for c, r in line}
            if len(values) != 1:
                continue
            value = values.pop()
            if value != EMPTY and (mark is None or value == mark):
                return line
        return None

    def get_active_player(self):
        return self._players[self._state.active_player_index]

    def get_winner(self):
        """
        winning Player or None
        """
        if self._state.winner_index is None:
            return None
        return self._players[self._state.winner_index]

    def get_board_snapshot(self):
        return self._grid.snapshot()

    def get_status(self):
        return self._state

    def empty_cells(self):
        # open (column, row) cells, empty once the match is over
        if self._state.is_over:
            return []
        return self._grid.empty_cells()
