"""
text front-end: plays a match from stdin/stdout
"""

from .config import EMPTY
from .game_logic import OutcomeKind

QUIT_WORDS = ("q", "quit", "exit")


def render_board(snapshot):
    """
    board as text, empty cells show their column number
    """
    size = len(snapshot[0]) if snapshot else 0
    lines = ["-" * (4 * size + 1)]
    for r, row in enumerate(snapshot):
        lines.append(f"{r}  " + " | ".join(cell if cell != EMPTY else str(c)
                                           for c, cell in enumerate(row)))
        if r < len(snapshot) - 1:
            lines.append("  " + "-" * (4 * size - 1))
    lines.append("   " + "   ".join(str(c) for c in range(size)))  # column indices
    lines.append("-" * (4 * size + 1))
    return "\n".join(lines)


def parse_move(text):
    """
    'column,row' -> (column, row)
    raises ValueError on anything else
    """
    parts = text.split(',')
    if len(parts) != 2:
        raise ValueError(f"expected column,row but got {text!r}")
    return int(parts[0]), int(parts[1])


def describe_outcome(outcome, controller):
    """
    one line for the player after a turn
    """
    kind = outcome.kind
    if kind is OutcomeKind.WIN:
        return f"{outcome.player.name} has won!!"
    if kind is OutcomeKind.DRAW:
        return "It's a draw!"
    if kind is OutcomeKind.CONTINUE:
        return f"{outcome.player.name}'s turn..."
    if kind is OutcomeKind.NO_OP:
        return "!! Cell already taken. Try again."
    if kind is OutcomeKind.INVALID_COORDINATE:
        top = controller.board_size - 1
        return f"!! Invalid column/row number. Must be between 0 and {top}."
    return "Game is already over."


def play_console(controller, read=None, write=None):
    """
    read moves until the match ends or input runs out
    read/write default to input/print
    returns: final MatchState
    """
    read = read or input; write = write or print
    write(render_board(controller.get_board_snapshot()))
    write(f"{controller.get_active_player().name}'s turn...")
    while not controller.get_status().is_over:
        player = controller.get_active_player()
        try:
            text = read(f"{player.name} ({player.mark}), enter move (column,row): ").strip()
        except EOFError:
            write("\nGame ended.")
            break
        if text.lower() in QUIT_WORDS:
            write("Game ended.")
            break
        try:
            column, row = parse_move(text)
        except ValueError:
            write("!! Invalid input. Please enter numbers for column and row (e.g., 1,1).")
            continue
        outcome = controller.play_turn(column, row)
        if outcome.placed:
            write(render_board(controller.get_board_snapshot()))
        write(describe_outcome(outcome, controller))
    return controller.get_status()
