import sys
import argparse
import logging
from functools import partial

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor
from gridmatch.config import DEFAULT_PLAYERS
from gridmatch.console import play_console
from gridmatch.game_logic import MatchController, Player
from gridmatch.ui.main_window import MatchWindow

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

WINDOW_COLOR = QColor(53, 53, 53)
WINDOW_TEXT_COLOR = Qt.white
BASE_COLOR = QColor(35, 35, 35)
ALT_BASE_COLOR = QColor(53, 53, 53)
TEXT_COLOR = Qt.white
BUTTON_COLOR = QColor(66, 66, 66)
BUTTON_TEXT_COLOR = Qt.white
HIGHLIGHT_COLOR = QColor(42, 130, 218)
HIGHLIGHTED_TEXT_COLOR = Qt.white

DISABLED_TEXT_COLOR = QColor(127, 127, 127)

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def apply_default_palette(app: QApplication):
    """
    Apply the dark theme palette using the constants above.
    """
    palette = QPalette()
    palette.setColor(QPalette.Window, WINDOW_COLOR)
    palette.setColor(QPalette.WindowText, WINDOW_TEXT_COLOR)
    palette.setColor(QPalette.Base, BASE_COLOR)
    palette.setColor(QPalette.AlternateBase, ALT_BASE_COLOR)
    palette.setColor(QPalette.Text, TEXT_COLOR)
    palette.setColor(QPalette.Button, BUTTON_COLOR)
    palette.setColor(QPalette.ButtonText, BUTTON_TEXT_COLOR)
    palette.setColor(QPalette.Highlight, HIGHLIGHT_COLOR)
    palette.setColor(QPalette.HighlightedText, HIGHLIGHTED_TEXT_COLOR)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_TEXT_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_TEXT_COLOR)
    app.setPalette(palette)

# -----------------------------------------------------------------------------
# ARGUMENTS
# -----------------------------------------------------------------------------

def parse_args(argv=None):
    (one_name, one_mark), (two_name, two_mark) = DEFAULT_PLAYERS
    parser = argparse.ArgumentParser(description="Two-player tic-tac-toe")
    parser.add_argument("--player-one", default=one_name,
                        help=f"name of the player using '{one_mark}' (moves first)")
    parser.add_argument("--player-two", default=two_name,
                        help=f"name of the player using '{two_mark}'")
    parser.add_argument("--console", action="store_true",
                        help="play in the terminal instead of a window")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="log every move")
    return parser.parse_args(argv)


def match_factory(args):
    """
    callable building a fresh MatchController from the CLI names
    """
    (_, one_mark), (_, two_mark) = DEFAULT_PLAYERS
    players = (Player(args.player_one, one_mark), Player(args.player_two, two_mark))
    return partial(MatchController, players)

# -----------------------------------------------------------------------------
# ENTRY POINT
# -----------------------------------------------------------------------------

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    new_match = match_factory(args)

    if args.console:
        play_console(new_match())
        return 0

    app = QApplication(sys.argv[:1])
    app.setStyle('Fusion')
    apply_default_palette(app)

    window = MatchWindow(new_match)
    window.show()
    return app.exec()


if __name__ == '__main__':
    sys.exit(main())
