import curses
import sys
from typing import List, Sequence
from colorama import init, deinit, Fore, Style
from .logic import *
from .renderer import TableRenderer

##################################
# Constants
##################################

# --- Glyphs -------------------------------------------------

GLYPHS = {
    Shape.OVAL: {Filling.EMPTY: "○", Filling.HALF: "◍", Filling.FULL: "●"},
    Shape.SQUIGGLE: {Filling.EMPTY: "▢", Filling.HALF: "▥", Filling.FULL: "▩"},
    Shape.DIAMOND: {Filling.EMPTY: "△", Filling.HALF: "◬", Filling.FULL: "▲"},
}

BLANK_CARD = "     "
ROW_SIZE = 3
TABLE_RULE = "-------------"
DECK_RULE = "============="

# --- Colors -------------------------------------------------

ANSI_COLORS = {
    Color.RED: Fore.RED,
    Color.GREEN: Fore.GREEN,
    Color.PURPLE: Fore.MAGENTA,
}

CURSES_COLORS = {
    Color.RED: curses.COLOR_RED,
    Color.GREEN: curses.COLOR_GREEN,
    Color.PURPLE: curses.COLOR_MAGENTA,
}

##################################
# Stringify
##################################

def card_glyph(card: Slot) -> str:
    """Card as `(xyz)`, one glyph per symbol, padded to five columns."""
    if card is None:
        return BLANK_CARD
    glyph = GLYPHS[card.shape][card.filling]
    count = card.number.count
    return "(" + "".join(glyph if n < count else " " for n in range(3)) + ")"

def table_lines(cards: Sequence[Slot], cards_out: int, cards_left: int, show_deck: bool = True) -> List[List[Slot]]:
    """Group the table in rows of three, followed by the deck strip if asked."""
    rows = [list(cards[i:i + ROW_SIZE]) for i in range(0, cards_out - cards_out % ROW_SIZE, ROW_SIZE)]
    if show_deck:
        rows.append(list(cards[cards_out:cards_left]))
    return rows

##################################
# Renderers
##################################

# --- Colored terminal ------------------------------------------------

class ColorRenderer(TableRenderer):
    """Prints the simulation with ANSI colored glyphs."""

    def __init__(self, stream=None):
        self.stream = stream

    def open(self):
        init()

    def close(self):
        deinit()

    def _write(self, text: str = ""):
        print(text, file=self.stream or sys.stdout)

    def _colored(self, card: Slot) -> str:
        if card is None:
            return BLANK_CARD
        return ANSI_COLORS[card.color] + card_glyph(card) + Style.RESET_ALL

    def draw_table(self, cards, cards_out, cards_left, show_deck=True):
        rows = table_lines(cards, cards_out, cards_left, show_deck)
        self._write("Table:")
        for row in rows[:cards_out // ROW_SIZE]:
            self._write("".join(self._colored(c) for c in row))
        if not show_deck:
            return
        self._write(TABLE_RULE)
        self._write("Deck: " + "".join(self._colored(c) for c in rows[-1]))
        self._write(DECK_RULE)

    def draw_sets(self, label, cards):
        for i in range(0, len(cards), SET_SIZE):
            self._write(f"{label}: " + "".join(self._colored(c) for c in cards[i:i + SET_SIZE]))

    def message(self, text):
        self._write(text)

    def draw_histogram(self, histogram):
        self._write("\n")
        self._write(histogram.format())
        self._write("\n")

# --- Text mode (curses) ------------------------------------------------

class CursesRenderer(TableRenderer):
    """Draws the simulation on a scrolling curses screen."""

    def __init__(self):
        self.stdscr = None

    def open(self):
        self.stdscr = curses.initscr()
        self.stdscr.scrollok(True)
        curses.start_color()
        for color, fg in CURSES_COLORS.items():
            curses.init_pair(int(color), fg, curses.COLOR_WHITE)

    def close(self):
        if self.stdscr is None:
            return
        self.stdscr.refresh()
        self.stdscr.getch()
        curses.endwin()
        self.stdscr = None

    def _addstr(self, text: str, attr: int = 0):
        try:
            self.stdscr.addstr(text, attr)
        except curses.error:
            pass

    def _card(self, card: Slot):
        if card is None:
            self._addstr(BLANK_CARD)
            return
        self._addstr(card_glyph(card), curses.color_pair(int(card.color)))

    def draw_table(self, cards, cards_out, cards_left, show_deck=True):
        rows = table_lines(cards, cards_out, cards_left, show_deck)
        self._addstr("Table:\n")
        for row in rows[:cards_out // ROW_SIZE]:
            for card in row:
                self._card(card)
            self._addstr("\n")
        if not show_deck:
            return
        self._addstr(TABLE_RULE + "\n")
        self._addstr("Deck: ")
        for card in rows[-1]:
            self._card(card)
        self._addstr("\n" + DECK_RULE + "\n")
        self.stdscr.refresh()

    def draw_sets(self, label, cards):
        for i in range(0, len(cards), SET_SIZE):
            self._addstr(f"{label}: ")
            for card in cards[i:i + SET_SIZE]:
                self._card(card)
            self._addstr("\n")

    def message(self, text):
        self._addstr(text + "\n")

    def draw_histogram(self, histogram):
        self._addstr("\n\n" + histogram.format() + "\n\n")
        self.stdscr.refresh()
