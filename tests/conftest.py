import os

import pytest

# headless pygame and matplotlib
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("MPLBACKEND", "Agg")

from setsim.logic import fill_deck, is_set
from setsim.renderer import TableRenderer


class RecordingRenderer(TableRenderer):
    """Keeps every event it is handed."""

    def __init__(self):
        self.tables = []
        self.sets = []
        self.messages = []
        self.histograms = []

    def draw_table(self, cards, cards_out, cards_left, show_deck=True):
        self.tables.append((list(cards[:cards_out]), cards_out, cards_left, show_deck))

    def draw_sets(self, label, cards):
        self.sets.append((label, list(cards)))

    def message(self, text):
        self.messages.append(text)

    def draw_histogram(self, histogram):
        self.histograms.append(histogram)


@pytest.fixture
def recorder():
    return RecordingRenderer()


@pytest.fixture
def cap():
    """Greedy set-free selection from the ordered deck (16 cards)."""
    chosen = []
    for card in fill_deck():
        if not any(is_set(a, b, card) for i, a in enumerate(chosen) for b in chosen[i + 1:]):
            chosen.append(card)
    return chosen
