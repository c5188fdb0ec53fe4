import io
import random

import numpy as np
from colorama import Fore, Style

from setsim.console import BLANK_CARD, ColorRenderer, card_glyph, table_lines
from setsim.hmi import CARD_H, CARD_W, MARGIN_X, PygameRenderer, plot_histogram, render_board
from setsim.logic import *
from setsim.renderer import NullRenderer
from setsim.table import Table
from setsim.trials import LeftoverHistogram, run_trials


def test_card_glyph():
    assert card_glyph(Card(Color.RED, Number.ONE, Shape.OVAL, Filling.EMPTY)) == "(○  )"
    assert card_glyph(Card(Color.RED, Number.TWO, Shape.SQUIGGLE, Filling.HALF)) == "(▥▥ )"
    assert card_glyph(Card(Color.RED, Number.THREE, Shape.DIAMOND, Filling.FULL)) == "(▲▲▲)"
    assert card_glyph(BLANK) == BLANK_CARD
    assert len(BLANK_CARD) == 5


def test_table_lines():
    deck = fill_deck()
    rows = table_lines(deck, 6, 9)
    assert rows == [deck[0:3], deck[3:6], deck[6:9]]
    assert table_lines(deck, 6, 9, show_deck=False) == [deck[0:3], deck[3:6]]


def test_color_renderer_table():
    stream = io.StringIO()
    renderer = ColorRenderer(stream)
    deck = fill_deck()
    renderer.draw_table(deck, 3, 4)
    lines = stream.getvalue().splitlines()
    assert lines[0] == "Table:"
    assert lines[1].startswith(Fore.RED + "(○  )" + Style.RESET_ALL)
    assert Fore.GREEN in lines[1] and Fore.MAGENTA in lines[1]
    assert lines[2] == "-------------"
    assert lines[3].startswith("Deck: ")
    assert lines[4] == "============="


def test_color_renderer_hides_deck():
    stream = io.StringIO()
    ColorRenderer(stream).draw_table([BLANK] * 3, 3, 3, show_deck=False)
    assert stream.getvalue() == "Table:\n" + BLANK_CARD * 3 + "\n"


def test_color_renderer_sets_and_histogram():
    stream = io.StringIO()
    renderer = ColorRenderer(stream)
    deck = fill_deck()
    renderer.draw_sets("Found set", deck[:6])
    histogram = LeftoverHistogram()
    histogram.record(3)
    renderer.draw_histogram(histogram)
    out = stream.getvalue()
    assert out.count("Found set: ") == 2
    assert "(3:100.00)" in out


def test_color_renderer_full_trial():
    stream = io.StringIO()
    run_trials(1, seed=6, renderer=ColorRenderer(stream))
    out = stream.getvalue()
    assert "Remaining cards: [" in out
    assert "Retrieving set: " in out
    assert "(0:" in out


def test_null_renderer_context():
    with NullRenderer() as renderer:
        table = Table(renderer=renderer)
        assert table.find_sets(DEAL_SIZE)


def test_render_board_shape():
    deck = fill_deck()
    rgb = render_board(deck, 12, 12, show_deck=False)
    assert rgb.ndim == 3 and rgb.shape[2] == 3
    assert rgb.shape[1] == MARGIN_X * 2 + 3 * CARD_W + 2 * 10
    assert rgb.dtype == np.uint8
    # a card background was painted
    assert (rgb == 245).all(axis=2).any()


def test_render_board_deck_strip_adds_height():
    deck = fill_deck()
    table_only = render_board(deck, 12, 81, show_deck=False)
    with_deck = render_board(deck, 12, 81)
    assert with_deck.shape[0] > table_only.shape[0]
    assert with_deck.shape[1] == table_only.shape[1]


def test_render_board_blank_slots():
    rgb = render_board([BLANK] * 3, 3, 3)
    assert rgb.shape[0] == 20 * 2 + CARD_H
    assert not (rgb == 245).all(axis=2).any()


def test_pygame_renderer_keeps_last_frame(tmp_path):
    path = tmp_path / "leftovers.png"
    renderer = PygameRenderer(plot_path=str(path))
    with renderer:
        run_trials(1, rng=random.Random(3), renderer=renderer)
    assert renderer.frames > 0
    assert renderer.frame is not None
    assert renderer.last_message.startswith("Remaining cards:")
    assert path.exists()


def test_plot_histogram(tmp_path):
    histogram = LeftoverHistogram()
    for leftover in (0, 3, 3, 6):
        histogram.record(leftover)
    path = tmp_path / "plot.png"
    fig = plot_histogram(histogram, path=str(path))
    assert path.exists()
    assert fig.axes[0].get_xlabel() == "Leftover cards"
