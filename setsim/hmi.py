# hmi.py

import pygame
import numpy as np
import matplotlib.pyplot as plt
from typing import Optional, Sequence
from .logic import *
from .renderer import TableRenderer

pygame.init()

##################################
# CONFIG (dynamic layout)
##################################

CARD_W = 100
CARD_H = 140
MARGIN_X = 20
MARGIN_Y = 20
GAP = 10
COLS = 3
DECK_CARD_SCALE = 0.5
BACKGROUND = (0, 0, 0)
CARD_BG = (245, 245, 245)
CARD_BORDER = (200, 200, 200)
BLANK_BG = (40, 40, 40)
COLORS = {
    Color.RED: (220, 40, 40),
    Color.GREEN: (40, 160, 70),
    Color.PURPLE: (120, 60, 170),
}

##################################
# SHAPES
##################################

def draw_diamond(surface, rect, color, width=0):
    cx, cy = rect.center
    w, h = rect.width // 2, rect.height // 2
    pts = [(cx, cy-h), (cx+w, cy), (cx, cy+h), (cx-w, cy)]
    pygame.draw.polygon(surface, color, pts, width)

def draw_oval(surface, rect, color, width=0):
    pygame.draw.ellipse(surface, color, rect, width)

def draw_squiggle(surface, rect, color, width=0):
    x, y, w, h = rect
    pts = [
        (x, y+h*0.4),
        (x+w*0.25, y),
        (x+w*0.75, y+h*0.2),
        (x+w, y+h*0.6),
        (x+w*0.75, y+h),
        (x+w*0.25, y+h*0.8),
    ]
    pygame.draw.polygon(surface, color, pts, width)

SHAPE_DRAWERS = {
    Shape.OVAL: draw_oval,
    Shape.SQUIGGLE: draw_squiggle,
    Shape.DIAMOND: draw_diamond,
}

##################################
# CARD RENDER
##################################

def draw_card(surface, card: Slot, x, y, card_w=CARD_W, card_h=CARD_H):

    if card is None:
        pygame.draw.rect(surface, BLANK_BG, (x, y, card_w, card_h), 1, border_radius=8)
        return

    pygame.draw.rect(surface, CARD_BG, (x, y, card_w, card_h), border_radius=8)
    pygame.draw.rect(surface, CARD_BORDER, (x, y, card_w, card_h), 1, border_radius=8)

    color = COLORS[card.color]
    draw_shape = SHAPE_DRAWERS[card.shape]
    count = card.number.count
    spacing = card_h // 3
    center_y = y + card_h // 2
    start_y = center_y - (count-1)*spacing//2
    symbol_h = max(card_h // 6, 4)

    for i in range(count):
        rect = pygame.Rect(
            int(x + card_w * 0.2),
            start_y + i*spacing - symbol_h // 2,
            int(card_w * 0.6),
            symbol_h
        )

        if card.filling == Filling.EMPTY:
            draw_shape(surface, rect, color, 2)
        elif card.filling == Filling.FULL:
            draw_shape(surface, rect, color)
        else:
            # outline plus vertical stripes clipped to the shape
            draw_shape(surface, rect, color, 2)
            stripe = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
            stripe.fill((0,0,0,0))
            draw_shape(stripe, pygame.Rect(0,0,rect.width,rect.height), color)
            mask = pygame.Surface((rect.width, rect.height), pygame.SRCALPHA)
            for sx in range(0, rect.width, 5):
                pygame.draw.line(mask, (255,255,255,255), (sx,0), (sx,rect.height), 1)
            stripe.blit(mask, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
            surface.blit(stripe, rect.topleft)

##################################
# BOARD RENDER
##################################

def render_board(cards: Sequence[Slot], cards_out: int, cards_left: int, show_deck: bool = True) -> np.ndarray:
    """
    Table in rows of three, with the undealt deck in a strip of
    half-size cards underneath. Returns an (H, W, 3) RGB array.
    """
    rows = max(1, -(-cards_out // COLS))
    deck = list(cards[cards_out:cards_left]) if show_deck else []

    deck_w = int(CARD_W * DECK_CARD_SCALE)
    deck_h = int(CARD_H * DECK_CARD_SCALE)
    deck_cols = max(1, (COLS * (CARD_W + GAP)) // (deck_w + GAP // 2))
    deck_rows = -(-len(deck) // deck_cols)

    width = MARGIN_X*2 + COLS*CARD_W + (COLS-1)*GAP
    height = MARGIN_Y*2 + rows*CARD_H + (rows-1)*GAP
    if deck_rows:
        height += MARGIN_Y + deck_rows*deck_h + (deck_rows-1)*(GAP // 2)

    surface = pygame.Surface((width, height))
    surface.fill(BACKGROUND)

    for idx, card in enumerate(cards[:cards_out]):
        col = idx % COLS
        row = idx // COLS
        x = MARGIN_X + col * (CARD_W + GAP)
        y = MARGIN_Y + row * (CARD_H + GAP)
        draw_card(surface, card, x, y, CARD_W, CARD_H)

    deck_top = MARGIN_Y*2 + rows*CARD_H + (rows-1)*GAP
    for idx, card in enumerate(deck):
        col = idx % deck_cols
        row = idx // deck_cols
        x = MARGIN_X + col * (deck_w + GAP // 2)
        y = deck_top + row * (deck_h + GAP // 2)
        draw_card(surface, card, x, y, deck_w, deck_h)

    rgb = pygame.surfarray.array3d(surface)
    return np.transpose(rgb, (1, 0, 2))

##################################
# HISTOGRAM
##################################

def plot_histogram(histogram, path: Optional[str] = None, show: bool = False):
    """Bar chart of leftover-card percentages."""
    leftovers, percents = zip(*histogram.rows())

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.bar(leftovers, percents, width=2.4)
    ax.set_xticks(leftovers)
    ax.set_title(f"Leftover cards over {histogram.total} games")
    ax.set_xlabel("Leftover cards")
    ax.set_ylabel("Games (%)")
    ax.grid(axis="y")
    fig.tight_layout()

    if path is not None:
        fig.savefig(path)
    if show:
        plt.show()
    plt.close(fig)
    return fig

##################################
# RENDERER
##################################

class PygameRenderer(TableRenderer):
    """
    Keeps the latest board image as a numpy array and, with `show`,
    displays it in a window. The histogram is plotted only with `plot`
    or `plot_path`.
    """

    def __init__(self, show: bool = False, delay_ms: int = 0, plot: bool = False, plot_path: Optional[str] = None):
        self.show = show
        self.plot = plot
        self.delay_ms = delay_ms
        self.plot_path = plot_path
        self.frame: Optional[np.ndarray] = None
        self.frames = 0
        self.last_message: Optional[str] = None
        self.screen = None

    def close(self):
        if self.screen is not None:
            pygame.display.quit()
            self.screen = None

    def draw_table(self, cards, cards_out, cards_left, show_deck=True):
        self.frame = render_board(cards, cards_out, cards_left, show_deck)
        self.frames += 1
        if not self.show:
            return

        height, width, _ = self.frame.shape
        if self.screen is None or self.screen.get_size() != (width, height):
            self.screen = pygame.display.set_mode((width, height))
        pygame.surfarray.blit_array(self.screen, np.transpose(self.frame, (1, 0, 2)))
        pygame.display.flip()
        pygame.event.pump()
        if self.delay_ms:
            pygame.time.wait(self.delay_ms)

    def message(self, text):
        self.last_message = text
        if self.screen is not None:
            pygame.display.set_caption(text)

    def draw_histogram(self, histogram):
        if self.plot_path is None and not self.plot:
            return
        plot_histogram(histogram, path=self.plot_path, show=self.plot)
