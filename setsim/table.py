from typing import List, Optional, Sequence
from .logic import *
from .renderer import NullRenderer, TableRenderer


class Table:
    """
    Face-up cards plus the undealt deck, held in a single buffer.

    cards[:cards_out] is the table, cards[cards_out:cards_left] the deck,
    anything from cards_left on is out of play (BLANK).
    """

    def __init__(self, cards: Optional[List[Slot]] = None, renderer: Optional[TableRenderer] = None):
        self.cards: List[Slot] = cards if cards is not None else fill_deck()
        self.cards_left = len(self.cards)
        self.renderer = renderer or NullRenderer()

    def deal(self, deck: List[Slot]):
        self.cards = deck
        self.cards_left = len(deck)

    def table_cards(self, cards_out: int) -> List[Slot]:
        return self.cards[:cards_out]

    def deck_cards(self, cards_out: int) -> List[Slot]:
        return self.cards[cards_out:self.cards_left]

    # -------------------------------------------------
    # Removal
    # -------------------------------------------------

    def refill(self, indices: Sequence[int]):
        """Move the last cards of the active range into the given slots."""
        for offset, idx in enumerate(indices, start=1):
            src = self.cards_left - offset
            self.cards[idx], self.cards[src] = self.cards[src], BLANK

    def compact(self):
        """Slide live cards to the front of the active range, keeping their order."""
        for x in range(self.cards_left):
            if self.cards[x] is not BLANK:
                continue
            # next live card to the right
            for y in range(x, self.cards_left):
                if self.cards[y] is not BLANK:
                    self.cards[x], self.cards[y] = self.cards[y], BLANK
                    break

    # -------------------------------------------------
    # Find and remove
    # -------------------------------------------------

    def find_sets(self, cards_out: int) -> bool:
        """
        Remove the first set on the table and replace its cards.

        The window grows by three cards while no set shows and
        undealt cards remain. Returns False once every card is
        face-up and no set is left.
        """
        while True:
            if cards_out > MAX_TABLE:
                self.renderer.message("Lots of cards out.")
            self.renderer.draw_table(self.cards, cards_out, self.cards_left)

            found = list(iter_sets(self.cards, cards_out))
            triple = first_set(self.cards, cards_out)
            self.renderer.draw_sets("Found set", [self.cards[idx] for t in found for idx in t])
            self.renderer.message(f"Found {len(found)} sets")

            if triple is not None:
                self.renderer.draw_sets("Retrieving set", [self.cards[idx] for idx in triple])
                for idx in triple:
                    self.cards[idx] = BLANK
                self.renderer.draw_table(self.cards, cards_out, self.cards_left, show_deck=False)

                if self.cards_left - cards_out >= SET_SIZE and cards_out < MAX_TABLE:
                    self.refill(triple)
                else:
                    self.compact()

                self.cards_left -= SET_SIZE
                return True

            if cards_out >= self.cards_left:
                return False

            self.renderer.message("No set.")
            cards_out = min(cards_out + SET_SIZE, self.cards_left)
