from typing import List, Sequence
from .logic import Slot

##################################
# Renderer Classes
##################################

# --- Table Renderer ------------------------------------------------

class TableRenderer:
    """
    Display collaborator of the simulation.

    The table manager and the trial runner report every event through
    these hooks; subclasses decide how (and whether) to show them.
    Every hook is a no-op here.
    """

    def open(self):
        pass

    def close(self):
        pass

    def draw_table(self, cards: Sequence[Slot], cards_out: int, cards_left: int, show_deck: bool = True):
        pass

    def draw_sets(self, label: str, cards: List[Slot]):
        pass

    def message(self, text: str):
        pass

    def draw_histogram(self, histogram):
        pass

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False

# --- Null Renderer ------------------------------------------------

class NullRenderer(TableRenderer):
    """Silent renderer, used for batch runs and tests."""
