import random
import numpy as np
from typing import Iterator, List, Optional, Tuple
from tqdm import tqdm
from .logic import *
from .renderer import NullRenderer, TableRenderer
from .table import Table

##################################
# Histogram
##################################

# leftovers are multiples of 3 in [0, 81]
N_BUCKETS = DECK_SIZE // SET_SIZE + 1
# buckets always shown, up to 18 leftover cards
MIN_REPORTED_BUCKETS = 7


class LeftoverHistogram:
    """Occurrences of each leftover-card count, bucketed by cards_left // 3."""

    def __init__(self):
        self.counts = np.zeros(N_BUCKETS, dtype=np.int64)

    @property
    def total(self) -> int:
        return int(self.counts.sum())

    def record(self, cards_left: int):
        if not 0 <= cards_left <= DECK_SIZE or cards_left % SET_SIZE:
            raise ValueError(
                f"Invalid leftover count {cards_left}. "
                f"Expected a multiple of {SET_SIZE} between 0 and {DECK_SIZE}"
            )
        self.counts[cards_left // SET_SIZE] += 1

    def percentages(self) -> np.ndarray:
        if self.total == 0:
            return np.zeros(N_BUCKETS, dtype=np.float64)
        return self.counts / self.total * 100

    def mean(self) -> float:
        if self.total == 0:
            return 0.0
        leftovers = np.arange(N_BUCKETS) * SET_SIZE
        return float((leftovers * self.counts).sum() / self.total)

    def rows(self) -> Iterator[Tuple[int, float]]:
        """(leftover_cards, percent) up to the highest observed bucket."""
        observed = np.nonzero(self.counts)[0]
        last = max(MIN_REPORTED_BUCKETS, int(observed[-1]) + 1 if observed.size else 0)
        percents = self.percentages()
        for bucket in range(last):
            yield bucket * SET_SIZE, float(percents[bucket])

    def format(self) -> str:
        return '\n'.join(f"({leftover}:{percent:2.2f})" for leftover, percent in self.rows())

##################################
# Trials
##################################

def run_trial(deck: Optional[List[Slot]] = None, rng: Optional[random.Random] = None, renderer: Optional[TableRenderer] = None) -> int:
    """
    Play one deck until no set can be found.

    Returns the number of cards left over.
    """
    renderer = renderer or NullRenderer()
    deck = fill_deck(deck)
    shuffle_deck(deck, rng)
    if verify_deck(deck):
        renderer.message("Deck has dupes!")

    table = Table(renderer=renderer)
    table.deal(deck)
    while table.find_sets(min(table.cards_left, DEAL_SIZE)):
        pass

    renderer.message(f"Remaining cards: [{table.cards_left}]")
    return table.cards_left


def run_trials(iterations: int, seed: Optional[int] = None, rng: Optional[random.Random] = None, renderer: Optional[TableRenderer] = None, verbose_level: int = 0) -> LeftoverHistogram:
    """
    Run `iterations` independent trials and histogram the leftovers.

    Args:
        iterations: number of decks to play, must be positive
        seed: seed for a fresh random stream (ignored when `rng` is given)
        rng: random stream shared by all trials
        renderer: display collaborator, silent by default
        verbose_level: 0 = silent, 1 = progress and summary, 2 = every trial
    """
    if not isinstance(iterations, int) or iterations <= 0:
        raise ValueError(f"Invalid iterations {iterations!r}. Expected a positive integer")

    if rng is None:
        rng = random.Random(seed)
    renderer = renderer or NullRenderer()

    histogram = LeftoverHistogram()
    deck: List[Slot] = [BLANK] * DECK_SIZE

    for i in tqdm(range(iterations), disable=verbose_level < 1):
        cards_left = run_trial(deck, rng=rng, renderer=renderer)
        histogram.record(cards_left)
        if verbose_level > 1:
            print(f"Trial {i}, Remaining cards: {cards_left} {board_state(deck[:cards_left])}")

    renderer.draw_histogram(histogram)
    if verbose_level > 0:
        print(f"Trials: {histogram.total}, Mean leftover: {histogram.mean():.2f}")
    return histogram
