import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterator, List, Optional, Sequence, Tuple
from itertools import combinations

##################################
# Constants
##################################

DECK_SIZE = 81
SET_SIZE = 3
DEAL_SIZE = 12
MAX_TABLE = 15
# OR of the three one-hot values: all three distinct
ALL_VALUES = 0b111

# Every attribute value is one-hot: 1, 2 or 4

class Color(IntEnum):
    RED = 1
    GREEN = 2
    PURPLE = 4

class Number(IntEnum):
    ONE = 1
    TWO = 2
    THREE = 4

    @property
    def count(self) -> int:
        return self.bit_length()

class Shape(IntEnum):
    OVAL = 1
    SQUIGGLE = 2
    DIAMOND = 4

class Filling(IntEnum):
    EMPTY = 1
    HALF = 2
    FULL = 4

ATTRIBUTES = ('color', 'number', 'shape', 'filling')

# Empty table slot
BLANK = None

##################################
# Card
##################################

@dataclass(frozen=True)
class Card:
    color: Color
    number: Number
    shape: Shape
    filling: Filling

    def __post_init__(self):
        # coerce raw ints, raises ValueError on anything but 1, 2, 4
        object.__setattr__(self, 'color', Color(self.color))
        object.__setattr__(self, 'number', Number(self.number))
        object.__setattr__(self, 'shape', Shape(self.shape))
        object.__setattr__(self, 'filling', Filling(self.filling))

    def code(self) -> str:
        return f"{self.number.count}{self.shape.name[0]}{self.color.name[0]}{self.filling.name[0]}"

Slot = Optional[Card]

##################################
# Deck
##################################

def fill_deck(deck: Optional[List[Slot]] = None) -> List[Slot]:
    """
    Enumerate the 81 attribute combinations, color varying fastest.
    Refills `deck` in place when a buffer is given.
    """
    cards = [
        Card(color, number, shape, filling)
        for filling in Filling
        for shape in Shape
        for number in Number
        for color in Color
    ]
    if deck is None:
        return cards
    deck[:] = cards
    return deck

def shuffle_deck(deck: List[Slot], rng: Optional[random.Random] = None):
    (rng or random).shuffle(deck)

def verify_deck(deck: Sequence[Slot]) -> List[Tuple[int, int]]:
    """Return index pairs holding the same card."""
    dupes = []
    for i, j in combinations(range(len(deck)), 2):
        if deck[i] is not None and deck[i] == deck[j]:
            dupes.append((i, j))
    return dupes

##################################
# Sets
##################################

def is_set(a: Slot, b: Slot, c: Slot) -> bool:
    if a is None or b is None or c is None:
        return False

    for attr in ATTRIBUTES:
        x, y, z = getattr(a, attr), getattr(b, attr), getattr(c, attr)
        if (x & y & z) == 0 and (x | y | z) != ALL_VALUES:
            return False

    return True

def iter_sets(cards: Sequence[Slot], cards_out: int) -> Iterator[Tuple[int, int, int]]:
    """Yield index triples i < j < k < cards_out forming a set, lexicographically."""
    for i, j, k in combinations(range(cards_out), SET_SIZE):
        if is_set(cards[i], cards[j], cards[k]):
            yield i, j, k

def first_set(cards: Sequence[Slot], cards_out: int) -> Optional[Tuple[int, int, int]]:
    return next(iter_sets(cards, cards_out), None)

def count_sets(cards: Sequence[Slot], cards_out: int) -> int:
    return sum(1 for _ in iter_sets(cards, cards_out))

def board_state(cards: Sequence[Slot]) -> str:
    return '[' + ','.join(c.code() if c is not None else '----' for c in cards) + ']'
