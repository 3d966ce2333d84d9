"""Card and Deck classes - immutable card representations and the shuffler."""

from dataclasses import dataclass
from enum import Enum
from random import Random
from types import MappingProxyType
from typing import Iterable, Iterator, Mapping, MutableSequence, TypeVar

from blackjack.errors import EmptyDeck

T = TypeVar("T")


class Suit(Enum):
    """Card suits, in canonical deck order."""

    CLUB = 0
    DIAMOND = 1
    HEART = 2
    SPADE = 3

    def __str__(self) -> str:
        return SUIT_NAMES[self]


class Face(Enum):
    """Card faces, in canonical deck order.

    The value is the position in the deck order, not the score. King, Queen
    and Jack sit at 10, 11 and 12 yet all score 10; see ``FACE_SCORES``.
    """

    ACE = 0
    TWO = 1
    THREE = 2
    FOUR = 3
    FIVE = 4
    SIX = 5
    SEVEN = 6
    EIGHT = 7
    NINE = 8
    TEN = 9
    KING = 10
    QUEEN = 11
    JACK = 12

    def __str__(self) -> str:
        return FACE_NAMES[self]


SUIT_NAMES: Mapping[Suit, str] = MappingProxyType({
    Suit.CLUB: "Club",
    Suit.DIAMOND: "Diamond",
    Suit.HEART: "Heart",
    Suit.SPADE: "Spade",
})

FACE_NAMES: Mapping[Face, str] = MappingProxyType({
    Face.ACE: "Ace",
    Face.TWO: "2",
    Face.THREE: "3",
    Face.FOUR: "4",
    Face.FIVE: "5",
    Face.SIX: "6",
    Face.SEVEN: "7",
    Face.EIGHT: "8",
    Face.NINE: "9",
    Face.TEN: "10",
    Face.KING: "King",
    Face.QUEEN: "Queen",
    Face.JACK: "Jack",
})

# Ace always counts 1 at this table.
FACE_SCORES: Mapping[Face, int] = MappingProxyType({
    Face.ACE: 1,
    Face.TWO: 2,
    Face.THREE: 3,
    Face.FOUR: 4,
    Face.FIVE: 5,
    Face.SIX: 6,
    Face.SEVEN: 7,
    Face.EIGHT: 8,
    Face.NINE: 9,
    Face.TEN: 10,
    Face.KING: 10,
    Face.QUEEN: 10,
    Face.JACK: 10,
})

DECK_SIZE = len(Suit) * len(Face)


@dataclass(frozen=True, slots=True)
class Card:
    """Immutable playing card."""

    suit: Suit
    face: Face

    def __str__(self) -> str:
        return f"{self.suit} {self.face}"

    def __repr__(self) -> str:
        return f"Card({self.suit.name}, {self.face.name})"

    @property
    def value(self) -> int:
        """Return the score this card adds to a hand."""
        return FACE_SCORES[self.face]

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.face is Face.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this card scores 10."""
        return self.value == 10

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """Create a card from a string like 'AS', '10h', 'K♥'."""
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s}")

        face_str = s[:-1]
        suit_str = s[-1]

        face_map = {
            "A": Face.ACE,
            "2": Face.TWO,
            "3": Face.THREE,
            "4": Face.FOUR,
            "5": Face.FIVE,
            "6": Face.SIX,
            "7": Face.SEVEN,
            "8": Face.EIGHT,
            "9": Face.NINE,
            "10": Face.TEN,
            "T": Face.TEN,
            "K": Face.KING,
            "Q": Face.QUEEN,
            "J": Face.JACK,
        }

        suit_map = {
            "C": Suit.CLUB,
            "♣": Suit.CLUB,
            "D": Suit.DIAMOND,
            "♦": Suit.DIAMOND,
            "H": Suit.HEART,
            "♥": Suit.HEART,
            "S": Suit.SPADE,
            "♠": Suit.SPADE,
        }

        if face_str not in face_map:
            raise ValueError(f"Invalid face: {face_str}")
        if suit_str not in suit_map:
            raise ValueError(f"Invalid suit: {suit_str}")

        return cls(suit_map[suit_str], face_map[face_str])


def shuffle_in_place(items: MutableSequence[T], rng: Random) -> None:
    """
    Shuffle a sequence in place with a swap-based Fisher-Yates pass.

    Args:
        items: Sequence to permute
        rng: Random source; seed it for reproducible orders
    """
    length = len(items)
    for i in range(length - 1):
        j = rng.randrange(i, length)
        items[i], items[j] = items[j], items[i]


class Deck:
    """A standard 52-card deck. The top of the deck is the last card."""

    def __init__(self, rng: Random | None = None) -> None:
        """Build a full deck and shuffle it."""
        self._rng = rng or Random()
        self._cards: list[Card] = []
        self.reset()
        self.shuffle()

    @classmethod
    def from_cards(cls, cards: Iterable[Card], rng: Random | None = None) -> "Deck":
        """
        Build a deck holding exactly the given cards, unshuffled.

        Args:
            cards: Cards in deck order; the last one is drawn first
            rng: Random source used by later calls to shuffle()
        """
        deck = cls.__new__(cls)
        deck._rng = rng or Random()
        deck._cards = list(cards)
        return deck

    def reset(self) -> None:
        """Reset deck to all 52 cards in canonical order."""
        self._cards = [Card(suit, face) for suit in Suit for face in Face]

    def shuffle(self) -> None:
        """Shuffle the cards currently in the deck."""
        shuffle_in_place(self._cards, self._rng)

    def draw(self) -> Card:
        """Draw a card from the top of the deck."""
        if not self._cards:
            raise EmptyDeck("No card left in deck")
        return self._cards.pop()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    @property
    def cards_remaining(self) -> int:
        """Return the number of cards remaining."""
        return len(self._cards)
