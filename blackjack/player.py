"""Players, their hands and the score-to-state rule."""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Iterator

from blackjack.cards import Card

# Fixed table thresholds; not configurable.
STAY_SCORE = 17
BLACKJACK_SCORE = 21

DEALER_ID = -1


class PlayerState(Enum):
    """
    Per-player state, derived from the score after every card.

    Flow: CAN_ASK → STAY | BLACKJACK | BUSTED (score never decreases)
    """

    CAN_ASK = auto()
    STAY = auto()
    BLACKJACK = auto()
    BUSTED = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_terminal(self) -> bool:
        """Check if a player in this state no longer draws."""
        return self is not PlayerState.CAN_ASK


def state_for_score(score: int) -> PlayerState:
    """
    Derive a player state from a score.

    Args:
        score: Current hand score

    Returns:
        CAN_ASK below 17, STAY for 17-20, BLACKJACK at 21, BUSTED above 21
    """
    if score > BLACKJACK_SCORE:
        return PlayerState.BUSTED
    if score == BLACKJACK_SCORE:
        return PlayerState.BLACKJACK
    if score >= STAY_SCORE:
        return PlayerState.STAY
    return PlayerState.CAN_ASK


@dataclass
class Player:
    """A seat at the table (or the dealer) with its received cards."""

    id: int
    hand: list[Card] = field(default_factory=list)
    score: int = 0
    state: PlayerState = PlayerState.CAN_ASK

    @classmethod
    def dealer(cls) -> "Player":
        """Create the dealer."""
        return cls(DEALER_ID)

    @property
    def is_dealer(self) -> bool:
        return self.id == DEALER_ID

    def deal_card(self, card: Card) -> None:
        """Receive a card, then update score and state."""
        self.hand.append(card)
        self.score += card.value
        self.state = state_for_score(self.score)

    def __len__(self) -> int:
        return len(self.hand)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.hand)

    def __repr__(self) -> str:
        return f"Player({self.id}, score={self.score}, state={self.state.name})"
