"""Table simulator engine - 100% UI-agnostic."""

from blackjack.cards import Card, Deck, Face, Suit, shuffle_in_place
from blackjack.errors import BlackjackError, EmptyDeck, InconsistentState, InvalidInput
from blackjack.player import Player, PlayerState, state_for_score

__all__ = [
    "Card",
    "Deck",
    "Face",
    "Suit",
    "shuffle_in_place",
    "BlackjackError",
    "EmptyDeck",
    "InconsistentState",
    "InvalidInput",
    "Player",
    "PlayerState",
    "state_for_score",
]
