"""Pytest fixtures for table simulator tests."""

import pytest
from random import Random

from blackjack.cards import Card, Deck
from blackjack.game import BlackjackGame
from blackjack.player import Player


def _cards(*tokens: str) -> list[Card]:
    return [Card.from_string(t) for t in tokens]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    return Deck(rng=rng)


@pytest.fixture
def player():
    """A seated player with an empty hand."""
    return Player(0)


@pytest.fixture
def dealer():
    """The dealer with an empty hand."""
    return Player.dealer()


@pytest.fixture
def cards():
    """Factory: cards("10S", "KH") -> [Card, Card]."""
    return _cards


@pytest.fixture
def stacked_deck():
    """Factory for a deck that deals the given cards in the given order."""

    def make(*tokens: str) -> Deck:
        return Deck.from_cards(reversed(_cards(*tokens)))

    return make


@pytest.fixture
def stacked_game(stacked_deck):
    """Factory for a game whose deck deals the given cards in order, dealer first."""

    def make(num_players: int, *tokens: str) -> BlackjackGame:
        return BlackjackGame(num_players, deck=stacked_deck(*tokens))

    return make


@pytest.fixture
def game(rng):
    """A new three-player game."""
    return BlackjackGame(3, rng=rng)
