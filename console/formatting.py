"""Plain-text rendering of cards, players and game results."""

from typing import Iterable

from blackjack.cards import Card, Deck
from blackjack.game import GameResult
from blackjack.player import Player


def format_card(card: Card) -> str:
    return f"C: {card}"


def format_player(player: Player) -> str:
    """Render a participant header followed by one line per card."""
    label = "Dealer" if player.is_dealer else "Player"
    hand = "".join(f"\n\t-> {format_card(c)}" for c in player.hand)
    return f"{label}: {player.id} score: {player.score} ({player.state}){hand}"


def format_status(players: Iterable[Player]) -> str:
    """Render a status view, e.g. BlackjackGame.status()."""
    return "\n\n".join(format_player(p) for p in players)


def format_deck(deck: Deck) -> str:
    """List the undealt cards, bottom of the deck first."""
    lines = ["Deck ->"]
    lines.extend(f"\t{card}" for card in deck)
    return "\n".join(lines)


def format_result(result: GameResult) -> str:
    """Render the final report: dealer, winners, closing line."""
    lines = [format_player(result.dealer), "", "Winners:"]
    if result.winners:
        lines.extend(format_player(p) for p in result.winners)
    else:
        lines.append("\t(none)")
    lines.extend(["", "The End"])
    return "\n".join(lines)
