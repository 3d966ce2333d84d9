"""Pydantic views of a finished game for JSON output."""

from pydantic import BaseModel

from blackjack.cards import Card
from blackjack.game import GameResult
from blackjack.player import Player


class CardView(BaseModel):
    """Card representation."""

    suit: str
    face: str
    value: int

    @classmethod
    def from_card(cls, card: Card) -> "CardView":
        return cls(suit=str(card.suit), face=str(card.face), value=card.value)


class PlayerView(BaseModel):
    """Participant representation."""

    id: int
    is_dealer: bool
    score: int
    state: str
    hand: list[CardView]

    @classmethod
    def from_player(cls, player: Player) -> "PlayerView":
        return cls(
            id=player.id,
            is_dealer=player.is_dealer,
            score=player.score,
            state=player.state.name,
            hand=[CardView.from_card(c) for c in player.hand],
        )


class GameResultView(BaseModel):
    """Final game report."""

    dealer: PlayerView
    dealer_state: str
    players: list[PlayerView]
    winners: list[int]
    reason: str
    rounds: int

    @classmethod
    def from_result(cls, result: GameResult) -> "GameResultView":
        return cls(
            dealer=PlayerView.from_player(result.dealer),
            dealer_state=result.dealer_state.name,
            players=[PlayerView.from_player(p) for p in result.players],
            winners=result.winner_ids,
            reason=result.reason.name,
            rounds=result.rounds,
        )
