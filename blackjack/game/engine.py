"""Table engine: deals, runs draw rounds to termination, declares winners."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Callable

from transitions import Machine

from blackjack.cards import Deck
from blackjack.errors import InconsistentState
from blackjack.game.events import EventEmitter, EventType, GameEvent
from blackjack.game.state import GameState
from blackjack.logging_utils import get_logger
from blackjack.player import Player, PlayerState

log = get_logger(__name__)

OPENING_HAND_SIZE = 2
DEALER_INDEX = 0

# Dealer states that end the game when the dealer's turn comes up
DEALER_FINISHED_STATES = (PlayerState.BLACKJACK, PlayerState.BUSTED)

# Non-dealer states eligible to win
CONTENDING_STATES = (PlayerState.STAY, PlayerState.BLACKJACK)

_STATE_EVENTS = {
    PlayerState.STAY: EventType.PLAYER_STAYS,
    PlayerState.BLACKJACK: EventType.PLAYER_BLACKJACK,
    PlayerState.BUSTED: EventType.PLAYER_BUSTS,
}


class TerminationReason(Enum):
    """Why the round loop stopped."""

    DEALER_FINISHED = auto()
    NO_ACTIVE_PLAYERS = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").lower()


@dataclass(frozen=True)
class GameResult:
    """Outcome of a finished game."""

    dealer: Player
    players: tuple[Player, ...]
    winners: tuple[Player, ...]
    reason: TerminationReason
    rounds: int

    @property
    def dealer_state(self) -> PlayerState:
        return self.dealer.state

    @property
    def winner_ids(self) -> list[int]:
        return [p.id for p in self.winners]


class BlackjackGame:
    """
    Automated table engine using a state machine.

    The dealer sits first, seated players follow in id order. Every
    participant draws while it can ask; the game ends when the dealer is
    found finished at its turn or when a whole round passes without a draw.
    Completely UI-agnostic: communication happens through events and the
    returned GameResult only.
    """

    # State machine states
    STATES = [s.name.lower() for s in GameState]

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "opening_dealt", "source": "dealing", "dest": "playing"},
        {"trigger": "rounds_finished", "source": "playing", "dest": "resolving"},
        {"trigger": "winners_declared", "source": "resolving", "dest": "complete"},
    ]

    def __init__(
        self,
        num_players: int,
        rng: Random | None = None,
        deck: Deck | None = None,
    ) -> None:
        """
        Seat the table.

        Args:
            num_players: Number of seated players besides the dealer; 0 plays
                the dealer alone
            rng: Random number generator for reproducible games
            deck: Pre-built deck to deal from instead of a fresh shuffled one
        """
        if num_players < 0:
            raise ValueError("Number of players cannot be negative")

        self.events = EventEmitter()
        if deck is None:
            deck = Deck(rng=rng)
            self.events.emit_new(EventType.DECK_SHUFFLED, cards=len(deck))
        self.deck = deck

        self.participants: list[Player] = [Player.dealer()]
        self.participants.extend(Player(i) for i in range(num_players))

        self.rounds_played = 0
        self.termination: TerminationReason | None = None
        self.result: GameResult | None = None

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state as enum."""
        return GameState[self._machine_state.upper()]  # type: ignore

    @property
    def dealer(self) -> Player:
        return self.participants[DEALER_INDEX]

    @property
    def players(self) -> tuple[Player, ...]:
        """Seated players, dealer excluded."""
        return tuple(p for p in self.participants if not p.is_dealer)

    @property
    def is_over(self) -> bool:
        """Check if the round loop has terminated."""
        return self.termination is not None

    def status(self) -> tuple[Player, ...]:
        """Return every participant, dealer first, for display."""
        return tuple(self.participants)

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def play(self) -> GameResult:
        """Play the whole game: opening deal, draw rounds, resolution."""
        self.deal_opening_hands()
        while not self.is_over:
            self.play_round()
        return self.resolve_winners()

    def deal_opening_hands(self) -> None:
        """Deal the opening cards to every participant, dealer first."""
        if self.state != GameState.DEALING:
            raise InconsistentState(f"Opening hands already dealt ({self.state})")

        self.events.emit_new(
            EventType.GAME_STARTED,
            players=len(self.participants) - 1,
            cards_remaining=len(self.deck),
        )
        for player in self.participants:
            for _ in range(OPENING_HAND_SIZE):
                self._deal_card_to(player)
        self.opening_dealt()

    def play_round(self) -> bool:
        """
        Give one card to every participant that can still ask.

        Returns:
            True if at least one participant drew a card
        """
        if self.state != GameState.PLAYING:
            raise InconsistentState(f"Cannot play a round while {self.state}")

        self.rounds_played += 1
        self.events.emit_new(EventType.ROUND_STARTED, round=self.rounds_played)

        has_turn = False
        for player in self.participants:
            if player.state == PlayerState.CAN_ASK:
                has_turn = True
                self._deal_card_to(player)
            elif player.is_dealer and player.state in DEALER_FINISHED_STATES:
                self.events.emit_new(
                    EventType.DEALER_FINISHED,
                    state=player.state.name,
                    score=player.score,
                )
                self._terminate(TerminationReason.DEALER_FINISHED)
                break

        # Nobody could ask for a card
        if not has_turn:
            self._terminate(TerminationReason.NO_ACTIVE_PLAYERS)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            round=self.rounds_played,
            had_turn=has_turn,
        )
        return has_turn

    def resolve_winners(self) -> GameResult:
        """
        Compare every contending player against the dealer.

        Returns:
            The game result; winners keep seat order
        """
        if self.state != GameState.RESOLVING or self.termination is None:
            raise InconsistentState(f"Cannot resolve winners while {self.state}")

        dealer = self.dealer
        contenders = [p for p in self.players if p.state in CONTENDING_STATES]

        if dealer.state == PlayerState.BUSTED:
            winners = contenders
        elif dealer.state == PlayerState.BLACKJACK:
            winners = [p for p in contenders if p.state == PlayerState.BLACKJACK]
        elif dealer.state == PlayerState.STAY:
            winners = [p for p in contenders if p.score > dealer.score]
        else:
            raise InconsistentState(
                "Dealer can't be in CAN_ASK after reaching the terminal case"
            )

        for player in winners:
            self.events.emit_new(
                EventType.PLAYER_WINS,
                player=player.id,
                score=player.score,
            )

        self.result = GameResult(
            dealer=dealer,
            players=self.players,
            winners=tuple(winners),
            reason=self.termination,
            rounds=self.rounds_played,
        )
        log.info(
            "Dealer %s with %d; winners: %s",
            dealer.state,
            dealer.score,
            self.result.winner_ids or "none",
        )
        self.winners_declared()
        return self.result

    def _deal_card_to(self, player: Player) -> None:
        """Draw the top card and hand it to a participant."""
        card = self.deck.draw()
        previous = player.state
        player.deal_card(card)

        log.debug("Player %d receives %s (score %d)", player.id, card, player.score)
        self.events.emit_new(
            EventType.CARD_DEALT,
            player=player.id,
            card=str(card),
            score=player.score,
        )

        if player.state != previous and player.state in _STATE_EVENTS:
            self.events.emit_new(
                _STATE_EVENTS[player.state],
                player=player.id,
                dealer=player.is_dealer,
                score=player.score,
            )

    def _terminate(self, reason: TerminationReason) -> None:
        """Stop the round loop; only the first reason counts."""
        if self.termination is not None:
            return

        self.termination = reason
        log.info("Game over after %d round(s): %s", self.rounds_played, reason)
        self.events.emit_new(
            EventType.GAME_ENDED,
            reason=reason.name,
            rounds=self.rounds_played,
        )
        self.rounds_finished()
