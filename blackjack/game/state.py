"""Game state enumeration."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: DEALING → PLAYING → RESOLVING → COMPLETE
    """

    # Opening hands being dealt
    DEALING = auto()

    # Rounds of draws for every participant that can still ask
    PLAYING = auto()

    # Termination fired; determining winners
    RESOLVING = auto()

    # Winners declared, game is finished and not reused
    COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.DEALING: [GameState.PLAYING],
    GameState.PLAYING: [GameState.PLAYING, GameState.RESOLVING],
    GameState.RESOLVING: [GameState.COMPLETE],
    GameState.COMPLETE: [],  # Terminal state
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
