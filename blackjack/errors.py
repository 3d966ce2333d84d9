"""Error taxonomy for the table simulator."""


class BlackjackError(Exception):
    """Base class for every error raised by the simulator."""


class EmptyDeck(BlackjackError, IndexError):
    """Raised when a card is requested from a deck with no cards left.

    Fatal for a game: it means too many participants share one 52-card deck.
    """


class InvalidInput(BlackjackError, ValueError):
    """Raised when the player count text is not a non-negative integer."""


class InconsistentState(BlackjackError, RuntimeError):
    """Raised when the engine reaches a state its own rules should prevent."""
