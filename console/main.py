"""Console entry point for the table simulator."""

import sys
from random import Random

from blackjack.errors import BlackjackError, InvalidInput
from blackjack.game import BlackjackGame, GameResult
from blackjack.logging_utils import get_logger, setup_logging
from config import AppConfig, config
from console.formatting import format_result
from console.schemas import GameResultView

log = get_logger("console.main")


def parse_player_count(text: str) -> int:
    """
    Parse the number of seated players from a line of text.

    Raises:
        InvalidInput: if the text is not a non-negative integer
    """
    raw = text.strip()
    try:
        count = int(raw, 10)
    except ValueError as exc:
        raise InvalidInput(f"Not a number of players: {raw!r}") from exc
    if count < 0:
        raise InvalidInput(f"Number of players cannot be negative: {count}")
    return count


def read_player_count() -> int:
    print("Enter the no. of players in the game")
    return parse_player_count(input())


def run(num_players: int, app_config: AppConfig = config) -> GameResult:
    """Play one game with the configured seed."""
    rng = Random(app_config.simulation.seed)
    game = BlackjackGame(num_players, rng=rng)
    return game.play()


def report(result: GameResult, app_config: AppConfig = config) -> str:
    if app_config.simulation.output == "json":
        return GameResultView.from_result(result).model_dump_json(indent=2)
    return format_result(result)


def main(app_config: AppConfig = config) -> int:
    """Entry point. Returns the process exit status."""
    setup_logging(app_config.logging.level)
    print("Welcome to BlackJack")

    try:
        num_players = read_player_count()
        result = run(num_players, app_config)
    except EOFError:
        log.error("No player count given")
        return 1
    except BlackjackError as e:
        log.error("%s: %s", type(e).__name__, e)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report(result, app_config))
    return 0


if __name__ == "__main__":
    sys.exit(main())
