# blackjack/cli/main.py

import sys

from blackjack.common.cards import DeckEmptyError
from blackjack.common.logging_utils import setup_logging, get_logger
from blackjack.game.session import GameConfig, SessionContext, run_session
from blackjack.cli.ui import Console


log = get_logger("cli.main")


def main() -> int:
    setup_logging()

    config = GameConfig(color=sys.stdout.isatty())
    ctx = SessionContext(console=Console(color=config.color), config=config)

    try:
        run_session(ctx)
    except (KeyboardInterrupt, EOFError):
        # stdin closed or Ctrl+C: the balance was saved after the last round
        log.info("Input closed, shutting down...")
        print("\nGoodbye!")
    except DeckEmptyError as e:
        log.error(f"Invariant violated: {e}")
        print(f"Fatal error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
