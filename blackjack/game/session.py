# blackjack/game/session.py

import random
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Optional

from blackjack.common.cards import Deck
from blackjack.common.constants import (
    RECORD_DIR, HISTORY_FILE, STARTING_BALANCE, MAX_LOGIN_ATTEMPTS,
    RESULT_WIN, RESULT_LOSS, RESULT_TIE,
)
from blackjack.common.logging_utils import get_logger
from blackjack.common.records import (
    HistoryLog, PinMismatchError, Player, PlayerStore, RecordError, is_valid_name,
)
from blackjack.cli.ui import Console, ask_text, ask_yes_no, welcome_script
from .round import RoundResult, play_one_round

log = get_logger("game.session")

NAME_RULES = "Names may only use letters, digits, spaces, '_' and '-'."


@dataclass
class GameConfig:
    record_dir: str = RECORD_DIR
    history_path: str = HISTORY_FILE
    starting_balance: int = STARTING_BALANCE
    top_up_amount: int = STARTING_BALANCE
    max_login_attempts: int = MAX_LOGIN_ATTEMPTS
    keep_history: bool = True
    color: bool = False


@dataclass
class SessionContext:
    """Everything one game session needs, passed explicitly instead of globals."""

    console: Console
    config: GameConfig = field(default_factory=GameConfig)
    store: Optional[PlayerStore] = None
    history: Optional[HistoryLog] = None
    rng: random.Random = field(default_factory=random.Random)
    deck_factory: Optional[Callable[[], Deck]] = None
    player: Optional[Player] = None
    results: Counter = field(default_factory=Counter)

    def __post_init__(self) -> None:
        if self.store is None:
            self.store = PlayerStore(self.config.record_dir)
        if self.history is None and self.config.keep_history:
            self.history = HistoryLog(self.config.history_path)

    def new_deck(self) -> Deck:
        # fresh 52 cards every round
        if self.deck_factory is not None:
            return self.deck_factory()
        return Deck.shuffled(self.rng)


# -------------------------
# Login
# -------------------------
def _ask_name(console: Console) -> str:
    return ask_text(console, "Enter your name: ", is_valid_name, error=NAME_RULES)


def save_player(ctx: SessionContext) -> bool:
    """Persist the current player. Failures are reported, never fatal."""
    try:
        ctx.store.save(ctx.player)
    except RecordError as e:
        ctx.console.say(f"Failed to save player data: {e}")
        return False
    return True


def create_player(ctx: SessionContext) -> Player:
    console = ctx.console
    while True:
        name = _ask_name(console)
        if not ctx.store.exists(name):
            break
        console.say(f"A player named {name} already exists. Please choose another name.")
    pin = ask_text(console, "Create a new pin: ", error="The pin cannot be empty.")

    ctx.player = Player(name=name, pin=pin, balance=ctx.config.starting_balance)
    log.info(f"Created player {name!r} balance={ctx.player.balance}")
    save_player(ctx)
    console.say(f"\n--- Welcome, {name}! ---")
    return ctx.player


def load_player(ctx: SessionContext) -> Optional[Player]:
    """
    Returning-player flow. On a PIN mismatch the player may re-enter the
    name, up to config.max_login_attempts tries in total.
    """
    console = ctx.console
    name = _ask_name(console)
    pin = ask_text(console, "Enter your pin code: ", error="The pin cannot be empty.")

    for attempt in range(1, ctx.config.max_login_attempts + 1):
        try:
            player = ctx.store.load(name, pin)
        except PinMismatchError:
            console.say("Player name and pin code do not match.")
            log.info(f"Login attempt {attempt}/{ctx.config.max_login_attempts} failed for {name!r}")
            if attempt == ctx.config.max_login_attempts:
                console.say("Too many failed attempts.")
                return None
            if not ask_yes_no(console, "Would you like to re-enter your name?"):
                return None
            name = _ask_name(console)
            continue
        except RecordError as e:
            console.say(f"Could not read player record: {e}")
            return None

        if player is None:
            console.say("Player not found.")
        return player
    return None


def login(ctx: SessionContext) -> Player:
    console = ctx.console
    console.say(welcome_script())
    player = None
    if ask_yes_no(console, "Are you a returning player?"):
        player = load_player(ctx)
        if player is not None:
            ctx.player = player
            console.say(f"\n--- Welcome back, {player.name}! ---")
        else:
            console.say("Starting as a new player.")
    if player is None:
        player = create_player(ctx)
    console.say(f"Your current balance: ${player.balance}")
    return player


# -------------------------
# Between rounds
# -------------------------
def finish_round(ctx: SessionContext, result: RoundResult) -> None:
    """Persist the balance and append the round to the history file."""
    ctx.results[result.outcome.label] += 1
    save_player(ctx)
    if ctx.history is None:
        return
    try:
        ctx.history.append(ctx.player.name, result.outcome.label)
    except RecordError as e:
        ctx.console.say(f"Failed to save game record: {e}")


def ensure_funds(ctx: SessionContext) -> bool:
    """
    True if the player can bet. At a zero balance offers a top-up;
    declining ends the session.
    """
    player = ctx.player
    if player.balance > 0:
        return True
    ctx.console.say(f"Your balance is ${player.balance}.")
    if not ask_yes_no(ctx.console, "Would you like to add money?"):
        return False
    player.credit(ctx.config.top_up_amount)
    log.info(f"Top-up {ctx.config.top_up_amount} for {player.name!r}")
    ctx.console.say(f"Added ${ctx.config.top_up_amount}. Your current balance: ${player.balance}")
    save_player(ctx)
    return True


def summary(ctx: SessionContext) -> str:
    r = ctx.results
    return (
        f"Rounds: {sum(r.values())}  "
        f"W={r[RESULT_WIN]} L={r[RESULT_LOSS]} T={r[RESULT_TIE]}  "
        f"Balance: ${ctx.player.balance}"
    )


def lifetime_record(ctx: SessionContext) -> Optional[str]:
    """Tally of every round this player has in the history file."""
    if ctx.history is None:
        return None
    try:
        entries = ctx.history.read()
    except RecordError as e:
        ctx.console.say(f"Could not read game record: {e}")
        return None
    r = Counter(e.result for e in entries if e.player == ctx.player.name)
    return f"All time: W={r[RESULT_WIN]} L={r[RESULT_LOSS]} T={r[RESULT_TIE]}"


def run_session(ctx: SessionContext) -> Player:
    """
    Login (if needed), then bet -> round -> persist until the player stops
    or runs out of money and declines a top-up.
    """
    if ctx.player is None:
        login(ctx)

    while ensure_funds(ctx):
        ctx.console.say("\n--- New Round ---")
        result = play_one_round(ctx, ctx.new_deck())
        finish_round(ctx, result)
        ctx.console.say(f"Your current balance: ${ctx.player.balance}")

        ctx.console.say("\n--- Play Again ---")
        if ctx.player.balance > 0 and not ask_yes_no(ctx.console, "Do you want to play again?"):
            break

    log.info(f"===== SESSION OVER ===== {summary(ctx)}")
    ctx.console.say(f"\n{summary(ctx)}")
    record = lifetime_record(ctx)
    if record:
        ctx.console.say(record)
    ctx.console.say("Goodbye!")
    return ctx.player
