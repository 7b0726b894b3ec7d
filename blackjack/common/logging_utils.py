# blackjack/common/logging_utils.py

import logging
import os
from typing import Iterable, Optional

# Environment switches:
#   LOG_LEVEL=DEBUG / INFO / WARNING / ERROR
#   LOG_FILE=path to write logs there instead of stderr
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
LOG_FILE = os.getenv("LOG_FILE") or None


def setup_logging(level: str = LOG_LEVEL, filename: Optional[str] = LOG_FILE) -> None:
    """Call once at program start (cli/main.py)."""
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        filename=filename,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def format_cards(cards: Iterable[object], max_cards: int = 12) -> str:
    """Short card list: 'A♠ 10♥ ...' limited to max_cards."""
    shown = list(cards)
    text = " ".join(str(c) for c in shown[:max_cards])
    if len(shown) > max_cards:
        text += f" ... (+{len(shown) - max_cards} cards)"
    return text or "-"


def log_hand(
    logger: logging.Logger,
    who: str,                     # "player" / "house"
    cards: Iterable[object],
    score: Optional[int] = None,
    note: str = "",
    level: int = logging.DEBUG,
) -> None:
    """
    Unified hand log.
    score: hand value if it should be shown (None while the hole card is hidden).
    """
    base = f"[{who}] {format_cards(cards)}"
    if score is not None:
        base += f" = {score}"
    if note:
        base += f" | {note}"

    logger.log(level, base)
