# blackjack/common/records.py

import os
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from .constants import RECORD_DIR, RECORD_SUFFIX, HISTORY_FILE, TIMESTAMP_FORMAT, VALID_RESULTS
from .logging_utils import get_logger

_log = get_logger("records")

_NAME_RE = re.compile(r"^[A-Za-z0-9 _-]+$")


# -------------------------
# Errors
# -------------------------
class RecordError(OSError):
    """Raised when a player record or the history file cannot be read or written."""
    pass


class PinMismatchError(ValueError):
    """Raised when a stored record exists but the PIN does not match."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Player name and pin code do not match for {name!r}")
        self.name = name


def is_valid_name(name: str) -> bool:
    # names double as file names
    name = name.strip()
    return bool(name) and bool(_NAME_RE.match(name)) and name not in (".", "..")


# -------------------------
# Player
# -------------------------
@dataclass
class Player:
    name: str
    pin: str
    balance: int

    def debit(self, amount: int) -> None:
        if amount < 0 or amount > self.balance:
            raise ValueError(f"Cannot debit {amount} from balance {self.balance}")
        self.balance -= amount

    def credit(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"Cannot credit a negative amount: {amount}")
        self.balance += amount


# -------------------------
# Player record: name, pin, balance (one per line)
# -------------------------
class PlayerStore:
    def __init__(self, directory: str = RECORD_DIR) -> None:
        self.directory = directory

    def path_for(self, name: str) -> str:
        return os.path.join(self.directory, name + RECORD_SUFFIX)

    def exists(self, name: str) -> bool:
        return os.path.isfile(self.path_for(name))

    def load(self, name: str, pin: str) -> Optional[Player]:
        """
        Returns the stored player, or None if there is no record.
        Raises PinMismatchError if the record exists but the PIN differs.
        """
        path = self.path_for(name)
        try:
            with open(path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            _log.info(f"No record for {name!r} at {path}")
            return None
        except OSError as e:
            raise RecordError(f"Could not read {path}: {e}") from e

        if len(lines) < 3:
            raise RecordError(f"Corrupt record {path}: expected 3 lines, got {len(lines)}")
        saved_name, saved_pin, raw_balance = lines[0], lines[1], lines[2].strip()
        try:
            balance = int(raw_balance)
        except ValueError as e:
            raise RecordError(f"Corrupt record {path}: bad balance {raw_balance!r}") from e
        if balance < 0:
            raise RecordError(f"Corrupt record {path}: negative balance {balance}")

        if saved_name != name or saved_pin != pin:
            _log.warning(f"PIN mismatch for {name!r}")
            raise PinMismatchError(name)

        _log.info(f"Loaded {name!r} balance={balance}")
        return Player(name=saved_name, pin=saved_pin, balance=balance)

    def save(self, player: Player) -> str:
        path = self.path_for(player.name)
        try:
            os.makedirs(self.directory, exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                f.write(f"{player.name}\n{player.pin}\n{player.balance}\n")
        except OSError as e:
            _log.error(f"Failed to save {player.name!r}: {e}")
            raise RecordError(f"Could not write {path}: {e}") from e
        _log.debug(f"Saved {player.name!r} balance={player.balance} -> {path}")
        return path


# -------------------------
# Game history: append-only blocks
#   Player: <name>
#   Result: Win|Loss|Tie
#   Time: yyyy-MM-dd HH:mm:ss
# -------------------------
@dataclass(frozen=True)
class HistoryEntry:
    player: str
    result: str
    time: str


class HistoryLog:
    def __init__(self, path: str = HISTORY_FILE, clock: Callable[[], datetime] = datetime.now) -> None:
        self.path = path
        self._clock = clock

    def append(self, player: str, result: str) -> HistoryEntry:
        if result not in VALID_RESULTS:
            raise ValueError(f"Unknown result label: {result!r}")
        entry = HistoryEntry(player=player, result=result, time=self._clock().strftime(TIMESTAMP_FORMAT))
        try:
            parent = os.path.dirname(self.path)
            if parent:
                os.makedirs(parent, exist_ok=True)
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(f"Player: {entry.player}\nResult: {entry.result}\nTime: {entry.time}\n")
        except OSError as e:
            _log.error(f"Failed to append history: {e}")
            raise RecordError(f"Could not write {self.path}: {e}") from e
        return entry

    def read(self) -> List[HistoryEntry]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return []
        except OSError as e:
            raise RecordError(f"Could not read {self.path}: {e}") from e

        entries: List[HistoryEntry] = []
        fields = {}
        for line in lines:
            key, sep, value = line.partition(": ")
            if not sep:
                continue
            fields[key] = value
            if key == "Time":
                entries.append(HistoryEntry(fields.get("Player", ""), fields.get("Result", ""), value))
                fields = {}
        return entries
