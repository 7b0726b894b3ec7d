# blackjack/common/constants.py

# Card model
SUITS = ["♠", "♥", "♦", "♣"]
RANKS = ["2", "3", "4", "5", "6", "7", "8", "9", "10", "J", "Q", "K", "A"]
FACE_RANKS = {"J", "Q", "K"}
ACE = "A"
RED_SUITS = {"♥", "♦"}


# Scoring
BLACKJACK_VALUE = 21
DEALER_STANDS_ON = 17
ACE_HIGH = 11
ACE_LOW = 1
FACE_VALUE = 10

# Money
BLACKJACK_PAYOUT = 1.5
STARTING_BALANCE = 100

# Round result labels (also written to the history file)
RESULT_WIN = "Win"
RESULT_LOSS = "Loss"
RESULT_TIE = "Tie"

VALID_RESULTS = {RESULT_WIN, RESULT_LOSS, RESULT_TIE}

# Console commands (case-insensitive single letters)
YES = "Y"
NO = "N"
HIT = "H"
STAND = "S"

VALID_DECISIONS = {HIT, STAND}

# Persistence
RECORD_DIR = "player_record"
RECORD_SUFFIX = ".txt"
HISTORY_FILE = "game_record.txt"
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOGIN_ATTEMPTS = 3
