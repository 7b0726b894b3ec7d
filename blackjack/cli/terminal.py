# blackjack/cli/terminal.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List

CSI = "\033["

@dataclass
class Style:
    prefix: str = ""
    suffix: str = CSI + "0m"

    def apply(self, text: str) -> str:
        return self.prefix + text + self.suffix

# Basic styles (extend as needed)
RESET = Style(prefix=CSI + "0m")

RED_BOLD = Style(prefix=CSI + "31m" + CSI + "1m")  # hearts/diamonds
DIM_BLUE = Style(prefix=CSI + "2m" + CSI + "34m")  # card backs

@dataclass
class Sprite:
    lines: List[str]

    @property
    def w(self) -> int:
        return max((len(s) for s in self.lines), default=0)

    @property
    def h(self) -> int:
        return len(self.lines)

    def styled(self, style: Style) -> "Sprite":
        return Sprite([style.apply(line) for line in self.lines])

    def __str__(self) -> str:
        return "\n".join(self.lines)
