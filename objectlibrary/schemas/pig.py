"""Pig dice game models."""

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import NamedTuple


class Die(IntEnum):
    """A six-faced die; each member's value is its face value."""

    ONE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6


class DieChange(NamedTuple):
    """One face shown during a roll, and how long it stays up (seconds)."""

    die: Die
    duration: float


@dataclass(frozen=True)
class Roll:
    total_duration: float
    die_changes: list[DieChange] = field(default_factory=list)

    @property
    def final_die(self):
        return self.die_changes[-1].die if self.die_changes else None


class PlayerIdentifier(str, Enum):
    ONE = "One"
    TWO = "Two"


class Player:
    """A Pig player and the points they have banked this game."""

    def __init__(self, id: PlayerIdentifier):
        self.id = id
        self._total_points = 0

    @property
    def total_points(self) -> int:
        return self._total_points

    @property
    def name(self) -> str:
        return f"Player {self.id.value}"

    def update_score(self, points: int) -> None:
        self._total_points += points

    def reset_total_points(self) -> None:
        self._total_points = 0

    def __repr__(self) -> str:
        return f"Player(id={self.id.value!r}, total_points={self._total_points})"
