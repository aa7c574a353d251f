from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(str, Enum):
    C = "C"
    D = "D"
    H = "H"
    S = "S"

    @property
    def label(self) -> str:
        return {"C": "clubs", "D": "diamonds", "H": "hearts", "S": "spades"}[self.value]


class Rank(Enum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    @property
    def rank_index(self) -> int:
        """Position in Ace..King order. Used for pairs and runs."""
        return self.value

    @property
    def cribbage_value(self) -> int:
        """Counting value for fifteens. Jack, Queen and King count as 10."""
        return min(self.value, 10)

    @property
    def code(self) -> str:
        return {1: "A", 11: "J", 12: "Q", 13: "K"}.get(self.value, str(self.value))


@dataclass(frozen=True)
class Card:
    rank: Rank
    suit: Suit

    @property
    def code(self) -> str:
        return f"{self.rank.code}{self.suit.value}"

    @property
    def name(self) -> str:
        return f"{self.rank.name.capitalize()} of {self.suit.label}"

    @property
    def sort_key(self) -> tuple[int, str]:
        return self.rank.rank_index, self.suit.value

    def __str__(self) -> str:
        return self.code


def standard_deck() -> frozenset[Card]:
    return frozenset(Card(rank, suit) for rank in Rank for suit in Suit)


def sorted_cards(cards) -> list[Card]:
    return sorted(cards, key=lambda c: c.sort_key)
