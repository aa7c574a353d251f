from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from cribcalc.cards import Card, Rank, sorted_cards
from cribcalc.combinations import power_set
from cribcalc.errors import InvalidHandError
from cribcalc.schemas import ScoreBreakdown, ScoreItem

HAND_SIZE = 4
RUN_LENGTHS = (5, 4, 3)

ScoredItem = tuple[str, frozenset[Card], int]


@dataclass(frozen=True)
class ScoredSet:
    """Four held cards plus the starter. Always exactly five distinct cards."""

    hand: frozenset[Card]
    starter: Card

    def __post_init__(self) -> None:
        object.__setattr__(self, "hand", frozenset(self.hand))
        if len(self.hand) != HAND_SIZE:
            raise InvalidHandError(f"hand must hold exactly {HAND_SIZE} unique cards, got {len(self.hand)}")
        if self.starter in self.hand:
            raise InvalidHandError(f"starter {self.starter} is already in the hand")

    @classmethod
    def of(cls, hand: Iterable[Card], starter: Card) -> ScoredSet:
        held = tuple(hand)
        unique = frozenset(held)
        if len(unique) != len(held):
            raise InvalidHandError("hand contains the same card twice")
        return cls(hand=unique, starter=starter)

    @property
    def cards(self) -> frozenset[Card]:
        return self.hand | {self.starter}


def _is_fifteen(cards: frozenset[Card]) -> bool:
    return sum(card.rank.cribbage_value for card in cards) == 15


def _is_run(cards: frozenset[Card]) -> bool:
    indices = sorted(card.rank.rank_index for card in cards)
    return all(b == a + 1 for a, b in zip(indices, indices[1:]))


def _fifteens(combinations: list[frozenset[Card]]) -> list[ScoredItem]:
    return [("fifteen", combo, 2) for combo in combinations if len(combo) >= 2 and _is_fifteen(combo)]


def _pairs(cards: frozenset[Card]) -> list[ScoredItem]:
    counts = Counter(card.rank.rank_index for card in cards)
    items: list[ScoredItem] = []
    for index, n in counts.items():
        if n >= 2:
            items.append(("pair", frozenset(c for c in cards if c.rank.rank_index == index), n * n - n))
    return items


def _runs(combinations: list[frozenset[Card]]) -> list[ScoredItem]:
    # Longest length wins outright; a 4-run is never also scored as two 3-runs.
    for length in RUN_LENGTHS:
        found = [("run", combo, length) for combo in combinations if len(combo) == length and _is_run(combo)]
        if found:
            return found
    return []


def _flush(scored: ScoredSet) -> list[ScoredItem]:
    suits = {card.suit for card in scored.hand}
    if len(suits) != 1:
        return []
    if scored.starter.suit in suits:
        return [("flush", scored.cards, 5)]
    return [("flush", scored.hand, 4)]


def _nobs(scored: ScoredSet) -> list[ScoredItem]:
    for card in scored.hand:
        if card.rank is Rank.JACK and card.suit == scored.starter.suit:
            return [("nobs", frozenset((card, scored.starter)), 1)]
    return []


def _scored_items(scored: ScoredSet) -> list[ScoredItem]:
    cards = scored.cards
    combinations = power_set(cards)
    return _fifteens(combinations) + _pairs(cards) + _runs(combinations) + _flush(scored) + _nobs(scored)


def score(scored: ScoredSet) -> int:
    return sum(points for _, _, points in _scored_items(scored))


def score_hand(hand: Iterable[Card], starter: Card) -> int:
    """Points for four held cards plus the starter."""
    return score(ScoredSet.of(hand, starter))


def score_breakdown(hand: Iterable[Card], starter: Card) -> ScoreBreakdown:
    """Same total as score_hand, split by category with every scoring combination listed."""
    items = _scored_items(ScoredSet.of(hand, starter))
    totals = Counter()
    for category, _, points in items:
        totals[category] += points
    return ScoreBreakdown(
        fifteens=totals["fifteen"],
        pairs=totals["pair"],
        runs=totals["run"],
        flush=totals["flush"],
        nobs=totals["nobs"],
        total=sum(totals.values()),
        items=[
            ScoreItem(category=category, cards=[c.code for c in sorted_cards(combo)], points=points)
            for category, combo, points in items
        ],
    )
