from __future__ import annotations

import logging
from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass

from cribcalc.cards import Card, sorted_cards
from cribcalc.combinations import pairs
from cribcalc.errors import (
    EmptyStarterPoolError,
    InvalidHandError,
    InvalidHandSizeError,
    InvalidPlayerCountError,
)
from cribcalc.hand_scoring import ScoredSet, score

logger = logging.getLogger(__name__)

DEALT_SIZE_BY_PLAYERS = {2: 6, 3: 5, 4: 5}
DISCARD_COUNT_BY_DEALT_SIZE = {5: 1, 6: 2}


@dataclass(frozen=True)
class DiscardEvaluation:
    discard: frozenset[Card]
    kept: frozenset[Card]
    average: float


def dealt_size_for_players(players: int) -> int:
    """2 players are dealt 6 cards each; 3 or 4 players are dealt 5."""
    if players not in DEALT_SIZE_BY_PLAYERS:
        raise InvalidPlayerCountError(f"players must be 2, 3 or 4, got {players}")
    return DEALT_SIZE_BY_PLAYERS[players]


def _validate_dealt(dealt: Iterable[Card]) -> frozenset[Card]:
    cards = tuple(dealt)
    if len(cards) not in DISCARD_COUNT_BY_DEALT_SIZE:
        raise InvalidHandSizeError(f"dealt hand must be 5 or 6 cards, got {len(cards)}")
    unique = frozenset(cards)
    if len(unique) != len(cards):
        raise InvalidHandError("dealt hand contains the same card twice")
    return unique


def discard_choices(dealt: frozenset[Card]) -> list[frozenset[Card]]:
    if DISCARD_COUNT_BY_DEALT_SIZE[len(dealt)] == 1:
        return [frozenset((card,)) for card in sorted_cards(dealt)]
    return pairs(dealt)


def _total_over_starters(kept: frozenset[Card], starters: tuple[Card, ...]) -> int:
    total = 0
    for starter in starters:
        total += score(ScoredSet(hand=kept, starter=starter))
    return total


def evaluate(
    dealt: Iterable[Card],
    remaining_deck: Iterable[Card],
    max_workers: int | None = None,
) -> dict[frozenset[Card], float]:
    """Discard choice -> average hand score over every unseen starter (unrounded)."""
    hand = _validate_dealt(dealt)
    # Dealt cards can never be the starter, even if the caller passed the full deck.
    starters = tuple(sorted_cards(card for card in set(remaining_deck) if card not in hand))
    if not starters:
        raise EmptyStarterPoolError("no unseen starter cards remain")

    choices = discard_choices(hand)
    logger.debug("evaluating %d discards over %d starters", len(choices), len(starters))

    if max_workers and max_workers > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures = [executor.submit(_total_over_starters, hand - choice, starters) for choice in choices]
            totals = [future.result() for future in futures]
    else:
        totals = [_total_over_starters(hand - choice, starters) for choice in choices]

    return {choice: total / len(starters) for choice, total in zip(choices, totals)}


def evaluate_discards(
    dealt: Iterable[Card],
    full_deck: Iterable[Card],
    max_workers: int | None = None,
) -> list[DiscardEvaluation]:
    """Discard choices ordered best average first; ties fall back to deck order of the discard."""
    hand = _validate_dealt(dealt)
    averages = evaluate(hand, full_deck, max_workers=max_workers)
    results = [
        DiscardEvaluation(discard=choice, kept=hand - choice, average=average)
        for choice, average in averages.items()
    ]
    return sorted(
        results,
        key=lambda r: (-r.average, [card.sort_key for card in sorted_cards(r.discard)]),
    )
