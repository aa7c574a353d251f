from __future__ import annotations

from collections.abc import Iterable

from cribcalc.cards import Card, sorted_cards


def _indexed(cards: Iterable[Card]) -> tuple[Card, ...]:
    # Fixed order so subset numbering is stable between calls.
    return tuple(sorted_cards(cards))


def power_set(cards: Iterable[Card]) -> list[frozenset[Card]]:
    """All non-empty subsets, including the full set."""
    items = _indexed(cards)
    subsets: list[frozenset[Card]] = []
    for mask in range(1, 1 << len(items)):
        subsets.append(frozenset(card for i, card in enumerate(items) if mask >> i & 1))
    return subsets


def pairs(cards: Iterable[Card]) -> list[frozenset[Card]]:
    """Every unordered 2-card subset, e.g. the 15 two-card discards from six cards."""
    items = _indexed(cards)
    return [
        frozenset((items[i], items[j]))
        for i in range(len(items))
        for j in range(i + 1, len(items))
    ]
