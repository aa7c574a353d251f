import pytest

from cribcalc.cards import standard_deck
from cribcalc.discards import dealt_size_for_players, evaluate, evaluate_discards
from cribcalc.errors import (
    EmptyStarterPoolError,
    InvalidHandError,
    InvalidHandSizeError,
    InvalidPlayerCountError,
)
from cribcalc.hand_scoring import score_hand
from cribcalc.validators import parse_card


def cards_of(*codes: str):
    return [parse_card(code) for code in codes]


def six_card_deal():
    return cards_of("5C", "5D", "5H", "JS", "5S", "2C")


def test_evaluate_discards_six_cards_returns_15_options():
    results = evaluate_discards(six_card_deal(), standard_deck())
    assert len(results) == 15
    assert all(0 <= r.average <= 29 for r in results)
    assert all(len(r.discard) == 2 and len(r.kept) == 4 for r in results)
    averages = [r.average for r in results]
    assert averages == sorted(averages, reverse=True)


def test_evaluate_discards_best_keeps_four_fives():
    best = evaluate_discards(six_card_deal(), standard_deck())[0]
    assert best.discard == frozenset(cards_of("JS", "2C"))


def test_evaluate_discards_five_cards_returns_5_options():
    results = evaluate_discards(cards_of("AH", "4C", "7D", "9S", "KH"), standard_deck())
    assert len(results) == 5
    assert all(len(r.discard) == 1 for r in results)


def test_evaluate_average_matches_direct_scoring():
    dealt = cards_of("AH", "4C", "7D", "9S", "KH")
    averages = evaluate(dealt, standard_deck())
    discard = frozenset(cards_of("KH"))
    kept = set(dealt) - discard
    starters = standard_deck() - set(dealt)
    assert len(starters) == 47
    expected = sum(score_hand(kept, starter) for starter in starters) / 47
    assert averages[discard] == pytest.approx(expected)


def test_evaluate_excludes_dealt_cards_from_starters():
    dealt = six_card_deal()
    assert evaluate(dealt, standard_deck()) == evaluate(dealt, standard_deck() - set(dealt))


def test_evaluate_threaded_matches_sequential():
    dealt = six_card_deal()
    assert evaluate(dealt, standard_deck(), max_workers=4) == evaluate(dealt, standard_deck())


def test_evaluate_rejects_bad_dealt_size():
    with pytest.raises(InvalidHandSizeError):
        evaluate(cards_of("AH", "2H", "3H", "4H"), standard_deck())
    with pytest.raises(InvalidHandSizeError):
        evaluate(cards_of("AH", "2H", "3H", "4H", "5H", "6H", "7H"), standard_deck())


def test_evaluate_rejects_duplicate_dealt_card():
    with pytest.raises(InvalidHandError):
        evaluate(cards_of("AH", "AH", "3H", "4H", "5H"), standard_deck())


def test_evaluate_rejects_empty_starter_pool():
    dealt = cards_of("AH", "2H", "3H", "4H", "5H")
    with pytest.raises(EmptyStarterPoolError):
        evaluate(dealt, dealt)


def test_dealt_size_for_players():
    assert dealt_size_for_players(2) == 6
    assert dealt_size_for_players(3) == 5
    assert dealt_size_for_players(4) == 5
    with pytest.raises(InvalidPlayerCountError):
        dealt_size_for_players(5)
