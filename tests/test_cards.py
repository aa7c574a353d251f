from cribcalc.cards import Card, Rank, Suit, standard_deck
from cribcalc.combinations import pairs, power_set
from cribcalc.validators import parse_card


def test_rank_index_is_strictly_increasing_and_injective():
    indices = [rank.rank_index for rank in Rank]
    assert indices == list(range(1, 14))
    assert len(set(indices)) == 13


def test_cribbage_value_collapses_face_cards_to_ten():
    values = [rank.cribbage_value for rank in Rank]
    assert values == sorted(values)
    assert {Rank.TEN.cribbage_value, Rank.JACK.cribbage_value, Rank.QUEEN.cribbage_value, Rank.KING.cribbage_value} == {10}
    assert Rank.ACE.cribbage_value == 1
    assert Rank.JACK.rank_index != Rank.TEN.rank_index


def test_card_equality_is_by_value():
    assert Card(Rank.FIVE, Suit.H) == Card(Rank.FIVE, Suit.H)
    assert Card(Rank.FIVE, Suit.H) != Card(Rank.FIVE, Suit.S)
    assert len({Card(Rank.KING, Suit.C), Card(Rank.KING, Suit.C)}) == 1


def test_card_code_and_name():
    card = Card(Rank.TEN, Suit.C)
    assert card.code == "10C"
    assert Card(Rank.ACE, Suit.D).code == "AD"
    assert Card(Rank.KING, Suit.H).name == "King of hearts"


def test_standard_deck_has_52_distinct_cards():
    deck = standard_deck()
    assert len(deck) == 52
    assert standard_deck() is not deck


def test_parse_card_accepts_original_notation():
    assert parse_card("1D") == Card(Rank.ACE, Suit.D)
    assert parse_card(" ad ") == Card(Rank.ACE, Suit.D)
    assert parse_card("10C") == Card(Rank.TEN, Suit.C)
    assert parse_card("TC") == Card(Rank.TEN, Suit.C)
    assert parse_card("kh") == Card(Rank.KING, Suit.H)


def test_power_set_of_five_cards():
    cards = [parse_card(code) for code in ["AH", "2S", "3C", "4D", "5H"]]
    subsets = power_set(cards)
    assert len(subsets) == 31
    assert len(set(subsets)) == 31
    assert frozenset(cards) in subsets
    assert frozenset() not in subsets
    assert len([s for s in subsets if len(s) == 3]) == 10


def test_pairs_of_six_cards():
    cards = [parse_card(code) for code in ["AH", "2S", "3C", "4D", "5H", "6S"]]
    result = pairs(cards)
    assert len(result) == 15
    assert all(len(p) == 2 for p in result)
    assert len(set(result)) == 15
