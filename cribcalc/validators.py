import re

from fastapi import HTTPException

from cribcalc.cards import Card, Rank, Suit
from cribcalc.discards import dealt_size_for_players
from cribcalc.schemas import DiscardRequest, ScoreRequest

CARD_RE = re.compile(r"^(?:[A1-9TJQK]|10)[CDHS]$")
RANK_CODES = {
    "A": Rank.ACE,
    "1": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}


def _normalize_code(code: str) -> str:
    return code.strip().upper()


def validate_card_code(code: str) -> None:
    if not CARD_RE.fullmatch(_normalize_code(code)):
        raise HTTPException(status_code=422, detail=f"Invalid card code: {code}")


def parse_card(code: str) -> Card:
    validate_card_code(code)
    c = _normalize_code(code)
    return Card(RANK_CODES[c[:-1]], Suit(c[-1]))


def _parse_unique(codes: list[str]) -> list[Card]:
    cards = [parse_card(code) for code in codes]
    seen: set[Card] = set()
    for card in cards:
        if card in seen:
            raise HTTPException(status_code=422, detail=f"Card appears more than once: {card.code}")
        seen.add(card)
    return cards


def validate_score_request(req: ScoreRequest) -> tuple[list[Card], Card]:
    if len(req.hand) != 4:
        raise HTTPException(status_code=422, detail="hand must contain exactly 4 cards")
    hand = _parse_unique(req.hand)
    starter = parse_card(req.starter)
    if starter in hand:
        raise HTTPException(status_code=422, detail=f"Starter is already in hand: {starter.code}")
    return hand, starter


def validate_discard_request(req: DiscardRequest) -> list[Card]:
    if req.players is not None:
        expected = dealt_size_for_players(req.players)
        if len(req.dealt) != expected:
            raise HTTPException(
                status_code=422,
                detail=f"{req.players} players are dealt {expected} cards, got {len(req.dealt)}",
            )
    elif len(req.dealt) not in {5, 6}:
        raise HTTPException(status_code=422, detail="dealt must contain 5 or 6 cards")
    return _parse_unique(req.dealt)
