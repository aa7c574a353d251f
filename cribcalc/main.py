from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from cribcalc.cards import Card, sorted_cards, standard_deck
from cribcalc.config import settings, setup_logging
from cribcalc.discards import DiscardEvaluation, evaluate_discards
from cribcalc.errors import CribbageError
from cribcalc.hand_scoring import score_breakdown
from cribcalc.schemas import (
    CardInfo,
    DeckResponse,
    DiscardOption,
    DiscardRequest,
    DiscardResponse,
    ScoreRequest,
    ScoreResponse,
)
from cribcalc.validators import validate_discard_request, validate_score_request

setup_logging(settings.log_level)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_title, version="0.1.0")


def _codes(cards) -> list[str]:
    return [card.code for card in sorted_cards(cards)]


def _card_info(card: Card) -> CardInfo:
    return CardInfo(
        code=card.code,
        name=card.name,
        suit=card.suit.value,
        rank_index=card.rank.rank_index,
        cribbage_value=card.rank.cribbage_value,
    )


def _discard_option(evaluation: DiscardEvaluation) -> DiscardOption:
    return DiscardOption(
        discard=_codes(evaluation.discard),
        kept=_codes(evaluation.kept),
        average=round(evaluation.average, settings.average_decimals),
    )


@app.get("/")
def root() -> dict[str, str]:
    return {
        "message": "Cribbage Calculator API",
        "docs": "/docs",
        "health": "/health",
        "deck": "/api/v1/deck",
    }


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/api/v1/deck", response_model=DeckResponse)
def deck() -> DeckResponse:
    cards = sorted_cards(standard_deck())
    return DeckResponse(count=len(cards), cards=[_card_info(card) for card in cards])


@app.post("/api/v1/score", response_model=ScoreResponse)
def score(req: ScoreRequest) -> ScoreResponse:
    hand, starter = validate_score_request(req)
    try:
        result = score_breakdown(hand, starter)
    except CribbageError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    logger.info("scored hand %s with starter %s: %d", _codes(hand), starter.code, result.total)
    return ScoreResponse(status="ok", hand=_codes(hand), starter=starter.code, result=result, warnings=[])


@app.post("/api/v1/discards", response_model=DiscardResponse)
def discards(req: DiscardRequest) -> DiscardResponse:
    dealt = validate_discard_request(req)
    full_deck = standard_deck()
    try:
        evaluations = evaluate_discards(dealt, full_deck, max_workers=settings.evaluation_workers)
    except CribbageError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    options = [_discard_option(evaluation) for evaluation in evaluations]
    logger.info("evaluated %d discard options for %s", len(options), _codes(dealt))
    return DiscardResponse(
        status="ok",
        dealt=_codes(dealt),
        starter_pool=len(full_deck) - len(dealt),
        options=options,
        best=options[0],
        warnings=[],
    )
