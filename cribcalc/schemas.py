from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field, conint

CardCode = str


class CardInfo(BaseModel):
    code: CardCode
    name: str
    suit: Literal["C", "D", "H", "S"]
    rank_index: conint(ge=1, le=13)
    cribbage_value: conint(ge=1, le=10)


class DeckResponse(BaseModel):
    count: int
    cards: list[CardInfo]


class ScoreItem(BaseModel):
    category: Literal["fifteen", "pair", "run", "flush", "nobs"]
    cards: list[CardCode]
    points: int


class ScoreBreakdown(BaseModel):
    fifteens: int = 0
    pairs: int = 0
    runs: int = 0
    flush: int = 0
    nobs: int = 0
    total: int
    items: list[ScoreItem] = Field(default_factory=list)


class ScoreRequest(BaseModel):
    hand: list[CardCode]
    starter: CardCode


class ScoreResponse(BaseModel):
    status: Literal["ok"]
    hand: list[CardCode]
    starter: CardCode
    result: ScoreBreakdown
    warnings: list[str] = Field(default_factory=list)


class DiscardRequest(BaseModel):
    dealt: list[CardCode]
    players: Literal[2, 3, 4] | None = None


class DiscardOption(BaseModel):
    discard: list[CardCode]
    kept: list[CardCode]
    average: float


class DiscardResponse(BaseModel):
    status: Literal["ok"]
    dealt: list[CardCode]
    starter_pool: int
    options: list[DiscardOption]
    best: DiscardOption
    warnings: list[str] = Field(default_factory=list)
