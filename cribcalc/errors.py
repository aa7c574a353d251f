from __future__ import annotations


class CribbageError(ValueError):
    pass


class InvalidHandError(CribbageError):
    """Wrong number of cards, or the same physical card twice."""


class InvalidHandSizeError(CribbageError):
    """Dealt hand is not 5 or 6 cards."""


class EmptyStarterPoolError(CribbageError):
    pass


class InvalidPlayerCountError(CribbageError):
    pass
