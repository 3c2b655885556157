"""Stream subscription value type."""

from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import EventKind

ALL_SYMBOLS = "*"


@dataclass(frozen=True)
class Subscription:
    """A subscription to one kind of event for one symbol or for all.

    Renders to the wire parameter ``<code>.<symbol>``, e.g. ``T.MSFT`` or
    ``Q.*``.
    """

    kind: EventKind
    symbol: str = ALL_SYMBOLS

    def __post_init__(self) -> None:
        if not isinstance(self.kind, EventKind):
            object.__setattr__(self, "kind", EventKind.from_code(self.kind))
        symbol = self.symbol.strip() if isinstance(self.symbol, str) else ""
        if not symbol:
            raise ValueError("Subscription symbol must be a non-empty string")
        if "," in symbol:
            raise ValueError(f"Invalid subscription symbol: {symbol!r}")
        object.__setattr__(self, "symbol", symbol)

    @classmethod
    def trades(cls, symbol: str = ALL_SYMBOLS) -> Subscription:
        return cls(EventKind.TRADE, symbol)

    @classmethod
    def quotes(cls, symbol: str = ALL_SYMBOLS) -> Subscription:
        return cls(EventKind.QUOTE, symbol)

    @classmethod
    def second_aggregates(cls, symbol: str = ALL_SYMBOLS) -> Subscription:
        return cls(EventKind.SECOND_AGGREGATE, symbol)

    @classmethod
    def minute_aggregates(cls, symbol: str = ALL_SYMBOLS) -> Subscription:
        return cls(EventKind.MINUTE_AGGREGATE, symbol)

    @classmethod
    def parse(cls, value: str) -> Subscription:
        """Parse the wire form, e.g. ``"AM.AAPL"``."""
        code, sep, symbol = value.strip().partition(".")
        if not sep:
            raise ValueError(f"Invalid subscription: {value!r}")
        return cls(EventKind.from_code(code), symbol)

    @property
    def is_all(self) -> bool:
        return self.symbol == ALL_SYMBOLS

    def __str__(self) -> str:
        return f"{self.kind.value}.{self.symbol}"
