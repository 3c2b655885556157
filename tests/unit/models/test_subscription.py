"""Unit tests for subscriptions."""

import pytest

from polyfeed.data.core import EventKind
from polyfeed.data.models import ALL_SYMBOLS, Subscription


class TestSubscription:
    @pytest.mark.parametrize(
        ("subscription", "wire"),
        [
            (Subscription.trades("MSFT"), "T.MSFT"),
            (Subscription.quotes(), "Q.*"),
            (Subscription.second_aggregates("AAPL"), "A.AAPL"),
            (Subscription.minute_aggregates("BRK.A"), "AM.BRK.A"),
        ],
    )
    def test_wire_form(self, subscription, wire):
        assert str(subscription) == wire

    def test_defaults_to_all_symbols(self):
        subscription = Subscription(EventKind.TRADE)
        assert subscription.symbol == ALL_SYMBOLS
        assert subscription.is_all

    def test_kind_code_is_coerced(self):
        assert Subscription("AM", "SPY").kind is EventKind.MINUTE_AGGREGATE

    def test_symbol_is_stripped(self):
        assert Subscription.trades("  MSFT ").symbol == "MSFT"

    @pytest.mark.parametrize("symbol", ["", "   ", "MSFT,AAPL"])
    def test_invalid_symbol_rejected(self, symbol):
        with pytest.raises(ValueError):
            Subscription.trades(symbol)

    def test_unknown_kind_rejected(self):
        with pytest.raises(ValueError, match="Unknown event kind code"):
            Subscription("X", "MSFT")

    def test_parse(self):
        assert Subscription.parse("T.MSFT") == Subscription.trades("MSFT")
        assert Subscription.parse("AM.BRK.A") == Subscription.minute_aggregates("BRK.A")
        assert Subscription.parse("Q.*").is_all

    def test_parse_requires_separator(self):
        with pytest.raises(ValueError, match="Invalid subscription"):
            Subscription.parse("MSFT")

    def test_hashable(self):
        assert len({Subscription.trades("MSFT"), Subscription.parse("T.MSFT")}) == 1
