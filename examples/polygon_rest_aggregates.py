#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
from datetime import UTC, datetime

from polyfeed.data import Client, TimeSpan


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Fetch Polygon aggregate bars via REST")
    p.add_argument("symbol", nargs="?", default="AAPL")
    p.add_argument("start", nargs="?", default="2018-02-01")
    p.add_argument("end", nargs="?", default="2018-03-01")
    p.add_argument("span", nargs="?", default="day", choices=[s.value for s in TimeSpan])
    p.add_argument("multiplier", nargs="?", type=int, default=1)
    return p.parse_args()


def _date(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%d").replace(tzinfo=UTC)


async def main() -> None:
    args = parse_args()

    async with Client.from_env() as client:
        bars = await client.get_bars(
            args.symbol,
            TimeSpan(args.span),
            _date(args.start),
            _date(args.end),
            multiplier=args.multiplier,
        )
    print("=" * 65)
    print(f"Symbol     : {args.symbol.upper()}")
    print(f"Span       : {args.multiplier} {args.span}")
    print(f"Bars count : {len(bars)}")
    print("=" * 65)
    print(
        f"{'Timestamp':25} | {'Open':>11} | {'High':>11} | {'Low':>11} | {'Close':>11} | {'Volume':>13}"
    )
    print("-" * 83)
    for b in bars:
        print(
            f"{b.timestamp.isoformat():25} | {b.open_price:>11.2f} | {b.high_price:>11.2f} | {b.low_price:>11.2f} | {b.close_price:>11.2f} | {b.volume:>13.2f}"
        )
    print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
