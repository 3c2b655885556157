#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from polyfeed.data import Client, Quote, Subscription, Trade


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream Polygon trades and quotes")
    p.add_argument("subscriptions", nargs="*", default=["T.MSFT", "Q.MSFT"])
    p.add_argument("--limit", type=int, default=0, help="stop after N events (0 = forever)")
    p.add_argument("--debug", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO)
    subscriptions = [Subscription.parse(s) for s in args.subscriptions]

    async with Client.from_env() as client:
        async with await client.stream(subscriptions) as stream:
            count = 0
            async for event in stream:
                if isinstance(event, Trade):
                    print(
                        f"{event.timestamp.isoformat()} | T {event.symbol} | price={event.price} qty={event.quantity}"
                    )
                elif isinstance(event, Quote):
                    print(
                        f"{event.timestamp.isoformat()} | Q {event.symbol} | bid={event.bid_price}x{event.bid_quantity} ask={event.ask_price}x{event.ask_quantity}"
                    )
                else:
                    print(
                        f"{event.end_timestamp.isoformat()} | {event.kind.value} {event.symbol} | close={event.close_price} vol={event.volume}"
                    )
                count += 1
                if args.limit and count >= args.limit:
                    break


if __name__ == "__main__":
    asyncio.run(main())
