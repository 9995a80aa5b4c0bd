"""Drive the remote counter against a running GraphQL server.

Start a server exposing getCount/incCount on REMOTE_URL (default
http://localhost:4000/), then run this script.
"""

import asyncio
import logging

from actionstore import create_store
from actionstore.adapters import graphql_performer
from actionstore.config import RemoteSettings, StoreSettings
from actionstore.count import FetchCount, IncrementCount
from actionstore.effects import RoutingPerformer, TimerPerformer


async def main() -> None:
    settings = StoreSettings()
    performer = RoutingPerformer(
        {
            "timer": TimerPerformer(default_delay=settings.timer_delay),
            "remote": graphql_performer(RemoteSettings()),
        }
    )
    store = create_store(settings, performer)

    store.dispatch(FetchCount())
    await store.drain()
    print(f"count: {store.select('count.count')} (status {store.select('count.status').name})")

    for _ in range(3):
        store.dispatch(IncrementCount())
    await store.drain()

    count = store.select("count")
    if count.error:
        print(f"remote call failed: {count.error}")
    else:
        print(f"count after 3 increments: {count.count} (id {count.id})")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
