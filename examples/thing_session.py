import asyncio
import logging

from actionstore import Redo, Undo, create_store
from actionstore.config import StoreSettings
from actionstore.thing import AddToA, AppendToB, IncA, LoadStuff, ResetStuff


def show(state) -> None:
    thing = state.thing
    history = state.history
    print(
        f"a={thing.a} b={thing.b!r} stuff={thing.stuff!r} ({thing.stuff_status.name})"
        f"  undo={history.undo_description()!r} redo={history.redo_description()!r}"
    )


async def main() -> None:
    store = create_store(StoreSettings(timer_delay=0.2, trace_enabled=True))
    store.subscribe(show)

    store.dispatch(IncA())
    store.dispatch(AddToA(5))
    store.dispatch(AppendToB("+"))

    store.dispatch(LoadStuff())
    store.dispatch(Undo())
    store.dispatch(Undo())
    await store.drain()

    store.dispatch(Redo())
    store.dispatch(ResetStuff())

    log = store.middleware[0].log
    print(f"\n{log.count} actions traced:")
    for record in log.records(top_level_only=True):
        print(f"  #{record.seq} {record.kind}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(main())
