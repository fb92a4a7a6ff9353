"""Repository base: one repository per entity collection over an AsyncSession.

Engine components never touch a collection except through its repository.
Id allocation, upserts and payment settlement are read-modify-write sequences.
A unit of work that writes a collection holds that collection's lock until
its transaction ends (commit, rollback or close), so a second request only
reads the collection once the first one's rows are committed:

- inside one process, a per-collection asyncio.Lock recorded on the session
- across processes on PostgreSQL, a transaction-scoped advisory lock
"""

import asyncio
import weakref
from typing import Any, Generic, TypeVar

from sqlalchemy import event, func, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import InstrumentedAttribute, Session

from app.models.base import Base

ModelT = TypeVar("ModelT", bound=Base)

HELD_LOCKS_KEY = "imk.collection_locks"

_locks: "weakref.WeakKeyDictionary[asyncio.AbstractEventLoop, dict[str, asyncio.Lock]]" = (
    weakref.WeakKeyDictionary()
)


def collection_lock(name: str) -> asyncio.Lock:
    """Return the write lock for a collection, scoped to the running event loop."""
    loop = asyncio.get_running_loop()
    per_loop = _locks.setdefault(loop, {})
    lock = per_loop.get(name)
    if lock is None:
        lock = per_loop[name] = asyncio.Lock()
    return lock


async def lock_collection(db: AsyncSession, name: str) -> None:
    """Take the write lock on a collection for the rest of the session's transaction.

    Re-entrant per session: a unit of work that already holds the lock
    continues without waiting.
    """
    held: dict[str, asyncio.Lock] = db.info.setdefault(HELD_LOCKS_KEY, {})
    if name in held:
        return

    lock = collection_lock(name)
    await lock.acquire()
    held[name] = lock
    try:
        if db.bind is not None and db.bind.dialect.name == "postgresql":
            await db.execute(
                text("SELECT pg_advisory_xact_lock(hashtext(:name))"), {"name": name}
            )
    except Exception:
        release_collection_locks(db.sync_session)
        raise


def release_collection_locks(session: Session) -> None:
    for lock in session.info.pop(HELD_LOCKS_KEY, {}).values():
        if lock.locked():
            lock.release()


@event.listens_for(Session, "after_transaction_end")
def _release_on_transaction_end(session: Session, transaction) -> None:
    if transaction.parent is None:
        release_collection_locks(session)


def format_id(prefix: str, count: int, width: int = 4) -> str:
    return f"{prefix}-{count + 1:0{width}d}"


def id_order(column: InstrumentedAttribute, descending: bool = False) -> tuple:
    """Order clauses sorting PREFIX-NNNN ids numerically.

    Ids share a prefix and are zero padded to a minimum width, so a longer id
    is always a later one (IOT-10000 after IOT-9999).
    """
    if descending:
        return func.length(column).desc(), column.desc()
    return func.length(column), column


class Repository(Generic[ModelT]):
    model: type[ModelT]
    id_prefix: str = ""

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def collection(self) -> str:
        return self.model.__tablename__

    async def lock(self) -> None:
        await lock_collection(self.db, self.collection)

    async def get(self, key: Any) -> ModelT | None:
        return await self.db.get(self.model, key)

    async def get_for_update(self, key: Any) -> ModelT | None:
        """Load a record with a row lock (SELECT ... FOR UPDATE where supported)."""
        return await self.db.get(self.model, key, with_for_update=True, populate_existing=True)

    async def count(self) -> int:
        return (await self.db.execute(select(func.count()).select_from(self.model))).scalar_one()

    async def next_id(self) -> str:
        return format_id(self.id_prefix, await self.count())

    async def create(self, **fields: Any) -> ModelT:
        """Allocate the next id and append a new record.

        The collection stays locked until the session's transaction ends.
        """
        await self.lock()
        record = self.model(id=await self.next_id(), **fields)
        self.db.add(record)
        await self.db.flush()
        return record

    async def save(self, record: ModelT) -> ModelT:
        """Flush changes made to a record loaded from this repository."""
        self.db.add(record)
        await self.db.flush()
        return record
