"""
Relation loading for nested GraphQL fields.

Two implementations share one interface:

- ``NaiveRelationLoader`` hits the store once per parent row and sleeps
  ``resolver_delay_ms`` before every access, one access at a time.
  Listing N posts with their comments and comment authors costs
  N + N*M store accesses and as many delays.
- ``BatchedRelationLoader`` collects keys with strawberry ``DataLoader``s
  and issues one keyed store access per batch, sleeping once per batch.

Both return identical data for the same store contents.
"""
import asyncio
import logging

from strawberry.dataloader import DataLoader

from postboard.core.config import Settings
from postboard.db.store import EntityStore
from postboard.models import Comment, User

logger = logging.getLogger(__name__)


class RelationLoader:
    """Interface used by field resolvers to fetch related rows."""

    def __init__(self, store: EntityStore, delay_ms: int = 0):
        self.store = store
        self.delay = max(delay_ms, 0) / 1000

    async def _simulate_latency(self) -> None:
        if self.delay:
            await asyncio.sleep(self.delay)

    async def user(self, user_id: int) -> User | None:
        raise NotImplementedError

    async def comments(self, post_id: int) -> list[Comment]:
        raise NotImplementedError

    async def comment_count(self, post_id: int) -> int:
        raise NotImplementedError


class NaiveRelationLoader(RelationLoader):
    """One store access per call, one call at a time.

    Concurrent resolvers queue on a lock, so the delays add up like
    sequential round trips to a slow dependency. Create one per request.
    """

    def __init__(self, store: EntityStore, delay_ms: int = 0):
        super().__init__(store, delay_ms)
        self._lock = asyncio.Lock()

    async def user(self, user_id: int) -> User | None:
        async with self._lock:
            await self._simulate_latency()
            return self.store.find_user_by_id(user_id)

    async def comments(self, post_id: int) -> list[Comment]:
        async with self._lock:
            await self._simulate_latency()
            return self.store.comments_for_post(post_id)

    async def comment_count(self, post_id: int) -> int:
        async with self._lock:
            await self._simulate_latency()
            return self.store.comment_count_for_post(post_id)


class BatchedRelationLoader(RelationLoader):
    """One store access per batch of keys. Create one instance per request."""

    def __init__(self, store: EntityStore, delay_ms: int = 0):
        super().__init__(store, delay_ms)
        self._users = DataLoader(load_fn=self._load_users)
        self._comments = DataLoader(load_fn=self._load_comments)
        self._counts = DataLoader(load_fn=self._load_counts)

    async def _load_users(self, keys: list[int]) -> list[User | None]:
        await self._simulate_latency()
        found = self.store.users_by_ids(keys)
        logger.debug(f"Batched {len(keys)} user lookups")
        return [found.get(key) for key in keys]

    async def _load_comments(self, keys: list[int]) -> list[list[Comment]]:
        await self._simulate_latency()
        grouped = self.store.comments_for_posts(keys)
        logger.debug(f"Batched comment lookups for {len(keys)} posts")
        return [grouped[key] for key in keys]

    async def _load_counts(self, keys: list[int]) -> list[int]:
        await self._simulate_latency()
        counts = self.store.comment_counts_for_posts(keys)
        return [counts[key] for key in keys]

    async def user(self, user_id: int) -> User | None:
        return await self._users.load(user_id)

    async def comments(self, post_id: int) -> list[Comment]:
        return await self._comments.load(post_id)

    async def comment_count(self, post_id: int) -> int:
        return await self._counts.load(post_id)


def make_relation_loader(store: EntityStore, settings: Settings) -> RelationLoader:
    if settings.batch_loading:
        return BatchedRelationLoader(store, settings.resolver_delay_ms)
    return NaiveRelationLoader(store, settings.resolver_delay_ms)
