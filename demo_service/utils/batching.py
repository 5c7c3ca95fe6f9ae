"""Request-scoped batched key lookup.

Collects every ``load``/``load_many`` call made during one turn of the event
loop, fetches the distinct keys with a single bulk call, then hands each
caller the entity matching its key (or ``None``). This is what keeps a
GraphQL field such as ``User.friends`` from issuing one lookup per parent
object (the N+1 problem).

Batch boundaries come from Strawberry's DataLoader: the first call of a turn
opens a batch and schedules its dispatch with ``loop.call_soon``, so every
resolver that runs before the loop gets back to the scheduled callback adds
its keys to the same batch. The batch is marked dispatched before the fetch
runs, so calls made while a fetch is in flight start the next batch.

The loader is created with ``cache=False``: every flush re-fetches, even keys
seen in an earlier turn. Deduplication happens here, per batch.

Usage:
    loader = BatchLoader(repository.get_users_by_ids)
    friends = await loader.load_many([2, 5, 2])  # one bulk call with [2, 5]
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Hashable, Iterable, Sequence
import inspect
import logging
from operator import attrgetter
from typing import Generic, TypeVar

from strawberry.dataloader import DataLoader

K = TypeVar("K", bound=Hashable)
T = TypeVar("T")

FetchFn = Callable[[list[K]], Iterable[T] | Awaitable[Iterable[T]]]

logger = logging.getLogger(__name__)


class BatchLoader(Generic[K, T]):
    """Batch keyed lookups into one bulk fetch per event-loop turn.

    Args:
        fetch: Bulk-fetch function receiving the deduplicated keys of one
            batch. May be sync or async and may return the entities in any
            order; keys with no matching entity are simply left out.
        key_fn: Extracts the lookup key from a fetched entity. Defaults to
            the entity's ``id`` attribute.
        max_batch_size: Optional cap on keys per batch. When set, a busy turn
            can dispatch more than one fetch.
        name: Label used in log records.

    Attributes:
        dispatch_count: Number of bulk fetches issued so far.
    """

    def __init__(
        self,
        fetch: FetchFn[K, T],
        *,
        key_fn: Callable[[T], K] = attrgetter("id"),
        max_batch_size: int | None = None,
        name: str | None = None,
    ) -> None:
        self._fetch = fetch
        self._key_fn = key_fn
        self.name = name or getattr(fetch, "__name__", "batch")
        self.dispatch_count = 0
        self._loader: DataLoader[K, T | None] = DataLoader(
            load_fn=self._dispatch,
            max_batch_size=max_batch_size,
            cache=False,
        )

    async def _dispatch(self, keys: list[K]) -> list[T | None]:
        """Fetch one batch and fan the results back out in request order."""
        unique_keys = list(dict.fromkeys(keys))
        self.dispatch_count += 1

        logger.debug(
            "Dispatching %s batch",
            self.name,
            extra={
                "loader": self.name,
                "requested_keys": len(keys),
                "unique_keys": len(unique_keys),
                "dispatch": self.dispatch_count,
            },
        )

        result = self._fetch(unique_keys)
        if inspect.isawaitable(result):
            result = await result

        found: dict[K, T] = {}
        for entity in result:
            found.setdefault(self._key_fn(entity), entity)

        return [found.get(key) for key in keys]

    def load(self, key: K) -> Awaitable[T | None]:
        """Request one entity; resolves to ``None`` when the key is unknown."""
        return self._loader.load(key)

    def load_many(self, keys: Sequence[K]) -> Awaitable[list[T | None]]:
        """Request several entities, preserving the order (and duplicates) of ``keys``."""
        return self._loader.load_many(keys)


__all__ = ["BatchLoader", "FetchFn"]
