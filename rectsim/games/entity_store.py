"""
Entity Store - ordered, optionally bounded collection of game entities.

Removal is done with a single compaction pass (`retain_if`) that hands the
removed entities back to the caller, so per-entity side effects (score,
health) are applied after the store is consistent again and an entity
removed once is never visited by a later pass.
"""
from typing import Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from rectsim.logging import get_logger

log = get_logger('entity_store')

T = TypeVar('T')


class EntityStore(Generic[T]):
    """Ordered sequence of entities with an optional soft capacity.

    Appends beyond the capacity are dropped, not queued.

    Examples:
        >>> store = EntityStore(capacity=2)
        >>> store.append('a'), store.append('b'), store.append('c')
        (True, True, False)
        >>> store.retain_if(lambda e: e != 'a')
        ['a']
        >>> list(store)
        ['b']
    """

    def __init__(self, capacity: Optional[int] = None):
        """Initialize an empty store.

        Args:
            capacity: Maximum number of live entities (None = unbounded)
        """
        if capacity is not None and capacity < 0:
            raise ValueError(f"capacity must be non-negative, got {capacity}")
        self._capacity = capacity
        self._entities: List[T] = []

    @property
    def capacity(self) -> Optional[int]:
        """Maximum number of live entities (None = unbounded)."""
        return self._capacity

    @property
    def is_full(self) -> bool:
        """True when another append would be dropped."""
        return self._capacity is not None and len(self._entities) >= self._capacity

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[T]:
        return iter(self._entities)

    def __getitem__(self, index: int) -> T:
        return self._entities[index]

    def append(self, entity: T) -> bool:
        """Add an entity at the end.

        Returns:
            True if stored, False if dropped because the store is full
        """
        if self.is_full:
            log.trace("store full (%d), dropping entity", len(self._entities))
            return False
        self._entities.append(entity)
        return True

    def retain_if(self, keep: Callable[[T], bool]) -> List[T]:
        """Keep entities for which `keep` is true, remove the rest.

        Args:
            keep: Predicate evaluated once per entity, in order

        Returns:
            Removed entities, in their original order
        """
        kept: List[T] = []
        removed: List[T] = []
        for entity in self._entities:
            if keep(entity):
                kept.append(entity)
            else:
                removed.append(entity)
        self._entities = kept
        return removed

    def clear(self) -> int:
        """Remove every entity.

        Returns:
            Number of entities removed
        """
        count = len(self._entities)
        self._entities = []
        return count

    def top(self) -> Optional[T]:
        """Most recently appended entity, or None when empty."""
        if not self._entities:
            return None
        return self._entities[-1]

    def snapshot(self) -> Tuple[T, ...]:
        """Immutable view of the current contents."""
        return tuple(self._entities)
