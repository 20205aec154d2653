"""
Cache store contract and the default in-process store.
"""

from typing import Any, Callable, Dict, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")


@runtime_checkable
class CacheStore(Protocol):
    """Read-through cache keyed by string.

    ``fetch`` returns the stored value when the key is present and must not
    call ``producer`` in that case. On a miss it calls ``producer`` once,
    stores the result and returns it. If ``producer`` raises, nothing is
    stored. ``delete`` is idempotent.

    Stores meant for concurrent use should call the producer at most once
    per key under concurrent misses; the stores shipped here do not.
    """

    def fetch(self, key: str, producer: Callable[[], T]) -> T:
        ...

    def delete(self, key: str) -> None:
        ...


class MemoryCache:
    """Dict-backed store living as long as the process.

    No TTL and no eviction. Presence is decided by key membership, so empty
    or falsy values are hits. Not single-flight: two threads missing the same
    key at once may both run the producer, and the last write wins.
    """

    def __init__(self):
        self._data: Dict[str, Any] = {}

    def fetch(self, key: str, producer: Callable[[], T]) -> T:
        if key in self._data:
            return self._data[key]
        value = producer()
        self._data[key] = value
        return value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def clear(self) -> None:
        self._data.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)
