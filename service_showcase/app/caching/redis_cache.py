"""
Redis-backed cache store for sharing the project list across processes.
"""

import json
from typing import Any, Callable, Optional, TypeVar

import redis

from shared.logging import get_logger

T = TypeVar("T")


def _to_jsonable(value: Any) -> Any:
    """``json.dumps`` hook for value objects exposing ``to_dict()``."""
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_dict()
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


class RedisCache:
    """CacheStore over a synchronous Redis client.

    Values are stored as JSON; objects with a ``to_dict()`` method are
    serialized through it. ``decoder`` rebuilds the cached value from the
    decoded JSON on a hit. An entry that fails to decode is treated as a
    miss and overwritten. Presence is decided on the raw reply, which keeps
    cached empty lists as hits. Like MemoryCache, concurrent misses may each
    run the producer.
    """

    def __init__(
        self,
        redis_url: Optional[str] = None,
        *,
        client: Optional[redis.Redis] = None,
        prefix: str = "showcase",
        ttl: Optional[int] = None,
        decoder: Optional[Callable[[Any], Any]] = None,
    ):
        if client is None and not redis_url:
            raise ValueError("RedisCache needs a redis_url or a client")
        self.redis_url = redis_url
        self.prefix = prefix
        self.ttl = ttl
        self.decoder = decoder
        self.logger = get_logger("showcase.redis_cache")
        self._redis: Optional[redis.Redis] = client

    def _get_redis(self) -> redis.Redis:
        """Get Redis connection."""
        if self._redis is None:
            self._redis = redis.from_url(self.redis_url)
        return self._redis

    def _make_key(self, key: str) -> str:
        return f"{self.prefix}:{key}"

    def _decode(self, cached_data: Any) -> Any:
        data = json.loads(cached_data)
        if self.decoder is not None:
            return self.decoder(data)
        return data

    def fetch(self, key: str, producer: Callable[[], T]) -> T:
        redis_client = self._get_redis()
        cache_key = self._make_key(key)

        cached_data = redis_client.get(cache_key)
        if cached_data is not None:
            try:
                return self._decode(cached_data)
            except Exception as e:
                self.logger.warning("Discarding undecodable cache entry", key=cache_key, error=str(e))

        value = producer()
        payload = json.dumps(value, default=_to_jsonable)
        if self.ttl:
            redis_client.setex(cache_key, self.ttl, payload)
        else:
            redis_client.set(cache_key, payload)
        self.logger.debug("Cached value", key=cache_key, ttl=self.ttl)
        return value

    def delete(self, key: str) -> None:
        self._get_redis().delete(self._make_key(key))
