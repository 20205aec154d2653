"""
Caching package for the Showcase feed.

Defines the CacheStore contract the repository consumes, the default
in-process MemoryCache and a Redis-backed store for sharing one cached
project list between processes.
"""

from .cache_store import CacheStore, MemoryCache
from .redis_cache import RedisCache

__all__ = ["CacheStore", "MemoryCache", "RedisCache"]
