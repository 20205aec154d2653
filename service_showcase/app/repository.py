"""
Cached access to the remote project list.
"""

import random
from typing import List, Optional

from shared.config import ShowcaseSettings, get_settings
from shared.logging import configure_logging, get_logger
from shared.metrics import MetricsCollector
from .adapters import ProjectsClient
from .caching import CacheStore, MemoryCache, RedisCache
from .configuration import Configuration
from .domain import Project, parse_projects


CACHE_KEY = "showcase_projects"


class ProjectRepository:
    """Fetch-validate-cache pipeline for the project feed.

    The whole project list is cached under a single key. A fetch only
    happens when the resolved cache store misses, and a failed fetch leaves
    the cache empty so the next call tries again.
    """

    def __init__(
        self,
        configuration: Optional[Configuration] = None,
        *,
        settings: Optional[ShowcaseSettings] = None,
        metrics: Optional[MetricsCollector] = None,
        client: Optional[ProjectsClient] = None,
    ):
        self.settings = settings or get_settings()
        self.configuration = configuration or Configuration.from_settings(self.settings)
        self.metrics = metrics or MetricsCollector()
        self.client = client or ProjectsClient(timeout=self.settings.http_timeout)
        self.logger = get_logger("showcase.repository")

        self._environment_store: Optional[RedisCache] = None
        self._memory_store: Optional[MemoryCache] = None

    @property
    def cache_store(self) -> CacheStore:
        """Store in use right now.

        Resolved on every access: an explicitly configured store wins, then a
        Redis store when the environment names one, then a memory store
        created on first use.
        """
        if self.configuration.cache_store is not None:
            return self.configuration.cache_store

        if self.settings.redis_url:
            if self._environment_store is None:
                self._environment_store = RedisCache(
                    self.settings.redis_url,
                    ttl=self.settings.cache_ttl,
                    decoder=parse_projects
                )
            return self._environment_store

        if self._memory_store is None:
            self._memory_store = MemoryCache()
        return self._memory_store

    def projects(self, refresh: bool = False) -> List[Project]:
        """All projects, in feed order. ``refresh`` drops the cached list first."""
        if refresh:
            self.clear_cache()

        produced = False

        def _produce() -> List[Project]:
            nonlocal produced
            produced = True
            self.metrics.record_cache_lookup(hit=False)
            self.logger.debug("Project cache miss", key=CACHE_KEY)
            with self.metrics.time_fetch():
                return self.client.fetch_projects(self.configuration.endpoint_url)

        result = self.cache_store.fetch(CACHE_KEY, _produce)
        if not produced:
            self.metrics.record_cache_lookup(hit=True)
        return list(result)

    def random_project(self, refresh: bool = False) -> Optional[Project]:
        """One project picked uniformly, or None when the feed is empty."""
        projects = self.projects(refresh=refresh)
        if not projects:
            return None
        return random.choice(projects)

    def clear_cache(self) -> None:
        """Drop the cached list if the store supports deletion."""
        store = self.cache_store
        delete = getattr(store, "delete", None)
        if callable(delete):
            delete(CACHE_KEY)
            self.logger.debug("Project cache cleared", key=CACHE_KEY)


_default_repository: Optional[ProjectRepository] = None


def get_repository() -> ProjectRepository:
    """Process-wide repository, built from the environment on first use.

    Logging is configured from ``SHOWCASE_LOG_LEVEL`` when the repository
    is first built.
    """
    global _default_repository
    if _default_repository is None:
        settings = get_settings()
        configure_logging("showcase", settings.log_level)
        _default_repository = ProjectRepository(settings=settings)
    return _default_repository


def reset_repository() -> None:
    """Forget the process-wide repository (its cache goes with it)."""
    global _default_repository
    _default_repository = None


def configure(endpoint_url: Optional[str] = None, cache_store: Optional[CacheStore] = None) -> Configuration:
    """Configure the process-wide repository, typically once at startup."""
    return get_repository().configuration.configure(endpoint_url=endpoint_url, cache_store=cache_store)


def projects(refresh: bool = False) -> List[Project]:
    return get_repository().projects(refresh=refresh)


def random_project(refresh: bool = False) -> Optional[Project]:
    return get_repository().random_project(refresh=refresh)


def clear_cache() -> None:
    get_repository().clear_cache()
