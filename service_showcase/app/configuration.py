"""
Feed configuration held by a ProjectRepository.
"""

from typing import Optional

from shared.config import ShowcaseSettings
from .caching import CacheStore


class Configuration:
    """Endpoint URL plus an optional explicitly chosen cache store.

    No endpoint is assumed. A missing one is reported when a fetch is
    attempted, not here.
    """

    def __init__(self, endpoint_url: Optional[str] = None, cache_store: Optional[CacheStore] = None):
        self.endpoint_url = endpoint_url
        self.cache_store = cache_store

    @classmethod
    def from_settings(cls, settings: ShowcaseSettings) -> "Configuration":
        return cls(endpoint_url=settings.endpoint_url)

    def configure(
        self,
        endpoint_url: Optional[str] = None,
        cache_store: Optional[CacheStore] = None,
    ) -> "Configuration":
        """Update the given options, leaving the others untouched."""
        if endpoint_url is not None:
            self.endpoint_url = endpoint_url
        if cache_store is not None:
            self.cache_store = cache_store
        return self

    def __repr__(self) -> str:
        return f"Configuration(endpoint_url={self.endpoint_url!r}, cache_store={self.cache_store!r})"
