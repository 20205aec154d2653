"""
Showcase feed application package.

Public surface: the Project value, the CacheStore contract and its
stores, Configuration, ProjectRepository, and the process-wide
convenience functions.
"""

from .domain import Project
from .caching import CacheStore, MemoryCache, RedisCache
from .configuration import Configuration
from .repository import (
    CACHE_KEY,
    ProjectRepository,
    clear_cache,
    configure,
    get_repository,
    projects,
    random_project,
    reset_repository,
)

__all__ = [
    "CACHE_KEY",
    "CacheStore",
    "Configuration",
    "MemoryCache",
    "Project",
    "ProjectRepository",
    "RedisCache",
    "clear_cache",
    "configure",
    "get_repository",
    "projects",
    "random_project",
    "reset_repository",
]
