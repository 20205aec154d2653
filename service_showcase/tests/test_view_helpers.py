"""
Unit tests for the process-wide surface and template helpers.
"""

from unittest.mock import MagicMock, patch

import pytest

from service_showcase.app import (
    CACHE_KEY,
    MemoryCache,
    Project,
    ProjectRepository,
    clear_cache,
    configure,
    get_repository,
    projects,
    random_project,
    reset_repository,
)
from service_showcase.app.helpers import showcase_projects, showcase_random_project, template_helpers


PROJECT = Project(name="A", url="https://a.example.com", description="first")


@pytest.fixture(autouse=True)
def fresh_repository(monkeypatch):
    monkeypatch.delenv("SHOWCASE_REDIS_URL", raising=False)
    monkeypatch.delenv("SHOWCASE_ENDPOINT_URL", raising=False)
    reset_repository()
    yield
    reset_repository()


@pytest.fixture
def seeded_store():
    store = MemoryCache()
    store.fetch(CACHE_KEY, lambda: [PROJECT])
    return store


def test_get_repository_is_shared():
    assert get_repository() is get_repository()


def test_endpoint_read_from_environment(monkeypatch):
    monkeypatch.setenv("SHOWCASE_ENDPOINT_URL", "https://env.example.com/projects.json")
    reset_repository()

    assert get_repository().configuration.endpoint_url == "https://env.example.com/projects.json"


def test_configure_updates_shared_repository(seeded_store):
    configuration = configure(endpoint_url="https://example.com/p.json", cache_store=seeded_store)

    assert configuration.endpoint_url == "https://example.com/p.json"
    assert get_repository().cache_store is seeded_store
    assert projects() == [PROJECT]
    assert random_project() == PROJECT


def test_configure_keeps_unset_options(seeded_store):
    configure(cache_store=seeded_store)
    configure(endpoint_url="https://example.com/p.json")

    assert get_repository().configuration.cache_store is seeded_store


def test_module_clear_cache(seeded_store):
    configure(cache_store=seeded_store)

    clear_cache()

    assert CACHE_KEY not in seeded_store


def test_view_helpers_delegate(seeded_store):
    configure(cache_store=seeded_store)

    assert showcase_projects() == [PROJECT]
    assert showcase_random_project() == PROJECT


def test_template_helpers_default():
    helpers = template_helpers()

    assert helpers == {
        "showcase_projects": showcase_projects,
        "showcase_random_project": showcase_random_project,
    }


def test_template_helpers_bound_to_repository():
    repository = MagicMock(spec=ProjectRepository)
    repository.projects.return_value = [PROJECT]
    repository.random_project.return_value = PROJECT

    helpers = template_helpers(repository)

    assert helpers["showcase_projects"]() == [PROJECT]
    assert helpers["showcase_random_project"]() == PROJECT


def test_shared_repository_configures_logging_from_environment(monkeypatch):
    monkeypatch.setenv("SHOWCASE_LOG_LEVEL", "warning")

    with patch("service_showcase.app.repository.configure_logging") as mock_configure:
        get_repository()
        get_repository()

    mock_configure.assert_called_once_with("showcase", "warning")
