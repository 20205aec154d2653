"""
Template-facing accessors for the project feed.

Registering these with a template engine is left to the host application,
e.g. ``env.globals.update(template_helpers())`` for Jinja2.
"""

from typing import Callable, Dict, List, Optional

from .domain import Project
from .repository import ProjectRepository, get_repository


def showcase_projects() -> List[Project]:
    """All cached projects from the process-wide repository."""
    return get_repository().projects()


def showcase_random_project() -> Optional[Project]:
    """One random project from the process-wide repository."""
    return get_repository().random_project()


def template_helpers(repository: Optional[ProjectRepository] = None) -> Dict[str, Callable]:
    """Name-to-callable map for a template environment's globals.

    Bound to ``repository`` when given, otherwise to the process-wide one.
    """
    if repository is None:
        return {
            "showcase_projects": showcase_projects,
            "showcase_random_project": showcase_random_project,
        }
    return {
        "showcase_projects": repository.projects,
        "showcase_random_project": repository.random_project,
    }
