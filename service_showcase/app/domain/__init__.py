"""
Domain package for the Showcase feed.

Holds the Project value object and the payload validation that guards
its construction.
"""

from .project import Project
from .validation import REQUIRED_KEYS, parse_projects, validate_projects

__all__ = ["Project", "REQUIRED_KEYS", "parse_projects", "validate_projects"]
