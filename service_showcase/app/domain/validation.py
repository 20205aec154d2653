"""
Shape validation for decoded project feed payloads.
"""

from typing import Any, List

import pydantic

from shared.errors import ValidationError
from .project import Project


REQUIRED_KEYS = ("name", "url", "description")


def validate_projects(payload: Any) -> List[dict]:
    """Ensure the payload is a list of objects carrying the required keys.

    The first offending element aborts validation; nothing is returned
    partially.
    """
    if not isinstance(payload, list):
        raise ValidationError("Projects JSON must be an array")

    for idx, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValidationError(
                f"Project at index {idx} must be an object",
                details={"index": idx}
            )

        missing = [key for key in REQUIRED_KEYS if key not in item]
        if missing:
            raise ValidationError(
                f"Project at index {idx} is missing keys: {', '.join(missing)}",
                details={"index": idx, "missing_keys": missing}
            )

    return payload


def parse_projects(payload: Any) -> List[Project]:
    """Validate ``payload`` and map it to Project values, keeping order."""
    projects: List[Project] = []
    for idx, item in enumerate(validate_projects(payload)):
        try:
            projects.append(Project.model_validate(item))
        except pydantic.ValidationError as exc:
            fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
            raise ValidationError(
                f"Project at index {idx} has invalid fields: {', '.join(fields)}",
                details={"index": idx, "invalid_keys": fields}
            ) from exc
    return projects
