"""
Unit tests for project payload validation.
"""

import pytest

from service_showcase.app.domain import Project, parse_projects, validate_projects
from shared.errors import ValidationError


VALID = {"name": "A", "url": "https://a.example.com", "description": "first"}


def test_rejects_object_at_top_level():
    with pytest.raises(ValidationError) as exc_info:
        validate_projects({"projects": []})

    assert str(exc_info.value) == "Projects JSON must be an array"


def test_rejects_non_object_element():
    with pytest.raises(ValidationError) as exc_info:
        validate_projects([VALID, "not a project"])

    assert str(exc_info.value) == "Project at index 1 must be an object"
    assert exc_info.value.details == {"index": 1}


def test_reports_missing_url():
    with pytest.raises(ValidationError) as exc_info:
        validate_projects([{"name": "A", "description": "no url"}])

    assert str(exc_info.value) == "Project at index 0 is missing keys: url"


def test_lists_missing_keys_in_order():
    payload = [VALID, VALID, {"name": "C"}]

    with pytest.raises(ValidationError) as exc_info:
        validate_projects(payload)

    assert str(exc_info.value) == "Project at index 2 is missing keys: url, description"
    assert exc_info.value.details["missing_keys"] == ["url", "description"]


def test_first_bad_element_wins():
    with pytest.raises(ValidationError) as exc_info:
        validate_projects([VALID, 42, {"name": "C"}])

    assert "index 1" in str(exc_info.value)


def test_logo_url_is_optional_and_extra_keys_ignored():
    projects = parse_projects([dict(VALID, stars=12)])

    assert projects == [Project(name="A", url="https://a.example.com", description="first")]


def test_logo_url_camel_case_alias():
    projects = parse_projects([dict(VALID, logoURL="https://a.example.com/logo.svg")])

    assert projects[0].logo_url == "https://a.example.com/logo.svg"


def test_wrong_field_type_is_validation_error():
    with pytest.raises(ValidationError) as exc_info:
        parse_projects([VALID, dict(VALID, name=7)])

    assert "index 1" in str(exc_info.value)
    assert exc_info.value.details["invalid_keys"] == ["name"]


def test_empty_list_is_valid():
    assert parse_projects([]) == []


def test_project_is_immutable():
    project = Project(**VALID)

    with pytest.raises(Exception):
        project.name = "changed"

    assert project.to_dict() == dict(VALID, logo_url=None)
    assert hash(project) == hash(Project(**VALID))
