"""
HTTP client for the remote project feed.
"""

import json
from typing import Any, List, Optional

import httpx

from shared.logging import get_logger
from shared.errors import ConfigurationError, FetchError, ParseError, ShowcaseError
from ..domain import Project, parse_projects


DEFAULT_TIMEOUT = 10.0


class ProjectsClient:
    """Fetches, decodes and validates the project list from an endpoint.

    Every failure leaves this client as a ShowcaseError subclass: typed
    errors pass through and anything else is wrapped into FetchError with
    the original message.
    """

    def __init__(self, timeout: Optional[float] = DEFAULT_TIMEOUT):
        self.timeout = timeout
        self.logger = get_logger("showcase.projects_client")

    def fetch_projects(self, endpoint_url: Optional[str]) -> List[Project]:
        """Run one full fetch against ``endpoint_url``."""
        try:
            if not endpoint_url:
                raise ConfigurationError("endpoint_url must be configured")

            body = self._get(endpoint_url)
            payload = self._decode(endpoint_url, body)
            projects = parse_projects(payload)
            self.logger.info("Projects fetched", url=endpoint_url, count=len(projects))
            return projects
        except ShowcaseError as exc:
            self.logger.error("Project feed error", url=endpoint_url, code=exc.code, error=exc.message)
            raise
        except Exception as exc:
            self.logger.error("Unexpected project feed error", url=endpoint_url, error=str(exc))
            raise FetchError(str(exc), details={"endpoint": endpoint_url}) from exc

    def _get(self, url: str) -> str:
        try:
            with httpx.Client(timeout=self.timeout) as client:
                response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                str(exc),
                details={"endpoint": url, "status_code": exc.response.status_code}
            ) from exc
        except httpx.HTTPError as exc:
            raise FetchError(str(exc), details={"endpoint": url}) from exc

        self.logger.debug("Project feed response", url=url, status_code=response.status_code)
        return response.text

    def _decode(self, url: str, body: str) -> Any:
        try:
            return json.loads(body)
        except json.JSONDecodeError as exc:
            raise ParseError(url, str(exc)) from exc
