"""
Adapters package for the Showcase feed.

Contains the HTTP client for the remote project endpoint. The adapter
encapsulates the request, JSON decoding and the mapping of transport
failures to shared errors. No retries are attempted.
"""

from .projects_client import ProjectsClient

__all__ = ["ProjectsClient"]
