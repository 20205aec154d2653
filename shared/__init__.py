"""
Shared utilities for the Showcase project feed.

This package aggregates common building blocks consumed by the feed
service:

- config: Environment settings via pydantic-settings
- logging: Structured logging with structlog
- metrics: Prometheus metrics helpers
- errors: Canonical error types and responses

Do not import from service_* packages into shared/.
"""
