"""
Shared utilities for the Kong admin API access layer.

This package aggregates common building blocks consumed by the client:

- config: Client configuration via pydantic-settings
- logging: Structured logging via structlog
- errors: Canonical error types and responses

Any cross-cutting logic should live here to avoid import cycles. Do not
import from kong_admin into shared/.
"""
