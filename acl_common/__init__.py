"""
Shared utilities for the ACL service.

This package holds the ambient building blocks used by the ACL code:

- config: Service settings via pydantic-settings
- logging: Structured logging with structlog
- errors: Canonical error types and responses

Do not import from service_acl into acl_common.
"""
