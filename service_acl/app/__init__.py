"""
ACL service package.

This package answers role-based access control questions for a user-like
entity and changes the entity's assigned roles and groups. It provides:

- app.main: Factory that wires settings, logging and the service.
- app.acl: Configuration models, the ACL service and the composable mixin.

Guidelines:
- The service is stateless; entities own and persist their assignments.
- Configuration is fixed at construction and never mutated.
"""
