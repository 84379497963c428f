"""
ACL package.

Modules of interest:
- models: Role, group and configuration models plus the entity protocol.
- service: Lookup, scope aggregation, predicates and assignment changes.
- composable: Mixin that folds the service into an entity class.
"""

from .models import AccessControlEntity, AclConfig, AclGroup, AclRole
from .service import AclService
from .composable import AclMixin, composable_acl

__all__ = [
    "AccessControlEntity",
    "AclConfig",
    "AclGroup",
    "AclRole",
    "AclService",
    "AclMixin",
    "composable_acl",
]
