"""
Composable ACL mixin.

Gives any class the ACL operations of AclService together with storage for
assigned roles and groups, so instances are their own access-control entity.

Usage::

    class User(composable_acl(acl_config), BaseUser):
        pass

    user = User(...)
    user.assign_roles("role_user")
    user.has_scope("read:own")
"""

from typing import List, Optional, Sequence, Type, Union

from .models import AclConfig, AclGroup, AclRole, NameOrNames
from .service import AclService


class AclMixin:
    """Mixin delegating to one AclService per class.

    Subclasses set ``acl_config``. The mixin defines no ``__init__``, so it
    can be combined with any base class.
    List it before the host base class so its methods take precedence.
    """

    acl_config: AclConfig

    @property
    def acl_service(self) -> AclService:
        cls = type(self)
        service = cls.__dict__.get("_acl_service")
        if service is None:
            service = AclService(cls.acl_config)
            cls._acl_service = service
        return service

    # Entity storage. Empty lists are reported as unassigned.

    def get_acl_roles(self) -> Optional[List[str]]:
        roles = getattr(self, "_acl_roles", None)
        return roles if roles else None

    def set_acl_roles(self, roles: List[str]) -> None:
        self._acl_roles = list(roles)

    def get_acl_groups(self) -> Optional[List[str]]:
        groups = getattr(self, "_acl_groups", None)
        return groups if groups else None

    def set_acl_groups(self, groups: List[str]) -> None:
        self._acl_groups = list(groups)

    # Configuration lookups

    def get_config(self) -> AclConfig:
        return self.acl_service.get_config()

    def get_default_group(self) -> AclGroup:
        return self.acl_service.get_default_group()

    def get_group(self, group: Union[str, AclGroup]) -> AclGroup:
        return self.acl_service.get_group(group)

    def get_role(self, role: str) -> AclRole:
        return self.acl_service.get_role(role)

    def get_role_scopes(self, role: NameOrNames) -> List[str]:
        return self.acl_service.get_role_scopes(role)

    def get_group_roles(self, group: Union[str, AclGroup]) -> List[AclRole]:
        return self.acl_service.get_group_roles(group)

    def get_group_scopes(self, group: Union[str, AclGroup]) -> List[str]:
        return self.acl_service.get_group_scopes(group)

    # Operations on this entity

    def get_user_scopes(self) -> List[str]:
        return self.acl_service.get_user_scopes(self)

    def has_scope(self, scope: str) -> bool:
        return self.acl_service.has_scope(self, scope)

    def has_scopes(self, scopes: Sequence[str]) -> bool:
        return self.acl_service.has_scopes(self, scopes)

    def has_role(self, role: NameOrNames) -> bool:
        return self.acl_service.has_role(self, role)

    def has_group(self, group: NameOrNames) -> bool:
        return self.acl_service.has_group(self, group)

    def assign_roles(self, role: NameOrNames) -> None:
        self.acl_service.assign_roles(self, role)

    def append_role(self, role: str) -> None:
        self.acl_service.append_role(self, role)

    def remove_roles(self, role: NameOrNames) -> None:
        self.acl_service.remove_roles(self, role)

    def assign_groups(self, group: NameOrNames) -> None:
        self.acl_service.assign_groups(self, group)

    def append_group(self, group: str) -> None:
        self.acl_service.append_group(self, group)

    def remove_groups(self, group: NameOrNames) -> None:
        self.acl_service.remove_groups(self, group)


def composable_acl(acl_config: AclConfig) -> Type[AclMixin]:
    """Create an AclMixin subclass bound to ``acl_config``."""
    return type("ComposableAcl", (AclMixin,), {"acl_config": acl_config})
