"""
ACL service: lookup, scope aggregation, predicates and assignment changes.
"""

from typing import List, Sequence, Union

from acl_common.errors import AclEntityKind, NotFoundError
from acl_common.logging import get_logger
from .models import AccessControlEntity, AclConfig, AclGroup, AclRole, NameOrNames


def _as_list(names: NameOrNames) -> List[str]:
    """Normalize a single name or a sequence of names to a list."""
    if isinstance(names, str):
        return [names]
    return list(names)


class AclService:
    """Role-based access control over a fixed configuration.

    The service keeps no per-entity state. Every entity operation reads the
    entity's current lists through its getters and, for mutations, writes a
    new list back through its setters. Lookups scan the configuration in
    declaration order, so the first entry with a given name wins.
    """

    def __init__(self, acl_config: AclConfig):
        self.logger = get_logger("acl.service")
        self.acl_config = acl_config

    def get_config(self) -> AclConfig:
        """Get the ACL configuration."""
        return self.acl_config

    # Lookup

    def get_role(self, role: str) -> AclRole:
        """Get a role by name."""
        for candidate in self.acl_config.roles:
            if candidate.name == role:
                return candidate

        self.logger.warning("Role not found", role=role)
        raise NotFoundError(AclEntityKind.ROLE, role)

    def get_group(self, group: Union[str, AclGroup]) -> AclGroup:
        """Get a group by name. Group values are returned as they are."""
        if isinstance(group, AclGroup):
            return group

        for candidate in self.acl_config.groups:
            if candidate.name == group:
                return candidate

        self.logger.warning("Group not found", group=group)
        raise NotFoundError(AclEntityKind.GROUP, group)

    def get_default_group(self) -> AclGroup:
        """Get the configured default group."""
        return self.get_group(self.acl_config.default_group)

    # Aggregation

    def get_role_scopes(self, role: NameOrNames) -> List[str]:
        """Get the scopes of one or more roles, in role order."""
        scopes: List[str] = []
        for role_name in _as_list(role):
            scopes.extend(self.get_role(role_name).scopes)
        return scopes

    def get_user_scopes(self, entity: AccessControlEntity) -> List[str]:
        """Get the scopes granted by the entity's assigned roles."""
        roles = entity.get_acl_roles()
        if not roles:
            return []
        return self.get_role_scopes(roles)

    def get_group_roles(self, group: Union[str, AclGroup]) -> List[AclRole]:
        """Get the roles referenced by a group."""
        return [self.get_role(role) for role in self.get_group(group).roles]

    def get_group_scopes(self, group: Union[str, AclGroup]) -> List[str]:
        """Get the scopes of every role in a group, in role order."""
        return [
            scope
            for role in self.get_group_roles(group)
            for scope in role.scopes
        ]

    # Predicates

    def has_scope(self, entity: AccessControlEntity, scope: str) -> bool:
        """Check whether any of the entity's roles grants the scope."""
        for role_name in entity.get_acl_roles() or []:
            if scope in self.get_role(role_name).scopes:
                return True
        return False

    def has_scopes(self, entity: AccessControlEntity, scopes: Sequence[str]) -> bool:
        """Check whether the entity has every one of the scopes."""
        return all(self.has_scope(entity, scope) for scope in scopes)

    def has_role(self, entity: AccessControlEntity, role: NameOrNames) -> bool:
        """Check whether every requested role is assigned to the entity."""
        assigned = entity.get_acl_roles() or []
        return all(name in assigned for name in _as_list(role))

    def has_group(self, entity: AccessControlEntity, group: NameOrNames) -> bool:
        """Check whether every requested group is assigned to the entity."""
        assigned = entity.get_acl_groups() or []
        return all(name in assigned for name in _as_list(group))

    # Mutation

    def assign_roles(self, entity: AccessControlEntity, role: NameOrNames) -> None:
        """Replace the entity's roles."""
        roles = _as_list(role)
        entity.set_acl_roles(roles)
        self.logger.debug("Roles assigned", roles=roles)

    def append_role(self, entity: AccessControlEntity, role: str) -> None:
        """Add a role to the end of the entity's roles."""
        roles = list(entity.get_acl_roles() or []) + [role]
        entity.set_acl_roles(roles)
        self.logger.debug("Role appended", role=role, roles=roles)

    def remove_roles(self, entity: AccessControlEntity, role: NameOrNames) -> None:
        """Remove one or more roles from the entity."""
        removed = _as_list(role)
        roles = [r for r in entity.get_acl_roles() or [] if r not in removed]
        entity.set_acl_roles(roles)
        self.logger.debug("Roles removed", removed=removed, roles=roles)

    def assign_groups(self, entity: AccessControlEntity, group: NameOrNames) -> None:
        """Replace the entity's groups."""
        groups = _as_list(group)
        entity.set_acl_groups(groups)
        self.logger.debug("Groups assigned", groups=groups)

    def append_group(self, entity: AccessControlEntity, group: str) -> None:
        """Add a group to the end of the entity's groups."""
        groups = list(entity.get_acl_groups() or []) + [group]
        entity.set_acl_groups(groups)
        self.logger.debug("Group appended", group=group, groups=groups)

    def remove_groups(self, entity: AccessControlEntity, group: NameOrNames) -> None:
        """Remove one or more groups from the entity."""
        removed = _as_list(group)
        groups = [g for g in entity.get_acl_groups() or [] if g not in removed]
        entity.set_acl_groups(groups)
        self.logger.debug("Groups removed", removed=removed, groups=groups)
