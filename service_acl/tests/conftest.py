"""
Shared fixtures for ACL tests.
"""

import pytest
from dataclasses import dataclass
from typing import List, Optional

from service_acl.app.acl.models import AclConfig, AclGroup, AclRole


@dataclass
class StubEntity:
    """Entity storing plain role and group lists."""
    roles: Optional[List[str]] = None
    groups: Optional[List[str]] = None

    def get_acl_roles(self) -> Optional[List[str]]:
        return self.roles

    def set_acl_roles(self, roles: List[str]) -> None:
        self.roles = roles

    def get_acl_groups(self) -> Optional[List[str]]:
        return self.groups

    def set_acl_groups(self, groups: List[str]) -> None:
        self.groups = groups


@pytest.fixture
def acl_config():
    """Two roles, two groups, default group "user"."""
    return AclConfig(
        default_group="user",
        groups=[
            AclGroup(name="admin", roles=["role_admin"]),
            AclGroup(name="user", roles=["role_user"]),
        ],
        roles=[
            AclRole(name="role_admin", scopes=["read:all", "write:all", "delete:all"]),
            AclRole(name="role_user", scopes=["read:own", "write:own"]),
        ],
    )


@pytest.fixture
def entity():
    """Entity with no roles or groups assigned."""
    return StubEntity()


@pytest.fixture
def make_entity():
    """Build an entity with the given role and group lists."""
    def _make(roles=None, groups=None):
        return StubEntity(roles=roles, groups=groups)
    return _make
