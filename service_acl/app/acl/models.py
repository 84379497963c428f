"""
ACL data models.
"""

from typing import List, Optional, Protocol, Sequence, Tuple, Union, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field


# A single name or a list of names; single strings are normalized to [name].
NameOrNames = Union[str, Sequence[str]]


class AclRole(BaseModel):
    """Named bundle of scopes."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Role name")
    scopes: Tuple[str, ...] = Field(default_factory=tuple, description="Scopes granted by the role")


class AclGroup(BaseModel):
    """Named bundle of role references."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Group name")
    roles: Tuple[str, ...] = Field(default_factory=tuple, description="Names of the roles in the group")


class AclConfig(BaseModel):
    """Static ACL configuration.

    Role references inside groups and the default group are not checked
    here; they are resolved when first looked up.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_group: str = Field(..., min_length=1, alias="defaultGroup", description="Default group name")
    groups: Tuple[AclGroup, ...] = Field(default_factory=tuple, description="Configured groups")
    roles: Tuple[AclRole, ...] = Field(default_factory=tuple, description="Configured roles")


@runtime_checkable
class AccessControlEntity(Protocol):
    """Anything that stores assigned role and group names.

    The getters return None when nothing is assigned.
    """

    def get_acl_roles(self) -> Optional[List[str]]:
        ...

    def set_acl_roles(self, roles: List[str]) -> None:
        ...

    def get_acl_groups(self) -> Optional[List[str]]:
        ...

    def set_acl_groups(self, groups: List[str]) -> None:
        ...
