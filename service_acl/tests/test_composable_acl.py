"""
Unit tests for the composable ACL mixin.
"""

import pytest

from acl_common.errors import NotFoundError
from service_acl.app.acl.composable import AclMixin, composable_acl
from service_acl.app.acl.models import AccessControlEntity, AclConfig, AclRole
from service_acl.app.acl.service import AclService


class BaseUser:
    """Host class with its own constructor."""

    def __init__(self, user_id, email=None):
        self.user_id = user_id
        self.email = email


class LegacyUser:
    """Host class with its own role check."""

    def has_role(self, role):
        return True

    def get_config(self):
        return {}


class TestComposableAcl:
    """Test cases for composable_acl."""

    @pytest.fixture
    def user_class(self, acl_config):
        """Create a user class with ACL behaviour."""
        class User(composable_acl(acl_config), BaseUser):
            pass
        return User

    @pytest.fixture
    def user(self, user_class):
        """Create a user without assignments."""
        return user_class("user-123", email="user@example.com")

    def test_host_constructor_untouched(self, user):
        assert user.user_id == "user-123"
        assert user.email == "user@example.com"

    def test_is_access_control_entity(self, user):
        assert isinstance(user, AccessControlEntity)

    def test_empty_storage_reads_as_absent(self, user):
        assert user.get_acl_roles() is None
        assert user.get_acl_groups() is None

        user.set_acl_roles([])

        assert user.get_acl_roles() is None

    def test_storage_is_per_instance(self, user_class):
        first = user_class("a")
        second = user_class("b")

        first.assign_roles("role_admin")

        assert first.get_acl_roles() == ["role_admin"]
        assert second.get_acl_roles() is None

    def test_service_shared_per_class(self, user_class):
        first = user_class("a")
        second = user_class("b")

        assert isinstance(first.acl_service, AclService)
        assert first.acl_service is second.acl_service

    def test_config_lookups(self, user, acl_config):
        assert user.get_config() is acl_config
        assert user.get_default_group().name == "user"
        assert user.get_group("admin").roles == ("role_admin",)
        assert user.get_role("role_user").scopes == ("read:own", "write:own")
        assert user.get_role_scopes(["role_user"]) == ["read:own", "write:own"]
        assert [role.name for role in user.get_group_roles("admin")] == ["role_admin"]
        assert user.get_group_scopes("admin") == ["read:all", "write:all", "delete:all"]

    def test_lookup_failure(self, user):
        with pytest.raises(NotFoundError):
            user.get_group("guests")

    def test_scopes_and_predicates(self, user):
        assert user.get_user_scopes() == []
        assert user.has_scope("read:own") is False

        user.assign_roles("role_user")

        assert user.get_user_scopes() == ["read:own", "write:own"]
        assert user.has_scope("read:own") is True
        assert user.has_scopes(["read:own", "write:own"]) is True
        assert user.has_scopes(["read:own", "delete:all"]) is False
        assert user.has_role("role_user") is True
        assert user.has_role(["role_user", "role_admin"]) is False

    def test_role_mutations(self, user):
        user.append_role("role_user")
        user.append_role("role_admin")
        user.append_role("role_user")

        assert user.get_acl_roles() == ["role_user", "role_admin", "role_user"]

        user.remove_roles("role_user")

        assert user.get_acl_roles() == ["role_admin"]

        user.remove_roles(["role_admin"])

        assert user.get_acl_roles() is None

    def test_group_mutations(self, user):
        user.assign_groups(["user"])
        user.append_group("admin")

        assert user.has_group(["user", "admin"]) is True

        user.remove_groups("user")

        assert user.get_acl_groups() == ["admin"]
        assert user.has_group("user") is False


class TestAclMixin:
    """Test cases for subclassing AclMixin directly."""

    def test_class_attribute_config(self):
        config = AclConfig(
            default_group="staff",
            roles=[AclRole(name="role_staff", scopes=["read:reports"])],
        )

        class Staff(AclMixin):
            acl_config = config

        staff = Staff()
        staff.append_role("role_staff")

        assert staff.has_scope("read:reports") is True

    def test_subclass_gets_own_service(self, acl_config):
        parent_config = acl_config
        other_config = AclConfig(default_group="other")

        class Parent(AclMixin):
            acl_config = parent_config

        class Child(Parent):
            acl_config = other_config

        assert Parent().get_config() is parent_config
        assert Child().get_config() is other_config

    def test_mixin_methods_take_precedence_over_host(self, acl_config):
        class User(composable_acl(acl_config), LegacyUser):
            pass

        user = User()

        assert user.has_role("role_admin") is False
        assert user.get_config() is acl_config

        user.assign_roles("role_admin")

        assert user.has_role("role_admin") is True
