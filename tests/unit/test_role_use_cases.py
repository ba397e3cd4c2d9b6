"""Unit tests for role use cases."""

import pytest

from rolectl.application.use_cases.role.create_role import CreateRoleUseCase
from rolectl.application.use_cases.role.delete_role import DeleteRoleUseCase
from rolectl.application.use_cases.role.grant_permissions import GrantPermissionsUseCase
from rolectl.application.use_cases.role.list_roles import ListRolesUseCase
from rolectl.application.use_cases.role.revoke_permissions import (
    RevokePermissionsUseCase,
)
from rolectl.domain.entities import Role
from rolectl.domain.exceptions import (
    AlreadyExists,
    InvalidPermission,
    NotFound,
    ValidationError,
)

from tests.fakes import StaticPermissionRegistry


# --- CreateRoleUseCase ---


def test_create_role_derives_label(uow_factory, fake_uow, notifications) -> None:
    """CreateRoleUseCase upper-cases only the first letter when label is omitted."""
    use_case = CreateRoleUseCase(uow_factory, notifications)

    role = use_case.execute("test_role")

    assert role.label == "Test_role"
    assert role.permissions == set()
    assert fake_uow.roles.get("test_role") == role
    assert notifications.messages == ['Created "test_role"']
    assert fake_uow.commits == 1


def test_create_role_keeps_given_label(uow_factory, fake_uow, notifications) -> None:
    """CreateRoleUseCase stores the label it was given."""
    use_case = CreateRoleUseCase(uow_factory, notifications)

    role = use_case.execute("editor", "Content editor")

    assert role.label == "Content editor"


def test_create_role_duplicate_raises(uow_factory, fake_uow, notifications) -> None:
    """CreateRoleUseCase raises AlreadyExists and leaves the existing role alone."""
    fake_uow.roles.add_role(Role(id="editor", label="Editor", permissions={"edit"}))
    use_case = CreateRoleUseCase(uow_factory, notifications)

    with pytest.raises(AlreadyExists, match="editor"):
        use_case.execute("editor", "Other")

    assert fake_uow.roles.get("editor") == Role(id="editor", label="Editor", permissions={"edit"})
    assert fake_uow.rollbacks == 1
    assert notifications.messages == []


@pytest.mark.parametrize("role_id", ["", "   "])
def test_create_role_empty_id_raises(uow_factory, notifications, role_id) -> None:
    """CreateRoleUseCase rejects an empty machine name."""
    use_case = CreateRoleUseCase(uow_factory, notifications)

    with pytest.raises(ValidationError):
        use_case.execute(role_id)


# --- DeleteRoleUseCase ---


def test_delete_role_success(uow_factory, fake_uow, notifications) -> None:
    """DeleteRoleUseCase removes the role and notifies."""
    fake_uow.roles.add_role(Role(id="editor", label="Editor"))
    use_case = DeleteRoleUseCase(uow_factory, notifications)

    use_case.execute("editor")

    assert fake_uow.roles.get("editor") is None
    assert notifications.messages == ['Deleted "editor"']


def test_delete_role_not_found(uow_factory, fake_uow, notifications) -> None:
    """DeleteRoleUseCase raises NotFound for an unknown role."""
    fake_uow.roles.add_role(Role(id="editor", label="Editor"))
    use_case = DeleteRoleUseCase(uow_factory, notifications)

    with pytest.raises(NotFound, match="ghost"):
        use_case.execute("ghost")

    assert [r.id for r in fake_uow.roles.get_all()] == ["editor"]
    assert notifications.messages == []


# --- GrantPermissionsUseCase ---


def test_grant_permissions_union(uow_factory, fake_uow, notifications, cache_invalidator) -> None:
    """GrantPermissionsUseCase adds names, notifies and invalidates once."""
    fake_uow.roles.add_role(Role(id="x", label="X", permissions={"a"}))
    use_case = GrantPermissionsUseCase(
        uow_factory, notifications, cache_invalidator=cache_invalidator
    )

    role = use_case.execute("x", ["a", "b"])

    assert role.permissions == {"a", "b"}
    assert fake_uow.roles.get("x").permissions == {"a", "b"}
    assert notifications.messages == ['Added "a,b" to "x"']
    assert cache_invalidator.invalidated == ["x"]


def test_grant_permissions_unknown_role(uow_factory, notifications, cache_invalidator) -> None:
    """GrantPermissionsUseCase raises NotFound and does not invalidate."""
    use_case = GrantPermissionsUseCase(
        uow_factory, notifications, cache_invalidator=cache_invalidator
    )

    with pytest.raises(NotFound):
        use_case.execute("ghost", ["a"])

    assert cache_invalidator.invalidated == []


def test_grant_permissions_invalid_is_atomic(uow_factory, fake_uow, notifications, cache_invalidator) -> None:
    """One unknown name fails the whole grant; nothing is applied."""
    fake_uow.roles.add_role(Role(id="x", label="X"))
    registry = StaticPermissionRegistry({"a", "b"})
    use_case = GrantPermissionsUseCase(
        uow_factory,
        notifications,
        permission_registry=registry,
        cache_invalidator=cache_invalidator,
    )

    with pytest.raises(InvalidPermission) as exc_info:
        use_case.execute("x", ["a", "nope", "b", "bogus"])

    assert exc_info.value.names == ["nope", "bogus"]
    assert fake_uow.roles.get("x").permissions == set()
    assert notifications.messages == []
    assert cache_invalidator.invalidated == []


def test_grant_permissions_not_found_checked_before_names(uow_factory, notifications) -> None:
    """Missing role is reported even when the names are invalid too."""
    registry = StaticPermissionRegistry(set())
    use_case = GrantPermissionsUseCase(uow_factory, notifications, permission_registry=registry)

    with pytest.raises(NotFound):
        use_case.execute("ghost", ["nope"])


def test_grant_permissions_uses_units_registry(fake_uow, uow_factory, notifications) -> None:
    """A registry exposed by the unit of work validates names in the same transaction."""
    fake_uow.permissions = StaticPermissionRegistry({"a"})
    fake_uow.roles.add_role(Role(id="x", label="X"))
    use_case = GrantPermissionsUseCase(uow_factory, notifications)

    with pytest.raises(InvalidPermission, match="nope"):
        use_case.execute("x", ["a", "nope"])
    role = use_case.execute("x", ["a"])

    assert role.permissions == {"a"}


def test_grant_permissions_empty_list(uow_factory, fake_uow, notifications) -> None:
    """GrantPermissionsUseCase requires at least one name."""
    fake_uow.roles.add_role(Role(id="x", label="X"))
    use_case = GrantPermissionsUseCase(uow_factory, notifications)

    with pytest.raises(ValidationError):
        use_case.execute("x", [" ", ""])


# --- RevokePermissionsUseCase ---


def test_revoke_permissions_difference(uow_factory, fake_uow, notifications, cache_invalidator) -> None:
    """RevokePermissionsUseCase removes held names and ignores absent ones."""
    fake_uow.roles.add_role(Role(id="x", label="X", permissions={"a", "b"}))
    use_case = RevokePermissionsUseCase(
        uow_factory, notifications, cache_invalidator=cache_invalidator
    )

    role = use_case.execute("x", ["a", "z"])

    assert role.permissions == {"b"}
    assert fake_uow.roles.get("x").permissions == {"b"}
    assert notifications.messages == ['Removed "a,z" from "x"']
    assert cache_invalidator.invalidated == ["x"]


def test_revoke_permissions_validates_names(uow_factory, fake_uow, notifications) -> None:
    """RevokePermissionsUseCase checks names against the registry too."""
    fake_uow.roles.add_role(Role(id="x", label="X", permissions={"a"}))
    registry = StaticPermissionRegistry({"a"})
    use_case = RevokePermissionsUseCase(uow_factory, notifications, permission_registry=registry)

    with pytest.raises(InvalidPermission, match="zzz"):
        use_case.execute("x", ["a", "zzz"])

    assert fake_uow.roles.get("x").permissions == {"a"}


def test_revoke_permissions_uses_units_registry(fake_uow, uow_factory, notifications) -> None:
    """Without its own registry the use case validates through the unit of work."""
    fake_uow.permissions = StaticPermissionRegistry({"a"})
    fake_uow.roles.add_role(Role(id="x", label="X", permissions={"a"}))
    use_case = RevokePermissionsUseCase(uow_factory, notifications)

    with pytest.raises(InvalidPermission) as exc_info:
        use_case.execute("x", ["a", "zzz"])

    assert exc_info.value.names == ["zzz"]
    assert fake_uow.roles.get("x").permissions == {"a"}


# --- Machine name normalization ---


@pytest.mark.parametrize("use_case_cls", [DeleteRoleUseCase, GrantPermissionsUseCase, RevokePermissionsUseCase])
def test_blank_role_id_raises(uow_factory, notifications, use_case_cls) -> None:
    """Every role operation rejects a blank machine name, not only create."""
    use_case = use_case_cls(uow_factory, notifications)
    args = ("  ",) if use_case_cls is DeleteRoleUseCase else ("  ", ["a"])

    with pytest.raises(ValidationError):
        use_case.execute(*args)


def test_operations_strip_role_id(uow_factory, fake_uow, notifications) -> None:
    """Surrounding whitespace is ignored by grant, revoke and delete."""
    fake_uow.roles.add_role(Role(id="editor", label="Editor"))

    GrantPermissionsUseCase(uow_factory, notifications).execute(" editor ", ["a", "b"])
    RevokePermissionsUseCase(uow_factory, notifications).execute("editor\t", ["a"])
    assert fake_uow.roles.get("editor").permissions == {"b"}

    DeleteRoleUseCase(uow_factory, notifications).execute(" editor")
    assert fake_uow.roles.get("editor") is None
    assert notifications.messages == [
        'Added "a,b" to "editor"',
        'Removed "a" from "editor"',
        'Deleted "editor"',
    ]


# --- ListRolesUseCase ---


def test_list_roles_ordered(uow_factory, fake_uow) -> None:
    """ListRolesUseCase returns roles ordered by id."""
    for role_id in ("b", "a", "c"):
        fake_uow.roles.add_role(Role(id=role_id, label=role_id.upper()))

    roles = ListRolesUseCase(uow_factory).execute()

    assert [r.id for r in roles] == ["a", "b", "c"]
