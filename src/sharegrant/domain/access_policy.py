"""Access policy - folds ownership and grants into permission flags.

Pure functions, shared by every resource kind.
"""

from dataclasses import dataclass

from sharegrant.domain.value_objects import Permission


@dataclass(frozen=True)
class PermissionFlags:
    """What a caller may do with a resource."""

    can_edit: bool
    can_share: bool
    is_owner: bool


def derive_permissions(is_owner: bool, grant_permission: Permission | None) -> PermissionFlags:
    """Derive edit/share flags from ownership and the caller's applicable grant."""
    if is_owner:
        return PermissionFlags(can_edit=True, can_share=True, is_owner=True)
    if grant_permission is None:
        return PermissionFlags(can_edit=False, can_share=False, is_owner=False)
    return PermissionFlags(
        can_edit=grant_permission >= Permission.WRITE,
        can_share=grant_permission == Permission.FULL,
        is_owner=False,
    )


def effective_permission(
    is_owner: bool,
    personal: Permission | None,
    wildcard: Permission | None,
) -> Permission | None:
    """Permission applicable to a caller.

    Owner is FULL. A personal grant wins over the wildcard grant even when
    the wildcard grant is higher.
    """
    if is_owner:
        return Permission.FULL
    if personal is not None:
        return personal
    return wildcard


def can_manage_sharing(is_owner: bool, personal: Permission | None) -> bool:
    """Only the owner and personal FULL holders may list, change or revoke grants.

    A wildcard grant never confers sharing management, whatever its level.
    """
    return is_owner or personal == Permission.FULL
