"""Domain exceptions."""

from sharegrant.domain.value_objects import ResourceKind


class SharingError(Exception):
    """Base exception for the sharing engine."""

    code = "internalServerError"


class ResourceNotFound(SharingError):
    """Resource does not exist or the caller may not manage its sharing."""

    def __init__(self, kind: ResourceKind) -> None:
        super().__init__(kind.not_found_code)
        self.kind = kind

    @property
    def code(self) -> str:
        return self.kind.not_found_code


class GranteeNotFound(SharingError):
    """Target user of a share does not exist."""

    code = "userNotFound"


class SelfShareForbidden(SharingError):
    """Caller tried to share a resource with themselves."""

    code = "cannotShareWithSelf"


class GrantConflict(SharingError):
    """A grant for the same (resource, grantee) pair already exists."""

    pass


class GrantNotFound(SharingError):
    """Grant with the given id does not exist for the resource."""

    code = "shareNotFound"


class ValidationError(SharingError):
    """Validation failed for input data."""

    code = "validationError"
