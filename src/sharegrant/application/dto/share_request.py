"""Share request parsing."""

from dataclasses import dataclass

from sharegrant.domain.exceptions import ValidationError
from sharegrant.domain.value_objects import Permission


@dataclass
class ShareRequest:
    """Body of a create-or-update share call. user_id None shares with everyone."""

    user_id: str | None
    permission: Permission

    @classmethod
    def from_dict(cls, data: object) -> "ShareRequest":
        """Parse JSON body. Raises ValidationError on malformed input."""
        if not isinstance(data, dict):
            raise ValidationError("Request body must be an object")
        if "userId" not in data:
            raise ValidationError("Missing required field: userId")
        user_id = data["userId"]
        # An empty string is a valid (unknown) user id, not the wildcard.
        if user_id is not None and not isinstance(user_id, str):
            raise ValidationError("userId must be a string or null")
        try:
            permission = Permission(data.get("permission"))
        except ValueError as e:
            raise ValidationError("permission must be one of READ, WRITE, FULL") from e
        return cls(user_id=user_id, permission=permission)
