"""User repository port."""

from typing import Protocol

from sharegrant.domain.entities import User


class UserRepository(Protocol):
    """Port for user lookup."""

    async def get_by_id(self, user_id: str) -> User | None: ...
