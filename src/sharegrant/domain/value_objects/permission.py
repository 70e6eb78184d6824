"""Permission levels for shared resources."""

from enum import StrEnum


class Permission(StrEnum):
    """Permission granted on a resource, totally ordered READ < WRITE < FULL."""

    READ = "READ"
    WRITE = "WRITE"
    FULL = "FULL"

    @property
    def rank(self) -> int:
        return _RANKS[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Permission):
            return NotImplemented
        return self.rank >= other.rank


_RANKS = {
    Permission.READ: 1,
    Permission.WRITE: 2,
    Permission.FULL: 3,
}
