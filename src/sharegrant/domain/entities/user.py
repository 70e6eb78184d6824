"""User entity - referenced by id and username only."""

from dataclasses import dataclass


@dataclass
class User:
    """Application user."""

    id: str
    username: str
