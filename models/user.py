"""
models/user.py
--------------
Domain models for users and the user-with-posts aggregate.
"""

from dataclasses import dataclass, field

from ulid import ULID

from models.post import Post


@dataclass
class User:
    """
    A registered author.

    Attributes:
        id: ULID assigned at insert time, never reassigned.
        name: Display name.
    """
    id: ULID
    name: str

    def to_dict(self) -> dict:
        return {"id": str(self.id), "name": self.name}


@dataclass
class UserWithPosts:
    """
    A user together with their posts, assembled at read time.

    ``posts`` keeps the order the store returned (newest first) and is an
    empty list, never None, for a user without posts.
    """
    id: ULID
    name: str
    posts: list[Post] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "name": self.name,
            "posts": [p.to_dict() for p in self.posts],
        }
