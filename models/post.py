"""
models/post.py
--------------
Domain models for posts and the post-with-author aggregate.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ulid import ULID

if TYPE_CHECKING:
    from models.user import User


@dataclass
class Post:
    """
    A post written by a user.

    Attributes:
        id: ULID assigned at insert time.
        title: Post title.
        body: Post body text.
        user_id: Identifier of the author (validity enforced by the store).
    """
    id: ULID
    title: str
    body: str
    user_id: ULID

    def key(self) -> str:
        """Cache-style key, e.g. ``posts:01H...``."""
        return f"posts:{self.id}"

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "body": self.body,
            "user_id": str(self.user_id),
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    def __str__(self) -> str:
        return self.to_json()


@dataclass
class PostWithUser:
    """A post with its author embedded, assembled at read time."""
    id: ULID
    title: str
    body: str
    user: User

    def to_dict(self) -> dict:
        return {
            "id": str(self.id),
            "title": self.title,
            "body": self.body,
            "user": self.user.to_dict(),
        }
