"""
models/rows.py
--------------
Row-to-aggregate mapping.

Each query declares its output columns through one of the row shapes
below. Rows coming from the driver only need to support lookup by column
name (``sqlite3.Row``, psycopg2's ``RealDictRow``, plain dicts).
"""

from dataclasses import dataclass
from typing import Iterable, Mapping, Optional

from errors import NotFoundError
from models.post import Post, PostWithUser
from models.user import User, UserWithPosts
from utils.identifiers import parse_id


@dataclass(frozen=True)
class PostRow:
    post_id: str
    post_title: str
    post_body: str
    post_user_id: str

    @classmethod
    def from_row(cls, row: Mapping) -> "PostRow":
        return cls(
            post_id=row["post_id"],
            post_title=row["post_title"],
            post_body=row["post_body"],
            post_user_id=row["post_user_id"],
        )

    def to_model(self) -> Post:
        return Post(
            id=parse_id(self.post_id),
            title=self.post_title,
            body=self.post_body,
            user_id=parse_id(self.post_user_id),
        )


@dataclass(frozen=True)
class PostWithUserRow:
    post_id: str
    post_title: str
    post_body: str
    user_id: str
    user_name: str

    @classmethod
    def from_row(cls, row: Mapping) -> "PostWithUserRow":
        return cls(
            post_id=row["post_id"],
            post_title=row["post_title"],
            post_body=row["post_body"],
            user_id=row["user_id"],
            user_name=row["user_name"],
        )

    def to_model(self) -> PostWithUser:
        return PostWithUser(
            id=parse_id(self.post_id),
            title=self.post_title,
            body=self.post_body,
            user=User(id=parse_id(self.user_id), name=self.user_name),
        )


@dataclass(frozen=True)
class UserPostRow:
    """
    One row of the user LEFT JOIN posts query.

    ``post`` is None when the row carries no post (NULL or empty post id).
    """
    user_id: str
    user_name: str
    post: Optional[PostRow]

    @classmethod
    def from_row(cls, row: Mapping) -> "UserPostRow":
        post = PostRow.from_row(row) if row["post_id"] else None
        return cls(user_id=row["user_id"], user_name=row["user_name"], post=post)


def map_posts(rows: Iterable[Mapping]) -> list[Post]:
    return [PostRow.from_row(r).to_model() for r in rows]


def map_posts_with_user(rows: Iterable[Mapping]) -> list[PostWithUser]:
    return [PostWithUserRow.from_row(r).to_model() for r in rows]


def map_user_with_posts(rows: Iterable[Mapping]) -> UserWithPosts:
    """
    Fold the rows of one user's LEFT JOIN into a UserWithPosts.

    The user's id and name come from the first row; posts keep row order
    and rows without a post are skipped.

    Raises:
        NotFoundError: If there are no rows at all.
        MalformedIdentifierError: If a stored id does not parse.
    """
    parsed = [UserPostRow.from_row(r) for r in rows]
    if not parsed:
        raise NotFoundError("map_user_with_posts", detail="no rows to build a user from")

    first = parsed[0]
    return UserWithPosts(
        id=parse_id(first.user_id),
        name=first.user_name,
        posts=[r.post.to_model() for r in parsed if r.post is not None],
    )
