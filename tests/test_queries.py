"""Tests for statement construction and the limit policy."""

import pytest

from db.queries import DEFAULT_LIMIT, QueryBuilder, Statement, resolve_limit
from errors import InvalidLimitError
from utils.identifiers import new_id


@pytest.mark.parametrize("limit, expected", [
    (None, DEFAULT_LIMIT),
    (0, DEFAULT_LIMIT),
    (-3, DEFAULT_LIMIT),
    (1, 1),
    (25, 25),
])
def test_resolve_limit(limit, expected):
    assert resolve_limit(limit) == expected


@pytest.mark.parametrize("bad", ["5", "1; DROP TABLE posts", 2.5, True, [3]])
def test_resolve_limit_rejects_non_integers(bad):
    with pytest.raises(InvalidLimitError):
        resolve_limit(bad)


def test_default_limit_is_ten():
    assert DEFAULT_LIMIT == 10


def test_unknown_paramstyle_rejected():
    with pytest.raises(ValueError):
        QueryBuilder("named")


def test_insert_user_binds_all_values():
    uid = new_id()
    stmt = QueryBuilder().insert_user(uid, "alice")
    assert isinstance(stmt, Statement)
    assert stmt.sql == "INSERT INTO users (id, name) VALUES (%s, %s);"
    assert stmt.params == (str(uid), "alice")


def test_insert_post_uses_qmark_for_sqlite():
    pid, uid = new_id(), new_id()
    stmt = QueryBuilder("qmark").insert_post(pid, "t", "b", uid)
    assert "%s" not in stmt.sql
    assert stmt.sql.count("?") == 4
    assert stmt.params == (str(pid), "t", "b", str(uid))


def test_select_posts_by_user_id_orders_and_limits():
    uid = new_id()
    stmt = QueryBuilder().select_posts_by_user_id(uid, 3)
    assert "WHERE posts.user_id = %s" in stmt.sql
    assert "ORDER BY posts.id DESC" in stmt.sql
    assert "LIMIT 3;" in stmt.sql
    assert stmt.params == (str(uid),)


def test_select_posts_by_user_id_default_limit():
    stmt = QueryBuilder().select_posts_by_user_id(new_id())
    assert "LIMIT 10;" in stmt.sql


def test_user_data_never_interpolated():
    name = "Robert'); DROP TABLE users;--"
    stmt = QueryBuilder().insert_user(new_id(), name)
    assert name not in stmt.sql
    assert name in stmt.params


def test_list_posts_with_user_zero_limit_means_default():
    stmt = QueryBuilder().list_posts_with_user(0)
    assert "JOIN users AS U ON U.id = P.user_id" in stmt.sql
    assert "ORDER BY P.id DESC" in stmt.sql
    assert "LIMIT 10;" in stmt.sql
    assert stmt.params == ()


def test_list_posts_with_user_rejects_bad_limit():
    with pytest.raises(InvalidLimitError):
        QueryBuilder().list_posts_with_user("10")


def test_get_user_with_posts_is_left_join():
    uid = new_id()
    stmt = QueryBuilder().get_user_with_posts(uid)
    assert "LEFT JOIN posts AS P ON P.user_id = U.id" in stmt.sql
    assert "WHERE U.id = %s" in stmt.sql
    assert "LIMIT" not in stmt.sql
    assert stmt.params == (str(uid),)
