"""Test ancestors and segment lookups."""
from __future__ import annotations


def test_get_parent(comments_url):
    assert comments_url.get_parent().get_relative_path() == "/users/10/comments"
    assert comments_url.get_parent(2).get_relative_path() == "/users/10"
    assert comments_url.get_parent(3).get_relative_path() == "/users"
    assert comments_url.get_parent(4).get_relative_path() == ""
    assert comments_url.get_parent(10).get_relative_path() == ""

    # The original builder is untouched
    assert comments_url.get_relative_path() == "/users/10/comments/1"
    assert comments_url.get_paths() == ["users", ":userId", "comments", ":commentId"]


def test_get_parent_keeps_base():
    from url_builder import create_from_url

    url = create_from_url("http://localhost:3000/users/10?page=1")
    parent = url.get_parent()

    assert parent.to_string() == "http://localhost:3000/users"
    assert parent.get_query() == {}
    assert url.get_query() == {"page": "1"}


def test_get_parent_removes_all_occurrences(url):
    url.add_path("a/b/a")
    assert url.get_parent().get_paths() == ["b"]


def test_get_parent_params(url):
    url.add_path("users/:id").add_params({"id": 10, "alias": "id", "other": "x"})

    # Params are matched by value against the placeholder name
    parent = url.get_parent()
    assert parent.get_params() == {"id": 10, "other": "x"}
    assert url.get_params() == {"id": 10, "alias": "id", "other": "x"}


def test_get_parent_empty_path(url):
    url.add_query("page", 1).add_param("id", "")

    parent = url.get_parent()
    assert parent.get_paths() == []
    assert parent.get_query() == {}
    assert parent.get_params() == {"id": ""}


def test_get_parent_zero(comments_url):
    comments_url.add_query("page", 1)

    for n in (0, -1):
        clone = comments_url.get_parent(n)
        assert clone is not comments_url
        assert clone.get_relative_path(True) == "/users/10/comments/1?page=1"


def test_get_between_2_words():
    from url_builder import create_from_url

    url = create_from_url("/users/10/comments")
    assert url.get_between_2_words("users", "comments") == "10"
    assert url.get_between_2_words("user", "comment") is None
    assert url.get_between_2_words("users", "comment") is None


def test_get_between_2_words_first_slot(url):
    # Segments added without a leading slash start at slot 0
    url.add_path("users/10/comments")

    assert url.get_between_2_words("users", "comments") is None
    assert url.get_between_2_words("comments", "users") is None

    # The result is the segment at the position of `a` slot
    assert url.get_between_2_words("10", "comments") == "10"


def test_get_between_2_words_slots():
    from url_builder import create_from_url

    url = create_from_url("https://localhost/a/b/c")
    assert url.get_between_2_words("b", "c") == "c"
    assert url.get_between_2_words("c", "a") is None

    # Slots follow the raw path, empty segments included
    url = create_from_url("/a//b")
    assert url.get_paths() == ["a", "b"]
    assert url.get_between_2_words("a", "b") == "b"
    assert url.get_between_2_words("b", "a") is None

    url.add_path("c")
    assert url.get_between_2_words("a", "c") == "b"
