from __future__ import annotations

import pytest


@pytest.fixture()
def url():
    from url_builder import UrlBuilder

    return UrlBuilder()


@pytest.fixture()
def comments_url():
    from url_builder import create_from_url

    return create_from_url("/users/:userId/comments/:commentId").add_params(
        {"userId": 10, "commentId": 1}
    )
