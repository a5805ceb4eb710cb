"""Tests for the subscription access rule."""

import pytest

from trailerhub.catalog import has_access


class TestHasAccess:
    @staticmethod
    @pytest.mark.parametrize(
        ("subscribed", "user_tier", "movie_tier", "expected"),
        [
            (False, None, "Basic", False),
            (False, "Premium", "Premium", False),
            (True, "Basic", "Basic", True),
            (True, "Basic", "Premium", False),
            (True, "Premium", "Basic", True),
            (True, "Premium", "Premium", True),
            (True, None, "Basic", True),
            (True, None, "Premium", False),
        ],
    )
    def test_rule(subscribed, user_tier, movie_tier, expected) -> None:
        assert has_access(subscribed, user_tier, movie_tier) is expected
