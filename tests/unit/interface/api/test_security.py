"""Unit tests for token extraction."""

import pytest

from scribe.interface.api.security import extract_token


class TestExtractToken:
    """Tests for extract_token."""

    @pytest.mark.parametrize(
        "authorization,cookie,expected",
        [
            ("Bearer abc", None, "abc"),
            ("bearer  abc ", None, "abc"),
            ("Bearer abc", "cookie-token", "abc"),
            (None, "cookie-token", "cookie-token"),
            ("Basic xyz", "cookie-token", "cookie-token"),
            ("Bearer ", "cookie-token", "cookie-token"),
            ("Bearer", None, None),
            (None, "", None),
            (None, None, None),
        ],
    )
    def test_extract_token(self, authorization, cookie, expected):
        assert extract_token(authorization, cookie) == expected
