"""Tests for keyword argument coercion."""

import pydantic
import pytest

from robotpages.lib.arguments import coerce_aliases, coerce_keyword_args


class TestCoerceAliases:
    """Tests for coerce_aliases."""

    @pytest.mark.parametrize("value,expected", [
        (None, None),
        ("", None),
        ("Sign In", ["Sign In"]),
        ("Sign In, Log On", ["Sign In", "Log On"]),
        ('["Sign In", "Log, On"]', ["Sign In", "Log, On"]),
        (["Sign In"], ["Sign In"]),
        (("Sign In", "Log On"), ["Sign In", "Log On"]),
    ])
    def test_coercion(self, value, expected):
        assert coerce_aliases(value) == expected

    def test_non_string_items_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            coerce_aliases([1, 2])


class TestCoerceKeywordArgs:
    """Tests for coerce_keyword_args."""

    @pytest.mark.parametrize("value,expected", [
        (None, ()),
        ("", ()),
        ("admin", ("admin",)),
        ("admin,en", ("admin", "en")),
        ('["a, b", 3]', ("a, b", 3)),
        (["admin", 3], ("admin", 3)),
    ])
    def test_coercion(self, value, expected):
        assert coerce_keyword_args(value) == expected

    def test_mapping_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            coerce_keyword_args({"user": "admin"})
