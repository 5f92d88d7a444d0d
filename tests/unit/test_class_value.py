"""Tests for class value normalization."""

import pytest

from withclass import cx, normalize_classes


class TestNormalizeClasses:
    """Tests for flattening class values into tokens."""

    def test_string(self):
        assert normalize_classes("btn") == ("btn",)

    def test_empty_and_nullish_values(self):
        """Empty strings, None and booleans contribute nothing."""
        assert normalize_classes("") == ()
        assert normalize_classes(None) == ()
        assert normalize_classes(False) == ()
        assert normalize_classes(True) == ()
        assert normalize_classes(0) == ()

    def test_nested_sequences_keep_order(self):
        value = ["a", ["b", None, ["c", ("d", "")]], "e"]
        assert normalize_classes(value) == ("a", "b", "c", "d", "e")

    def test_duplicates_are_kept(self):
        assert normalize_classes(["btn", "btn", ["btn"]]) == ("btn", "btn", "btn")

    def test_multi_token_string_is_not_split(self):
        assert normalize_classes(["btn flex-1", "p-2"]) == ("btn flex-1", "p-2")

    def test_numbers(self):
        assert normalize_classes([1, 0, 2.5]) == ("1", "2.5")

    def test_mapping_keeps_truthy_keys(self):
        """Mapping entries are included when their condition is truthy."""
        value = {"active": True, "disabled": False, "open": {}, "hidden": None}
        assert normalize_classes(value) == ("active", "open")

    def test_generator(self):
        assert normalize_classes(f"col-{i}" for i in range(3)) == ("col-0", "col-1", "col-2")

    def test_bytes_are_one_opaque_token(self):
        """Bytes are not iterated byte by byte."""
        assert normalize_classes(b"ab") == ("b'ab'",)
        assert normalize_classes(["a", bytearray(b"cd")]) == ("a", "bytearray(b'cd')")

    def test_opaque_object_is_one_token(self):
        class Token:
            def __str__(self) -> str:
                return "custom-token"

        assert normalize_classes(["a", Token()]) == ("a", "custom-token")

    @pytest.mark.parametrize(
        "value",
        [
            "btn",
            ["a", ["b", ["c", None]], "", "a"],
            [{"x": 1, "y": 0}, ("z",), None],
            [],
        ],
    )
    def test_idempotent(self, value):
        """Normalizing a normalized value changes nothing."""
        once = normalize_classes(value)
        assert normalize_classes(once) == once


class TestCx:
    """Tests for the joined form."""

    def test_joins_with_single_space(self):
        assert cx("btn", ["btn-primary", None], {"active": True}) == "btn btn-primary active"

    def test_empty(self):
        assert cx() == ""
        assert cx(None, "", []) == ""
