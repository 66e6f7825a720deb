"""Tests for AccountIndex."""

import pytest

from db.index import AccountIndex


@pytest.fixture
def index(tmp_path):
    return AccountIndex(tmp_path / "index.txt")


class TestAccountIndex:
    """Tests for AccountIndex."""

    def test_exists_without_index_file(self, index):
        assert index.exists("1234567") is False
        assert index.count() == 0

    def test_append_then_exists(self, index):
        index.append("1234567")

        assert index.exists("1234567") is True
        assert index.exists("7654321") is False

    def test_exists_requires_exact_line(self, index):
        index.append("12345678")

        assert index.exists("1234567") is False

    def test_non_digit_input_is_never_found(self, index):
        index.path.write_text("abc\n\n")

        assert index.exists("abc") is False
        assert index.exists("") is False

    def test_append_does_not_deduplicate(self, index):
        index.append("1234567")
        index.append("1234567")

        assert index.count() == 2

    def test_remove_returns_true_and_drops_all_copies(self, index):
        index.append("1234567")
        index.append("2345678")
        index.append("1234567")

        assert index.remove("1234567") is True
        assert index.exists("1234567") is False
        assert index.list() == ["2345678"]

    def test_remove_missing_entry(self, index):
        index.append("2345678")

        assert index.remove("1234567") is False
        assert index.list() == ["2345678"]

    def test_remove_without_index_file(self, index):
        assert index.remove("1234567") is False
        assert not index.path.exists()

    def test_remove_leaves_no_temporary_file(self, index):
        index.append("1234567")

        index.remove("1234567")

        assert not (index.path.parent / "index.tmp").exists()

    def test_count_skips_blank_lines(self, index):
        index.path.write_text("1234567\n\n2345678\n   \n")

        assert index.count() == 2

    def test_remove_drops_blank_lines(self, index):
        index.path.write_text("1234567\n\n2345678\n")

        index.remove("1234567")

        assert index.path.read_text() == "2345678\n"
