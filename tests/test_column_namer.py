# ==============================================
# Tests for ColumnNamer
# ==============================================

import re

import pytest

from pdf_tables.normalization import ColumnNamer


IDENTIFIER = re.compile(r'^[A-Za-z0-9_]+$')


@pytest.fixture
def namer():
    return ColumnNamer()


class TestSanitize:
    """Tests for single header sanitization."""

    def test_trims_whitespace(self, namer):
        assert namer.sanitize("Amount ", 0) == "Amount"

    def test_internal_whitespace_becomes_underscore(self, namer):
        assert namer.sanitize("Unit   Price", 0) == "Unit_Price"

    def test_strips_edge_hashes_and_dashes(self, namer):
        assert namer.sanitize("# Name -", 0) == "Name"
        assert namer.sanitize("-- Total --", 0) == "Total"

    def test_drops_invalid_characters(self, namer):
        assert namer.sanitize("S.No.", 0) == "SNo"
        assert namer.sanitize("Amount (Rs.)", 0) == "Amount_Rs"

    def test_empty_result_uses_positional_fallback(self, namer):
        assert namer.sanitize("#", 0) == "Column_1"
        assert namer.sanitize("   ", 2) == "Column_3"
        assert namer.sanitize("()", 4) == "Column_5"

    def test_non_string_keys(self, namer):
        assert namer.sanitize(2023, 0) == "2023"

    @pytest.mark.parametrize("raw", [
        "Amount ", "# Name", "Date of Birth", "S.No.", "-", "Column_7", "_x_", "Amount (Rs.)",
    ])
    def test_sanitize_is_idempotent(self, namer, raw):
        once = namer.sanitize(raw, 6)
        assert IDENTIFIER.match(once)
        assert namer.sanitize(once, 6) == once


class TestSanitizeAll:
    """Tests for whole-header sanitization and collisions."""

    def test_preserves_order(self, namer):
        assert namer.sanitize_all(["#", "Name", "Amount "]) == ["Column_1", "Name", "Amount"]

    def test_collisions_get_numeric_suffixes(self, namer):
        names = namer.sanitize_all(["Amount", "Amount ", "# Amount", "Amount_2"])
        assert names == ["Amount", "Amount_2", "Amount_3", "Amount_2_2"]
        assert len(set(names)) == len(names)

    def test_fallback_collision(self, namer):
        assert namer.sanitize_all(["Column_2", "#"]) == ["Column_2", "Column_2_2"]

    def test_mappings_track_last_table(self, namer):
        namer.sanitize_all(["Old"])
        namer.sanitize_all(["Amount ", "#"])
        assert namer.get_mappings() == {"Amount ": "Amount", "#": "Column_2"}
