# ==============================================
# Tests for TypeDetector
# ==============================================

import pytest

from pdf_tables.normalization import ColumnType, TypeDetector


class TestValuePredicates:
    """Tests for per-value checks."""

    @pytest.mark.parametrize("value", [True, False, "true", "false"])
    def test_boolean_values(self, value):
        assert TypeDetector.is_boolean(value)

    @pytest.mark.parametrize("value", ["True", "FALSE", "yes", "1", 1])
    def test_non_boolean_values(self, value):
        assert not TypeDetector.is_boolean(value)

    @pytest.mark.parametrize("value", ["237706", "3510.00", "-12", "+4", ".5", "1e3", " 42 ", 7, 2.5])
    def test_numeric_values(self, value):
        assert TypeDetector.is_number(value)

    @pytest.mark.parametrize("value", ["", "  ", "12abc", "nan", "inf", "Infinity", "0x1F", "1e400", "1_000", "1.2.3", None, True])
    def test_non_numeric_values(self, value):
        assert not TypeDetector.is_number(value)

    def test_to_number_keeps_integers_integral(self):
        assert TypeDetector.to_number("237706") == 237706
        assert isinstance(TypeDetector.to_number("237706"), int)
        assert TypeDetector.to_number("3510.00") == 3510.0
        assert isinstance(TypeDetector.to_number("3510.00"), float)

    def test_huge_integer_string_is_not_a_number(self):
        assert TypeDetector.to_number("9" * 5000) is None
        assert not TypeDetector.is_number("9" * 5000)

    @pytest.mark.parametrize("value", [
        "2023-04-01", "2023-04-01T10:15:00", "2023-04-01 10:15:00", "01/04/2023",
        "15-Jan-2024", "15 Jan 2024", "January 15 2024",
    ])
    def test_date_values(self, value):
        assert TypeDetector.is_date(value)

    @pytest.mark.parametrize("value", ["2023", "Jan 5", "hello world", "32/13/2023", 20230401])
    def test_non_date_values(self, value):
        assert not TypeDetector.is_date(value)


class TestColumnInference:
    """Tests for conjunctive column type inference."""

    def test_no_samples_is_string(self):
        assert TypeDetector.infer_column_type([]) == ColumnType.STRING

    def test_nulls_are_ignored(self):
        assert TypeDetector.infer_column_type([None, "1", None]) == ColumnType.NUMBER

    def test_boolean_column(self):
        assert TypeDetector.infer_column_type(["true", "false", "true"]) == ColumnType.BOOLEAN

    def test_number_column(self):
        assert TypeDetector.infer_column_type(["1", "2.5", "-3"]) == ColumnType.NUMBER

    def test_date_column(self):
        assert TypeDetector.infer_column_type(["2023-04-01", "2023-05-17"]) == ColumnType.DATE

    def test_single_non_numeric_sample_disqualifies_number(self):
        samples = [str(i) for i in range(99)] + ["n/a"]
        assert TypeDetector.infer_column_type(samples) == ColumnType.STRING

    def test_numbers_mixed_with_dates_fall_back_to_string(self):
        assert TypeDetector.infer_column_type(["2023-04-01", "17"]) == ColumnType.STRING

    def test_boolean_wins_over_everything(self):
        assert TypeDetector.infer_column_type(["true"]) == ColumnType.BOOLEAN
