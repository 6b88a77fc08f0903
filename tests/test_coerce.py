"""Tests for xml2json_core.coerce."""

from xml2json_core.coerce import coerce_scalar
from xml2json_core.model import JBool, JNumber, JString


class TestCoerceScalar:
    def test_integer(self):
        assert coerce_scalar("42") == JNumber(42)

    def test_integer_is_int(self):
        assert isinstance(coerce_scalar("42").value, int)

    def test_negative_integer(self):
        assert coerce_scalar("-5") == JNumber(-5)

    def test_float(self):
        assert coerce_scalar("3.14") == JNumber(3.14)

    def test_exponent(self):
        assert coerce_scalar("1.5e3") == JNumber(1500.0)
        assert coerce_scalar("2E-2") == JNumber(0.02)

    def test_true(self):
        assert coerce_scalar("true") == JBool(True)

    def test_false(self):
        assert coerce_scalar("false") == JBool(False)

    def test_bool_is_case_sensitive(self):
        assert coerce_scalar("True") == JString("True")
        assert coerce_scalar("FALSE") == JString("FALSE")

    def test_plain_text(self):
        assert coerce_scalar("Alex") == JString("Alex")

    def test_empty_string(self):
        assert coerce_scalar("") == JString("")

    def test_partial_numeric_prefix(self):
        assert coerce_scalar("12abc") == JString("12abc")

    def test_not_quite_numbers(self):
        for text in ["1.", ".5", "+3", "1.2.3", "1e", "--1", "0x10", "NaN", "inf"]:
            assert coerce_scalar(text) == JString(text), text

    def test_surrounding_whitespace_ignored_for_number(self):
        assert coerce_scalar("  7\n") == JNumber(7)

    def test_surrounding_whitespace_ignored_for_bool(self):
        assert coerce_scalar(" true ") == JBool(True)

    def test_string_keeps_untrimmed_text(self):
        assert coerce_scalar("  Mel ") == JString("  Mel ")

    def test_float_overflow_falls_back_to_string(self):
        assert coerce_scalar("1e400") == JString("1e400")

    def test_large_integer_becomes_float(self):
        result = coerce_scalar("99999999999999999999")
        assert result == JNumber(1e20)
        assert isinstance(result.value, float)

    def test_int64_bounds_stay_int(self):
        assert coerce_scalar("9223372036854775807").value == 2**63 - 1
        assert coerce_scalar("-9223372036854775808").value == -(2**63)

    def test_non_ascii_digits_are_strings(self):
        assert coerce_scalar("４２") == JString("４２")
        assert coerce_scalar("١٢٣") == JString("١٢٣")
        assert coerce_scalar("3.１") == JString("3.１")

    def test_non_xml_whitespace_not_trimmed(self):
        assert coerce_scalar("\u00a042") == JString("\u00a042")
        assert coerce_scalar("true\u2003") == JString("true\u2003")

    def test_xml_whitespace_trimmed(self):
        assert coerce_scalar("\r\n\t 42 \t") == JNumber(42)
