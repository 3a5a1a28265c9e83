from recibo.constants import MONTHS_ES, format_amount, format_date, format_total, parse_date


class TestMonthsEs:
    def test_all_twelve_months(self):
        assert len(MONTHS_ES) == 12

    def test_january(self):
        assert MONTHS_ES[1] == "enero"

    def test_september(self):
        assert MONTHS_ES[9] == "septiembre"


class TestParseDate:
    def test_iso(self):
        parsed = parse_date("2025-09-03")
        assert (parsed.year, parsed.month, parsed.day) == (2025, 9, 3)

    def test_empty(self):
        assert parse_date("") is None

    def test_garbage(self):
        assert parse_date("ayer") is None

    def test_out_of_range_day(self):
        assert parse_date("2025-02-30") is None


class TestFormatDate:
    def test_standard(self):
        assert format_date("2025-09-03") == "3 de septiembre de 2025"

    def test_january(self):
        assert format_date("2025-01-15") == "15 de enero de 2025"

    def test_december(self):
        assert format_date("2024-12-31") == "31 de diciembre de 2024"

    def test_invalid(self):
        assert format_date("not-a-date") == "Invalid Date"

    def test_empty(self):
        assert format_date("") == "Invalid Date"


class TestFormatAmount:
    def test_plain(self):
        assert format_amount(1500) == "$1500"

    def test_zero(self):
        assert format_amount(0) == "$0"


class TestFormatTotal:
    def test_two_decimals(self):
        assert format_total(1500) == "$1500.00"

    def test_zero(self):
        assert format_total(0) == "$0.00"

    def test_no_thousands_separator(self):
        assert format_total(1234567) == "$1234567.00"

    def test_exact_for_huge_totals(self):
        assert format_total(10**400) == f"${10**400}.00"
