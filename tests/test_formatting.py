# tests/test_formatting.py
import math
from decimal import Decimal

import pytest

from resultsdb_core import format_eng, format_complex_eng


class TestEngineeringNotation:

    @pytest.mark.parametrize("number, expected", [
        (1500, "1.5k"),
        (2.2e-9, "2.2n"),
        (100, "100"),
        (400, "400"),
        (500, "0.5k"),
        (0.001, "1m"),
        (-1500, "-1.5k"),
        (1e6, "1M"),
        (47e-12, "47p"),
        (Decimal("2500"), "2.5k"),
    ])
    def test_prefix_selection(self, number, expected):
        assert format_eng(number) == expected

    def test_zero(self):
        assert format_eng(0) == "0"
        assert format_eng(0.0) == "0"

    def test_out_of_prefix_range_falls_back_to_engineering_string(self):
        assert format_eng(1e30) == "1E+30"

    def test_non_finite(self):
        assert format_eng(math.nan) == "nan"
        assert format_eng(math.inf) == "inf"
        assert format_eng(-math.inf) == "-inf"

    @pytest.mark.parametrize("number, expected", [
        (Decimal("NaN"), "nan"),
        (Decimal("sNaN"), "nan"),
        (Decimal("Infinity"), "inf"),
        (Decimal("-Infinity"), "-inf"),
    ])
    def test_non_finite_decimals(self, number, expected):
        assert format_eng(number) == expected

    def test_complex(self):
        assert format_complex_eng(1500 + 2.2e-9j) == "1.5k + j*2.2n"
