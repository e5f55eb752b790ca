"""
Tests for display formatting of rates and impedances.

Validates:
1. Prefix selection at each threshold
2. Whole values printed without a decimal part
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from wirelib.units import format_data_rate, format_impedance


class TestFormatDataRate:
    """Test bits-per-second formatting."""

    @pytest.mark.parametrize('bps, expected', [
        (0, '0 bps'),
        (300, '300 bps'),
        (999, '999 bps'),
        (1000, '1 kbps'),
        (9600, '9.6 kbps'),
        (31250, '31.25 kbps'),
        (115200, '115.2 kbps'),
        (1_000_000, '1 Mbps'),
        (12_000_000, '12 Mbps'),
        (100_000_000, '100 Mbps'),
        (1_000_000_000, '1 Gbps'),
        (10_000_000_000, '10 Gbps'),
        (100_000_000_000, '100 Gbps'),
    ])
    def test_format(self, bps, expected):
        assert format_data_rate(bps) == expected

    def test_just_below_threshold_uses_smaller_unit(self):
        assert format_data_rate(999_999) == '999.999 kbps'

    def test_quotient_printed_in_full(self):
        assert format_data_rate(1_234_567_891) == '1.234567891 Gbps'


class TestFormatImpedance:
    """Test impedance formatting."""

    def test_whole_ohms(self):
        assert format_impedance(120) == '120Ω'

    def test_float_whole_ohms(self):
        assert format_impedance(150.0) == '150Ω'

    def test_fractional_ohms(self):
        assert format_impedance(37.5) == '37.5Ω'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
