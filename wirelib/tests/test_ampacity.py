"""
Tests for reference ampacity lookup.

Validates:
1. Table selection by size unit
2. Known NEC and IEC values
3. Missing sizes and installation methods return None
4. Unknown units are rejected
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from wirelib.ampacity import (
    AMPACITY_REFERENCE_TABLES,
    IEC_60364_COPPER_PVC,
    NEC_TABLE_310_16,
    get_ampacity_for_size,
    lookup_ampacity,
)
from wirelib.types import InstallationMethod


class TestTables:
    """Test the reference tables themselves."""

    def test_both_tables_registered(self):
        assert AMPACITY_REFERENCE_TABLES == [NEC_TABLE_310_16, IEC_60364_COPPER_PVC]

    def test_nec_row_count(self):
        assert len(NEC_TABLE_310_16.ratings) == 18

    def test_iec_row_count(self):
        assert len(IEC_60364_COPPER_PVC.ratings) == 15

    def test_ampacity_rises_with_size(self):
        """Within each table and unit, larger conductors carry more current."""
        for table in AMPACITY_REFERENCE_TABLES:
            amps = [r.ampacity for r in table.ratings]
            assert amps == sorted(amps), table.reference

    def test_reference_conditions(self):
        for r in NEC_TABLE_310_16.ratings:
            assert r.ambient_temp_c == 30
            assert r.conductor_temp_c == 60
        for r in IEC_60364_COPPER_PVC.ratings:
            assert r.size_unit == 'mm²'
            assert r.conductor_temp_c == 70


class TestGetAmpacityForSize:
    """Test lookup within a single table."""

    def test_found(self):
        assert get_ampacity_for_size(NEC_TABLE_310_16, '12').ampacity == 20

    def test_method_must_match(self):
        assert get_ampacity_for_size(NEC_TABLE_310_16, '12', InstallationMethod.FREE_AIR) is None

    def test_missing_size(self):
        assert get_ampacity_for_size(IEC_60364_COPPER_PVC, '300') is None


class TestLookupAmpacity:
    """Test unit-driven table selection."""

    @pytest.mark.parametrize('size, unit, amps', [
        ('14', 'AWG', 15),
        ('1/0', 'AWG', 125),
        ('4/0', 'AWG', 195),
        ('250', 'kcmil', 215),
        ('500', 'kcmil', 320),
        ('1.5', 'mm²', 14),
        ('2.5', 'mm²', 19),
        ('240', 'mm²', 315),
    ])
    def test_known_values(self, size, unit, amps):
        rating = lookup_ampacity(size, unit)
        assert rating is not None
        assert rating.ampacity == amps

    def test_metric_size_uses_iec_table(self):
        rating = lookup_ampacity('10', 'mm²')
        assert rating.ampacity == 46
        assert rating.size_unit == 'mm²'

    def test_same_size_string_differs_by_unit(self):
        assert lookup_ampacity('10', 'AWG').ampacity == 30
        assert lookup_ampacity('10', 'mm²').ampacity == 46

    def test_unknown_size_returns_none(self):
        assert lookup_ampacity('18', 'AWG') is None

    def test_other_installation_method_returns_none(self):
        assert lookup_ampacity('12', 'AWG', InstallationMethod.DIRECT_BURIED) is None

    def test_unknown_unit_raises(self):
        with pytest.raises(ValueError):
            lookup_ampacity('12', 'inches')


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
