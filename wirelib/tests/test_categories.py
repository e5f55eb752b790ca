"""
Tests for category labels and menu groupings.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from wirelib.categories import (
    get_all_cable_categories,
    get_all_protocol_categories,
    get_cable_category_display_name,
    get_cable_category_groups,
    get_protocol_category_display_name,
    get_protocol_category_groups,
)
from wirelib.types import CableCategory, ProtocolCategory


class TestCategories:
    """Every category has a label and sits in exactly one group."""

    def test_all_categories(self):
        assert len(get_all_protocol_categories()) == 8
        assert len(get_all_cable_categories()) == 13

    def test_every_category_labelled(self):
        for category in ProtocolCategory:
            assert get_protocol_category_display_name(category)
        for category in CableCategory:
            assert get_cable_category_display_name(category)

    def test_known_labels(self):
        assert get_protocol_category_display_name(ProtocolCategory.FIELDBUS_ETHERNET) == 'Industrial Ethernet'
        assert get_cable_category_display_name(CableCategory.COMMUNICATION_FIELDBUS) == 'Fieldbus Cable'

    def test_groups_partition_categories(self):
        for groups, enum in [
            (get_protocol_category_groups(), ProtocolCategory),
            (get_cable_category_groups(), CableCategory),
        ]:
            members = [c for group in groups.values() for c in group]
            assert sorted(members) == sorted(enum)

    def test_groups_are_copies(self):
        groups = get_cable_category_groups()
        groups['Power'].clear()
        assert get_cable_category_groups()['Power'] == [
            CableCategory.POWER_LV, CableCategory.POWER_MV, CableCategory.POWER_HV,
        ]


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
