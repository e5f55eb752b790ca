"""
Tests for the protocol/cable compatibility engine.

Validates:
1. Check ordering (generic → user-defined → media → rate → impedance → shielding)
2. Confirmation flag only on UNLIKELY verdicts
3. Missing optional numbers treated as no constraint
4. Batch grouping skips generic entries and preserves input order
5. Known catalog pairings
"""

import dataclasses
import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from wirelib.compatibility import (
    assess_compatibility,
    group_compatible_cables,
    group_compatible_protocols,
    get_compatibility_display_name,
    get_compatibility_icon,
)
from wirelib.models import (
    CableDefinition,
    ConductorSpec,
    DataRateSpec,
    PhysicalLayerCapabilities,
    PhysicalLayerRequirements,
    ProtocolDefinition,
    TemperatureRating,
)
from wirelib.types import (
    AddressingMode,
    CableCategory,
    CableVoltageClass,
    CompatibilityLevel,
    ConductorMaterial,
    InsulationType,
    JacketType,
    PhysicalMediaType,
    ProtocolCategory,
    ShieldingType,
)
from wirelib.protocol_library import ProtocolLibrary
from wirelib.cable_library import CableLibrary


def make_protocol(media=(PhysicalMediaType.RS485,), min_rate=9600, impedance=150,
                  shielding_required=True, **flags) -> ProtocolDefinition:
    return ProtocolDefinition(
        protocol_id=flags.pop('protocol_id', 'TEST-PROTO'),
        name='Test Protocol',
        abbreviation='TP',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Protocol used by the compatibility tests',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=list(media),
            min_data_rate=min_rate,
            characteristic_impedance=impedance,
            shielding_required=shielding_required,
        ),
        supported_topologies=[],
        max_nodes=32,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(9600, 115200),
        **flags,
    )


def make_cable(media=PhysicalMediaType.RS485, max_rate=115200, impedance=120,
               shielding=ShieldingType.FOIL_AND_BRAID, **flags) -> CableDefinition:
    return CableDefinition(
        cable_id=flags.pop('cable_id', 'TEST-CABLE'),
        name='Test Cable',
        category=CableCategory.COMMUNICATION_FIELDBUS,
        description='Cable used by the compatibility tests',
        physical_capabilities=PhysicalLayerCapabilities(
            media_type=media,
            max_data_rate=max_rate,
            max_distance=1200,
            connector_types=[],
            shielding=shielding,
            characteristic_impedance=impedance,
        ),
        construction=[],
        insulation=InsulationType.PE,
        jacket=JacketType.PVC,
        voltage_class=CableVoltageClass.LOW_300V,
        conductor=ConductorSpec(material=ConductorMaterial.COPPER),
        conductor_count=2,
        temperature_rating=TemperatureRating(-40, 75),
        **flags,
    )


@pytest.fixture(scope='module')
def protocols():
    return ProtocolLibrary()


@pytest.fixture(scope='module')
def cables():
    return CableLibrary()


class TestCheckOrder:
    """Each rule fires only when every earlier rule passed."""

    def test_generic_protocol_is_pending(self):
        result = assess_compatibility(make_protocol(is_generic=True), make_cable())
        assert result.level == CompatibilityLevel.PENDING
        assert result.requires_confirmation is False
        assert result.message == 'Specification pending'

    def test_generic_cable_is_pending(self):
        result = assess_compatibility(make_protocol(), make_cable(is_generic=True))
        assert result.level == CompatibilityLevel.PENDING

    def test_generic_dominates_user_defined(self):
        """Generic wins even when both sides are also user-defined."""
        protocol = make_protocol(is_generic=True, is_user_defined=True)
        cable = make_cable(is_user_defined=True, media=PhysicalMediaType.RS232)
        result = assess_compatibility(protocol, cable)
        assert result.level == CompatibilityLevel.PENDING
        assert result.requires_confirmation is False

    def test_user_defined_is_unverified(self):
        for protocol, cable in [
            (make_protocol(is_user_defined=True), make_cable()),
            (make_protocol(), make_cable(is_user_defined=True)),
        ]:
            result = assess_compatibility(protocol, cable)
            assert result.level == CompatibilityLevel.UNVERIFIED
            assert result.requires_confirmation is False

    def test_user_defined_skips_physical_checks(self):
        """A user-defined cable on the wrong medium is still only UNVERIFIED."""
        cable = make_cable(is_user_defined=True, media=PhysicalMediaType.FIBER_SINGLE_MODE, max_rate=0)
        result = assess_compatibility(make_protocol(), cable)
        assert result.level == CompatibilityLevel.UNVERIFIED

    def test_media_mismatch_is_unlikely(self):
        """Same protocol as the impedance scenario, but on an RS-232 cable."""
        result = assess_compatibility(make_protocol(), make_cable(media=PhysicalMediaType.RS232))
        assert result.level == CompatibilityLevel.UNLIKELY
        assert result.requires_confirmation is True
        assert result.message == 'Physical media mismatch'

    def test_media_mismatch_details_name_both_sides(self):
        protocol = make_protocol(media=(PhysicalMediaType.RS485, PhysicalMediaType.RS232))
        cable = make_cable(media=PhysicalMediaType.COPPER_ETHERNET)
        result = assess_compatibility(protocol, cable)
        assert 'Protocol requires: RS485, RS232' in result.details
        assert 'Cable provides: COPPER_ETHERNET' in result.details

    def test_empty_supported_media_always_mismatches(self):
        result = assess_compatibility(make_protocol(media=()), make_cable())
        assert result.level == CompatibilityLevel.UNLIKELY

    def test_insufficient_rate_is_unlikely(self):
        result = assess_compatibility(make_protocol(min_rate=1_000_000), make_cable(max_rate=115200))
        assert result.level == CompatibilityLevel.UNLIKELY
        assert result.requires_confirmation is True
        assert result.details == ('Protocol minimum: 1 Mbps', 'Cable maximum: 115.2 kbps')

    def test_rate_equal_to_minimum_passes(self):
        result = assess_compatibility(make_protocol(min_rate=115200, impedance=120), make_cable(max_rate=115200))
        assert result.level == CompatibilityLevel.VERIFIED

    def test_missing_minimum_rate_is_no_constraint(self):
        result = assess_compatibility(make_protocol(min_rate=None, impedance=None), make_cable(max_rate=0))
        assert result.level == CompatibilityLevel.VERIFIED

    def test_impedance_mismatch_is_compatible(self):
        """150Ω protocol on a 120Ω cable: Δ30 exceeds the 22.5Ω tolerance."""
        result = assess_compatibility(make_protocol(), make_cable())
        assert result.level == CompatibilityLevel.COMPATIBLE
        assert result.requires_confirmation is False
        assert result.message == 'Impedance mismatch detected'
        assert 'Protocol expects: 150Ω' in result.details
        assert 'Cable provides: 120Ω' in result.details

    def test_impedance_100_vs_150(self):
        result = assess_compatibility(make_protocol(), make_cable(impedance=100))
        assert result.level == CompatibilityLevel.COMPATIBLE

    def test_impedance_at_tolerance_boundary_passes(self):
        """Exactly 15% off is still within tolerance."""
        result = assess_compatibility(make_protocol(impedance=100), make_cable(impedance=115))
        assert result.level == CompatibilityLevel.VERIFIED

    def test_impedance_absent_on_either_side_is_skipped(self):
        for protocol, cable in [
            (make_protocol(impedance=None), make_cable(impedance=50)),
            (make_protocol(impedance=150), make_cable(impedance=None)),
        ]:
            assert assess_compatibility(protocol, cable).level == CompatibilityLevel.VERIFIED

    def test_zero_impedance_is_treated_as_unpublished(self):
        result = assess_compatibility(make_protocol(impedance=0), make_cable(impedance=120))
        assert result.level == CompatibilityLevel.VERIFIED

    def test_impedance_preempts_shielding(self):
        """An impedance mismatch is reported instead of the shielding advisory."""
        cable = make_cable(impedance=50, shielding=ShieldingType.UNSHIELDED)
        result = assess_compatibility(make_protocol(), cable)
        assert result.level == CompatibilityLevel.COMPATIBLE
        assert result.message == 'Impedance mismatch detected'

    def test_unshielded_cable_for_shielded_protocol(self):
        cable = make_cable(impedance=150, shielding=ShieldingType.UNSHIELDED)
        result = assess_compatibility(make_protocol(), cable)
        assert result.level == CompatibilityLevel.COMPATIBLE
        assert result.message == 'Shielding recommended'
        assert result.requires_confirmation is False

    def test_shielding_none_is_not_unshielded(self):
        """NONE means shielding does not apply and does not trigger the advisory."""
        cable = make_cable(impedance=150, shielding=ShieldingType.NONE)
        assert assess_compatibility(make_protocol(), cable).level == CompatibilityLevel.VERIFIED

    def test_shielding_not_required(self):
        cable = make_cable(impedance=150, shielding=ShieldingType.UNSHIELDED)
        for required in (False, None):
            result = assess_compatibility(make_protocol(shielding_required=required), cable)
            assert result.level == CompatibilityLevel.VERIFIED

    def test_all_checks_pass_is_verified(self):
        result = assess_compatibility(make_protocol(), make_cable(impedance=150))
        assert result.level == CompatibilityLevel.VERIFIED
        assert result.message == 'Verified compatible combination'
        assert result.requires_confirmation is False

    def test_assessment_is_deterministic(self):
        protocol, cable = make_protocol(), make_cable()
        assert assess_compatibility(protocol, cable) == assess_compatibility(protocol, cable)


class TestCatalogPairings:
    """Known protocol/cable pairings from the seed catalogs."""

    @pytest.mark.parametrize('protocol_id, cable_id, level', [
        ('MODBUS-RTU-001', 'CABLE-MB485-001', CompatibilityLevel.VERIFIED),
        ('MODBUS-RTU-001', 'CABLE-RS232-001', CompatibilityLevel.VERIFIED),
        ('MODBUS-RTU-001', 'CABLE-CAT6-001', CompatibilityLevel.UNLIKELY),
        ('PROFIBUS-DP-001', 'CABLE-PBDP-001', CompatibilityLevel.VERIFIED),
        ('PROFIBUS-DP-001', 'CABLE-MB485-001', CompatibilityLevel.COMPATIBLE),
        ('PROFINET-001', 'CABLE-CAT6A-001', CompatibilityLevel.VERIFIED),
        ('PROFINET-001', 'CABLE-CAT5E-001', CompatibilityLevel.COMPATIBLE),
        ('ETHERNETIP-001', 'CABLE-CAT5E-001', CompatibilityLevel.VERIFIED),
        ('CCLINK-IE-001', 'CABLE-INDETH-001', CompatibilityLevel.UNLIKELY),
        ('IEC61850-001', 'CABLE-INDSM-001', CompatibilityLevel.VERIFIED),
        ('PROTO-GENERIC-001', 'CABLE-USER-001', CompatibilityLevel.PENDING),
        ('PROTO-USER-001', 'CABLE-CAT6-001', CompatibilityLevel.UNVERIFIED),
    ])
    def test_pairing(self, protocols, cables, protocol_id, cable_id, level):
        result = assess_compatibility(protocols.get_by_id(protocol_id), cables.get_by_id(cable_id))
        assert result.level == level

    def test_rate_shortfall_message(self, protocols, cables):
        result = assess_compatibility(
            protocols.get_by_id('CCLINK-IE-001'), cables.get_by_id('CABLE-INDETH-001'))
        assert result.details == ('Protocol minimum: 1 Gbps', 'Cable maximum: 100 Mbps')

    def test_assessment_and_entries_are_hashable(self, protocols, cables):
        protocol = protocols.get_by_id('PROFINET-001')
        cable = cables.get_by_id('CABLE-CAT6A-001')
        result = assess_compatibility(protocol, cable)
        assert hash(result) == hash(assess_compatibility(protocol, cable))
        assert {protocol, cable, result}


class TestGrouping:
    """Batch wrappers over assess_compatibility."""

    def test_every_level_is_a_key(self, protocols):
        groups = group_compatible_cables(protocols.get_by_id('MODBUS-RTU-001'), [])
        assert set(groups) == set(CompatibilityLevel)
        assert all(bucket == [] for bucket in groups.values())

    def test_generic_protocols_are_skipped(self, protocols, cables):
        groups = group_compatible_protocols(cables.get_by_id('CABLE-CAT6A-001'), protocols.protocols)
        bucketed = [p for bucket in groups.values() for p in bucket]
        assert all(not p.is_generic for p in bucketed)
        assert groups[CompatibilityLevel.PENDING] == []
        assert len(bucketed) == protocols.count - 1

    def test_generic_cables_are_skipped(self, protocols, cables):
        groups = group_compatible_cables(protocols.get_by_id('PROFINET-001'), cables.cables)
        bucketed = [c for bucket in groups.values() for c in bucket]
        assert all(not c.is_generic for c in bucketed)
        assert len(bucketed) == cables.count - 1

    def test_buckets_match_single_assessment(self, protocols, cables):
        cable = cables.get_by_id('CABLE-MB485-001')
        groups = group_compatible_protocols(cable, protocols.protocols)
        for level, bucket in groups.items():
            for protocol in bucket:
                assert assess_compatibility(protocol, cable).level == level

    def test_input_order_preserved(self):
        first = make_cable(cable_id='A', impedance=150)
        second = make_cable(cable_id='B', impedance=150)
        third = make_cable(cable_id='C', impedance=150)
        groups = group_compatible_cables(make_protocol(), [third, first, second])
        assert [c.cable_id for c in groups[CompatibilityLevel.VERIFIED]] == ['C', 'A', 'B']

    def test_user_defined_cable_is_bucketed(self, protocols, cables):
        groups = group_compatible_cables(protocols.get_by_id('MODBUS-RTU-001'), cables.cables)
        ids = [c.cable_id for c in groups[CompatibilityLevel.UNVERIFIED]]
        assert ids == ['CABLE-USER-001']

    def test_catalog_entries_unchanged_after_grouping(self, protocols, cables):
        before = [dataclasses.asdict(c) for c in cables.cables]
        group_compatible_cables(protocols.get_by_id('PROFINET-001'), cables.cables)
        assert [dataclasses.asdict(c) for c in cables.cables] == before


class TestDisplay:
    """Labels and icons for each level."""

    def test_every_level_has_label_and_icon(self):
        for level in CompatibilityLevel:
            assert get_compatibility_display_name(level)
            assert get_compatibility_icon(level)

    def test_known_labels(self):
        assert get_compatibility_display_name(CompatibilityLevel.VERIFIED) == 'Verified Compatible'
        assert get_compatibility_icon(CompatibilityLevel.UNLIKELY) == '⛔'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
