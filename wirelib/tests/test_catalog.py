"""
Tests for the protocol and cable catalogs.

Validates:
1. Seed data loads with unique IDs and expected counts
2. Exactly one generic and one user-defined template per catalog
3. Search by text, category, industry and medium
4. ID and abbreviation lookup
5. Filter helpers (power-system, real-time, cable families)
6. JSON export
"""

import dataclasses
import json
import pytest
import sys
import os
import time
from concurrent.futures import ThreadPoolExecutor

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.dirname(__file__))))

from wirelib.protocol_library import (
    ProtocolLibrary,
    get_all_protocols,
    get_protocol_by_id,
    get_protocol_by_abbreviation,
    get_protocols_by_category,
    get_protocols_by_industry,
    get_protocols_by_ids,
    get_real_time_protocols,
    get_renewable_integration_protocols,
    get_safety_capable_protocols,
    get_scada_protocols,
    get_substation_protocols,
    search_protocols,
)
from wirelib.cable_library import (
    CableLibrary,
    get_all_cables,
    get_armored_fiber_cables,
    get_cable_by_id,
    get_cables_by_category,
    get_communication_cables,
    get_control_cables_only,
    get_direct_burial_power_cables,
    get_ethernet_cables,
    get_fiber_cables_by_data_rate,
    get_fiber_cables_by_distance,
    get_fieldbus_cables,
    get_flexible_control_cables,
    get_industrial_ethernet_cables,
    get_industrial_fiber_cables,
    get_instrumentation_cables,
    get_lv_power_cables,
    get_multi_mode_cables,
    get_mv_power_cables,
    get_outdoor_fiber_cables,
    get_power_cables,
    get_shielded_communication_cables,
    get_shielded_control_cables,
    get_single_mode_cables,
    get_thermocouple_cables,
    get_tray_rated_power_cables,
    search_cables,
)
from wirelib.types import (
    CableCategory,
    CableConstruction,
    PhysicalMediaType,
    ProtocolCategory,
    ShieldingType,
)


class TestProtocolLibrary:
    """Test the protocol catalog."""

    def test_seed_count(self):
        assert ProtocolLibrary().count == 31

    def test_empty_library(self):
        assert ProtocolLibrary(seed=False).count == 0

    def test_ids_unique(self):
        ids = [p.protocol_id for p in get_all_protocols()]
        assert len(ids) == len(set(ids))

    def test_single_generic_and_user_template(self):
        protocols = get_all_protocols()
        assert [p.protocol_id for p in protocols if p.is_generic] == ['PROTO-GENERIC-001']
        assert [p.protocol_id for p in protocols if p.is_user_defined] == ['PROTO-USER-001']

    def test_every_protocol_lists_media(self):
        for p in get_all_protocols():
            assert p.supported_media, p.protocol_id

    def test_get_by_id(self):
        p = get_protocol_by_id('MODBUS-RTU-001')
        assert p.name == 'Modbus RTU'
        assert p.min_data_rate == 9600

    def test_get_by_id_unknown(self):
        assert get_protocol_by_id('NOPE-001') is None

    def test_get_by_abbreviation_ignores_case(self):
        assert get_protocol_by_abbreviation('pn').protocol_id == 'PROFINET-001'
        assert get_protocol_by_abbreviation('MB-RTU').protocol_id == 'MODBUS-RTU-001'

    def test_search_text(self):
        results = search_protocols('profibus')
        ids = {p.protocol_id for p in results}
        assert {'PROFIBUS-DP-001', 'PROFIBUS-PA-001'} <= ids

    def test_search_by_category(self):
        results = ProtocolLibrary().search(category=ProtocolCategory.POWER_SYSTEM)
        assert len(results) == 10
        assert all(p.category == ProtocolCategory.POWER_SYSTEM for p in results)

    def test_search_by_media(self):
        results = ProtocolLibrary().search(media_type=PhysicalMediaType.FIELDBUS_H1)
        assert [p.protocol_id for p in results] == ['FF-H1-001']

    def test_search_by_industry_case_insensitive(self):
        lower = ProtocolLibrary().search(industry='water')
        assert lower
        assert lower == ProtocolLibrary().search(industry='WATER')

    def test_search_no_match(self):
        assert ProtocolLibrary().search(query='zzzz-not-a-protocol') == []

    def test_category_filter(self):
        serial = get_protocols_by_category(ProtocolCategory.FIELDBUS_SERIAL)
        assert all(p.category == ProtocolCategory.FIELDBUS_SERIAL for p in serial)
        assert any(p.protocol_id == 'MODBUS-RTU-001' for p in serial)

    def test_industry_filter(self):
        assert all('POWER' in p.industries for p in get_protocols_by_industry('POWER'))

    def test_safety_capable(self):
        ids = {p.protocol_id for p in get_safety_capable_protocols()}
        assert 'PROFINET-001' in ids
        assert 'MODBUS-RTU-001' not in ids

    def test_real_time_protocols(self):
        ids = {p.protocol_id for p in get_real_time_protocols()}
        assert 'ETHERCAT-001' in ids
        assert 'MODBUS-TCP-001' not in ids
        for p in get_real_time_protocols():
            assert p.category == ProtocolCategory.FIELDBUS_ETHERNET
            assert p.cycle_time.min < 1

    def test_power_system_filters(self):
        for getter in (get_substation_protocols, get_scada_protocols, get_renewable_integration_protocols):
            results = getter()
            assert results, getter.__name__
            assert all(p.category == ProtocolCategory.POWER_SYSTEM for p in results)
        assert 'IEC61850-001' in {p.protocol_id for p in get_substation_protocols()}

    def test_get_by_ids(self):
        found = get_protocols_by_ids(['MODBUS-RTU-001', 'MISSING'])
        assert found['MODBUS-RTU-001'].abbreviation == 'MB-RTU'
        assert found['MISSING'] is None

    def test_export_json(self):
        data = json.loads(ProtocolLibrary().export_json())
        assert len(data) == 31
        assert data[0]['protocol_id'] == 'MODBUS-RTU-001'
        assert data[0]['physical_requirements']['supported_media'] == ['RS485', 'RS232']
        assert data[0]['physical_requirements']['max_distance'] == {'RS485': 1200, 'RS232': 15}

    def test_search_result_is_a_copy(self):
        search_protocols().clear()
        assert get_protocol_by_id('MODBUS-RTU-001') is not None
        assert len(get_all_protocols()) == 31

    def test_nested_fields_cannot_be_changed(self):
        protocol = get_protocol_by_id('PROFINET-001')
        with pytest.raises(AttributeError):
            protocol.supported_media.append(PhysicalMediaType.RS232)
        with pytest.raises(TypeError):
            protocol.physical_requirements.max_distance[0] = (PhysicalMediaType.RS232, 15)
        fresh = ProtocolLibrary().get_by_id('PROFINET-001')
        assert fresh.supported_media == (
            PhysicalMediaType.COPPER_ETHERNET,
            PhysicalMediaType.FIBER_MULTI_MODE,
            PhysicalMediaType.FIBER_SINGLE_MODE,
        )

    def test_distance_for_medium(self):
        requirements = get_protocol_by_id('PROFINET-001').physical_requirements
        assert requirements.distance_for(PhysicalMediaType.FIBER_SINGLE_MODE) == 26000
        assert requirements.distance_for(PhysicalMediaType.RS485) is None

    def test_default_library_built_once_across_threads(self, monkeypatch):
        import wirelib.protocol_library as protocol_library

        built = []

        class SlowLibrary(ProtocolLibrary):
            def __init__(self):
                built.append(self)
                time.sleep(0.05)
                super().__init__()

        monkeypatch.setattr(protocol_library, '_default_library', None)
        monkeypatch.setattr(protocol_library, 'ProtocolLibrary', SlowLibrary)
        with ThreadPoolExecutor(max_workers=8) as pool:
            libraries = list(pool.map(lambda _: protocol_library._get_library(), range(8)))

        assert len(built) == 1
        assert all(library is built[0] for library in libraries)

    def test_industries_sorted(self):
        industries = ProtocolLibrary().industries
        assert industries == sorted(industries)
        assert 'MANUFACTURING' in industries


class TestCableLibrary:
    """Test the cable catalog."""

    def test_seed_count(self):
        assert CableLibrary().count == 40

    def test_ids_unique(self):
        ids = [c.cable_id for c in get_all_cables()]
        assert len(ids) == len(set(ids))

    def test_single_generic_and_user_template(self):
        cables = get_all_cables()
        assert [c.cable_id for c in cables if c.is_generic] == ['CABLE-GENERIC-001']
        assert [c.cable_id for c in cables if c.is_user_defined] == ['CABLE-USER-001']

    def test_templates_last(self):
        ids = [c.cable_id for c in get_all_cables()]
        assert ids[-2:] == ['CABLE-GENERIC-001', 'CABLE-USER-001']

    def test_get_by_id(self):
        cable = get_cable_by_id('CABLE-PBDP-001')
        assert cable.media_type == PhysicalMediaType.PROFIBUS_DP
        assert cable.characteristic_impedance == 150
        assert cable.max_data_rate == 12_000_000

    def test_get_by_id_unknown(self):
        assert get_cable_by_id('CABLE-NOPE') is None

    def test_search_text(self):
        ids = {c.cable_id for c in search_cables('thermocouple')}
        assert ids == {'CABLE-TC-K-001', 'CABLE-TC-J-001', 'CABLE-TC-T-001'}

    def test_search_by_media(self):
        results = CableLibrary().search(media_type=PhysicalMediaType.COPPER_ETHERNET)
        assert {c.cable_id for c in results} == {
            'CABLE-CAT5E-001', 'CABLE-CAT6-001', 'CABLE-CAT6A-001', 'CABLE-INDETH-001',
        }

    def test_search_combined(self):
        results = CableLibrary().search(query='fiber', category=CableCategory.FIBER_SINGLE_MODE)
        assert all(c.category == CableCategory.FIBER_SINGLE_MODE for c in results)
        assert len(results) == 3

    def test_category_filter(self):
        assert len(get_cables_by_category(CableCategory.THERMOCOUPLE)) == 3

    def test_power_and_communication_groups(self):
        assert all(c.category.value.startswith('POWER_') for c in get_power_cables())
        assert len(get_power_cables()) == 7
        comm = {c.category for c in get_communication_cables()}
        assert CableCategory.SPECIALTY not in comm

    def test_power_filters(self):
        assert len(get_lv_power_cables()) == 5
        assert {c.cable_id for c in get_mv_power_cables()} == {'CABLE-MV15-001', 'CABLE-MV35-001'}
        assert all(CableConstruction.TRAY_RATED in c.construction for c in get_tray_rated_power_cables())
        assert 'CABLE-TC-001' in {c.cable_id for c in get_direct_burial_power_cables()}

    def test_control_filters(self):
        assert all(c.shielding != ShieldingType.NONE for c in get_shielded_control_cables())
        assert 'CABLE-CTRL-001' not in {c.cable_id for c in get_shielded_control_cables()}
        assert [c.cable_id for c in get_flexible_control_cables()] == ['CABLE-CTRL-003']
        assert [c.cable_id for c in get_control_cables_only()] == ['CABLE-CTRL-001', 'CABLE-CTRL-002', 'CABLE-CTRL-003']
        assert len(get_instrumentation_cables()) == 3
        assert len(get_thermocouple_cables()) == 3

    def test_communication_filters(self):
        assert len(get_ethernet_cables()) == 5
        assert len(get_fieldbus_cables()) == 7
        assert [c.cable_id for c in get_industrial_ethernet_cables()] == ['CABLE-CAT6A-001']
        shielded = {c.cable_id for c in get_shielded_communication_cables()}
        assert 'CABLE-CAT5E-001' not in shielded
        assert 'CABLE-ASI-001' not in shielded
        assert 'CABLE-CAN-001' in shielded

    def test_fiber_filters(self):
        assert len(get_single_mode_cables()) == 3
        assert len(get_multi_mode_cables()) == 4
        assert 'CABLE-SMOS2-002' in {c.cable_id for c in get_armored_fiber_cables()}
        assert 'CABLE-SMOS2-001' not in {c.cable_id for c in get_outdoor_fiber_cables()}
        assert {'CABLE-INDMM-001', 'CABLE-INDSM-001'} <= {c.cable_id for c in get_industrial_fiber_cables()}

    def test_fiber_by_distance_and_rate(self):
        long_haul = {c.cable_id for c in get_fiber_cables_by_distance(40000)}
        assert long_haul == {'CABLE-SMOS2-001', 'CABLE-SMOS2-002'}
        fast = {c.cable_id for c in get_fiber_cables_by_data_rate(100_000_000_000)}
        assert fast == {'CABLE-SMOS2-001', 'CABLE-SMOS2-002', 'CABLE-MMOM4-001'}

    def test_export_json(self):
        data = json.loads(CableLibrary().export_json())
        assert len(data) == 40
        assert data[0]['physical_capabilities']['media_type'] == 'CURRENT_LOOP'

    def test_entries_are_frozen(self):
        cable = get_cable_by_id('CABLE-CAT6-001')
        with pytest.raises(dataclasses.FrozenInstanceError):
            cable.name = 'changed'
        with pytest.raises(AttributeError):
            cable.construction.append(CableConstruction.ARMORED)
        with pytest.raises(AttributeError):
            cable.physical_capabilities.connector_types.clear()
        assert CableConstruction.ARMORED not in CableLibrary().get_by_id('CABLE-CAT6-001').construction

    def test_search_result_is_a_copy(self):
        search_cables().clear()
        assert get_cable_by_id('CABLE-CAT6-001') is not None
        assert len(get_all_cables()) == 40


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
