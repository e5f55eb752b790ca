"""
Category labels and groupings for catalog browsing.
"""

from typing import Dict, List

from wirelib.types import CableCategory, ProtocolCategory


PROTOCOL_CATEGORY_NAMES: Dict[ProtocolCategory, str] = {
    ProtocolCategory.FIELDBUS_SERIAL: 'Serial Fieldbus',
    ProtocolCategory.FIELDBUS_ETHERNET: 'Industrial Ethernet',
    ProtocolCategory.POWER_SYSTEM: 'Power System',
    ProtocolCategory.BUILDING_AUTOMATION: 'Building Automation',
    ProtocolCategory.WIRELESS: 'Wireless',
    ProtocolCategory.LEGACY: 'Legacy',
    ProtocolCategory.USER_DEFINED: 'User-Defined',
    ProtocolCategory.GENERIC: 'Generic (TBD)',
}

PROTOCOL_CATEGORY_GROUPS: Dict[str, List[ProtocolCategory]] = {
    'Industrial Communication': [
        ProtocolCategory.FIELDBUS_SERIAL,
        ProtocolCategory.FIELDBUS_ETHERNET,
    ],
    'Specialized': [
        ProtocolCategory.POWER_SYSTEM,
        ProtocolCategory.BUILDING_AUTOMATION,
        ProtocolCategory.WIRELESS,
    ],
    'Other': [
        ProtocolCategory.LEGACY,
        ProtocolCategory.USER_DEFINED,
        ProtocolCategory.GENERIC,
    ],
}

CABLE_CATEGORY_NAMES: Dict[CableCategory, str] = {
    CableCategory.POWER_LV: 'Low Voltage Power',
    CableCategory.POWER_MV: 'Medium Voltage Power',
    CableCategory.POWER_HV: 'High Voltage Power',
    CableCategory.CONTROL: 'Control Cable',
    CableCategory.INSTRUMENTATION: 'Instrumentation',
    CableCategory.THERMOCOUPLE: 'Thermocouple Extension',
    CableCategory.COMMUNICATION_COPPER: 'Communication (Copper)',
    CableCategory.COMMUNICATION_FIELDBUS: 'Fieldbus Cable',
    CableCategory.FIBER_SINGLE_MODE: 'Fiber Optic (Single-Mode)',
    CableCategory.FIBER_MULTI_MODE: 'Fiber Optic (Multi-Mode)',
    CableCategory.SPECIALTY: 'Specialty Cable',
    CableCategory.USER_DEFINED: 'User-Defined',
    CableCategory.GENERIC: 'Generic (TBD)',
}

CABLE_CATEGORY_GROUPS: Dict[str, List[CableCategory]] = {
    'Power': [
        CableCategory.POWER_LV,
        CableCategory.POWER_MV,
        CableCategory.POWER_HV,
    ],
    'Control & Instrumentation': [
        CableCategory.CONTROL,
        CableCategory.INSTRUMENTATION,
        CableCategory.THERMOCOUPLE,
    ],
    'Communication': [
        CableCategory.COMMUNICATION_COPPER,
        CableCategory.COMMUNICATION_FIELDBUS,
        CableCategory.FIBER_SINGLE_MODE,
        CableCategory.FIBER_MULTI_MODE,
    ],
    'Other': [
        CableCategory.SPECIALTY,
        CableCategory.USER_DEFINED,
        CableCategory.GENERIC,
    ],
}


def get_all_protocol_categories() -> List[ProtocolCategory]:
    return list(ProtocolCategory)


def get_all_cable_categories() -> List[CableCategory]:
    return list(CableCategory)


def get_protocol_category_display_name(category: ProtocolCategory) -> str:
    """Human-readable label for a protocol category."""
    return PROTOCOL_CATEGORY_NAMES[category]


def get_cable_category_display_name(category: CableCategory) -> str:
    """Human-readable label for a cable category."""
    return CABLE_CATEGORY_NAMES[category]


def get_protocol_category_groups() -> Dict[str, List[ProtocolCategory]]:
    """Protocol categories grouped for menus. Returns a fresh copy."""
    return {name: list(members) for name, members in PROTOCOL_CATEGORY_GROUPS.items()}


def get_cable_category_groups() -> Dict[str, List[CableCategory]]:
    """Cable categories grouped for menus. Returns a fresh copy."""
    return {name: list(members) for name, members in CABLE_CATEGORY_GROUPS.items()}
