"""
Protocol/cable compatibility engine.

Compares a protocol's physical-layer requirements with a cable's
physical-layer capabilities and returns a graded advisory verdict.
Checks run in a fixed order and the first one that fires decides the
result:

    1. generic placeholder on either side   → PENDING
    2. user-defined entry on either side    → UNVERIFIED
    3. cable medium not supported            → UNLIKELY (confirm)
    4. cable rate below protocol minimum     → UNLIKELY (confirm)
    5. impedance outside ±15% of protocol    → COMPATIBLE
    6. shielding required, cable unshielded  → COMPATIBLE
    7. otherwise                             → VERIFIED

Advisory only. Nothing here models real signal-integrity physics.
"""

import logging
from typing import Dict, Iterable, List

from wirelib.models import CableDefinition, CompatibilityAssessment, ProtocolDefinition
from wirelib.types import CompatibilityLevel, ShieldingType
from wirelib.units import format_data_rate, format_impedance

logger = logging.getLogger(__name__)

# Fraction of the protocol's nominal impedance a cable may deviate by
IMPEDANCE_TOLERANCE = 0.15

COMPATIBILITY_DISPLAY_NAMES: Dict[CompatibilityLevel, str] = {
    CompatibilityLevel.VERIFIED: 'Verified Compatible',
    CompatibilityLevel.COMPATIBLE: 'Compatible (Advisory)',
    CompatibilityLevel.UNVERIFIED: 'Unverified (User-Defined)',
    CompatibilityLevel.UNLIKELY: 'Unlikely (Confirmation Required)',
    CompatibilityLevel.PENDING: 'Pending Specification',
}

COMPATIBILITY_ICONS: Dict[CompatibilityLevel, str] = {
    CompatibilityLevel.VERIFIED: '✅',
    CompatibilityLevel.COMPATIBLE: '⚠️',
    CompatibilityLevel.UNVERIFIED: '❓',
    CompatibilityLevel.UNLIKELY: '⛔',
    CompatibilityLevel.PENDING: '📋',
}


def assess_compatibility(
    protocol: ProtocolDefinition,
    cable: CableDefinition,
) -> CompatibilityAssessment:
    """
    Assess whether a protocol is likely to run over a cable.

    Args:
        protocol: Protocol whose physical requirements are checked
        cable: Cable whose physical capabilities are checked

    Returns:
        CompatibilityAssessment with level, summary message, detail lines
        and whether a UI should force explicit acknowledgement.
    """
    if protocol.is_generic or cable.is_generic:
        return CompatibilityAssessment(
            level=CompatibilityLevel.PENDING,
            message='Specification pending',
            details=[
                'Protocol or cable type not yet defined',
                'Item flagged for project review',
            ],
            requires_confirmation=False,
        )

    if protocol.is_user_defined or cable.is_user_defined:
        return CompatibilityAssessment(
            level=CompatibilityLevel.UNVERIFIED,
            message='User-defined combination',
            details=[
                'Compatibility not verified by system library',
                'Engineering judgment applied',
            ],
            requires_confirmation=False,
        )

    if cable.media_type not in protocol.supported_media:
        required = ', '.join(m.value for m in protocol.supported_media)
        return CompatibilityAssessment(
            level=CompatibilityLevel.UNLIKELY,
            message='Physical media mismatch',
            details=[
                f"Protocol requires: {required}",
                f"Cable provides: {cable.media_type.value}",
                'Non-standard configuration - verify with equipment vendor',
            ],
            requires_confirmation=True,
        )

    min_rate = protocol.min_data_rate or 0
    if cable.max_data_rate < min_rate:
        return CompatibilityAssessment(
            level=CompatibilityLevel.UNLIKELY,
            message='Insufficient data rate capacity',
            details=[
                f"Protocol minimum: {format_data_rate(min_rate)}",
                f"Cable maximum: {format_data_rate(cable.max_data_rate)}",
            ],
            requires_confirmation=True,
        )

    expected = protocol.characteristic_impedance
    provided = cable.characteristic_impedance
    if expected and provided:
        if abs(expected - provided) > expected * IMPEDANCE_TOLERANCE:
            return CompatibilityAssessment(
                level=CompatibilityLevel.COMPATIBLE,
                message='Impedance mismatch detected',
                details=[
                    f"Protocol expects: {format_impedance(expected)}",
                    f"Cable provides: {format_impedance(provided)}",
                    'May cause signal reflections at high frequencies',
                ],
                requires_confirmation=False,
            )

    if protocol.shielding_required and cable.shielding == ShieldingType.UNSHIELDED:
        return CompatibilityAssessment(
            level=CompatibilityLevel.COMPATIBLE,
            message='Shielding recommended',
            details=[
                'Protocol specification recommends shielded cable',
                'Unshielded may work in low-EMI environments',
                'Consider environment before finalizing',
            ],
            requires_confirmation=False,
        )

    return CompatibilityAssessment(
        level=CompatibilityLevel.VERIFIED,
        message='Verified compatible combination',
        details=[
            'Physical layer requirements satisfied',
            'Industry-standard configuration',
        ],
        requires_confirmation=False,
    )


def _empty_groups() -> Dict[CompatibilityLevel, list]:
    return {level: [] for level in CompatibilityLevel}


def group_compatible_protocols(
    cable: CableDefinition,
    protocols: Iterable[ProtocolDefinition],
) -> Dict[CompatibilityLevel, List[ProtocolDefinition]]:
    """
    Bucket protocols by how well they run over one cable.

    Generic placeholder protocols are left out entirely rather than
    listed as PENDING. Every level is present as a key.
    """
    groups = _empty_groups()
    for protocol in protocols:
        if protocol.is_generic:
            continue
        result = assess_compatibility(protocol, cable)
        groups[result.level].append(protocol)
    logger.debug("Grouped protocols for cable %s: %s", cable.cable_id,
                 {level.value: len(items) for level, items in groups.items()})
    return groups


def group_compatible_cables(
    protocol: ProtocolDefinition,
    cables: Iterable[CableDefinition],
) -> Dict[CompatibilityLevel, List[CableDefinition]]:
    """
    Bucket cables by how well they carry one protocol.

    Generic placeholder cables are left out entirely. Every level is
    present as a key.
    """
    groups = _empty_groups()
    for cable in cables:
        if cable.is_generic:
            continue
        result = assess_compatibility(protocol, cable)
        groups[result.level].append(cable)
    logger.debug("Grouped cables for protocol %s: %s", protocol.protocol_id,
                 {level.value: len(items) for level, items in groups.items()})
    return groups


def get_compatibility_display_name(level: CompatibilityLevel) -> str:
    return COMPATIBILITY_DISPLAY_NAMES[level]


def get_compatibility_icon(level: CompatibilityLevel) -> str:
    return COMPATIBILITY_ICONS[level]
