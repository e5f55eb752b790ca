"""
Reference ampacity tables for copper building wire.

Two tables are carried: NEC Table 310.16 (AWG and kcmil sizes, 60°C
column) and IEC 60364-5-52 Table B.52.2 (metric sizes, method B1). Values
are base ratings only. Ambient temperature and bundling correction
factors are not applied.
"""

import logging
from typing import Dict, List, Optional

from wirelib.models import AmpacityRating, AmpacityTable
from wirelib.types import InstallationMethod

logger = logging.getLogger(__name__)

SIZE_UNITS = ('AWG', 'kcmil', 'mm²')


def _ratings(unit: str, rows: Dict[str, float], conductor_temp_c: float) -> List[AmpacityRating]:
    return [
        AmpacityRating(
            conductor_size=size,
            size_unit=unit,
            ampacity=amps,
            installation_method=InstallationMethod.IN_CONDUIT,
            ambient_temp_c=30,
            conductor_temp_c=conductor_temp_c,
        )
        for size, amps in rows.items()
    ]


NEC_TABLE_310_16 = AmpacityTable(
    reference='NEC Table 310.16',
    description='Allowable ampacities of insulated copper conductors, not more than 3 '
                'current-carrying conductors in raceway/cable, based on 30°C ambient',
    ratings=_ratings('AWG', {
        '14': 15, '12': 20, '10': 30, '8': 40, '6': 55, '4': 70, '3': 85, '2': 95, '1': 110,
        '1/0': 125, '2/0': 145, '3/0': 165, '4/0': 195,
    }, 60) + _ratings('kcmil', {
        '250': 215, '300': 240, '350': 260, '400': 280, '500': 320,
    }, 60),
)

IEC_60364_COPPER_PVC = AmpacityTable(
    reference='IEC 60364-5-52 Table B.52.2',
    description='Current-carrying capacities for PVC insulated copper cables, installation '
                'method B1 (conduit in thermally insulated wall)',
    ratings=_ratings('mm²', {
        '1.5': 14, '2.5': 19, '4': 26, '6': 33, '10': 46, '16': 61, '25': 80, '35': 99,
        '50': 118, '70': 149, '95': 179, '120': 206, '150': 236, '185': 268, '240': 315,
    }, 70),
)

AMPACITY_REFERENCE_TABLES: List[AmpacityTable] = [
    NEC_TABLE_310_16,
    IEC_60364_COPPER_PVC,
]


def get_ampacity_for_size(
    table: AmpacityTable,
    size: str,
    method: Optional[InstallationMethod] = None,
) -> Optional[AmpacityRating]:
    """
    Find the first rating in a table for a conductor size.

    Args:
        table: Table to search
        size: Conductor size exactly as printed in the table ('12', '1/0', '2.5')
        method: If given, the rating must also match this installation method

    Returns:
        Matching AmpacityRating, or None
    """
    for rating in table.ratings:
        if rating.conductor_size == size and (method is None or rating.installation_method == method):
            return rating
    return None


def lookup_ampacity(
    size: str,
    size_unit: str,
    installation_method: InstallationMethod = InstallationMethod.IN_CONDUIT,
) -> Optional[AmpacityRating]:
    """
    Look up a base ampacity, choosing the table from the size unit.

    Metric sizes ('mm²') are read from the IEC table; AWG and kcmil sizes
    from the NEC table.

    Raises:
        ValueError: if ``size_unit`` is not one of SIZE_UNITS
    """
    if size_unit not in SIZE_UNITS:
        raise ValueError(f"Unknown conductor size unit: {size_unit!r} (expected one of {', '.join(SIZE_UNITS)})")

    table = IEC_60364_COPPER_PVC if size_unit == 'mm²' else NEC_TABLE_310_16
    rating = get_ampacity_for_size(table, size, installation_method)
    if rating is None:
        logger.info("No %s rating for %s %s (%s)", table.reference, size, size_unit, installation_method.value)
    return rating
