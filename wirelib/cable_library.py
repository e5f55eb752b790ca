"""
Cable product catalog.

Seed data for power, control, instrumentation, communication and fiber
optic cables commonly specified for industrial projects, plus generic and
user-defined templates. Values are typical catalog figures; confirm
against the selected manufacturer's datasheet before procurement.
"""

import dataclasses
import json
import logging
import threading
from typing import List, Optional

from wirelib.models import (
    CableDefinition,
    ConductorSpec,
    PhysicalLayerCapabilities,
    TemperatureRating,
)
from wirelib.types import (
    CableCategory,
    CableConstruction as K,
    CableVoltageClass as V,
    ConductorMaterial,
    ConnectorType as C,
    InsulationType,
    JacketType,
    PhysicalMediaType as M,
    ShieldingType as S,
)

logger = logging.getLogger(__name__)

_CU = ConductorMaterial.COPPER
_TCU = ConductorMaterial.TINNED_COPPER


def _cable(cable_id, name, category, description, media, max_rate, distance, connectors, shielding,
           construction, insulation, jacket, voltage, conductor, count, temp, industries, standards,
           applications, impedance=None, pairs=None, power_over_fieldbus=False, icon=''):
    """Build a catalog entry from the positional layout used by the seed tables below."""
    material, awg = conductor
    return CableDefinition(
        cable_id=cable_id,
        name=name,
        category=category,
        description=description,
        physical_capabilities=PhysicalLayerCapabilities(
            media_type=media,
            max_data_rate=max_rate,
            max_distance=distance,
            connector_types=connectors,
            shielding=shielding,
            characteristic_impedance=impedance,
            supports_power_over_fieldbus=power_over_fieldbus,
        ),
        construction=construction,
        insulation=insulation,
        jacket=jacket,
        voltage_class=voltage,
        conductor=ConductorSpec(material=material, awg_range=awg),
        conductor_count=count,
        pair_count=pairs,
        temperature_rating=TemperatureRating(*temp),
        industries=industries,
        standards=standards,
        typical_applications=applications,
        icon=icon,
    )


# --- Power ---

POWER_CABLES = [
    _cable('CABLE-THHN-001', 'THHN/THWN-2 Building Wire', CableCategory.POWER_LV,
           'Thermoplastic high heat-resistant nylon-coated building wire. Standard for commercial and '
           'industrial branch circuits. Dual-rated for dry and wet locations.',
           M.CURRENT_LOOP, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.NONE,
           [K.SOLID, K.STRANDED], InsulationType.PVC, JacketType.NONE, V.LOW_600V,
           (_CU, '14 AWG - 1000 kcmil'), 1, (-10, 90),
           ['BUILDING_AUTOMATION', 'MANUFACTURING', 'COMMERCIAL'],
           ['UL 83', 'NEC Article 310', 'NFPA 70'],
           ['Branch circuits', 'Feeder circuits', 'Control wiring', 'Motor connections',
            'Conduit installations'], icon='🔌'),
    _cable('CABLE-XHHW-001', 'XHHW-2 Cross-Linked Wire', CableCategory.POWER_LV,
           'Cross-linked polyethylene insulated building wire. Superior temperature and moisture '
           'resistance. Suitable for wet and dry locations at 90°C.',
           M.CURRENT_LOOP, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.NONE,
           [K.STRANDED], InsulationType.XLPE, JacketType.NONE, V.LOW_600V,
           (_CU, '14 AWG - 500 kcmil'), 1, (-40, 90),
           ['MANUFACTURING', 'OIL_GAS', 'CHEMICAL', 'POWER'],
           ['UL 44', 'NEC Article 310'],
           ['Industrial feeders', 'Motor circuits', 'Outdoor installations',
            'High-temperature environments'], icon='🔌'),
    _cable('CABLE-MC-001', 'MC Cable (Metal Clad)', CableCategory.POWER_LV,
           'Factory assembly of conductors within interlocking metal armor. Provides mechanical '
           'protection without conduit. Includes equipment grounding conductor.',
           M.CURRENT_LOOP, 0, 150, [C.CABLE_GLAND, C.TERMINAL_BLOCK], S.BRAID_SHIELDED,
           [K.ARMORED, K.STRANDED], InsulationType.XLPE, JacketType.PVC, V.LOW_600V,
           (_CU, '14 AWG - 500 kcmil'), '2-4 + Ground', (-25, 90),
           ['MANUFACTURING', 'COMMERCIAL', 'HEALTHCARE', 'DATA_CENTER'],
           ['UL 1569', 'NEC Article 330'],
           ['Commercial branch circuits', 'Healthcare facilities', 'Exposed installations',
            'Cable tray systems'], icon='🛡️'),
    _cable('CABLE-SOOW-001', 'SOOW Portable Cord', CableCategory.POWER_LV,
           'Oil-resistant, weather-resistant portable cord for heavy industrial service. Extra-flexible '
           'construction for demanding applications. Suitable for outdoor use.',
           M.CURRENT_LOOP, 0, 150, [C.TERMINAL_BLOCK, C.CABLE_GLAND], S.NONE,
           [K.EXTRA_FLEXIBLE, K.OUTDOOR], InsulationType.RUBBER, JacketType.NEOPRENE, V.LOW_600V,
           (_CU, '18 AWG - 2 AWG'), '2-5', (-40, 90),
           ['MANUFACTURING', 'MINING', 'CONSTRUCTION', 'MARINE'],
           ['UL 62', 'CSA C22.2 No. 49'],
           ['Portable equipment', 'Temporary power', 'Stage lighting', 'Mobile machinery',
            'Mining equipment'], icon='🔋'),
    _cable('CABLE-VFD-001', 'VFD/Motor Drive Cable', CableCategory.SPECIALTY,
           'Specialized cable for variable frequency drive applications. Symmetrical construction with '
           'low capacitance design. Includes ground conductors for EMI control.',
           M.CURRENT_LOOP, 0, 300, [C.TERMINAL_BLOCK, C.CABLE_GLAND], S.FOIL_AND_BRAID,
           [K.STRANDED, K.TRAY_RATED], InsulationType.XLPE, JacketType.PVC, V.LOW_1000V,
           (_CU, '14 AWG - 500 kcmil'), '3 + Ground(s)', (-40, 90),
           ['MANUFACTURING', 'OIL_GAS', 'MINING', 'WATER', 'HVAC'],
           ['UL 2277', 'NFPA 79', 'NEC Article 300'],
           ['VFD to motor connections', 'Servo drive cabling', 'PWM motor circuits',
            'Long motor lead applications'], impedance=50, icon='⚙️'),
    _cable('CABLE-MV15-001', 'MV-90 15kV EPR Power Cable', CableCategory.POWER_MV,
           'Medium voltage power cable with EPR insulation for 15kV class applications. Features strand '
           'shield, insulation shield, and copper tape shield. UL MV-90 rated.',
           M.CURRENT_LOOP, 0, 5000, [C.TERMINAL_BLOCK, C.CABLE_GLAND], S.FOIL_AND_BRAID,
           [K.STRANDED, K.ARMORED, K.DIRECT_BURIAL], InsulationType.EPR, JacketType.PVC, V.MEDIUM_15KV,
           (_CU, '1/0 AWG - 1000 kcmil'), 1, (-40, 90),
           ['POWER', 'MINING', 'OIL_GAS', 'MANUFACTURING', 'WATER'],
           ['UL 1072', 'ICEA S-93-639', 'AEIC CS8', 'NEC Article 328'],
           ['Primary distribution', 'Industrial substations', 'Mining power distribution',
            'Utility feeders', 'Wind farm collection systems'], icon='⚡'),
    _cable('CABLE-MV35-001', 'MV-105 35kV XLPE Power Cable', CableCategory.POWER_MV,
           'Medium voltage power cable with XLPE insulation for 35kV class applications. Tree-retardant '
           'XLPE (TR-XLPE) option available. Superior thermal performance.',
           M.CURRENT_LOOP, 0, 10000, [C.TERMINAL_BLOCK, C.CABLE_GLAND], S.FOIL_AND_BRAID,
           [K.STRANDED, K.ARMORED, K.DIRECT_BURIAL], InsulationType.XLPE, JacketType.PE, V.MEDIUM_35KV,
           (_CU, '1/0 AWG - 1000 kcmil'), 1, (-40, 90),
           ['POWER', 'UTILITY', 'RENEWABLE_ENERGY', 'MINING'],
           ['UL 1072', 'ICEA S-94-649', 'AEIC CS9', 'IEC 60502-2'],
           ['Utility distribution', 'Solar farm collection', 'Industrial plant feeders',
            'Underground distribution', 'Substation interconnections'], icon='⚡'),
    _cable('CABLE-TC-001', 'Type TC Tray Cable', CableCategory.POWER_LV,
           'Power and control tray cable for industrial installations. Suitable for cable tray, conduit, '
           'or direct burial. Multiple conductor configurations available.',
           M.CURRENT_LOOP, 0, 300, [C.TERMINAL_BLOCK, C.CABLE_GLAND], S.NONE,
           [K.STRANDED, K.TRAY_RATED, K.DIRECT_BURIAL], InsulationType.XLPE, JacketType.PVC, V.LOW_600V,
           (_CU, '18 AWG - 500 kcmil'), '2-37', (-40, 90),
           ['MANUFACTURING', 'OIL_GAS', 'CHEMICAL', 'POWER', 'WATER'],
           ['UL 1277', 'NEC Article 336', 'ICEA S-95-658'],
           ['Cable tray installations', 'Industrial power distribution', 'Control system wiring',
            'Outdoor installations', 'Process industries'], icon='🔌'),
    _cable('CABLE-PLTC-001', 'PLTC Power-Limited Tray Cable', CableCategory.CONTROL,
           'Power-limited tray cable for Class 2 circuits in cable trays. Used in industrial control '
           'systems and building automation. Available shielded or unshielded.',
           M.VOLTAGE_SIGNAL, 0, 150, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.FOIL_SHIELDED,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PVC, JacketType.PVC, V.LOW_300V,
           (_CU, '22 AWG - 12 AWG'), '2-50', (-20, 75),
           ['MANUFACTURING', 'BUILDING_AUTOMATION', 'COMMERCIAL'],
           ['UL 13', 'NEC Article 725'],
           ['Building automation', 'HVAC controls', 'Fire alarm circuits', 'Security systems',
            'Industrial controls'], pairs=1, icon='🎛️'),
]


# --- Control, instrumentation and thermocouple ---

CONTROL_CABLES = [
    _cable('CABLE-CTRL-001', 'Multi-Conductor Control Cable (PVC)', CableCategory.CONTROL,
           'General purpose multi-conductor control cable with PVC insulation. Color-coded conductors for '
           'easy identification. Suitable for relay circuits, control panels, and general wiring.',
           M.VOLTAGE_SIGNAL, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.NONE,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PVC, JacketType.PVC, V.LOW_600V,
           (_CU, '18 AWG - 10 AWG'), '2-37', (-20, 75),
           ['MANUFACTURING', 'BUILDING_AUTOMATION', 'POWER', 'WATER'],
           ['UL 2587', 'CSA C22.2 No. 239'],
           ['Control panels', 'Relay circuits', 'Interlock wiring', 'Limit switch connections',
            'General control wiring'], icon='🎛️'),
    _cable('CABLE-CTRL-002', 'Shielded Control Cable', CableCategory.CONTROL,
           'Multi-conductor control cable with overall foil shield. Provides EMI/RFI protection for '
           'sensitive control circuits. Includes drain wire for shield termination.',
           M.VOLTAGE_SIGNAL, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.FOIL_SHIELDED,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PVC, JacketType.PVC, V.LOW_600V,
           (_CU, '18 AWG - 10 AWG'), '2-37', (-20, 75),
           ['MANUFACTURING', 'OIL_GAS', 'CHEMICAL', 'POWER'],
           ['UL 2587', 'CSA C22.2 No. 239'],
           ['Analog signal wiring', 'PLC I/O connections', 'Instrumentation loops',
            'EMI-sensitive circuits', 'Process control systems'], icon='🛡️'),
    _cable('CABLE-CTRL-003', 'Flexible Control Cable (PUR)', CableCategory.CONTROL,
           'Highly flexible control cable with polyurethane jacket. Designed for continuous flexing '
           'applications such as cable tracks and robotic systems. Oil and coolant resistant.',
           M.VOLTAGE_SIGNAL, 0, 100, [C.TERMINAL_BLOCK, C.M12_A_CODED], S.BRAID_SHIELDED,
           [K.EXTRA_FLEXIBLE], InsulationType.TPE, JacketType.PUR, V.LOW_300V,
           (_TCU, '22 AWG - 16 AWG'), '2-25', (-40, 80),
           ['MANUFACTURING', 'AUTOMOTIVE', 'ROBOTICS', 'PACKAGING'],
           ['UL AWM 20549', 'UL AWM 21223'],
           ['Cable tracks/chains', 'Robotic arms', 'CNC machines', 'Pick and place systems',
            'Automated guided vehicles'], icon='🔄'),
    _cable('CABLE-INST-001', 'Instrumentation Cable (Twisted Pair)', CableCategory.INSTRUMENTATION,
           'Twisted pair instrumentation cable with individual and overall shields. Designed for 4-20mA '
           'analog signals and low-level measurement circuits. PE insulation for low capacitance.',
           M.CURRENT_LOOP, 0, 1500, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.INDIVIDUAL_AND_OVERALL,
           [K.STRANDED, K.TRAY_RATED, K.ARMORED], InsulationType.PE, JacketType.PVC, V.LOW_300V,
           (_TCU, '16 AWG'), 2, (-40, 75),
           ['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'POWER', 'WATER'],
           ['ISA S50.1', 'ICEA S-82-552'],
           ['4-20mA transmitter loops', 'RTD circuits', 'Strain gauge connections',
            'Low-level analog signals', 'Process instrumentation'], pairs=1, icon='📊'),
    _cable('CABLE-INST-002', 'Multi-Pair Instrumentation Cable', CableCategory.INSTRUMENTATION,
           'Multi-pair instrumentation cable with individually shielded pairs and overall shield. '
           'Color-coded pairs for easy identification. Suitable for marshalling cabinets and DCS '
           'terminations.',
           M.CURRENT_LOOP, 0, 1500, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.INDIVIDUAL_AND_OVERALL,
           [K.STRANDED, K.TRAY_RATED, K.ARMORED], InsulationType.PE, JacketType.PVC, V.LOW_300V,
           (_TCU, '16 AWG'), '4-50', (-40, 75),
           ['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'POWER'],
           ['ISA S50.1', 'ICEA S-82-552'],
           ['Marshalling cabinets', 'DCS I/O terminations', 'Multi-loop installations',
            'Control room wiring', 'Remote I/O racks'], pairs=2, icon='📊'),
    _cable('CABLE-INST-003', 'Instrumentation Cable (Triad)', CableCategory.INSTRUMENTATION,
           'Three-conductor triad instrumentation cable. Third conductor for shield drain or dedicated '
           'ground. Used where separate signal and ground references are required.',
           M.CURRENT_LOOP, 0, 1500, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.INDIVIDUAL_AND_OVERALL,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PE, JacketType.PVC, V.LOW_300V,
           (_TCU, '16 AWG - 18 AWG'), 3, (-40, 75),
           ['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'POWER'],
           ['ISA S50.1', 'ICEA S-82-552'],
           ['RTD 3-wire circuits', 'Grounded thermocouple circuits', 'Bridge circuits',
            'Millivolt signals'], icon='📊'),
    _cable('CABLE-TC-K-001', 'Type K Thermocouple Extension Cable', CableCategory.THERMOCOUPLE,
           'Extension wire for Type K (Chromel-Alumel) thermocouples. Color-coded per ANSI/ISA-MC96.1. '
           'Individual and overall shields available for EMI protection.',
           M.VOLTAGE_SIGNAL, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.FOIL_SHIELDED,
           [K.STRANDED], InsulationType.FEP, JacketType.PVC, V.EXTRA_LOW,
           (_CU, '20 AWG - 16 AWG'), 2, (-40, 200),
           ['MANUFACTURING', 'CHEMICAL', 'PHARMACEUTICAL', 'FOOD_BEVERAGE', 'METALS'],
           ['ANSI/ISA-MC96.1', 'IEC 60584-3'],
           ['Furnace temperature monitoring', 'Process temperature measurement', 'Kiln control',
            'Heat treatment', 'General industrial temperature'], pairs=1, icon='🌡️'),
    _cable('CABLE-TC-J-001', 'Type J Thermocouple Extension Cable', CableCategory.THERMOCOUPLE,
           'Extension wire for Type J (Iron-Constantan) thermocouples. Suitable for reducing '
           'atmospheres. Color-coded per ANSI/ISA-MC96.1.',
           M.VOLTAGE_SIGNAL, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.FOIL_SHIELDED,
           [K.STRANDED], InsulationType.FEP, JacketType.PVC, V.EXTRA_LOW,
           (_CU, '20 AWG - 16 AWG'), 2, (-40, 200),
           ['MANUFACTURING', 'PLASTICS', 'FOOD_BEVERAGE', 'PACKAGING'],
           ['ANSI/ISA-MC96.1', 'IEC 60584-3'],
           ['Plastic extrusion', 'Packaging equipment', 'Food processing',
            'Lower temperature applications'], pairs=1, icon='🌡️'),
    _cable('CABLE-TC-T-001', 'Type T Thermocouple Extension Cable', CableCategory.THERMOCOUPLE,
           'Extension wire for Type T (Copper-Constantan) thermocouples. Excellent for low temperature '
           'and cryogenic applications. Highest accuracy at sub-zero temperatures.',
           M.VOLTAGE_SIGNAL, 0, 300, [C.TERMINAL_BLOCK, C.SCREW_TERMINAL], S.FOIL_SHIELDED,
           [K.STRANDED], InsulationType.FEP, JacketType.PVC, V.EXTRA_LOW,
           (_CU, '20 AWG - 16 AWG'), 2, (-200, 150),
           ['PHARMACEUTICAL', 'FOOD_BEVERAGE', 'LABORATORY', 'CRYOGENICS'],
           ['ANSI/ISA-MC96.1', 'IEC 60584-3'],
           ['Refrigeration systems', 'Cryogenic applications', 'Environmental chambers',
            'Laboratory equipment', 'Food storage monitoring'], pairs=1, icon='🌡️'),
]


# --- Communication (copper and fieldbus) ---

COMMUNICATION_CABLES = [
    _cable('CABLE-CAT5E-001', 'Cat5e UTP Ethernet Cable', CableCategory.COMMUNICATION_COPPER,
           'Category 5e unshielded twisted pair cable for 100/1000BASE-T networks. Four pair '
           'construction. Suitable for office and light industrial environments.',
           M.COPPER_ETHERNET, 1_000_000_000, 100, [C.RJ45], S.UNSHIELDED,
           [K.SOLID, K.STRANDED], InsulationType.HDPE, JacketType.PVC, V.EXTRA_LOW,
           (_CU, '24 AWG'), 8, (-20, 60),
           ['COMMERCIAL', 'BUILDING_AUTOMATION', 'LIGHT_INDUSTRIAL'],
           ['TIA/EIA-568-C.2', 'ISO/IEC 11801', 'EN 50173'],
           ['Office networks', '100BASE-TX', '1000BASE-T', 'VoIP systems', 'IP cameras'],
           impedance=100, pairs=4, icon='🔗'),
    _cable('CABLE-CAT6-001', 'Cat6 UTP Ethernet Cable', CableCategory.COMMUNICATION_COPPER,
           'Category 6 unshielded twisted pair cable supporting 10GBASE-T up to 55m. Improved crosstalk '
           'performance over Cat5e. Standard for new commercial installations.',
           M.COPPER_ETHERNET, 10_000_000_000, 100, [C.RJ45], S.UNSHIELDED,
           [K.SOLID], InsulationType.HDPE, JacketType.PVC, V.EXTRA_LOW,
           (_CU, '23 AWG'), 8, (-20, 60),
           ['COMMERCIAL', 'DATA_CENTER', 'BUILDING_AUTOMATION'],
           ['TIA/EIA-568-C.2', 'ISO/IEC 11801', 'EN 50173'],
           ['1000BASE-T', '10GBASE-T (limited distance)', 'PoE systems', 'Data centers',
            'Building backbone'], impedance=100, pairs=4, icon='🔗'),
    _cable('CABLE-CAT6A-001', 'Cat6A S/FTP Industrial Ethernet Cable', CableCategory.COMMUNICATION_COPPER,
           'Category 6A shielded/foiled twisted pair cable for full 10GBASE-T performance. Individual '
           'pair foil shields plus overall braid. Industrial grade for harsh environments.',
           M.COPPER_ETHERNET, 10_000_000_000, 100, [C.RJ45, C.M12_X_CODED], S.FOIL_AND_BRAID,
           [K.SOLID, K.TRAY_RATED, K.OUTDOOR], InsulationType.PE, JacketType.PUR, V.EXTRA_LOW,
           (_CU, '23 AWG'), 8, (-40, 70),
           ['MANUFACTURING', 'AUTOMOTIVE', 'OIL_GAS', 'CHEMICAL'],
           ['TIA/EIA-568-C.2', 'ISO/IEC 11801', 'IEC 61156-6'],
           ['PROFINET networks', 'EtherNet/IP networks', '10GBASE-T full distance',
            'Industrial automation', 'High-EMI environments'], impedance=100, pairs=4, icon='🛡️'),
    _cable('CABLE-INDETH-001', 'Industrial Ethernet Cable (2-Pair)', CableCategory.COMMUNICATION_COPPER,
           'Two-pair industrial Ethernet cable for 100Mbps networks. Compact design for tight spaces. '
           'Oil and UV resistant jacket for industrial environments.',
           M.COPPER_ETHERNET, 100_000_000, 100, [C.RJ45, C.M12_D_CODED], S.FOIL_AND_BRAID,
           [K.STRANDED, K.FLEXIBLE, K.OUTDOOR], InsulationType.PE, JacketType.PUR, V.EXTRA_LOW,
           (_TCU, '22 AWG'), 4, (-40, 80),
           ['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING', 'ROBOTICS'],
           ['IEEE 802.3', 'PROFINET Guideline'],
           ['PROFINET IO devices', 'EtherNet/IP field devices', 'Cable track applications',
            'Robot connections', 'Machine-level networking'], impedance=100, pairs=2, icon='🔗'),
    _cable('CABLE-PBDP-001', 'PROFIBUS DP Cable', CableCategory.COMMUNICATION_FIELDBUS,
           'Standard PROFIBUS DP cable with violet jacket. Single shielded twisted pair for RS-485 '
           'communication. 150Ω characteristic impedance per PROFIBUS specification.',
           M.PROFIBUS_DP, 12_000_000, 1200, [C.DB9, C.M12_B_CODED], S.BRAID_SHIELDED,
           [K.SOLID, K.STRANDED], InsulationType.PE, JacketType.PVC, V.EXTRA_LOW,
           (_CU, '22 AWG'), 2, (-40, 75),
           ['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING', 'CHEMICAL'],
           ['IEC 61158', 'EN 50170'],
           ['PROFIBUS DP networks', 'Factory automation', 'Drive integration', 'Distributed I/O'],
           impedance=150, pairs=1, icon='🟣'),
    _cable('CABLE-PBPA-001', 'PROFIBUS PA Cable', CableCategory.COMMUNICATION_FIELDBUS,
           'PROFIBUS PA cable for process automation. Blue jacket identification. Designed for '
           'intrinsically safe installations with bus-powered devices.',
           M.PROFIBUS_PA, 31_250, 1900, [C.TERMINAL_BLOCK], S.FOIL_AND_BRAID,
           [K.STRANDED, K.ARMORED], InsulationType.PE, JacketType.PVC, V.EXTRA_LOW,
           (_TCU, '18 AWG'), 2, (-40, 60),
           ['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'WATER'],
           ['IEC 61158-2', 'FISCO Model'],
           ['PROFIBUS PA networks', 'Process transmitters', 'Hazardous area instrumentation',
            'Valve positioners'], impedance=100, pairs=1, power_over_fieldbus=True, icon='🔵'),
    _cable('CABLE-DNET-001', 'DeviceNet Cable (Thick)', CableCategory.COMMUNICATION_FIELDBUS,
           'DeviceNet trunk cable with integrated power and signal conductors. CAN-based protocol cable '
           'with characteristic 24V DC bus power distribution.',
           M.RS485, 500_000, 500, [C.M12_A_CODED, C.TERMINAL_BLOCK], S.FOIL_AND_BRAID,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PE, JacketType.PVC, V.LOW_300V,
           (_CU, '15 AWG (Power), 18 AWG (Signal)'), 5, (-30, 70),
           ['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING', 'MATERIAL_HANDLING'],
           ['ODVA DeviceNet Specification', 'IEC 62026-3'],
           ['DeviceNet trunk lines', 'Conveyor systems', 'Assembly machines', 'Packaging equipment'],
           impedance=120, power_over_fieldbus=True, icon='🟢'),
    _cable('CABLE-FF-001', 'Foundation Fieldbus H1 Cable', CableCategory.COMMUNICATION_FIELDBUS,
           'Foundation Fieldbus H1 cable for process automation. Supports bus-powered devices in '
           'hazardous areas. IEC 61158-2 compliant.',
           M.FIELDBUS_H1, 31_250, 1900, [C.TERMINAL_BLOCK], S.FOIL_AND_BRAID,
           [K.STRANDED, K.ARMORED], InsulationType.PE, JacketType.PVC, V.EXTRA_LOW,
           (_TCU, '18 AWG'), 2, (-40, 60),
           ['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'REFINING'],
           ['IEC 61158-2', 'FISCO Model', 'ISA SP50'],
           ['Foundation Fieldbus H1 networks', 'Process transmitters', 'Control valves',
            'Hazardous area instrumentation', 'Refinery automation'],
           impedance=100, pairs=1, power_over_fieldbus=True, icon='🔶'),
    _cable('CABLE-MB485-001', 'Modbus RS-485 Cable', CableCategory.COMMUNICATION_FIELDBUS,
           'Shielded twisted pair cable for Modbus RTU/ASCII over RS-485. Low capacitance design for '
           'extended distances. Suitable for multi-drop networks up to 32 devices.',
           M.RS485, 115_200, 1200, [C.TERMINAL_BLOCK, C.DB9], S.FOIL_AND_BRAID,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PE, JacketType.PVC, V.LOW_300V,
           (_TCU, '22 AWG - 18 AWG'), 2, (-40, 75),
           ['MANUFACTURING', 'BUILDING_AUTOMATION', 'POWER', 'WATER', 'HVAC'],
           ['TIA/EIA-485', 'Modbus Serial Line Protocol'],
           ['Modbus RTU networks', 'Building management systems', 'Energy meters',
            'VFD communications', 'PLC serial ports'], impedance=120, pairs=1, icon='📡'),
    _cable('CABLE-CAN-001', 'CANopen/CAN Bus Cable', CableCategory.COMMUNICATION_FIELDBUS,
           'CAN bus cable for CANopen, J1939, and other CAN-based protocols. Characteristic 120Ω '
           'impedance with low propagation delay. Available in standard and flexible versions.',
           M.RS485, 1_000_000, 500, [C.M12_A_CODED, C.DB9, C.TERMINAL_BLOCK], S.FOIL_AND_BRAID,
           [K.STRANDED, K.TRAY_RATED], InsulationType.PE, JacketType.PVC, V.EXTRA_LOW,
           (_TCU, '22 AWG'), 4, (-40, 80),
           ['AUTOMOTIVE', 'MANUFACTURING', 'MOBILE_EQUIPMENT', 'MARINE'],
           ['ISO 11898', 'CiA 303-1'],
           ['CANopen networks', 'J1939 vehicle networks', 'Mobile machinery', 'Medical devices',
            'Elevator systems'], impedance=120, pairs=2, icon='🚗'),
    _cable('CABLE-ASI-001', 'AS-Interface Cable (Yellow)', CableCategory.COMMUNICATION_FIELDBUS,
           'AS-Interface flat cable with characteristic yellow color. Unshielded two-wire design with '
           'integrated power and data. Piercing technology for tap connections.',
           M.RS485, 167_000, 300, [C.TERMINAL_BLOCK], S.NONE,
           [K.SOLID], InsulationType.TPE, JacketType.TPE, V.LOW_300V,
           (_CU, '16 AWG'), 2, (-30, 70),
           ['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING', 'MATERIAL_HANDLING'],
           ['IEC 62026-2', 'EN 50295'],
           ['AS-Interface networks', 'Simple sensor/actuator connections', 'Conveyor systems',
            'Safety circuits (red cable)', 'Low-level I/O networking'],
           power_over_fieldbus=True, icon='🟡'),
    _cable('CABLE-RS232-001', 'RS-232 Serial Cable', CableCategory.COMMUNICATION_COPPER,
           'Multi-conductor cable for RS-232 serial communication. Includes signal, handshake, and ground '
           'conductors. Individual foil shields per pair for noise immunity.',
           M.RS232, 115_200, 15, [C.DB9, C.DB25], S.FOIL_SHIELDED,
           [K.STRANDED], InsulationType.PVC, JacketType.PVC, V.EXTRA_LOW,
           (_TCU, '24 AWG - 22 AWG'), '3-25', (-20, 75),
           ['MANUFACTURING', 'COMMERCIAL', 'LABORATORY'],
           ['TIA/EIA-232-F'],
           ['Legacy device communication', 'Serial console connections', 'Barcode scanners',
            'Laboratory instruments', 'PLC programming ports'], icon='🔌'),
]


# --- Fiber optic ---

FIBER_OPTIC_CABLES = [
    _cable('CABLE-SMOS2-001', 'Single-Mode OS2 Indoor Cable', CableCategory.FIBER_SINGLE_MODE,
           'OS2 single-mode fiber optic cable for indoor applications. 9/125µm core/cladding. Low water '
           'peak (LWP) fiber for full spectrum operation. LSZH jacket for plenum installations.',
           M.FIBER_SINGLE_MODE, 100_000_000_000, 40000, [C.LC_FIBER, C.SC_FIBER, C.ST_FIBER], S.NONE,
           [K.PLENUM], InsulationType.PVC, JacketType.LSZH, V.EXTRA_LOW,
           (_CU, None), '2-144', (-20, 60),
           ['DATA_CENTER', 'TELECOMMUNICATIONS', 'BUILDING_AUTOMATION', 'ENTERPRISE'],
           ['ISO/IEC 11801', 'TIA-568.3-D', 'ITU-T G.652.D'],
           ['Data center interconnects', 'Building backbone', 'Long-haul links', 'CWDM/DWDM systems',
            'Telecommunications'], icon='💡'),
    _cable('CABLE-SMOS2-002', 'Single-Mode OS2 Outdoor Armored Cable', CableCategory.FIBER_SINGLE_MODE,
           'Armored single-mode fiber for outdoor and direct burial installations. Loose tube construction '
           'with gel-filled buffer tubes. Corrugated steel armor for rodent protection.',
           M.FIBER_SINGLE_MODE, 100_000_000_000, 80000, [C.LC_FIBER, C.SC_FIBER], S.NONE,
           [K.ARMORED, K.DIRECT_BURIAL, K.OUTDOOR], InsulationType.PE, JacketType.PE, V.EXTRA_LOW,
           (_CU, None), '6-288', (-40, 70),
           ['TELECOMMUNICATIONS', 'UTILITY', 'OIL_GAS', 'MINING', 'TRANSPORTATION'],
           ['ITU-T G.652.D', 'Telcordia GR-20', 'IEC 60794-1-2'],
           ['Campus interconnects', 'Direct burial installations', 'Aerial installations',
            'Industrial outdoor runs', 'Utility networks'], icon='🛡️'),
    _cable('CABLE-MMOM3-001', 'Multi-Mode OM3 Fiber Cable', CableCategory.FIBER_MULTI_MODE,
           'OM3 laser-optimized multi-mode fiber (50/125µm). Supports 10GbE up to 300m. Aqua jacket color '
           'identification. Suitable for short-reach data center and enterprise applications.',
           M.FIBER_MULTI_MODE, 10_000_000_000, 300, [C.LC_FIBER, C.SC_FIBER, C.ST_FIBER], S.NONE,
           [K.PLENUM, K.RISER], InsulationType.PVC, JacketType.LSZH, V.EXTRA_LOW,
           (_CU, None), '2-144', (-20, 60),
           ['DATA_CENTER', 'ENTERPRISE', 'MANUFACTURING', 'HEALTHCARE'],
           ['ISO/IEC 11801', 'TIA-568.3-D', 'IEC 60793-2-10'],
           ['10GBASE-SR', 'Fibre Channel', 'Data center short reach', 'Building backbone',
            'SAN connectivity'], icon='🔵'),
    _cable('CABLE-MMOM4-001', 'Multi-Mode OM4 Fiber Cable', CableCategory.FIBER_MULTI_MODE,
           'OM4 laser-optimized multi-mode fiber (50/125µm). Enhanced bandwidth for 40/100GbE parallel '
           'optics. Supports 10GbE up to 550m. Aqua or violet jacket identification.',
           M.FIBER_MULTI_MODE, 100_000_000_000, 150, [C.LC_FIBER, C.SC_FIBER], S.NONE,
           [K.PLENUM, K.RISER], InsulationType.PVC, JacketType.LSZH, V.EXTRA_LOW,
           (_CU, None), '2-144', (-20, 60),
           ['DATA_CENTER', 'ENTERPRISE', 'FINANCIAL', 'HEALTHCARE'],
           ['ISO/IEC 11801', 'TIA-568.3-D', 'IEC 60793-2-10'],
           ['40GBASE-SR4', '100GBASE-SR4', '10GBASE-SR extended reach', 'High-density data center',
            'Parallel optics'], icon='🔵'),
    _cable('CABLE-INDMM-001', 'Industrial Multi-Mode Fiber Cable', CableCategory.FIBER_MULTI_MODE,
           'Ruggedized multi-mode fiber for industrial Ethernet networks. Oil, UV, and chemical resistant '
           'PUR jacket. Suitable for PROFINET, EtherNet/IP, and EtherCAT optical links.',
           M.FIBER_MULTI_MODE, 1_000_000_000, 2000, [C.LC_FIBER, C.SC_FIBER], S.NONE,
           [K.OUTDOOR, K.TRAY_RATED], InsulationType.PVC, JacketType.PUR, V.EXTRA_LOW,
           (_CU, None), '2-12', (-40, 70),
           ['MANUFACTURING', 'AUTOMOTIVE', 'OIL_GAS', 'MINING', 'WATER'],
           ['IEC 60794-1-2', 'PROFINET Guideline'],
           ['PROFINET fiber links', 'EtherNet/IP long distance', 'Industrial backbone',
            'EMI-immune links', 'Hazardous area communication'], icon='🔶'),
    _cable('CABLE-INDSM-001', 'Industrial Single-Mode Fiber Cable', CableCategory.FIBER_SINGLE_MODE,
           'Ruggedized single-mode fiber for long-distance industrial links. Armored construction for '
           'harsh environments. Ideal for substation communication and campus interconnects.',
           M.FIBER_SINGLE_MODE, 10_000_000_000, 26000, [C.LC_FIBER, C.SC_FIBER], S.NONE,
           [K.ARMORED, K.OUTDOOR, K.TRAY_RATED], InsulationType.PE, JacketType.PE, V.EXTRA_LOW,
           (_CU, None), '2-24', (-40, 70),
           ['POWER', 'OIL_GAS', 'UTILITY', 'MINING', 'TRANSPORTATION'],
           ['IEC 60794-1-2', 'IEEE 1613'],
           ['Substation communication', 'IEC 61850 GOOSE/SV', 'Long-distance industrial links',
            'Pipeline SCADA', 'Railway signaling'], icon='⚡'),
    _cable('CABLE-HYBRID-001', 'Hybrid Fiber-Power Cable', CableCategory.SPECIALTY,
           'Combined fiber optic and copper power conductors in single cable. Provides both high-speed '
           'communication and device power. Ideal for remote equipment with single cable run.',
           M.FIBER_MULTI_MODE, 1_000_000_000, 500, [C.LC_FIBER, C.SC_FIBER], S.FOIL_SHIELDED,
           [K.OUTDOOR, K.ARMORED], InsulationType.XLPE, JacketType.PUR, V.LOW_600V,
           (_CU, '14 AWG - 10 AWG (Power)'), '2 Fiber + 2-4 Copper', (-40, 70),
           ['OIL_GAS', 'TRANSPORTATION', 'SECURITY', 'RENEWABLE_ENERGY'],
           ['IEC 60794-1-2', 'UL 1277'],
           ['Remote IP cameras', 'Wireless access points', 'Remote I/O stations',
            'Solar tracker communication', 'Traffic monitoring'], icon='🔀'),
    _cable('CABLE-TACTICAL-001', 'Tactical Fiber Cable', CableCategory.FIBER_MULTI_MODE,
           'Rugged fiber optic cable for temporary or deployable installations. Highly flexible with '
           'crush-resistant construction. Pre-terminated with ruggedized field connectors.',
           M.FIBER_MULTI_MODE, 10_000_000_000, 300, [C.LC_FIBER, C.SC_FIBER], S.NONE,
           [K.EXTRA_FLEXIBLE, K.OUTDOOR, K.ARMORED], InsulationType.PUR, JacketType.PUR, V.EXTRA_LOW,
           (_CU, None), '2-12', (-40, 85),
           ['MILITARY', 'BROADCAST', 'EVENTS', 'EMERGENCY_SERVICES'],
           ['MIL-PRF-85045', 'SMPTE 311M'],
           ['Temporary network deployments', 'Broadcast events', 'Military communications',
            'Emergency response', 'Construction site networks'], icon='🎖️'),
]


# --- Templates ---

GENERIC_CABLE_TEMPLATE = CableDefinition(
    cable_id='CABLE-GENERIC-001',
    name='Generic Cable (TBD)',
    category=CableCategory.GENERIC,
    description='Placeholder for undefined cable type. Requires specification before project '
                'completion. This item will be flagged in project reports.',
    physical_capabilities=PhysicalLayerCapabilities(
        media_type=M.GENERIC,
        max_data_rate=0,
        max_distance=0,
        connector_types=[C.GENERIC],
        shielding=S.NONE,
    ),
    construction=[],
    insulation=InsulationType.PVC,
    jacket=JacketType.PVC,
    voltage_class=V.LOW_600V,
    conductor=ConductorSpec(material=_CU),
    conductor_count='TBD',
    temperature_rating=TemperatureRating(-20, 75),
    typical_applications=['Pending specification'],
    icon='❓',
    is_generic=True,
)

USER_DEFINED_CABLE_TEMPLATE = CableDefinition(
    cable_id='CABLE-USER-001',
    name='User-Defined Cable',
    category=CableCategory.USER_DEFINED,
    description='Custom cable definition for project-specific or proprietary cable types.',
    physical_capabilities=PhysicalLayerCapabilities(
        media_type=M.USER_DEFINED,
        max_data_rate=0,
        max_distance=0,
        connector_types=[C.USER_DEFINED],
        shielding=S.USER_DEFINED,
    ),
    construction=[],
    insulation=InsulationType.PVC,
    jacket=JacketType.PVC,
    voltage_class=V.LOW_600V,
    conductor=ConductorSpec(material=_CU),
    conductor_count=0,
    temperature_rating=TemperatureRating(-20, 75),
    icon='🔧',
    is_user_defined=True,
)


SEED_CABLES: List[CableDefinition] = (
    POWER_CABLES
    + CONTROL_CABLES
    + COMMUNICATION_CABLES
    + FIBER_OPTIC_CABLES
    + [GENERIC_CABLE_TEMPLATE, USER_DEFINED_CABLE_TEMPLATE]
)

_POWER_CATEGORIES = (CableCategory.POWER_LV, CableCategory.POWER_MV, CableCategory.POWER_HV)
_COMMUNICATION_CATEGORIES = (
    CableCategory.COMMUNICATION_COPPER,
    CableCategory.COMMUNICATION_FIELDBUS,
    CableCategory.FIBER_SINGLE_MODE,
    CableCategory.FIBER_MULTI_MODE,
)


class CableLibrary:
    """In-memory cable catalog with search capabilities."""

    def __init__(self, seed: bool = True):
        self.cables: List[CableDefinition] = []
        if seed:
            self._load_seed_data()

    def _load_seed_data(self):
        """Load seed cables, rejecting duplicate IDs."""
        seen = set()
        for cable in SEED_CABLES:
            if cable.cable_id in seen:
                raise ValueError(f"Duplicate cable ID in seed data: {cable.cable_id}")
            seen.add(cable.cable_id)
            self.cables.append(cable)
        logger.debug("Loaded %d cables", len(self.cables))

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[CableCategory] = None,
        industry: Optional[str] = None,
        media_type: Optional[M] = None,
    ) -> List[CableDefinition]:
        """Search cables by text query, category, industry or medium."""
        results = self.cables

        if category:
            results = [c for c in results if c.category == category]

        if industry:
            results = [c for c in results if industry.upper() in c.industries]

        if media_type:
            results = [c for c in results if c.media_type == media_type]

        if query:
            q = query.lower()
            results = [
                c for c in results
                if q in c.name.lower()
                or q in c.cable_id.lower()
                or q in c.description.lower()
            ]

        return list(results)

    def get_by_id(self, cable_id: str) -> Optional[CableDefinition]:
        """Get a cable by its ID."""
        for c in self.cables:
            if c.cable_id == cable_id:
                return c
        return None

    def export_json(self) -> str:
        """Export all cables as JSON."""
        return json.dumps([dataclasses.asdict(c) for c in self.cables], indent=2)

    @property
    def industries(self) -> List[str]:
        """Get sorted list of industries served by any cable."""
        return sorted(set(i for c in self.cables for i in c.industries))

    @property
    def count(self) -> int:
        return len(self.cables)


# Module-level convenience functions
_default_library = None
_default_library_lock = threading.Lock()


def _get_library() -> CableLibrary:
    global _default_library
    if _default_library is None:
        with _default_library_lock:
            if _default_library is None:
                _default_library = CableLibrary()
    return _default_library


def _where(predicate) -> List[CableDefinition]:
    return [c for c in _get_library().cables if predicate(c)]


def get_all_cables() -> List[CableDefinition]:
    return list(_get_library().cables)


def search_cables(query: Optional[str] = None, **kwargs) -> List[CableDefinition]:
    return _get_library().search(query=query, **kwargs)


def get_cable_by_id(cable_id: str) -> Optional[CableDefinition]:
    return _get_library().get_by_id(cable_id)


def get_cables_by_category(category: CableCategory) -> List[CableDefinition]:
    return _where(lambda c: c.category == category)


def get_cables_by_industry(industry: str) -> List[CableDefinition]:
    return _where(lambda c: industry in c.industries)


def get_cables_by_media_type(media_type: M) -> List[CableDefinition]:
    return _where(lambda c: c.media_type == media_type)


def get_power_cables() -> List[CableDefinition]:
    return _where(lambda c: c.category in _POWER_CATEGORIES)


def get_communication_cables() -> List[CableDefinition]:
    return _where(lambda c: c.category in _COMMUNICATION_CATEGORIES)


# Power

def get_lv_power_cables() -> List[CableDefinition]:
    return [c for c in POWER_CABLES if c.category == CableCategory.POWER_LV]


def get_mv_power_cables() -> List[CableDefinition]:
    """Medium and high voltage power cables."""
    return [c for c in POWER_CABLES if c.category in (CableCategory.POWER_MV, CableCategory.POWER_HV)]


def get_tray_rated_power_cables() -> List[CableDefinition]:
    return [c for c in POWER_CABLES if K.TRAY_RATED in c.construction]


def get_direct_burial_power_cables() -> List[CableDefinition]:
    return [c for c in POWER_CABLES if K.DIRECT_BURIAL in c.construction]


# Control

def get_control_cables_only() -> List[CableDefinition]:
    return [c for c in CONTROL_CABLES if c.category == CableCategory.CONTROL]


def get_instrumentation_cables() -> List[CableDefinition]:
    return [c for c in CONTROL_CABLES if c.category == CableCategory.INSTRUMENTATION]


def get_thermocouple_cables() -> List[CableDefinition]:
    return [c for c in CONTROL_CABLES if c.category == CableCategory.THERMOCOUPLE]


def get_shielded_control_cables() -> List[CableDefinition]:
    """Control-family cables with any shield."""
    return [c for c in CONTROL_CABLES if c.shielding != S.NONE]


def get_flexible_control_cables() -> List[CableDefinition]:
    return [
        c for c in CONTROL_CABLES
        if K.FLEXIBLE in c.construction or K.EXTRA_FLEXIBLE in c.construction
    ]


# Communication

def get_ethernet_cables() -> List[CableDefinition]:
    return [c for c in COMMUNICATION_CABLES if c.category == CableCategory.COMMUNICATION_COPPER]


def get_fieldbus_cables() -> List[CableDefinition]:
    return [c for c in COMMUNICATION_CABLES if c.category == CableCategory.COMMUNICATION_FIELDBUS]


def get_industrial_ethernet_cables() -> List[CableDefinition]:
    """Tray-rated copper Ethernet cables."""
    return [
        c for c in COMMUNICATION_CABLES
        if c.media_type == M.COPPER_ETHERNET and K.TRAY_RATED in c.construction
    ]


def get_shielded_communication_cables() -> List[CableDefinition]:
    """Communication cables with a real shield (not UTP, not unrated)."""
    return [
        c for c in COMMUNICATION_CABLES
        if c.shielding not in (S.UNSHIELDED, S.NONE)
    ]


# Fiber

def get_single_mode_cables() -> List[CableDefinition]:
    return [c for c in FIBER_OPTIC_CABLES if c.category == CableCategory.FIBER_SINGLE_MODE]


def get_multi_mode_cables() -> List[CableDefinition]:
    return [c for c in FIBER_OPTIC_CABLES if c.category == CableCategory.FIBER_MULTI_MODE]


def get_armored_fiber_cables() -> List[CableDefinition]:
    return [c for c in FIBER_OPTIC_CABLES if K.ARMORED in c.construction]


def get_outdoor_fiber_cables() -> List[CableDefinition]:
    return [
        c for c in FIBER_OPTIC_CABLES
        if K.OUTDOOR in c.construction or K.DIRECT_BURIAL in c.construction
    ]


def get_industrial_fiber_cables() -> List[CableDefinition]:
    return [
        c for c in FIBER_OPTIC_CABLES
        if 'IND' in c.cable_id or 'MANUFACTURING' in c.industries
    ]


def get_fiber_cables_by_distance(min_distance: float) -> List[CableDefinition]:
    """Fiber cables rated for at least ``min_distance`` metres."""
    return [c for c in FIBER_OPTIC_CABLES if c.physical_capabilities.max_distance >= min_distance]


def get_fiber_cables_by_data_rate(min_rate: float) -> List[CableDefinition]:
    """Fiber cables rated for at least ``min_rate`` bps."""
    return [c for c in FIBER_OPTIC_CABLES if c.max_data_rate >= min_rate]
