"""
Communication protocol catalog.

Seed data for common serial fieldbus, industrial Ethernet and power-system
protocols, plus two templates: a generic placeholder for protocols that are
not yet specified and a blank user-defined entry. Values follow the
governing bodies' published specifications.
"""

import dataclasses
import json
import logging
import threading
from typing import Dict, List, Optional

from wirelib.models import (
    CycleTimeSpec,
    DataRateSpec,
    PhysicalLayerRequirements,
    ProtocolDefinition,
)
from wirelib.types import (
    AddressingMode,
    ConnectorType as C,
    NetworkTopology as T,
    PhysicalMediaType as M,
    ProtocolCategory,
)

logger = logging.getLogger(__name__)


# --- Serial fieldbus and wireless ---

FIELDBUS_PROTOCOLS = [
    ProtocolDefinition(
        protocol_id='MODBUS-RTU-001',
        name='Modbus RTU',
        abbreviation='MB-RTU',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Serial binary protocol using RS-485 physical layer. Master-slave architecture '
                    'with binary data framing. Most widely deployed industrial protocol worldwide.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS485, M.RS232],
            min_data_rate=9600,
            max_distance={M.RS485: 1200, M.RS232: 15},
            connector_types=[C.TERMINAL_BLOCK, C.DB9, C.SCREW_TERMINAL],
            shielding_required=True,
            termination_required=True,
            termination_resistance=120,
            characteristic_impedance=120,
        ),
        supported_topologies=[T.MULTI_DROP, T.POINT_TO_POINT, T.DAISY_CHAIN],
        max_nodes=247,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(1200, 115200, 'bps'),
        cycle_time=CycleTimeSpec(10, 50, 500),
        typical_applications=['PLC to VFD communication', 'SCADA polling of remote I/O',
                              'Building management systems', 'Energy metering',
                              'Simple device integration'],
        industries=['MANUFACTURING', 'WATER', 'BUILDING_AUTOMATION', 'OIL_GAS', 'POWER'],
        standards=['Modbus Application Protocol V1.1b3', 'Modbus Serial Line Protocol V1.02'],
        governing_body='Modbus Organization',
        successor_protocol='MODBUS-TCP-001',
        icon='📟',
    ),
    ProtocolDefinition(
        protocol_id='MODBUS-ASCII-001',
        name='Modbus ASCII',
        abbreviation='MB-ASCII',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Serial ASCII protocol variant of Modbus. Human-readable format with LRC error checking.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS485, M.RS232],
            min_data_rate=9600,
            max_distance={M.RS485: 1200, M.RS232: 15},
            connector_types=[C.TERMINAL_BLOCK, C.DB9],
            shielding_required=True,
            termination_required=True,
            termination_resistance=120,
        ),
        supported_topologies=[T.MULTI_DROP, T.POINT_TO_POINT],
        max_nodes=247,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(1200, 19200, 'bps'),
        cycle_time=CycleTimeSpec(20, 100, 1000),
        typical_applications=['Legacy system integration', 'Debugging and troubleshooting'],
        industries=['MANUFACTURING', 'BUILDING_AUTOMATION'],
        standards=['Modbus Serial Line Protocol V1.02'],
        governing_body='Modbus Organization',
        icon='📟',
    ),
    ProtocolDefinition(
        protocol_id='HART-001',
        name='HART Protocol',
        abbreviation='HART',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Highway Addressable Remote Transducer protocol. Superimposes digital FSK signal '
                    'on 4-20mA analog loop.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.CURRENT_LOOP],
            min_data_rate=1200,
            max_distance={M.CURRENT_LOOP: 3000},
            connector_types=[C.TERMINAL_BLOCK, C.SCREW_TERMINAL],
            shielding_required=True,
        ),
        supported_topologies=[T.POINT_TO_POINT, T.MULTI_DROP],
        max_nodes=63,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(1200, 1200, 'bps'),
        cycle_time=CycleTimeSpec(250, 500, 2000),
        safety_certifiable=True,
        safety_protocol='HART-IP with SIL verification',
        typical_applications=['Smart transmitter configuration', 'Online diagnostics', 'Asset management'],
        industries=['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'WATER', 'POWER'],
        standards=['IEC 61158', 'HART Protocol Specification'],
        governing_body='FieldComm Group',
        successor_protocol='WIRELESSHART-001',
        icon='📈',
    ),
    ProtocolDefinition(
        protocol_id='WIRELESSHART-001',
        name='WirelessHART',
        abbreviation='WiHART',
        category=ProtocolCategory.WIRELESS,
        description='Wireless extension of HART protocol using IEEE 802.15.4 radio.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.WIRELESS_2_4GHZ],
        ),
        supported_topologies=[T.MESH, T.STAR],
        max_nodes=250,
        addressing_mode=AddressingMode.MAC_ADDRESS,
        data_rate=DataRateSpec(250, 250, 'kbps'),
        cycle_time=CycleTimeSpec(1000, 4000, 60000),
        typical_applications=['Brownfield instrumentation additions', 'Remote or hazardous area monitoring'],
        industries=['OIL_GAS', 'CHEMICAL', 'WATER', 'MINING'],
        standards=['IEC 62591', 'IEEE 802.15.4'],
        governing_body='FieldComm Group',
        predecessor_protocol='HART-001',
        icon='📶',
    ),
    ProtocolDefinition(
        protocol_id='FF-H1-001',
        name='FOUNDATION Fieldbus H1',
        abbreviation='FF-H1',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Low-speed fieldbus for process automation with bus-powered devices.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.FIELDBUS_H1],
            min_data_rate=31250,
            max_distance={M.FIELDBUS_H1: 1900},
            connector_types=[C.TERMINAL_BLOCK, C.SCREW_TERMINAL],
            shielding_required=True,
            termination_required=True,
            termination_resistance=100,
            characteristic_impedance=100,
        ),
        supported_topologies=[T.BUS, T.TREE, T.DAISY_CHAIN],
        max_nodes=32,
        addressing_mode=AddressingMode.DEVICE_NAME,
        data_rate=DataRateSpec(31250, 31250, 'bps'),
        cycle_time=CycleTimeSpec(50, 250, 5000),
        safety_certifiable=True,
        safety_protocol='FF-SIF',
        typical_applications=['Process control in chemical plants', 'Refinery instrumentation'],
        industries=['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL', 'REFINING'],
        standards=['IEC 61158', 'IEC 61784-1'],
        governing_body='FieldComm Group',
        icon='🏭',
    ),
    ProtocolDefinition(
        protocol_id='PROFIBUS-DP-001',
        name='PROFIBUS DP',
        abbreviation='PB-DP',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Decentralized Peripherals protocol for high-speed communication between '
                    'automation systems and distributed I/O.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.PROFIBUS_DP, M.RS485],
            min_data_rate=9600,
            max_distance={M.RS485: 1200, M.PROFIBUS_DP: 1200},
            connector_types=[C.DB9, C.M12_B_CODED, C.TERMINAL_BLOCK],
            shielding_required=True,
            termination_required=True,
            termination_resistance=220,
            characteristic_impedance=150,
        ),
        supported_topologies=[T.BUS, T.LINE],
        max_nodes=126,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(9600, 12000000, 'bps'),
        cycle_time=CycleTimeSpec(1, 10, 100),
        safety_certifiable=True,
        safety_protocol='PROFIsafe',
        typical_applications=['PLC to remote I/O', 'Drive integration', 'Manufacturing automation'],
        industries=['MANUFACTURING', 'AUTOMOTIVE', 'CHEMICAL', 'PACKAGING'],
        standards=['IEC 61158', 'IEC 61784-1'],
        governing_body='PROFIBUS & PROFINET International (PI)',
        successor_protocol='PROFINET-001',
        icon='🟣',
    ),
    ProtocolDefinition(
        protocol_id='PROFIBUS-PA-001',
        name='PROFIBUS PA',
        abbreviation='PB-PA',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Process Automation variant of PROFIBUS for intrinsically safe applications.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.PROFIBUS_PA],
            min_data_rate=31250,
            max_distance={M.PROFIBUS_PA: 1900},
            connector_types=[C.TERMINAL_BLOCK, C.SCREW_TERMINAL],
            shielding_required=True,
            termination_required=True,
            termination_resistance=100,
            characteristic_impedance=100,
        ),
        supported_topologies=[T.BUS, T.TREE],
        max_nodes=32,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(31250, 31250, 'bps'),
        cycle_time=CycleTimeSpec(50, 200, 5000),
        safety_certifiable=True,
        safety_protocol='PROFIsafe',
        typical_applications=['Process instrumentation in hazardous areas', 'Transmitter integration'],
        industries=['OIL_GAS', 'CHEMICAL', 'PHARMACEUTICAL'],
        standards=['IEC 61158', 'IEC 61784-1'],
        governing_body='PROFIBUS & PROFINET International (PI)',
        icon='🔵',
    ),
    ProtocolDefinition(
        protocol_id='DEVICENET-001',
        name='DeviceNet',
        abbreviation='DN',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='CAN-based industrial network for factory automation.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS485],
            min_data_rate=125000,
            max_distance={M.RS485: 500},
            connector_types=[C.M12_A_CODED, C.TERMINAL_BLOCK],
            shielding_required=True,
            termination_required=True,
            termination_resistance=121,
        ),
        supported_topologies=[T.BUS, T.LINE],
        max_nodes=64,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(125000, 500000, 'bps'),
        cycle_time=CycleTimeSpec(2, 10, 100),
        safety_certifiable=True,
        safety_protocol='CIP Safety',
        typical_applications=['Discrete manufacturing I/O', 'Safety systems'],
        industries=['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING'],
        standards=['IEC 62026-3', 'ODVA DeviceNet Specification'],
        governing_body='ODVA',
        successor_protocol='ETHERNETIP-001',
        icon='🟢',
    ),
    ProtocolDefinition(
        protocol_id='CANOPEN-001',
        name='CANopen',
        abbreviation='CANo',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='CAN-based protocol for embedded systems and automation. Widely used in motion control.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS485],
            min_data_rate=10000,
            max_distance={M.RS485: 1000},
            connector_types=[C.DB9, C.M12_A_CODED, C.TERMINAL_BLOCK],
            shielding_required=True,
            termination_required=True,
            termination_resistance=120,
        ),
        supported_topologies=[T.BUS, T.LINE],
        max_nodes=127,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(10000, 1000000, 'bps'),
        cycle_time=CycleTimeSpec(1, 5, 100),
        safety_certifiable=True,
        safety_protocol='CANopen Safety (EN 50325-5)',
        typical_applications=['Motion control systems', 'Servo drives and motors', 'Mobile machinery'],
        industries=['MANUFACTURING', 'AUTOMOTIVE', 'MEDICAL', 'AEROSPACE'],
        standards=['CiA 301', 'CiA 402 (Drives)', 'EN 50325-4'],
        governing_body='CAN in Automation (CiA)',
        icon='🚗',
    ),
    ProtocolDefinition(
        protocol_id='ASI-001',
        name='AS-Interface',
        abbreviation='AS-i',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Actuator-Sensor Interface for simple binary devices. Two-wire unshielded cable '
                    'carries power and data.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.VOLTAGE_SIGNAL],
            min_data_rate=167000,
            max_distance={M.VOLTAGE_SIGNAL: 100},
            connector_types=[C.TERMINAL_BLOCK, C.M12_A_CODED],
            shielding_required=False,
            termination_required=False,
        ),
        supported_topologies=[T.BUS, T.TREE, T.LINE, T.STAR],
        max_nodes=62,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(167000, 167000, 'bps'),
        cycle_time=CycleTimeSpec(5, 5, 10),
        safety_certifiable=True,
        safety_protocol='AS-i Safety at Work',
        typical_applications=['Binary sensor integration', 'Pneumatic valve islands',
                              'Safety interlock systems'],
        industries=['MANUFACTURING', 'PACKAGING', 'AUTOMOTIVE', 'FOOD_BEVERAGE'],
        standards=['IEC 62026-2', 'EN 62026-2'],
        governing_body='AS-International Association',
        icon='🟡',
    ),
    ProtocolDefinition(
        protocol_id='IOLINK-001',
        name='IO-Link',
        abbreviation='IOL',
        category=ProtocolCategory.FIELDBUS_SERIAL,
        description='Point-to-point communication for smart sensors and actuators. Uses standard '
                    '3-wire sensor cables.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.VOLTAGE_SIGNAL],
            min_data_rate=4800,
            max_distance={M.VOLTAGE_SIGNAL: 20},
            connector_types=[C.M12_A_CODED, C.M8],
            shielding_required=False,
            termination_required=False,
        ),
        supported_topologies=[T.POINT_TO_POINT],
        max_nodes=1,
        addressing_mode=AddressingMode.SLOT_BASED,
        data_rate=DataRateSpec(4800, 230400, 'bps'),
        cycle_time=CycleTimeSpec(0.4, 2, 10),
        safety_certifiable=True,
        safety_protocol='IO-Link Safety',
        typical_applications=['Smart sensor integration', 'Parameterizable actuators',
                              'Tool changers and grippers'],
        industries=['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING', 'SEMICONDUCTOR'],
        standards=['IEC 61131-9', 'IO-Link Specification V1.1'],
        governing_body='IO-Link Consortium',
        icon='🔌',
    ),
]


# --- Industrial Ethernet ---

_ETHERNET_MEDIA = (M.COPPER_ETHERNET, M.FIBER_MULTI_MODE, M.FIBER_SINGLE_MODE)

INDUSTRIAL_ETHERNET_PROTOCOLS = [
    ProtocolDefinition(
        protocol_id='PROFINET-001',
        name='PROFINET IO',
        abbreviation='PN',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Industrial Ethernet standard for factory and process automation. Provider-consumer '
                    'model with real-time communication. Supports RT (soft real-time) and IRT '
                    '(isochronous real-time) modes.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=100_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000, M.FIBER_SINGLE_MODE: 26000},
            connector_types=[C.RJ45, C.M12_D_CODED, C.LC_FIBER, C.SC_FIBER],
            shielding_required=True,
        ),
        supported_topologies=[T.STAR, T.LINE, T.RING, T.TREE],
        max_nodes=256,
        addressing_mode=AddressingMode.DEVICE_NAME,
        data_rate=DataRateSpec(100, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(0.25, 1, 512),
        safety_certifiable=True,
        safety_protocol='PROFIsafe',
        typical_applications=['High-speed I/O scanning', 'Motion control', 'Drive integration',
                              'Safety systems', 'Process automation', 'Machine-to-machine communication'],
        industries=['MANUFACTURING', 'AUTOMOTIVE', 'PACKAGING', 'CHEMICAL', 'FOOD_BEVERAGE', 'PHARMACEUTICAL'],
        standards=['IEC 61158', 'IEC 61784-2', 'IEEE 802.3', 'IEEE 802.1Q'],
        governing_body='PROFIBUS & PROFINET International (PI)',
        predecessor_protocol='PROFIBUS-DP-001',
        icon='🌐',
    ),
    ProtocolDefinition(
        protocol_id='ETHERNETIP-001',
        name='EtherNet/IP',
        abbreviation='EIP',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Common Industrial Protocol over Ethernet. Producer-consumer model with CIP '
                    'object-based communication. Dominant in North American discrete manufacturing.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=100_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000, M.FIBER_SINGLE_MODE: 20000},
            connector_types=[C.RJ45, C.M12_D_CODED, C.LC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.LINE, T.RING, T.TREE],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(0.5, 10, 1000),
        safety_certifiable=True,
        safety_protocol='CIP Safety',
        typical_applications=['PLC to I/O communication', 'Drive integration', 'Safety systems',
                              'HMI connectivity', 'Motion control', 'Process skid integration'],
        industries=['MANUFACTURING', 'AUTOMOTIVE', 'OIL_GAS', 'FOOD_BEVERAGE', 'WATER', 'PACKAGING'],
        standards=['IEC 61158', 'ODVA EtherNet/IP Specification', 'IEEE 802.3'],
        governing_body='ODVA',
        predecessor_protocol='DEVICENET-001',
        icon='🌐',
    ),
    ProtocolDefinition(
        protocol_id='ETHERCAT-001',
        name='EtherCAT',
        abbreviation='ECAT',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Ethernet for Control Automation Technology. Processing-on-the-fly architecture '
                    'achieving sub-microsecond cycle times. Optimal for high-performance motion control.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_MULTI_MODE],
            min_data_rate=100_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000},
            connector_types=[C.RJ45, C.M12_D_CODED, C.LC_FIBER],
            shielding_required=True,
        ),
        supported_topologies=[T.LINE, T.DAISY_CHAIN, T.TREE, T.RING],
        max_nodes=65535,
        addressing_mode=AddressingMode.SLOT_BASED,
        data_rate=DataRateSpec(100, 100, 'Mbps'),
        cycle_time=CycleTimeSpec(0.0125, 0.1, 10),
        safety_certifiable=True,
        safety_protocol='FSoE (Fail Safe over EtherCAT)',
        typical_applications=['High-speed motion control', 'CNC machinery', 'Robotics',
                              'Semiconductor manufacturing', 'Printing and converting',
                              'Test and measurement'],
        industries=['MANUFACTURING', 'SEMICONDUCTOR', 'PACKAGING', 'AUTOMOTIVE', 'AEROSPACE'],
        standards=['IEC 61158', 'IEC 61784-2', 'ETG.1000 (EtherCAT Specification)'],
        governing_body='EtherCAT Technology Group (ETG)',
        icon='⚡',
    ),
    ProtocolDefinition(
        protocol_id='MODBUS-TCP-001',
        name='Modbus TCP',
        abbreviation='MB-TCP',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Modbus protocol encapsulated in TCP/IP. Client-server architecture over standard '
                    'Ethernet. Most widely deployed industrial Ethernet protocol due to simplicity.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=10_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000, M.FIBER_SINGLE_MODE: 20000},
            connector_types=[C.RJ45, C.M12_D_CODED, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.TREE, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(5, 50, 1000),
        typical_applications=['SCADA polling', 'Building management systems', 'Energy metering',
                              'Simple device integration', 'Gateway communication',
                              'Legacy system bridging'],
        industries=['MANUFACTURING', 'BUILDING_AUTOMATION', 'POWER', 'WATER', 'OIL_GAS', 'HVAC'],
        standards=['Modbus TCP/IP Specification', 'Modbus Application Protocol V1.1b3'],
        governing_body='Modbus Organization',
        predecessor_protocol='MODBUS-RTU-001',
        icon='📡',
    ),
    ProtocolDefinition(
        protocol_id='POWERLINK-001',
        name='POWERLINK',
        abbreviation='EPL',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Ethernet POWERLINK is an open-source, real-time Ethernet protocol. Slot-based '
                    'communication achieving deterministic cycle times. Strong in motion control '
                    'applications.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_MULTI_MODE],
            min_data_rate=100_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000},
            connector_types=[C.RJ45, C.M12_D_CODED],
            shielding_required=True,
        ),
        supported_topologies=[T.LINE, T.TREE, T.STAR],
        max_nodes=253,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(100, 100, 'Mbps'),
        cycle_time=CycleTimeSpec(0.2, 1, 100),
        safety_certifiable=True,
        safety_protocol='openSAFETY',
        typical_applications=['Motion control', 'CNC and robotics', 'Packaging machines',
                              'Injection molding', 'Printing presses'],
        industries=['MANUFACTURING', 'PACKAGING', 'AUTOMOTIVE', 'PLASTICS'],
        standards=['IEC 61158', 'IEC 61784-2', 'IEEE 802.3'],
        governing_body='Ethernet POWERLINK Standardization Group (EPSG)',
        icon='⚡',
    ),
    ProtocolDefinition(
        protocol_id='OPCUA-001',
        name='OPC UA',
        abbreviation='OPC-UA',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Open Platform Communications Unified Architecture. Service-oriented architecture '
                    'providing secure, reliable, manufacturer-independent data exchange. Standard for '
                    'Industry 4.0 vertical integration.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=10_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000, M.FIBER_SINGLE_MODE: 40000},
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.MESH, T.TREE],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 10000, 'Mbps'),
        cycle_time=CycleTimeSpec(1, 100, 10000),
        safety_certifiable=True,
        safety_protocol='OPC UA Safety',
        typical_applications=['MES integration', 'Cloud connectivity', 'Cross-vendor data exchange',
                              'Asset management', 'Historian interfaces', 'Industry 4.0 applications'],
        industries=['MANUFACTURING', 'PHARMACEUTICAL', 'AUTOMOTIVE', 'CHEMICAL', 'PACKAGING', 'ENERGY'],
        standards=['IEC 62541', 'OPC UA Specification'],
        governing_body='OPC Foundation',
        predecessor_protocol='OPC-DA (Classic)',
        icon='🔗',
    ),
    ProtocolDefinition(
        protocol_id='MQTT-001',
        name='MQTT',
        abbreviation='MQTT',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Message Queuing Telemetry Transport. Lightweight publish-subscribe protocol for IoT '
                    'and telemetry. Designed for constrained networks and remote monitoring.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_MULTI_MODE, M.WIRELESS_2_4GHZ, M.WIRELESS_5GHZ],
            min_data_rate=1_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000},
            connector_types=[C.RJ45, C.LC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(1, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(10, 1000, 60000),
        typical_applications=['IoT device connectivity', 'Remote monitoring', 'Cloud telemetry',
                              'Edge-to-cloud communication', 'Mobile application backends'],
        industries=['OIL_GAS', 'WATER', 'AGRICULTURE', 'BUILDING_AUTOMATION', 'RENEWABLE_ENERGY'],
        standards=['ISO/IEC 20922 (MQTT 3.1.1)', 'OASIS MQTT 5.0'],
        governing_body='OASIS',
        icon='☁️',
    ),
    ProtocolDefinition(
        protocol_id='CCLINK-IE-001',
        name='CC-Link IE Field',
        abbreviation='CCIE',
        category=ProtocolCategory.FIELDBUS_ETHERNET,
        description='Control & Communication Link Industrial Ethernet. Gigabit Ethernet-based protocol '
                    'for factory automation. Strong presence in Asian markets, especially automotive.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_MULTI_MODE],
            min_data_rate=1_000_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 550},
            connector_types=[C.RJ45, C.LC_FIBER],
            shielding_required=True,
        ),
        supported_topologies=[T.STAR, T.LINE, T.RING],
        max_nodes=254,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(1000, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(0.031, 0.5, 8),
        safety_certifiable=True,
        safety_protocol='CC-Link IE Field Safety',
        typical_applications=['High-speed I/O control', 'Motion systems', 'Robot integration',
                              'Assembly lines'],
        industries=['AUTOMOTIVE', 'MANUFACTURING', 'SEMICONDUCTOR', 'ELECTRONICS'],
        standards=['IEC 61158', 'IEC 61784-2'],
        governing_body='CC-Link Partner Association (CLPA)',
        icon='🌐',
    ),
]


# --- Power system ---

_STATION_DISTANCES = {M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000, M.FIBER_SINGLE_MODE: 40000}

POWER_SYSTEM_PROTOCOLS = [
    ProtocolDefinition(
        protocol_id='IEC61850-001',
        name='IEC 61850',
        abbreviation='61850',
        category=ProtocolCategory.POWER_SYSTEM,
        description='International standard for substation automation. Object-oriented data modeling '
                    'with GOOSE (peer-to-peer), MMS (client-server), and Sampled Values. Enables '
                    'interoperability between multi-vendor IEDs.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_SINGLE_MODE, M.FIBER_MULTI_MODE],
            min_data_rate=100_000_000,
            max_distance=_STATION_DISTANCES,
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.RING, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(100, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(0.003, 4, 1000),
        typical_applications=['Substation automation', 'Protection relay communication',
                              'Bay-level interlocking', 'Process bus (sampled values)',
                              'Station bus (GOOSE/MMS)', 'Wide-area protection schemes'],
        industries=['POWER', 'RENEWABLE', 'TRANSMISSION', 'DISTRIBUTION'],
        standards=['IEC 61850-1 to 61850-10', 'IEC 61850-7-1 (Principles)', 'IEC 61850-7-2 (ACSI)',
                   'IEC 61850-7-4 (Logical Nodes)', 'IEC 61850-8-1 (MMS Mapping)',
                   'IEC 61850-9-2 (Sampled Values)'],
        governing_body='IEC TC 57',
        icon='🏗️',
    ),
    ProtocolDefinition(
        protocol_id='DNP3-SERIAL-001',
        name='DNP3 Serial',
        abbreviation='DNP3-S',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Distributed Network Protocol over serial communication. Three-layer architecture '
                    'optimized for SCADA applications. Event-driven reporting with time-stamped data. '
                    'Widely used in North American utilities.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS232, M.RS485],
            min_data_rate=1200,
            max_distance={M.RS232: 15, M.RS485: 1200},
            connector_types=[C.DB9, C.DB25, C.TERMINAL_BLOCK],
            shielding_required=True,
            termination_required=True,
        ),
        supported_topologies=[T.POINT_TO_POINT, T.MULTI_DROP],
        max_nodes=65519,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(1.2, 115.2, 'kbps'),
        cycle_time=CycleTimeSpec(100, 1000, 60000),
        typical_applications=['SCADA master-outstation communication', 'Remote terminal unit polling',
                              'Substation data acquisition', 'Distribution automation',
                              'Water/wastewater SCADA'],
        industries=['POWER', 'WATER', 'OIL_GAS', 'PIPELINE'],
        standards=['IEEE 1815', 'IEC 62351 (Security)'],
        governing_body='DNP Users Group / IEEE',
        successor_protocol='DNP3-TCP-001',
        icon='📡',
    ),
    ProtocolDefinition(
        protocol_id='DNP3-TCP-001',
        name='DNP3 TCP/IP',
        abbreviation='DNP3-TCP',
        category=ProtocolCategory.POWER_SYSTEM,
        description='DNP3 protocol encapsulated over TCP/IP. Maintains all DNP3 application layer '
                    'functionality over Ethernet infrastructure. Supports secure authentication per '
                    'IEC 62351-5.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=10_000_000,
            max_distance=_STATION_DISTANCES,
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.MESH, T.TREE],
        max_nodes=65519,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(10, 500, 60000),
        typical_applications=['WAN SCADA communication', 'Substation to control center',
                              'Inter-control center communication', 'Distributed generation monitoring',
                              'Pipeline SCADA'],
        industries=['POWER', 'WATER', 'OIL_GAS', 'PIPELINE', 'RENEWABLE'],
        standards=['IEEE 1815', 'IEC 62351-5 (Security)', 'DNP3 Secure Authentication v5'],
        governing_body='DNP Users Group / IEEE',
        predecessor_protocol='DNP3-SERIAL-001',
        icon='📡',
    ),
    ProtocolDefinition(
        protocol_id='IEC101-001',
        name='IEC 60870-5-101',
        abbreviation='IEC-101',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Telecontrol companion standard for serial communication. Balanced and unbalanced '
                    'transmission modes. Primary protocol for SCADA in European and Asian power systems.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS232, M.RS485],
            min_data_rate=100,
            max_distance={M.RS232: 15, M.RS485: 1200},
            connector_types=[C.DB9, C.DB25, C.TERMINAL_BLOCK],
            shielding_required=True,
        ),
        supported_topologies=[T.POINT_TO_POINT, T.MULTI_DROP],
        max_nodes=65534,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(0.1, 115.2, 'kbps'),
        cycle_time=CycleTimeSpec(100, 2000, 60000),
        typical_applications=['Substation to control center (serial)', 'RTU polling',
                              'Distribution automation', 'Telecontrol applications'],
        industries=['POWER', 'WATER', 'DISTRICT_HEATING'],
        standards=['IEC 60870-5-101', 'IEC 62351 (Security)'],
        governing_body='IEC TC 57',
        successor_protocol='IEC104-001',
        icon='📠',
    ),
    ProtocolDefinition(
        protocol_id='IEC104-001',
        name='IEC 60870-5-104',
        abbreviation='IEC-104',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Network access for IEC 60870-5-101 using TCP/IP. Maintains application layer '
                    'compatibility with 101 while enabling communication over WAN. De facto standard '
                    'for European utility SCADA.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=10_000_000,
            max_distance=_STATION_DISTANCES,
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.MESH, T.TREE],
        max_nodes=65534,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(10, 1000, 60000),
        typical_applications=['Substation to control center (WAN)',
                              'Inter-control center communication (ICCP alternative)',
                              'Distribution management systems', 'Renewable energy integration',
                              'Wide-area monitoring'],
        industries=['POWER', 'RENEWABLE', 'WATER', 'DISTRICT_HEATING'],
        standards=['IEC 60870-5-104', 'IEC 62351 (Security)'],
        governing_body='IEC TC 57',
        predecessor_protocol='IEC101-001',
        icon='🌐',
    ),
    ProtocolDefinition(
        protocol_id='C37118-001',
        name='IEEE C37.118 Synchrophasor',
        abbreviation='C37.118',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Standard for synchrophasor measurements in power systems. Defines PMU data format '
                    'and communication. Enables wide-area situational awareness and grid stability '
                    'monitoring.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=10_000_000,
            max_distance=_STATION_DISTANCES,
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.TREE, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(8.33, 20, 100),
        typical_applications=['Wide-area monitoring systems (WAMS)', 'Grid stability assessment',
                              'Oscillation detection', 'State estimation', 'Post-disturbance analysis',
                              'Renewable integration monitoring'],
        industries=['POWER', 'TRANSMISSION', 'RENEWABLE'],
        standards=['IEEE C37.118.1 (Measurements)', 'IEEE C37.118.2 (Communication)',
                   'IEEE C37.242 (Time Sync)'],
        governing_body='IEEE Power & Energy Society',
        icon='📐',
    ),
    ProtocolDefinition(
        protocol_id='IEC62351-001',
        name='IEC 62351 Security',
        abbreviation='IEC-SEC',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Security standard for power system communication protocols. Provides '
                    'authentication, encryption, and intrusion detection for IEC 61850, IEC 60870-5, '
                    'and DNP3. Essential for critical infrastructure protection.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=_ETHERNET_MEDIA,
            min_data_rate=10_000_000,
            max_distance=_STATION_DISTANCES,
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        typical_applications=['Securing IEC 61850 communications', 'Securing IEC 60870-5-104 links',
                              'Securing DNP3 with SAv5', 'Critical infrastructure protection',
                              'NERC CIP compliance'],
        industries=['POWER', 'TRANSMISSION', 'DISTRIBUTION', 'RENEWABLE'],
        standards=['IEC 62351-1 (Overview)', 'IEC 62351-3 (TLS for TCP/IP)', 'IEC 62351-4 (MMS Security)',
                   'IEC 62351-5 (IEC 60870-5 and DNP3)', 'IEC 62351-6 (IEC 61850)',
                   'IEC 62351-7 (Network Management)', 'IEC 62351-8 (RBAC)'],
        governing_body='IEC TC 57 WG15',
        icon='🔒',
    ),
    ProtocolDefinition(
        protocol_id='ICCP-001',
        name='ICCP / TASE.2',
        abbreviation='ICCP',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Inter-Control Center Communications Protocol. Standardized as IEC 60870-6 TASE.2. '
                    'Enables data exchange between utility control centers for reliability coordination.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_SINGLE_MODE],
            min_data_rate=10_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_SINGLE_MODE: 40000},
            connector_types=[C.RJ45, C.LC_FIBER, C.SC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.POINT_TO_POINT, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(10, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(1000, 10000, 60000),
        typical_applications=['Inter-control center data exchange', 'Reliability coordination',
                              'Energy market data exchange', 'Wide-area situational awareness',
                              'Tie-line monitoring'],
        industries=['POWER', 'TRANSMISSION', 'ISO_RTO'],
        standards=['IEC 60870-6 (TASE.2)', 'IEEE 1379'],
        governing_body='IEC TC 57',
        icon='🏢',
    ),
    ProtocolDefinition(
        protocol_id='SUNSPEC-001',
        name='SunSpec Modbus',
        abbreviation='SSPEC',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Standardized Modbus register mapping for solar and energy storage equipment. '
                    'Provides interoperability for inverters, meters, and battery systems. Foundation '
                    'for DER management systems.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.RS485, M.COPPER_ETHERNET],
            min_data_rate=9600,
            max_distance={M.RS485: 1200, M.COPPER_ETHERNET: 100},
            connector_types=[C.TERMINAL_BLOCK, C.RJ45],
            shielding_required=True,
            termination_required=True,
        ),
        supported_topologies=[T.MULTI_DROP, T.STAR],
        max_nodes=247,
        addressing_mode=AddressingMode.NODE_ADDRESS,
        data_rate=DataRateSpec(9.6, 100000, 'kbps'),
        cycle_time=CycleTimeSpec(100, 1000, 10000),
        typical_applications=['Solar inverter monitoring', 'Battery energy storage integration',
                              'DER aggregation platforms', 'Smart inverter control (IEEE 1547)',
                              'Renewable plant SCADA'],
        industries=['RENEWABLE', 'POWER', 'COMMERCIAL'],
        standards=['SunSpec Alliance Specifications', 'IEEE 1547', 'IEEE 2030.5'],
        governing_body='SunSpec Alliance',
        icon='☀️',
    ),
    ProtocolDefinition(
        protocol_id='IEEE2030-5-001',
        name='IEEE 2030.5 (SEP2)',
        abbreviation='SEP2',
        category=ProtocolCategory.POWER_SYSTEM,
        description='Smart Energy Profile 2.0. RESTful protocol for DER and demand response management. '
                    'Based on HTTP/TLS with XML payloads. California Rule 21 mandated protocol for DER '
                    'integration.',
        physical_requirements=PhysicalLayerRequirements(
            supported_media=[M.COPPER_ETHERNET, M.FIBER_MULTI_MODE, M.WIRELESS_2_4GHZ],
            min_data_rate=1_000_000,
            max_distance={M.COPPER_ETHERNET: 100, M.FIBER_MULTI_MODE: 2000},
            connector_types=[C.RJ45, C.LC_FIBER],
            shielding_required=False,
        ),
        supported_topologies=[T.STAR, T.MESH],
        max_nodes=None,
        addressing_mode=AddressingMode.IP_ADDRESS,
        data_rate=DataRateSpec(1, 1000, 'Mbps'),
        cycle_time=CycleTimeSpec(1000, 5000, 300000),
        typical_applications=['DER management (DERMS)', 'Demand response programs',
                              'Smart inverter communication', 'Grid services dispatch',
                              'California Rule 21 compliance'],
        industries=['POWER', 'RENEWABLE', 'COMMERCIAL', 'RESIDENTIAL'],
        standards=['IEEE 2030.5', 'California Rule 21', 'IEEE 1547'],
        governing_body='IEEE',
        icon='🔋',
    ),
]


# --- Templates ---

GENERIC_PROTOCOL_TEMPLATE = ProtocolDefinition(
    protocol_id='PROTO-GENERIC-001',
    name='Generic Protocol (TBD)',
    abbreviation='TBD',
    category=ProtocolCategory.GENERIC,
    description='Placeholder for undefined protocol. Requires specification before project '
                'completion. This item will be flagged in project reports.',
    physical_requirements=PhysicalLayerRequirements(
        supported_media=[M.GENERIC],
        connector_types=[C.GENERIC],
    ),
    supported_topologies=[],
    max_nodes=None,
    addressing_mode=AddressingMode.NONE,
    data_rate=DataRateSpec(0, 0, 'bps'),
    typical_applications=['Pending specification'],
    icon='❓',
    is_generic=True,
)

USER_DEFINED_PROTOCOL_TEMPLATE = ProtocolDefinition(
    protocol_id='PROTO-USER-001',
    name='User-Defined Protocol',
    abbreviation='USR',
    category=ProtocolCategory.USER_DEFINED,
    description='Custom protocol definition for project-specific or proprietary communication '
                'requirements.',
    physical_requirements=PhysicalLayerRequirements(
        supported_media=[M.USER_DEFINED],
        connector_types=[C.USER_DEFINED],
    ),
    supported_topologies=[],
    max_nodes=None,
    addressing_mode=AddressingMode.NONE,
    data_rate=DataRateSpec(0, 0, 'bps'),
    icon='🔧',
    is_user_defined=True,
)


SEED_PROTOCOLS: List[ProtocolDefinition] = (
    FIELDBUS_PROTOCOLS
    + INDUSTRIAL_ETHERNET_PROTOCOLS
    + POWER_SYSTEM_PROTOCOLS
    + [GENERIC_PROTOCOL_TEMPLATE, USER_DEFINED_PROTOCOL_TEMPLATE]
)


class ProtocolLibrary:
    """In-memory protocol catalog with search capabilities."""

    def __init__(self, seed: bool = True):
        self.protocols: List[ProtocolDefinition] = []
        if seed:
            self._load_seed_data()

    def _load_seed_data(self):
        """Load seed protocols, rejecting duplicate IDs."""
        seen = set()
        for protocol in SEED_PROTOCOLS:
            if protocol.protocol_id in seen:
                raise ValueError(f"Duplicate protocol ID in seed data: {protocol.protocol_id}")
            seen.add(protocol.protocol_id)
            self.protocols.append(protocol)
        logger.debug("Loaded %d protocols", len(self.protocols))

    def search(
        self,
        query: Optional[str] = None,
        category: Optional[ProtocolCategory] = None,
        industry: Optional[str] = None,
        media_type: Optional[M] = None,
    ) -> List[ProtocolDefinition]:
        """Search protocols by text query, category, industry or supported medium."""
        results = self.protocols

        if category:
            results = [p for p in results if p.category == category]

        if industry:
            results = [p for p in results if industry.upper() in p.industries]

        if media_type:
            results = [p for p in results if media_type in p.supported_media]

        if query:
            q = query.lower()
            results = [
                p for p in results
                if q in p.name.lower()
                or q in p.abbreviation.lower()
                or q in p.protocol_id.lower()
                or q in p.description.lower()
            ]

        return list(results)

    def get_by_id(self, protocol_id: str) -> Optional[ProtocolDefinition]:
        """Get a protocol by its ID."""
        for p in self.protocols:
            if p.protocol_id == protocol_id:
                return p
        return None

    def get_by_abbreviation(self, abbreviation: str) -> Optional[ProtocolDefinition]:
        """Get a protocol by abbreviation, ignoring case."""
        abbr = abbreviation.lower()
        for p in self.protocols:
            if p.abbreviation.lower() == abbr:
                return p
        return None

    def export_json(self) -> str:
        """Export all protocols as JSON."""
        records = []
        for p in self.protocols:
            record = dataclasses.asdict(p)
            record['physical_requirements']['max_distance'] = {
                media.value: metres for media, metres in p.physical_requirements.max_distance
            }
            records.append(record)
        return json.dumps(records, indent=2)

    @property
    def industries(self) -> List[str]:
        """Get sorted list of industries served by any protocol."""
        return sorted(set(i for p in self.protocols for i in p.industries))

    @property
    def count(self) -> int:
        return len(self.protocols)


# Module-level convenience functions
_default_library = None
_default_library_lock = threading.Lock()


def _get_library() -> ProtocolLibrary:
    global _default_library
    if _default_library is None:
        with _default_library_lock:
            if _default_library is None:
                _default_library = ProtocolLibrary()
    return _default_library


def get_all_protocols() -> List[ProtocolDefinition]:
    return list(_get_library().protocols)


def search_protocols(query: Optional[str] = None, **kwargs) -> List[ProtocolDefinition]:
    return _get_library().search(query=query, **kwargs)


def get_protocol_by_id(protocol_id: str) -> Optional[ProtocolDefinition]:
    return _get_library().get_by_id(protocol_id)


def get_protocol_by_abbreviation(abbreviation: str) -> Optional[ProtocolDefinition]:
    return _get_library().get_by_abbreviation(abbreviation)


def get_protocols_by_category(category: ProtocolCategory) -> List[ProtocolDefinition]:
    return [p for p in _get_library().protocols if p.category == category]


def get_protocols_by_industry(industry: str) -> List[ProtocolDefinition]:
    return [p for p in _get_library().protocols if industry in p.industries]


def get_safety_capable_protocols() -> List[ProtocolDefinition]:
    return [p for p in _get_library().protocols if p.safety_certifiable]


def get_real_time_protocols() -> List[ProtocolDefinition]:
    """Industrial Ethernet protocols able to cycle faster than 1 ms."""
    return [
        p for p in _get_library().protocols
        if p.category == ProtocolCategory.FIELDBUS_ETHERNET
        and p.cycle_time is not None
        and p.cycle_time.min < 1
    ]


def _applications_mention(protocol: ProtocolDefinition, keywords: List[str]) -> bool:
    return any(
        keyword in app.lower()
        for app in protocol.typical_applications
        for keyword in keywords
    )


def get_substation_protocols() -> List[ProtocolDefinition]:
    """Power-system protocols used inside substations."""
    return [
        p for p in _get_library().protocols
        if p.category == ProtocolCategory.POWER_SYSTEM
        and _applications_mention(p, ['substation', 'protection', 'bay'])
    ]


def get_scada_protocols() -> List[ProtocolDefinition]:
    """Power-system protocols used for SCADA and control-center links."""
    return [
        p for p in _get_library().protocols
        if p.category == ProtocolCategory.POWER_SYSTEM
        and _applications_mention(p, ['scada', 'control center', 'rtu'])
    ]


def get_renewable_integration_protocols() -> List[ProtocolDefinition]:
    """Power-system protocols used to integrate renewables and DER."""
    return [
        p for p in _get_library().protocols
        if p.category == ProtocolCategory.POWER_SYSTEM
        and ('RENEWABLE' in p.industries or _applications_mention(p, ['renewable', 'solar', 'der']))
    ]


def get_protocols_by_ids(protocol_ids: List[str]) -> Dict[str, Optional[ProtocolDefinition]]:
    """Resolve several protocol IDs at once; unknown IDs map to None."""
    library = _get_library()
    return {pid: library.get_by_id(pid) for pid in protocol_ids}
