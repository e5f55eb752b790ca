"""
Enumerations shared by the protocol and cable catalogs.

Values are plain strings so records serialize directly to JSON and
compare equal to the identifiers used in project files.
"""

from enum import Enum


class PhysicalMediaType(str, Enum):
    RS232 = "RS232"
    RS485 = "RS485"
    RS422 = "RS422"
    COPPER_ETHERNET = "COPPER_ETHERNET"
    FIBER_SINGLE_MODE = "FIBER_SINGLE_MODE"
    FIBER_MULTI_MODE = "FIBER_MULTI_MODE"
    FIELDBUS_H1 = "FIELDBUS_H1"
    FIELDBUS_HSE = "FIELDBUS_HSE"
    PROFIBUS_DP = "PROFIBUS_DP"
    PROFIBUS_PA = "PROFIBUS_PA"
    CURRENT_LOOP = "CURRENT_LOOP"
    VOLTAGE_SIGNAL = "VOLTAGE_SIGNAL"
    WIRELESS_2_4GHZ = "WIRELESS_2_4GHZ"
    WIRELESS_5GHZ = "WIRELESS_5GHZ"
    WIRELESS_900MHZ = "WIRELESS_900MHZ"
    POWER_LINE = "POWER_LINE"
    COAXIAL = "COAXIAL"
    USER_DEFINED = "USER_DEFINED"
    GENERIC = "GENERIC"


class ConnectorType(str, Enum):
    RJ45 = "RJ45"
    M12_D_CODED = "M12_D_CODED"
    M12_X_CODED = "M12_X_CODED"
    M12_A_CODED = "M12_A_CODED"
    M12_B_CODED = "M12_B_CODED"
    M8 = "M8"
    LC_FIBER = "LC_FIBER"
    SC_FIBER = "SC_FIBER"
    ST_FIBER = "ST_FIBER"
    DB9 = "DB9"
    DB25 = "DB25"
    TERMINAL_BLOCK = "TERMINAL_BLOCK"
    SCREW_TERMINAL = "SCREW_TERMINAL"
    SPRING_TERMINAL = "SPRING_TERMINAL"
    HAN_CONNECTOR = "HAN_CONNECTOR"
    CABLE_GLAND = "CABLE_GLAND"
    BNC = "BNC"
    N_TYPE = "N_TYPE"
    SMA = "SMA"
    USER_DEFINED = "USER_DEFINED"
    GENERIC = "GENERIC"


class ShieldingType(str, Enum):
    """Cable shield construction.

    UNSHIELDED ("UTP") is an explicit twisted-pair rating and is not the
    same as NONE, which means shielding does not apply (power, fiber).
    """
    UNSHIELDED = "UTP"
    FOIL_SHIELDED = "FTP"
    BRAID_SHIELDED = "STP"
    FOIL_AND_BRAID = "S/FTP"
    INDIVIDUAL_AND_OVERALL = "PIMF"
    DOUBLE_SHIELDED = "S/STP"
    NONE = "NONE"
    USER_DEFINED = "USER_DEFINED"


class NetworkTopology(str, Enum):
    POINT_TO_POINT = "POINT_TO_POINT"
    MULTI_DROP = "MULTI_DROP"
    BUS = "BUS"
    RING = "RING"
    STAR = "STAR"
    TREE = "TREE"
    MESH = "MESH"
    DAISY_CHAIN = "DAISY_CHAIN"
    LINE = "LINE"


class AddressingMode(str, Enum):
    NODE_ADDRESS = "NODE_ADDRESS"
    MAC_ADDRESS = "MAC_ADDRESS"
    IP_ADDRESS = "IP_ADDRESS"
    DEVICE_NAME = "DEVICE_NAME"
    SLOT_BASED = "SLOT_BASED"
    NONE = "NONE"


class ProtocolCategory(str, Enum):
    FIELDBUS_SERIAL = "FIELDBUS_SERIAL"
    FIELDBUS_ETHERNET = "FIELDBUS_ETHERNET"
    POWER_SYSTEM = "POWER_SYSTEM"
    BUILDING_AUTOMATION = "BUILDING_AUTOMATION"
    WIRELESS = "WIRELESS"
    LEGACY = "LEGACY"
    USER_DEFINED = "USER_DEFINED"
    GENERIC = "GENERIC"


class CableCategory(str, Enum):
    POWER_LV = "POWER_LV"
    POWER_MV = "POWER_MV"
    POWER_HV = "POWER_HV"
    CONTROL = "CONTROL"
    INSTRUMENTATION = "INSTRUMENTATION"
    THERMOCOUPLE = "THERMOCOUPLE"
    COMMUNICATION_COPPER = "COMMUNICATION_COPPER"
    COMMUNICATION_FIELDBUS = "COMMUNICATION_FIELDBUS"
    FIBER_SINGLE_MODE = "FIBER_SINGLE_MODE"
    FIBER_MULTI_MODE = "FIBER_MULTI_MODE"
    SPECIALTY = "SPECIALTY"
    USER_DEFINED = "USER_DEFINED"
    GENERIC = "GENERIC"


class CableConstruction(str, Enum):
    SOLID = "SOLID"
    STRANDED = "STRANDED"
    FLEXIBLE = "FLEXIBLE"
    EXTRA_FLEXIBLE = "EXTRA_FLEXIBLE"
    ARMORED = "ARMORED"
    TRAY_RATED = "TRAY_RATED"
    DIRECT_BURIAL = "DIRECT_BURIAL"
    PLENUM = "PLENUM"
    RISER = "RISER"
    OUTDOOR = "OUTDOOR"
    MARINE = "MARINE"
    MINING = "MINING"


class InsulationType(str, Enum):
    PVC = "PVC"
    XLPE = "XLPE"
    EPR = "EPR"
    LSZH = "LSZH"
    FEP = "FEP"
    PTFE = "PTFE"
    SILICONE = "SILICONE"
    RUBBER = "RUBBER"
    PE = "PE"
    HDPE = "HDPE"
    PUR = "PUR"
    TPE = "TPE"


class JacketType(str, Enum):
    PVC = "PVC"
    LSZH = "LSZH"
    PE = "PE"
    PUR = "PUR"
    TPE = "TPE"
    NEOPRENE = "NEOPRENE"
    HYPALON = "HYPALON"
    NONE = "NONE"


class ConductorMaterial(str, Enum):
    COPPER = "COPPER"
    TINNED_COPPER = "TINNED_COPPER"
    SILVER_PLATED_COPPER = "SILVER_PLATED_COPPER"
    ALUMINUM = "ALUMINUM"
    COPPER_CLAD_ALUMINUM = "CCA"


class CableVoltageClass(str, Enum):
    EXTRA_LOW = "EXTRA_LOW"
    LOW_300V = "LOW_300V"
    LOW_600V = "LOW_600V"
    LOW_1000V = "LOW_1000V"
    MEDIUM_5KV = "MEDIUM_5KV"
    MEDIUM_15KV = "MEDIUM_15KV"
    MEDIUM_25KV = "MEDIUM_25KV"
    MEDIUM_35KV = "MEDIUM_35KV"
    HIGH = "HIGH"


class InstallationMethod(str, Enum):
    IN_CONDUIT = "IN_CONDUIT"
    IN_CABLE_TRAY = "IN_CABLE_TRAY"
    DIRECT_BURIED = "DIRECT_BURIED"
    FREE_AIR = "FREE_AIR"
    IN_DUCT = "IN_DUCT"
    UNDERGROUND_CONDUIT = "UNDERGROUND_CONDUIT"
    LADDER_RACK = "LADDER_RACK"
    WIREWAY = "WIREWAY"


class CompatibilityLevel(str, Enum):
    """Advisory verdict returned by the compatibility engine."""
    VERIFIED = "VERIFIED"
    COMPATIBLE = "COMPATIBLE"
    UNVERIFIED = "UNVERIFIED"
    UNLIKELY = "UNLIKELY"
    PENDING = "PENDING"
