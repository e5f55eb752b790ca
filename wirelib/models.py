"""
Record types for the protocol and cable catalogs.

Catalog entries are frozen dataclasses: they are built once when a library
is loaded and never modified afterwards. Sequence fields accept any
iterable and are stored as tuples, and a protocol's per-medium distance
limits are stored as (medium, metres) pairs, so entries cannot be changed
in place and stay hashable.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from wirelib.types import (
    AddressingMode,
    CableCategory,
    CableConstruction,
    CableVoltageClass,
    CompatibilityLevel,
    ConductorMaterial,
    ConnectorType,
    InstallationMethod,
    InsulationType,
    JacketType,
    NetworkTopology,
    PhysicalMediaType,
    ProtocolCategory,
    ShieldingType,
)


def _freeze(record, *names):
    for name in names:
        object.__setattr__(record, name, tuple(getattr(record, name)))


# --- Protocols ---

@dataclass(frozen=True)
class PhysicalLayerRequirements:
    """What a protocol needs from the cable it runs over."""
    supported_media: Tuple[PhysicalMediaType, ...]
    min_data_rate: Optional[int] = None            # bps
    max_distance: Tuple[Tuple[PhysicalMediaType, int], ...] = ()  # metres
    connector_types: Tuple[ConnectorType, ...] = ()
    shielding_required: Optional[bool] = None
    termination_required: Optional[bool] = None
    termination_resistance: Optional[float] = None  # Ohms
    characteristic_impedance: Optional[float] = None  # Ohms

    def __post_init__(self):
        _freeze(self, 'supported_media', 'connector_types')
        distances = self.max_distance
        if isinstance(distances, dict):
            distances = distances.items()
        object.__setattr__(self, 'max_distance', tuple((media, metres) for media, metres in distances))

    def distance_for(self, media: PhysicalMediaType) -> Optional[int]:
        """Maximum segment length in metres over one medium, if published."""
        for candidate, metres in self.max_distance:
            if candidate == media:
                return metres
        return None


@dataclass(frozen=True)
class DataRateSpec:
    min: float
    max: float
    unit: str = 'bps'


@dataclass(frozen=True)
class CycleTimeSpec:
    min: float
    typical: float
    max: float
    unit: str = 'ms'


@dataclass(frozen=True)
class ProtocolDefinition:
    """A communication protocol and its physical-layer requirements."""
    protocol_id: str
    name: str
    abbreviation: str
    category: ProtocolCategory
    description: str
    physical_requirements: PhysicalLayerRequirements
    supported_topologies: Tuple[NetworkTopology, ...]
    max_nodes: Optional[int]
    addressing_mode: AddressingMode
    data_rate: DataRateSpec
    cycle_time: Optional[CycleTimeSpec] = None
    safety_certifiable: bool = False
    safety_protocol: Optional[str] = None
    governing_body: Optional[str] = None
    standards: Tuple[str, ...] = ()
    typical_applications: Tuple[str, ...] = ()
    industries: Tuple[str, ...] = ()
    predecessor_protocol: Optional[str] = None
    successor_protocol: Optional[str] = None
    icon: str = ''
    is_user_defined: bool = False
    is_generic: bool = False
    is_deprecated: bool = False
    version: str = '1.0.0'

    def __post_init__(self):
        _freeze(self, 'supported_topologies', 'standards', 'typical_applications', 'industries')

    @property
    def supported_media(self) -> Tuple[PhysicalMediaType, ...]:
        return self.physical_requirements.supported_media

    @property
    def min_data_rate(self) -> Optional[int]:
        return self.physical_requirements.min_data_rate

    @property
    def characteristic_impedance(self) -> Optional[float]:
        return self.physical_requirements.characteristic_impedance

    @property
    def shielding_required(self) -> Optional[bool]:
        return self.physical_requirements.shielding_required


# --- Cables ---

@dataclass(frozen=True)
class PhysicalLayerCapabilities:
    """What a cable can carry."""
    media_type: PhysicalMediaType
    max_data_rate: int            # bps, 0 for power and analog cables
    max_distance: int             # metres
    connector_types: Tuple[ConnectorType, ...]
    shielding: ShieldingType
    characteristic_impedance: Optional[float] = None  # Ohms
    supports_poe: bool = False
    supports_power_over_fieldbus: bool = False

    def __post_init__(self):
        _freeze(self, 'connector_types')


@dataclass(frozen=True)
class ConductorSpec:
    material: ConductorMaterial
    awg_range: Optional[str] = None
    cross_section: Optional[str] = None


@dataclass(frozen=True)
class TemperatureRating:
    min_operating_c: float
    max_operating_c: float


@dataclass(frozen=True)
class CableDefinition:
    """A cable product and its physical-layer capabilities."""
    cable_id: str
    name: str
    category: CableCategory
    description: str
    physical_capabilities: PhysicalLayerCapabilities
    construction: Tuple[CableConstruction, ...]
    insulation: InsulationType
    jacket: JacketType
    voltage_class: CableVoltageClass
    conductor: ConductorSpec
    conductor_count: Union[int, str]
    temperature_rating: TemperatureRating
    pair_count: Optional[int] = None
    industries: Tuple[str, ...] = ()
    standards: Tuple[str, ...] = ()
    typical_applications: Tuple[str, ...] = ()
    icon: str = ''
    is_user_defined: bool = False
    is_generic: bool = False
    is_deprecated: bool = False
    version: str = '1.0.0'

    def __post_init__(self):
        _freeze(self, 'construction', 'industries', 'standards', 'typical_applications')

    @property
    def media_type(self) -> PhysicalMediaType:
        return self.physical_capabilities.media_type

    @property
    def max_data_rate(self) -> int:
        return self.physical_capabilities.max_data_rate

    @property
    def characteristic_impedance(self) -> Optional[float]:
        return self.physical_capabilities.characteristic_impedance

    @property
    def shielding(self) -> ShieldingType:
        return self.physical_capabilities.shielding


# --- Compatibility ---

@dataclass(frozen=True)
class CompatibilityAssessment:
    """Advisory verdict for one protocol/cable pair."""
    level: CompatibilityLevel
    message: str
    details: Tuple[str, ...] = ()
    requires_confirmation: bool = False

    def __post_init__(self):
        _freeze(self, 'details')


# --- Ampacity ---

@dataclass(frozen=True)
class AmpacityRating:
    conductor_size: str           # e.g. '12', '1/0', '250', '2.5'
    size_unit: str                # 'AWG', 'kcmil' or 'mm²'
    ampacity: float               # Amps
    installation_method: InstallationMethod
    ambient_temp_c: float
    conductor_temp_c: float


@dataclass(frozen=True)
class AmpacityTable:
    reference: str
    description: str
    ratings: Tuple[AmpacityRating, ...]

    def __post_init__(self):
        _freeze(self, 'ratings')
