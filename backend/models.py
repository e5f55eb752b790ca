"""Pydantic models for Wirelib API responses."""

from __future__ import annotations

from typing import Optional, Union

from pydantic import BaseModel, Field

from wirelib.types import (
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


# --- Protocols ---

class ProtocolInfo(BaseModel):
    protocol_id: str
    name: str
    abbreviation: str
    category: ProtocolCategory
    description: str
    supported_media: list[PhysicalMediaType]
    min_data_rate: Optional[int] = Field(None, description="Minimum data rate (bps)")
    max_distance: dict[str, int] = Field(default_factory=dict, description="Maximum segment length per medium (m)")
    connector_types: list[ConnectorType] = []
    shielding_required: Optional[bool] = None
    termination_required: Optional[bool] = None
    characteristic_impedance: Optional[float] = Field(None, description="Nominal line impedance (Ohms)")
    supported_topologies: list[NetworkTopology] = []
    max_nodes: Optional[int] = None
    data_rate_min: float = Field(..., description="Slowest supported rate (bps)")
    data_rate_max: float = Field(..., description="Fastest supported rate (bps)")
    cycle_time_typical_ms: Optional[float] = None
    safety_certifiable: bool = False
    safety_protocol: Optional[str] = None
    governing_body: Optional[str] = None
    standards: list[str] = []
    typical_applications: list[str] = []
    industries: list[str] = []
    icon: str = ""
    is_user_defined: bool = False
    is_generic: bool = False


class ProtocolListResponse(BaseModel):
    protocols: list[ProtocolInfo]
    total: int


# --- Cables ---

class CableInfo(BaseModel):
    cable_id: str
    name: str
    category: CableCategory
    description: str
    media_type: PhysicalMediaType
    max_data_rate: int = Field(..., description="Maximum data rate (bps), 0 for power and analog cables")
    max_distance: int = Field(..., description="Maximum run length (m)")
    connector_types: list[ConnectorType] = []
    shielding: ShieldingType
    characteristic_impedance: Optional[float] = Field(None, description="Nominal line impedance (Ohms)")
    supports_power_over_fieldbus: bool = False
    construction: list[CableConstruction] = []
    insulation: InsulationType
    jacket: JacketType
    voltage_class: CableVoltageClass
    conductor_material: ConductorMaterial
    awg_range: Optional[str] = None
    conductor_count: Union[int, str]
    pair_count: Optional[int] = None
    min_operating_c: float
    max_operating_c: float
    industries: list[str] = []
    standards: list[str] = []
    typical_applications: list[str] = []
    icon: str = ""
    is_user_defined: bool = False
    is_generic: bool = False


class CableListResponse(BaseModel):
    cables: list[CableInfo]
    total: int


# --- Categories ---

class CategoryInfo(BaseModel):
    value: str
    display_name: str


class CategoryListResponse(BaseModel):
    categories: list[CategoryInfo]
    groups: dict[str, list[str]]


# --- Compatibility ---

class CompatibilityResponse(BaseModel):
    protocol_id: str
    cable_id: str
    level: CompatibilityLevel
    display_name: str
    icon: str
    message: str
    details: list[str] = []
    requires_confirmation: bool = False


class CatalogEntryRef(BaseModel):
    id: str
    name: str


class CompatibilityGroup(BaseModel):
    level: CompatibilityLevel
    display_name: str
    icon: str
    entries: list[CatalogEntryRef]


class GroupedCompatibilityResponse(BaseModel):
    subject_id: str = Field(..., description="Protocol or cable the others were assessed against")
    groups: list[CompatibilityGroup]


# --- Ampacity ---

class AmpacityResponse(BaseModel):
    conductor_size: str
    size_unit: str
    ampacity: float = Field(..., description="Base ampacity (A)")
    installation_method: InstallationMethod
    ambient_temp_c: float
    conductor_temp_c: float
