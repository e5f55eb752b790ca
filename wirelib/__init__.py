"""
Wirelib Reference Library

Catalogs of industrial communication protocols and cable products,
with a rule-based engine that grades how well a protocol will run over
a given cable.

Verdicts are advisory. Nothing here simulates signal integrity.
"""

from wirelib.types import CompatibilityLevel, PhysicalMediaType, ProtocolCategory, CableCategory
from wirelib.models import ProtocolDefinition, CableDefinition, CompatibilityAssessment
from wirelib.protocol_library import ProtocolLibrary, get_all_protocols, get_protocol_by_id, search_protocols
from wirelib.cable_library import CableLibrary, get_all_cables, get_cable_by_id, search_cables
from wirelib.compatibility import assess_compatibility, group_compatible_cables, group_compatible_protocols
from wirelib.units import format_data_rate, format_impedance
from wirelib.ampacity import lookup_ampacity

__version__ = "0.1.0"
