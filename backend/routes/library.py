"""Library routes: protocol catalog, cable catalog, categories."""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query, Request

from backend.models import (
    CableInfo,
    CableListResponse,
    CategoryInfo,
    CategoryListResponse,
    ProtocolInfo,
    ProtocolListResponse,
)
from wirelib.categories import (
    get_all_cable_categories,
    get_all_protocol_categories,
    get_cable_category_display_name,
    get_cable_category_groups,
    get_protocol_category_display_name,
    get_protocol_category_groups,
)
from wirelib.models import CableDefinition, ProtocolDefinition
from wirelib.types import CableCategory, PhysicalMediaType, ProtocolCategory

logger = logging.getLogger(__name__)

router = APIRouter()


def protocol_info(p: ProtocolDefinition) -> ProtocolInfo:
    req = p.physical_requirements
    return ProtocolInfo(
        protocol_id=p.protocol_id,
        name=p.name,
        abbreviation=p.abbreviation,
        category=p.category,
        description=p.description,
        supported_media=req.supported_media,
        min_data_rate=req.min_data_rate,
        max_distance={media.value: metres for media, metres in req.max_distance},
        connector_types=req.connector_types,
        shielding_required=req.shielding_required,
        termination_required=req.termination_required,
        characteristic_impedance=req.characteristic_impedance,
        supported_topologies=p.supported_topologies,
        max_nodes=p.max_nodes,
        data_rate_min=p.data_rate.min,
        data_rate_max=p.data_rate.max,
        cycle_time_typical_ms=p.cycle_time.typical if p.cycle_time else None,
        safety_certifiable=p.safety_certifiable,
        safety_protocol=p.safety_protocol,
        governing_body=p.governing_body,
        standards=p.standards,
        typical_applications=p.typical_applications,
        industries=p.industries,
        icon=p.icon,
        is_user_defined=p.is_user_defined,
        is_generic=p.is_generic,
    )


def cable_info(c: CableDefinition) -> CableInfo:
    caps = c.physical_capabilities
    return CableInfo(
        cable_id=c.cable_id,
        name=c.name,
        category=c.category,
        description=c.description,
        media_type=caps.media_type,
        max_data_rate=caps.max_data_rate,
        max_distance=caps.max_distance,
        connector_types=caps.connector_types,
        shielding=caps.shielding,
        characteristic_impedance=caps.characteristic_impedance,
        supports_power_over_fieldbus=caps.supports_power_over_fieldbus,
        construction=c.construction,
        insulation=c.insulation,
        jacket=c.jacket,
        voltage_class=c.voltage_class,
        conductor_material=c.conductor.material,
        awg_range=c.conductor.awg_range,
        conductor_count=c.conductor_count,
        pair_count=c.pair_count,
        min_operating_c=c.temperature_rating.min_operating_c,
        max_operating_c=c.temperature_rating.max_operating_c,
        industries=c.industries,
        standards=c.standards,
        typical_applications=c.typical_applications,
        icon=c.icon,
        is_user_defined=c.is_user_defined,
        is_generic=c.is_generic,
    )


@router.get("/library/protocols", response_model=ProtocolListResponse)
async def list_protocols(
    request: Request,
    q: Optional[str] = Query(None, description="Search query"),
    category: Optional[ProtocolCategory] = Query(None),
    industry: Optional[str] = Query(None),
    media_type: Optional[PhysicalMediaType] = Query(None, description="Only protocols that run over this medium"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    """Search and list communication protocols."""
    library = request.app.state.protocol_library
    protocols = library.search(query=q, category=category, industry=industry, media_type=media_type)

    # Paginate
    total = len(protocols)
    protocols = protocols[offset:offset + limit]

    return ProtocolListResponse(protocols=[protocol_info(p) for p in protocols], total=total)


@router.get("/library/protocols/{protocol_id}", response_model=ProtocolInfo)
async def get_protocol(request: Request, protocol_id: str):
    """Get a specific protocol's physical-layer requirements."""
    protocol = request.app.state.protocol_library.get_by_id(protocol_id)
    if not protocol:
        logger.info("Unknown protocol requested: %s", protocol_id)
        raise HTTPException(status_code=404, detail="Protocol not found")
    return protocol_info(protocol)


@router.get("/library/protocol-categories", response_model=CategoryListResponse)
async def list_protocol_categories():
    """List protocol categories with display names and menu groups."""
    return CategoryListResponse(
        categories=[
            CategoryInfo(value=c.value, display_name=get_protocol_category_display_name(c))
            for c in get_all_protocol_categories()
        ],
        groups={
            name: [c.value for c in members]
            for name, members in get_protocol_category_groups().items()
        },
    )


@router.get("/library/cables", response_model=CableListResponse)
async def list_cables(
    request: Request,
    q: Optional[str] = Query(None, description="Search query"),
    category: Optional[CableCategory] = Query(None),
    industry: Optional[str] = Query(None),
    media_type: Optional[PhysicalMediaType] = Query(None),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    """Search and list cable products."""
    library = request.app.state.cable_library
    cables = library.search(query=q, category=category, industry=industry, media_type=media_type)

    # Paginate
    total = len(cables)
    cables = cables[offset:offset + limit]

    return CableListResponse(cables=[cable_info(c) for c in cables], total=total)


@router.get("/library/cables/{cable_id}", response_model=CableInfo)
async def get_cable(request: Request, cable_id: str):
    """Get a specific cable's physical-layer capabilities and construction."""
    cable = request.app.state.cable_library.get_by_id(cable_id)
    if not cable:
        logger.info("Unknown cable requested: %s", cable_id)
        raise HTTPException(status_code=404, detail="Cable not found")
    return cable_info(cable)


@router.get("/library/cable-categories", response_model=CategoryListResponse)
async def list_cable_categories():
    """List cable categories with display names and menu groups."""
    return CategoryListResponse(
        categories=[
            CategoryInfo(value=c.value, display_name=get_cable_category_display_name(c))
            for c in get_all_cable_categories()
        ],
        groups={
            name: [c.value for c in members]
            for name, members in get_cable_category_groups().items()
        },
    )
