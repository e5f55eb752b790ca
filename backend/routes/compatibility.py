"""Compatibility routes: pairwise assessment and grouped listings."""

import logging

from fastapi import APIRouter, HTTPException, Query, Request

from backend.models import (
    CatalogEntryRef,
    CompatibilityGroup,
    CompatibilityResponse,
    GroupedCompatibilityResponse,
)
from wirelib.compatibility import (
    assess_compatibility,
    get_compatibility_display_name,
    get_compatibility_icon,
    group_compatible_cables,
    group_compatible_protocols,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _lookup_protocol(request: Request, protocol_id: str):
    protocol = request.app.state.protocol_library.get_by_id(protocol_id)
    if not protocol:
        logger.info("Unknown protocol requested: %s", protocol_id)
        raise HTTPException(status_code=404, detail="Protocol not found")
    return protocol


def _lookup_cable(request: Request, cable_id: str):
    cable = request.app.state.cable_library.get_by_id(cable_id)
    if not cable:
        logger.info("Unknown cable requested: %s", cable_id)
        raise HTTPException(status_code=404, detail="Cable not found")
    return cable


def _groups(grouped: dict, ref) -> list[CompatibilityGroup]:
    return [
        CompatibilityGroup(
            level=level,
            display_name=get_compatibility_display_name(level),
            icon=get_compatibility_icon(level),
            entries=[ref(item) for item in items],
        )
        for level, items in grouped.items()
    ]


@router.get("/compatibility", response_model=CompatibilityResponse)
async def check_compatibility(
    request: Request,
    protocol_id: str = Query(..., description="Protocol ID, e.g. MODBUS-RTU-001"),
    cable_id: str = Query(..., description="Cable ID, e.g. CABLE-MB485-001"),
):
    """Assess whether a protocol will run over a cable."""
    protocol = _lookup_protocol(request, protocol_id)
    cable = _lookup_cable(request, cable_id)

    result = assess_compatibility(protocol, cable)
    return CompatibilityResponse(
        protocol_id=protocol.protocol_id,
        cable_id=cable.cable_id,
        level=result.level,
        display_name=get_compatibility_display_name(result.level),
        icon=get_compatibility_icon(result.level),
        message=result.message,
        details=result.details,
        requires_confirmation=result.requires_confirmation,
    )


@router.get("/compatibility/protocols/{protocol_id}/cables", response_model=GroupedCompatibilityResponse)
async def cables_for_protocol(request: Request, protocol_id: str):
    """Group every catalog cable by how well it carries one protocol."""
    protocol = _lookup_protocol(request, protocol_id)
    grouped = group_compatible_cables(protocol, request.app.state.cable_library.cables)
    return GroupedCompatibilityResponse(
        subject_id=protocol.protocol_id,
        groups=_groups(grouped, lambda c: CatalogEntryRef(id=c.cable_id, name=c.name)),
    )


@router.get("/compatibility/cables/{cable_id}/protocols", response_model=GroupedCompatibilityResponse)
async def protocols_for_cable(request: Request, cable_id: str):
    """Group every catalog protocol by how well it runs over one cable."""
    cable = _lookup_cable(request, cable_id)
    grouped = group_compatible_protocols(cable, request.app.state.protocol_library.protocols)
    return GroupedCompatibilityResponse(
        subject_id=cable.cable_id,
        groups=_groups(grouped, lambda p: CatalogEntryRef(id=p.protocol_id, name=p.name)),
    )
