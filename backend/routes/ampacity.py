"""Ampacity routes: reference current ratings for building wire."""

from fastapi import APIRouter, HTTPException, Query

from backend.models import AmpacityResponse
from wirelib.ampacity import lookup_ampacity
from wirelib.types import InstallationMethod

router = APIRouter()


@router.get("/ampacity", response_model=AmpacityResponse)
async def get_ampacity(
    size: str = Query(..., description="Conductor size as printed in the table, e.g. 12, 1/0, 2.5"),
    size_unit: str = Query("AWG", description="AWG, kcmil or mm²"),
    installation_method: InstallationMethod = Query(InstallationMethod.IN_CONDUIT),
):
    """Look up the base ampacity of a copper conductor."""
    try:
        rating = lookup_ampacity(size, size_unit, installation_method)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    if rating is None:
        raise HTTPException(status_code=404, detail="No ampacity rating for this size")

    return AmpacityResponse(
        conductor_size=rating.conductor_size,
        size_unit=rating.size_unit,
        ampacity=rating.ampacity,
        installation_method=rating.installation_method,
        ambient_temp_c=rating.ambient_temp_c,
        conductor_temp_c=rating.conductor_temp_c,
    )
