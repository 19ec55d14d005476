"""
API routes for government schemes
"""
import logging
from datetime import datetime, timezone
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ..config import settings
from ..models.profile import EligibilityRequest, EligibilityResponse, FarmerProfile
from ..registry import get_scheme_service
from ..services.scheme_service import SchemeService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/schemes", tags=["schemes"])

SOURCE = "Ministry of Agriculture & Farmers Welfare, MyScheme.gov.in"


class CompareRequest(BaseModel):
    scheme_ids: List[str] = Field(..., min_length=1, description="Schemes to compare")
    language: str = "en"


class ApplicationRequest(BaseModel):
    scheme_id: str = Field(..., min_length=1, description="Scheme to apply for")
    profile: Optional[FarmerProfile] = Field(None, description="Applicant's profile")


@router.get("")
async def get_schemes(
    category: Optional[str] = Query(None, description="Filter by category"),
    state: Optional[str] = Query(None, description="Filter by state"),
    search: Optional[str] = Query(None, description="Search title, description and ministry"),
    language: str = Query("en", description="Response language"),
    service: SchemeService = Depends(get_scheme_service)
):
    """
    List government schemes
    """
    try:
        schemes = service.list_schemes(category=category, state=state, search=search, language=language)
        return {
            "success": True,
            "data": schemes,
            "total": len(schemes),
            "last_updated": datetime.now(timezone.utc).isoformat(),
            "source": SOURCE
        }
    except Exception as e:
        logger.error(f"Schemes API error: {e}")
        raise HTTPException(status_code=500, detail="Failed to fetch schemes data")


@router.post("/eligibility", response_model=EligibilityResponse)
async def check_eligibility(request: EligibilityRequest, service: SchemeService = Depends(get_scheme_service)):
    """
    Rank the schemes a farmer qualifies for
    """
    try:
        return service.check_eligibility(request.profile, request.language)
    except Exception as e:
        logger.error(f"Error checking eligibility: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/compare")
async def compare_schemes(request: CompareRequest, service: SchemeService = Depends(get_scheme_service)):
    """
    Compare selected schemes
    """
    try:
        comparison = service.compare(request.scheme_ids, request.language)
        return {
            "success": True,
            "comparison": comparison,
            "generated_at": datetime.now(timezone.utc).isoformat()
        }
    except Exception as e:
        logger.error(f"Error comparing schemes: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.post("/apply")
async def apply_for_scheme(request: ApplicationRequest, service: SchemeService = Depends(get_scheme_service)):
    """
    Submit an application for a scheme
    """
    try:
        application = service.apply(request.scheme_id)

        if not application:
            raise HTTPException(status_code=404, detail=f"Scheme not found: {request.scheme_id}")

        return {"success": True, **application}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error submitting application for {request.scheme_id}: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")


@router.get("/{scheme_id}")
async def get_scheme(
    scheme_id: str,
    language: str = Query("en", description="Response language"),
    service: SchemeService = Depends(get_scheme_service)
):
    """
    Get a specific scheme by ID
    """
    try:
        scheme = service.store.get(scheme_id)

        if not scheme:
            raise HTTPException(status_code=404, detail=f"Scheme not found: {scheme_id}")

        return {"success": True, "data": scheme.localize(language, settings.default_language)}

    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Error fetching scheme {scheme_id}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve scheme")
