import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, Request, status
from fastapi.exception_handlers import request_validation_exception_handler
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from services.school_management.models.schools import School
from services.school_management.schemas.schools import (
    AddSchoolResponse,
    ListSchoolsResponse,
    SchoolCreate,
    SchoolOut,
)
from shared.config import settings
from shared.db import get_db
from shared.geo import is_valid_location, parse_coordinate, sort_by_distance, validate_school_input


router = APIRouter(tags=["Schools"])
logger = logging.getLogger(__name__)


def server_error_response(exc: Exception) -> JSONResponse:
    content = {"success": False, "message": "Internal server error"}
    if settings.is_development:
        content["error"] = str(exc)
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=content)


async def invalid_json_handler(request: Request, exc: RequestValidationError):
    """Answer unparseable JSON bodies with a 400 like any other bad input."""
    if any(error.get("type") == "json_invalid" for error in exc.errors()):
        logger.debug("Rejected malformed JSON body on %s", request.url.path)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "errors": ["Request body must be valid JSON"]},
        )
    return await request_validation_exception_handler(request, exc)


# --- WELCOME ---
@router.get("/")
async def homepage():
    return {"message": "Welcome to the school management system"}


# --- ADD SCHOOL ---
@router.post(
    "/addSchool",
    response_model=AddSchoolResponse,
    status_code=status.HTTP_201_CREATED,
)
async def add_school(
    payload: Any = Body(None),
    db: AsyncSession = Depends(get_db),
):
    data = payload if isinstance(payload, dict) else {}

    errors = validate_school_input(data)
    if errors:
        logger.debug("Rejected school input: %s", errors)
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "errors": errors},
        )

    school_in = SchoolCreate(
        name=data["name"].strip(),
        address=data["address"].strip(),
        latitude=parse_coordinate(data["latitude"]),
        longitude=parse_coordinate(data["longitude"]),
    )

    try:
        new_school = School(**school_in.model_dump())
        db.add(new_school)
        await db.commit()
    except Exception as exc:
        await db.rollback()
        logger.exception("Error adding school")
        return server_error_response(exc)

    logger.info("Added school %s", new_school.id)
    return AddSchoolResponse(message="School added successfully", schoolId=new_school.id)


# --- LIST SCHOOLS BY PROXIMITY ---
#  /listSchools?latitude=12.97&longitude=77.59
@router.get("/listSchools", response_model=ListSchoolsResponse)
async def list_schools(
    latitude: Optional[str] = Query(None, description="Latitude of the reference point"),
    longitude: Optional[str] = Query(None, description="Longitude of the reference point"),
    db: AsyncSession = Depends(get_db),
):
    if not is_valid_location(latitude, longitude):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"success": False, "message": "Invalid latitude or longitude provided"},
        )

    user_lat = parse_coordinate(latitude)
    user_lon = parse_coordinate(longitude)

    try:
        result = await db.execute(select(School).order_by(School.id))
        schools = result.scalars().all()
        rows = (SchoolOut.model_validate(school).model_dump() for school in schools)
        nearest_first = sort_by_distance(rows, user_lat, user_lon)
    except Exception as exc:
        logger.exception("Error listing schools")
        return server_error_response(exc)

    return ListSchoolsResponse(count=len(nearest_first), schools=nearest_first)
