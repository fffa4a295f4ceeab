# services/school_management/schemas/schools.py

from pydantic import BaseModel, ConfigDict, Field
from typing import List


class SchoolCreate(BaseModel):
    name: str
    address: str
    latitude: float
    longitude: float


class SchoolOut(BaseModel):
    id: int
    name: str
    address: str
    latitude: float
    longitude: float

    model_config = ConfigDict(from_attributes=True)


class SchoolWithDistance(SchoolOut):
    distance: float = Field(..., description="Distance from the query point in km, 2 decimals")


class AddSchoolResponse(BaseModel):
    success: bool = True
    message: str
    schoolId: int


class ListSchoolsResponse(BaseModel):
    success: bool = True
    count: int
    schools: List[SchoolWithDistance]
