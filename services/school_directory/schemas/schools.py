# services/school_directory/schemas/schools.py

from pydantic import BaseModel, EmailStr, Field
from typing import Optional, List
from datetime import datetime

from services.school_directory.models.schools import SportType, ScholarshipType, Region, CostRange
from shared.schemas import UrlStr


class SchoolSportInput(BaseModel):
    sport_type: SportType
    is_primary: bool = False


class SchoolScholarshipInput(BaseModel):
    scholarship_type: ScholarshipType
    description: Optional[str] = None
    requirements: Optional[str] = None


class BoardingSchoolCreate(BaseModel):
    name: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)
    region: Region
    cost_range: CostRange
    website_url: Optional[UrlStr] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    profile_content: Optional[str] = None
    is_featured: bool = False
    sports: Optional[List[SchoolSportInput]] = None
    scholarships: Optional[List[SchoolScholarshipInput]] = None


# Sparse update: omitted fields stay untouched (see model_fields_set).
# Non-nullable columns default to None but reject an explicit null.
class BoardingSchoolUpdate(BaseModel):
    name: str = Field(None, min_length=1)
    description: str = Field(None, min_length=1)
    region: Region = None
    cost_range: CostRange = None
    website_url: Optional[UrlStr] = None
    contact_email: Optional[EmailStr] = None
    contact_phone: Optional[str] = None
    address: Optional[str] = None
    profile_content: Optional[str] = None
    is_featured: bool = None
    sports: List[SchoolSportInput] = None
    scholarships: List[SchoolScholarshipInput] = None


class FilterSchoolsInput(BaseModel):
    sports: Optional[List[SportType]] = None
    scholarships: Optional[List[ScholarshipType]] = None
    regions: Optional[List[Region]] = None
    cost_ranges: Optional[List[CostRange]] = None
    search: Optional[str] = None
    limit: int = Field(20, gt=0)
    offset: int = Field(0, ge=0)


class BoardingSchoolOut(BaseModel):
    id: int
    name: str
    description: str
    region: Region
    cost_range: CostRange
    website_url: Optional[str]
    contact_email: Optional[str]
    contact_phone: Optional[str]
    address: Optional[str]
    profile_content: Optional[str]
    is_featured: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SchoolSportOut(BaseModel):
    id: int
    school_id: int
    sport_type: SportType
    is_primary: bool
    created_at: datetime

    class Config:
        from_attributes = True


class SchoolScholarshipOut(BaseModel):
    id: int
    school_id: int
    scholarship_type: ScholarshipType
    description: Optional[str]
    requirements: Optional[str]
    created_at: datetime

    class Config:
        from_attributes = True


class BoardingSchoolWithRelationsOut(BoardingSchoolOut):
    sports: List[SchoolSportOut] = Field(default_factory=list)
    scholarships: List[SchoolScholarshipOut] = Field(default_factory=list)
