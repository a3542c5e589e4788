from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy import and_, or_, update, delete
from sqlalchemy.exc import IntegrityError
from typing import List, Optional

from shared.db import get_db, utcnow
from shared.logger import get_logger
from shared.schemas import SuccessOut
from services.school_directory.models.schools import BoardingSchool, SchoolSport, SchoolScholarship
from services.school_directory.schemas.schools import (
    BoardingSchoolCreate,
    BoardingSchoolUpdate,
    BoardingSchoolOut,
    BoardingSchoolWithRelationsOut,
    FilterSchoolsInput,
    SchoolSportInput,
    SchoolScholarshipInput,
    SchoolSportOut,
    SchoolScholarshipOut,
)

router = APIRouter(prefix="/schools", tags=["BoardingSchools"])
logger = get_logger("school_directory")

SCHOOL_COLUMNS = (
    "name",
    "description",
    "region",
    "cost_range",
    "website_url",
    "contact_email",
    "contact_phone",
    "address",
    "profile_content",
    "is_featured",
)


def _sport_rows(school_id: int, sports: List[SchoolSportInput]) -> List[SchoolSport]:
    return [
        SchoolSport(school_id=school_id, sport_type=s.sport_type, is_primary=s.is_primary)
        for s in sports
    ]


def _scholarship_rows(school_id: int, scholarships: List[SchoolScholarshipInput]) -> List[SchoolScholarship]:
    return [
        SchoolScholarship(
            school_id=school_id,
            scholarship_type=s.scholarship_type,
            description=s.description,
            requirements=s.requirements,
        )
        for s in scholarships
    ]


def _filter_conditions(filters: FilterSchoolsInput) -> list:
    conditions = []

    if filters.regions:
        conditions.append(BoardingSchool.region.in_(filters.regions))

    if filters.cost_ranges:
        conditions.append(BoardingSchool.cost_range.in_(filters.cost_ranges))

    if filters.search:
        conditions.append(
            or_(
                BoardingSchool.name.icontains(filters.search, autoescape=True),
                BoardingSchool.description.icontains(filters.search, autoescape=True),
            )
        )

    # A school matches when at least one of its junction rows matches
    if filters.sports:
        conditions.append(
            BoardingSchool.id.in_(
                select(SchoolSport.school_id).where(SchoolSport.sport_type.in_(filters.sports))
            )
        )

    if filters.scholarships:
        conditions.append(
            BoardingSchool.id.in_(
                select(SchoolScholarship.school_id).where(
                    SchoolScholarship.scholarship_type.in_(filters.scholarships)
                )
            )
        )

    return conditions


# --- CREATE BOARDING SCHOOL ---
@router.post("/", response_model=BoardingSchoolOut, operation_id="createBoardingSchool")
async def create_boarding_school(
    payload: BoardingSchoolCreate,
    db: AsyncSession = Depends(get_db)
):
    new_school = BoardingSchool(**payload.model_dump(include=set(SCHOOL_COLUMNS)))

    # School row and its sport/scholarship rows are written in a single transaction
    try:
        async with db.begin():
            db.add(new_school)
            await db.flush()
            db.add_all(_sport_rows(new_school.id, payload.sports or []))
            db.add_all(_scholarship_rows(new_school.id, payload.scholarships or []))
    except IntegrityError as e:
        logger.warning("Boarding school creation failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Boarding school violates a database constraint"
        )

    await db.refresh(new_school)
    logger.info(
        "Created boarding school %s with %d sports and %d scholarships",
        new_school.id, len(payload.sports or []), len(payload.scholarships or []),
    )
    return new_school


# --- LIST BOARDING SCHOOLS WITH FILTERS ---
@router.post("/search", response_model=List[BoardingSchoolOut], operation_id="getBoardingSchools")
async def get_boarding_schools(
    filters: Optional[FilterSchoolsInput] = Body(None),
    db: AsyncSession = Depends(get_db)
):
    filters = filters or FilterSchoolsInput()
    conditions = _filter_conditions(filters)

    stmt = select(BoardingSchool)
    if conditions:
        stmt = stmt.where(and_(*conditions))
    stmt = stmt.order_by(BoardingSchool.id).limit(filters.limit).offset(filters.offset)

    result = await db.execute(stmt)
    return result.scalars().all()


# --- GET FEATURED SCHOOLS ---
@router.get("/featured", response_model=List[BoardingSchoolOut], operation_id="getFeaturedSchools")
async def get_featured_schools(db: AsyncSession = Depends(get_db)):
    result = await db.execute(
        select(BoardingSchool)
        .where(BoardingSchool.is_featured == True)
        .order_by(BoardingSchool.updated_at.desc())
    )
    return result.scalars().all()


# --- GET BOARDING SCHOOL BY ID (WITH SPORTS AND SCHOLARSHIPS) ---
@router.get(
    "/{school_id}",
    response_model=Optional[BoardingSchoolWithRelationsOut],
    operation_id="getBoardingSchoolById",
)
async def get_boarding_school_by_id(
    school_id: int,
    db: AsyncSession = Depends(get_db)
):
    school = await db.get(BoardingSchool, school_id)
    if not school:
        return None

    sports = await db.execute(select(SchoolSport).where(SchoolSport.school_id == school_id))
    scholarships = await db.execute(
        select(SchoolScholarship).where(SchoolScholarship.school_id == school_id)
    )

    return BoardingSchoolWithRelationsOut(
        **BoardingSchoolOut.model_validate(school).model_dump(),
        sports=[SchoolSportOut.model_validate(s) for s in sports.scalars().all()],
        scholarships=[SchoolScholarshipOut.model_validate(s) for s in scholarships.scalars().all()],
    )


# --- UPDATE BOARDING SCHOOL ---
@router.put("/{school_id}", response_model=BoardingSchoolOut, operation_id="updateBoardingSchool")
async def update_boarding_school(
    school_id: int,
    payload: BoardingSchoolUpdate,
    db: AsyncSession = Depends(get_db)
):
    provided = payload.model_dump(include=set(SCHOOL_COLUMNS), exclude_unset=True)
    provided["updated_at"] = utcnow()

    async with db.begin():
        result = await db.execute(
            update(BoardingSchool)
            .where(BoardingSchool.id == school_id)
            .values(**provided)
            .returning(BoardingSchool)
        )
        school = result.scalars().first()
        if school is None:
            logger.warning("Update rejected: boarding school %s not found", school_id)
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Boarding school with id {school_id} not found"
            )

        # A provided list replaces the existing rows; an empty list clears them
        if payload.sports is not None:
            await db.execute(delete(SchoolSport).where(SchoolSport.school_id == school_id))
            db.add_all(_sport_rows(school_id, payload.sports))

        if payload.scholarships is not None:
            await db.execute(delete(SchoolScholarship).where(SchoolScholarship.school_id == school_id))
            db.add_all(_scholarship_rows(school_id, payload.scholarships))

    logger.info("Updated boarding school %s", school_id)
    return school


# --- DELETE BOARDING SCHOOL ---
@router.delete("/{school_id}", response_model=SuccessOut, operation_id="deleteBoardingSchool")
async def delete_boarding_school(
    school_id: int,
    db: AsyncSession = Depends(get_db)
):
    # Sport and scholarship rows go with the school through ON DELETE CASCADE
    result = await db.execute(delete(BoardingSchool).where(BoardingSchool.id == school_id))
    await db.commit()

    deleted = result.rowcount > 0
    if deleted:
        logger.info("Deleted boarding school %s", school_id)
    return SuccessOut(success=deleted)
