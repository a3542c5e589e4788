from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select
from sqlalchemy.exc import IntegrityError

from shared.db import get_db
from shared.logger import get_logger
from services.user_management.models.users import User
from services.user_management.schemas.users import UserCreate, UserOut

router = APIRouter(prefix="/users", tags=["Users"])
logger = get_logger("user_management")


# --- CREATE USER ---
@router.post("/", response_model=UserOut, operation_id="createUser")
async def create_user(
    payload: UserCreate,
    db: AsyncSession = Depends(get_db)
):
    # Check if email exists
    result = await db.execute(select(User).where(User.email == payload.email))
    if result.scalars().first():
        logger.warning("User creation rejected: %s already registered", payload.email)
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists"
        )

    new_user = User(
        email=payload.email,
        name=payload.name,
        role=payload.role
    )

    db.add(new_user)
    try:
        await db.commit()
    except IntegrityError:
        await db.rollback()
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="User with this email already exists"
        )

    await db.refresh(new_user)
    logger.info("Created %s user %s", new_user.role.value, new_user.id)
    return new_user
