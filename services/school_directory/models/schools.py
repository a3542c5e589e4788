# services/school_directory/models/schools.py
from sqlalchemy import Column, Integer, String, Text, Boolean, Enum, ForeignKey, DateTime, Index
from sqlalchemy.orm import relationship
from shared.db import Base, utcnow
import enum


class SportType(str, enum.Enum):
    FOOTBALL = "football"
    RUGBY = "rugby"
    SWIMMING = "swimming"
    TENNIS = "tennis"
    HOCKEY = "hockey"
    ROWING = "rowing"


class ScholarshipType(str, enum.Enum):
    SPORTS_SCHOLARSHIP = "sports_scholarship"
    PARTIAL_SCHOLARSHIP = "partial_scholarship"
    FULL_SCHOLARSHIP = "full_scholarship"


class Region(str, enum.Enum):
    ENGLAND = "england"
    SCOTLAND = "scotland"
    NORTHERN_IRELAND = "northern_ireland"
    WALES = "wales"


# Fee bucket labels; "80000" reads as "80000 and above"
class CostRange(str, enum.Enum):
    FROM_20000 = "20000"
    FROM_30000 = "30000"
    FROM_40000 = "40000"
    FROM_50000 = "50000"
    FROM_60000 = "60000"
    FROM_70000 = "70000"
    FROM_80000 = "80000"


def _enum_column(enum_cls, name):
    return Enum(enum_cls, name=name, values_callable=lambda e: [m.value for m in e])


class BoardingSchool(Base):
    __tablename__ = "boarding_schools"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String, nullable=False)
    description = Column(Text, nullable=False)
    region = Column(_enum_column(Region, "region"), nullable=False)
    cost_range = Column(_enum_column(CostRange, "cost_range"), nullable=False)
    website_url = Column(String, nullable=True)
    contact_email = Column(String, nullable=True)
    contact_phone = Column(String, nullable=True)
    address = Column(String, nullable=True)
    profile_content = Column(Text, nullable=True)  # Rich text managed by admins, stored as-is
    is_featured = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    sports = relationship(
        "SchoolSport", back_populates="school", cascade="all, delete-orphan", passive_deletes=True
    )
    scholarships = relationship(
        "SchoolScholarship", back_populates="school", cascade="all, delete-orphan", passive_deletes=True
    )

    __table_args__ = (
        Index("idx_school_region", "region"),
        Index("idx_school_cost_range", "cost_range"),
        Index("idx_school_featured_updated", "is_featured", "updated_at"),
    )


class SchoolSport(Base):
    __tablename__ = "school_sports"

    id = Column(Integer, primary_key=True, autoincrement=True)
    school_id = Column(Integer, ForeignKey("boarding_schools.id", ondelete="CASCADE"), nullable=False)
    sport_type = Column(_enum_column(SportType, "sport_type"), nullable=False)
    is_primary = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    school = relationship("BoardingSchool", back_populates="sports")

    __table_args__ = (
        Index("idx_school_sport_school", "school_id"),
        Index("idx_school_sport_type", "sport_type", "school_id"),
    )


class SchoolScholarship(Base):
    __tablename__ = "school_scholarships"

    id = Column(Integer, primary_key=True, autoincrement=True)
    school_id = Column(Integer, ForeignKey("boarding_schools.id", ondelete="CASCADE"), nullable=False)
    scholarship_type = Column(_enum_column(ScholarshipType, "scholarship_type"), nullable=False)
    description = Column(Text, nullable=True)
    requirements = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    school = relationship("BoardingSchool", back_populates="scholarships")

    __table_args__ = (
        Index("idx_school_scholarship_school", "school_id"),
        Index("idx_school_scholarship_type", "scholarship_type", "school_id"),
    )
