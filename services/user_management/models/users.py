# services/user_management/models/users.py
from sqlalchemy import Column, Integer, String, Enum, DateTime, Index
from sqlalchemy.orm import relationship
from shared.db import Base, utcnow
import enum


class UserRole(str, enum.Enum):
    ADMIN = "admin"
    USER = "user"


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String, unique=True, nullable=False)
    name = Column(String, nullable=False)
    role = Column(
        Enum(UserRole, name="user_role", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=UserRole.USER,
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    # Blog posts written by this user (admins only)
    blog_posts = relationship("BlogPost", back_populates="author")

    __table_args__ = (
        Index("idx_user_role", "role"),
    )
