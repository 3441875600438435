"""Database models package.

This package contains the SQLAlchemy ORM model definitions for the application.
Each model lives in its own module (user, bootcamp, course, review) and is
re-exported here for convenience.
"""

# Re-export model classes from individual modules
from .user import User, ROLES  # noqa: F401
from .bootcamp import Bootcamp, CAREERS  # noqa: F401
from .course import Course, SKILL_LEVELS  # noqa: F401
from .review import Review  # noqa: F401

__all__ = ["User", "Bootcamp", "Course", "Review", "ROLES", "CAREERS", "SKILL_LEVELS"]
