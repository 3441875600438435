"""Service layer for the directory API.

Write paths for users, bootcamps, courses and reviews, the advanced-results
query engine, session tokens and password resets. Route handlers call into
these modules and never touch the session directly.
"""

from services.query_service import advanced_results, get_by_id, translate_query  # noqa: F401
from services.user_service import create_user, register_user  # noqa: F401
from services.password_reset_service import PasswordResetService  # noqa: F401


__all__ = [
    "advanced_results",
    "get_by_id",
    "translate_query",
    "create_user",
    "register_user",
    "PasswordResetService",
]
