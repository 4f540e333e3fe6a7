"""
User services.
"""

from app.user.services.hobby_catalog import HobbyCatalog
from app.user.services.user_store import DuplicateAccountError, UserStore

__all__ = ["HobbyCatalog", "DuplicateAccountError", "UserStore"]
