"""
Auth services.
"""

from app.auth.services.session_service import SessionService

__all__ = ["SessionService"]
