"""
Auth Service - Demo login against the seeded accounts.

The token is an unsigned base64 JSON blob carrying the user id, role and
expiry. Nothing verifies it; it only lets the client remember who logged in.
"""

from app.config.seed import USERS
from app.core.settings import settings
from app.models.user import AuthResponse, UserResponse
from app.utils.clock import utc_now
from datetime import timedelta
from typing import Dict, List, Optional
import base64
import json
import logging

logger = logging.getLogger(__name__)


class AuthService:
    """Credential store for the demo accounts."""

    def __init__(self, users: Optional[List[Dict]] = None):
        self.users = users if users is not None else USERS

    def authenticate(self, email: str, password: str) -> Optional[AuthResponse]:
        """
        Check credentials.

        Returns:
            AuthResponse with token and public user, or None if invalid
        """
        email = email.strip().lower()
        user = next(
            (u for u in self.users if u["email"].lower() == email and u["password"] == password),
            None,
        )
        if user is None:
            logger.info(f"Login failed for {email}")
            return None

        expires_at = utc_now() + timedelta(hours=settings.TOKEN_TTL_HOURS)
        payload = {
            "userId": user["id"],
            "role": user["role"],
            "exp": int(expires_at.timestamp() * 1000),
        }
        token = base64.b64encode(json.dumps(payload).encode()).decode()

        logger.info(f"User authenticated: {user['id']} ({user['role']})")
        return AuthResponse(
            token=token,
            user=UserResponse(id=user["id"], name=user["name"], email=user["email"], role=user["role"]),
        )


# Global service instance
_auth_service = None


def get_auth_service() -> AuthService:
    """Get or create AuthService singleton."""
    global _auth_service
    if _auth_service is None:
        _auth_service = AuthService()
    return _auth_service
