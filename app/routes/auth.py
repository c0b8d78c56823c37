"""
Authentication endpoints - Demo email + password login.
"""

from fastapi import APIRouter, Depends, HTTPException, status
from app.models.user import AuthResponse, LoginRequest
from app.routes.deps import simulate_latency
from app.services.auth_service import AuthService, get_auth_service
import logging

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/auth", tags=["Authentication"], dependencies=[Depends(simulate_latency)])


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, service: AuthService = Depends(get_auth_service)):
    """
    Log in with one of the demo accounts.

    Returns:
        AuthResponse with a demo token and the public user

    Raises:
        401: Invalid email or password
    """
    result = service.authenticate(request.email, request.password)
    if result is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password"
        )
    return result
