"""
Admin login endpoint for API v1.
"""

from fastapi import APIRouter, HTTPException, status

from portfolio_site.app.schemas.auth import LoginRequest, LoginResponse
from portfolio_site.app.services.auth_service import AuthService

router = APIRouter()


@router.post("", response_model=LoginResponse)
async def login(credentials: LoginRequest) -> LoginResponse:
    """Check the admin credentials and hand out a bearer token."""
    token = await AuthService.login(credentials.username, credentials.password)
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")
    return LoginResponse(message="Login successful", access_token=token)
