"""
Pydantic models for the admin login exchange.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    username: str = Field(..., examples=["admin"])
    password: str = Field(..., examples=["secret"])


class LoginResponse(BaseModel):
    """Returned on a successful login.

    ``access_token`` must be sent back as ``Authorization: Bearer <token>``
    on every admin request.
    """

    message: str
    access_token: str
    token_type: str = "bearer"
