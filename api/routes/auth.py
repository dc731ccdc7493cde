"""
Authentication routes for the Portfolio Backend API.
"""

from fastapi import APIRouter

from common import errors, logger
from api.utils.auth_utils import create_access_token, verify_password
from .schema import LoginRequest, LoginResponse

router = APIRouter(prefix="/api", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(request: LoginRequest):
    """
    Exchange the admin password for a bearer token.

    Raises:
        HTTPException: 401 when the password is wrong
    """
    auth_logger = logger.get_structured_logger("auth", "api_login")

    if not verify_password(request.password):
        logger.log_structured_error(
            auth_logger,
            "login_failed",
            "Login attempt with an invalid password",
            {"endpoint": "login"}
        )
        errors.raise_invalid_password()

    logger.log_structured_event(
        auth_logger,
        "login_succeeded",
        {"endpoint": "login"},
        "Issued admin access token"
    )
    return LoginResponse(token=create_access_token())
