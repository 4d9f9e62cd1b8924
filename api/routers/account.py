"""
Account router.

Sheet-backed accounts for the coaching app.

Endpoints:
- POST /api/register - Create an account
- POST /api/login - Verify credentials
"""
import logging

from fastapi import APIRouter, Depends

from api.deps import get_login_use_case, get_register_use_case
from api.schemas import CredentialsRequest
from application.use_cases import LoginUserUseCase, RegisterUserUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/api",
    tags=["account"],
)


@router.post("/register")
async def register(
    request: CredentialsRequest,
    use_case: RegisterUserUseCase = Depends(get_register_use_case),
):
    """
    Register a new account.

    Returns 400 when the email is already registered.
    """
    result = await use_case.execute(request.email, request.password)
    return {"success": result.success, "user_id": result.user_id}


@router.post("/login")
async def login(
    request: CredentialsRequest,
    use_case: LoginUserUseCase = Depends(get_login_use_case),
):
    """Returns 401 for an unknown email or wrong password."""
    result = await use_case.execute(request.email, request.password)
    return {"success": result.success, "user_id": result.user_id}
